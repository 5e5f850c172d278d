"""Pydantic models describing the Open Food Facts product payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNGRADED_NUTRISCORE = frozenset({"unknown", "not-applicable"})


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _join_list(value: object) -> object:
    # A few fields are occasionally served as tag lists rather than strings.
    if isinstance(value, list):
        return ", ".join(str(item) for item in value if str(item).strip()) or None
    return _blank_to_none(value)


class OpenFoodFactsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProductPayload(OpenFoodFactsBaseModel):
    product_name: str | None = None
    brands: str | None = None
    categories: str | None = None
    labels: str | None = None
    ingredients_text: str | None = None
    nutriscore_grade: str | None = None

    _normalize_text = field_validator(
        "product_name", "brands", "categories", "labels", "ingredients_text", mode="before"
    )(_join_list)

    @field_validator("nutriscore_grade", mode="before")
    @classmethod
    def _parse_grade(cls, value: object) -> object:
        value = _blank_to_none(value)
        if isinstance(value, str) and value.lower() in UNGRADED_NUTRISCORE:
            return None
        return value


class ProductResponse(OpenFoodFactsBaseModel):
    status: int = 0
    code: str | None = None
    status_verbose: str | None = None
    product: ProductPayload | None = Field(default=None)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: int | str | None) -> int:
        if value is None or value == "":
            return 0
        return int(value)

    @property
    def is_found(self) -> bool:
        return self.status == 1 and self.product is not None
