"""Pydantic models for the BarcodeLookup v3 products endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class BarcodeLookupBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProductPayload(BarcodeLookupBaseModel):
    barcode_number: str | None = None
    title: str | None = None
    manufacturer: str | None = None
    brand: str | None = None

    _normalize_text = field_validator("title", "manufacturer", "brand", mode="before")(
        _blank_to_none
    )


class ProductsResponse(BarcodeLookupBaseModel):
    products: list[ProductPayload] = Field(default_factory=list["ProductPayload"])

    @property
    def manufacturer(self) -> str | None:
        if not self.products:
            return None
        return self.products[0].manufacturer
