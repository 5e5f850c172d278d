"""Brand rating dataset backed by a static JSON file."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from ethiscan.config.brand_ratings import get_brand_ratings_config
from ethiscan.domain.model import ProviderId
from ethiscan.domain.ports.lookups import BrandRating, MalformedResponseError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ethiscan.config.brand_ratings import BrandRatingsConfig

log = getLogger(__name__)


class BrandRatingPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    rating: str
    comment: str = ""

    @field_validator("comment", mode="before")
    @classmethod
    def _null_comment(cls, value: object) -> object:
        return "" if value is None else value


_DATASET_ADAPTER = TypeAdapter(dict[str, BrandRatingPayload])


class JsonBrandRatings:
    """Exact-match brand lookup over a ``{"brand": {"rating", "comment"}}`` file.

    The file is read on first query, under a lock, and never again. A missing
    file yields an empty dataset; an unreadable or malformed one makes every
    query fail with the same :class:`MalformedResponseError`.
    """

    provider = ProviderId.BRAND_RATINGS

    def __init__(self, *, config: BrandRatingsConfig | None = None) -> None:
        self._config = config or get_brand_ratings_config()
        self._lock = threading.Lock()
        self._loaded = False
        self._ratings: Mapping[str, BrandRating] = {}
        self._load_error: MalformedResponseError | None = None

    def query(self, brand: str, /) -> BrandRating | None:
        self._ensure_loaded()
        if self._load_error is not None:
            raise MalformedResponseError(
                str(self._load_error), provider=self.provider
            ) from self._load_error
        return self._ratings.get(brand)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            try:
                self._ratings = self._read()
            except MalformedResponseError as exc:
                log.warning("Brand rating dataset unusable: %s", exc)
                self._load_error = exc
            self._loaded = True

    def _read(self) -> dict[str, BrandRating]:
        path = self._config.path
        if not path.exists():
            log.warning("Brand rating dataset %s not found; using an empty dataset", path)
            return {}

        try:
            raw = path.read_bytes()
            payload = _DATASET_ADAPTER.validate_json(raw)
        except OSError as exc:
            raise MalformedResponseError(
                f"Cannot read brand rating dataset {path}: {exc}", provider=self.provider
            ) from exc
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Malformed brand rating dataset {path}: {exc.error_count()} error(s)",
                provider=self.provider,
            ) from exc

        log.info("Loaded %d brand rating(s) from %s", len(payload), path)
        return {
            brand: BrandRating(rating=entry.rating, comment=entry.comment)
            for brand, entry in payload.items()
        }
