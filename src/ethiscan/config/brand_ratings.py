"""Brand rating dataset location."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import optional_env_var
from .storage import StorageConfig, get_storage_config


@dataclass(frozen=True, slots=True)
class BrandRatingsConfig:
    path: Path


def get_brand_ratings_config(*, storage: StorageConfig | None = None) -> BrandRatingsConfig:
    override = optional_env_var("ETHISCAN_BRAND_RATINGS_PATH")
    if override:
        return BrandRatingsConfig(path=Path(override).expanduser())
    storage_config = storage or get_storage_config()
    return BrandRatingsConfig(path=storage_config.brand_ratings_path())
