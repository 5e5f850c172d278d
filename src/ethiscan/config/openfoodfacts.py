"""Open Food Facts configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, optional_env_var
from .http_resilience import ResilienceConfig, ShouldCacheHook, cache_config_from_environment
from .storage import StorageConfig, get_storage_config

DEFAULT_OPENFOODFACTS_BASE_URL = "https://world.openfoodfacts.org"
OPENFOODFACTS_TIMEOUT_SECONDS = 5.0
DEFAULT_USER_AGENT = "ethiscan/0.1 (+https://github.com/ethiscan/ethiscan)"


@dataclass(frozen=True, slots=True)
class OpenFoodFactsConfig:
    resilience: ResilienceConfig


def get_openfoodfacts_config(
    *,
    storage: StorageConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> OpenFoodFactsConfig:
    storage_config = storage or get_storage_config()
    user_agent = optional_env_var("ETHISCAN_USER_AGENT") or DEFAULT_USER_AGENT
    return OpenFoodFactsConfig(
        resilience=ResilienceConfig(
            name="openfoodfacts",
            base_url=optional_env_var("ETHISCAN_OPENFOODFACTS_URL")
            or DEFAULT_OPENFOODFACTS_BASE_URL,
            timeout_seconds=env_float(
                "ETHISCAN_OPENFOODFACTS_TIMEOUT", OPENFOODFACTS_TIMEOUT_SECONDS
            ),
            cache=cache_config_from_environment(
                sqlite_path=str(storage_config.http_cache_path(ensure=False)),
                should_cache=cache_predicate,
            ),
            default_headers={"User-Agent": user_agent, "Accept": "application/json"},
        )
    )
