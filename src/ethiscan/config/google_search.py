"""Google Custom Search configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, require_env_vars
from .http_resilience import ResilienceConfig

GOOGLE_SEARCH_BASE_URL = "https://www.googleapis.com/customsearch/"
GOOGLE_SEARCH_PATH = "v1"
GOOGLE_SEARCH_TIMEOUT_SECONDS = 8.0


@dataclass(frozen=True, slots=True)
class GoogleSearchConfig:
    """Credentials for the Custom Search JSON API."""

    api_key: str
    engine_id: str
    resilience: ResilienceConfig


def get_google_search_config(*, resilience: ResilienceConfig | None = None) -> GoogleSearchConfig:
    values = require_env_vars(("ETHISCAN_GOOGLE_API_KEY", "ETHISCAN_GOOGLE_CSE_ID"))
    return GoogleSearchConfig(
        api_key=values["ETHISCAN_GOOGLE_API_KEY"],
        engine_id=values["ETHISCAN_GOOGLE_CSE_ID"],
        resilience=resilience
        or ResilienceConfig(
            name="google_search",
            base_url=GOOGLE_SEARCH_BASE_URL,
            timeout_seconds=env_float("ETHISCAN_GOOGLE_TIMEOUT", GOOGLE_SEARCH_TIMEOUT_SECONDS),
        ),
    )
