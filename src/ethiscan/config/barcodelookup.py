"""BarcodeLookup configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

BARCODELOOKUP_BASE_URL = "https://api.barcodelookup.com/v3/"
BARCODELOOKUP_TIMEOUT_SECONDS = 8.0


@dataclass(frozen=True, slots=True)
class BarcodeLookupConfig:
    """Holds BarcodeLookup API configuration values."""

    api_key: str
    resilience: ResilienceConfig


def get_barcodelookup_config(*, resilience: ResilienceConfig | None = None) -> BarcodeLookupConfig:
    values = require_env_vars(("ETHISCAN_BARCODELOOKUP_API_KEY",))
    return BarcodeLookupConfig(
        api_key=values["ETHISCAN_BARCODELOOKUP_API_KEY"],
        resilience=resilience
        or ResilienceConfig(
            name="barcodelookup",
            base_url=BARCODELOOKUP_BASE_URL,
            timeout_seconds=env_float(
                "ETHISCAN_BARCODELOOKUP_TIMEOUT", BARCODELOOKUP_TIMEOUT_SECONDS
            ),
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            default_headers={"User-Agent": "Mozilla/5.0", "Accept": "application/json"},
        ),
    )
