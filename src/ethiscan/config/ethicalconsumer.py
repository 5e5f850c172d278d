"""Ethical Consumer site-search configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, optional_env_var
from .http_resilience import RateLimit, ResilienceConfig
from .openfoodfacts import DEFAULT_USER_AGENT

ETHICAL_CONSUMER_BASE_URL = "https://www.ethicalconsumer.org"
ETHICAL_CONSUMER_TIMEOUT_SECONDS = 12.0
DEFAULT_RESULT_SELECTORS = (".search-result a[href]", "h3 a[href]")


@dataclass(frozen=True, slots=True)
class EthicalConsumerConfig:
    resilience: ResilienceConfig
    search_path: str = "/search"
    result_selectors: tuple[str, ...] = DEFAULT_RESULT_SELECTORS


def get_ethicalconsumer_config() -> EthicalConsumerConfig:
    selector = optional_env_var("ETHISCAN_ETHICAL_CONSUMER_SELECTOR")
    user_agent = optional_env_var("ETHISCAN_USER_AGENT") or DEFAULT_USER_AGENT
    return EthicalConsumerConfig(
        resilience=ResilienceConfig(
            name="ethical_consumer",
            base_url=ETHICAL_CONSUMER_BASE_URL,
            timeout_seconds=env_float(
                "ETHISCAN_ETHICAL_CONSUMER_TIMEOUT", ETHICAL_CONSUMER_TIMEOUT_SECONDS
            ),
            ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
            default_headers={"User-Agent": user_agent, "Accept": "text/html"},
        ),
        result_selectors=(selector,) if selector else DEFAULT_RESULT_SELECTORS,
    )
