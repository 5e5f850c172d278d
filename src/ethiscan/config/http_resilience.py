"""Configuration types for resilient HTTP clients."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import httpx

from .env import optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ShouldCacheHook = Callable[[object], bool]
CacheBackend = Literal["sqlite", "memory"]

HTTP_CACHE_ENV_VAR = "ETHISCAN_HTTP_CACHE"


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry budget for transient failures.

    Timeouts are deliberately absent from ``retry_on_exceptions``: a provider that
    exceeds its time budget counts as failed for the current resolution.
    """

    total: int = 1
    backoff_factor: float = 0.25
    max_backoff_wait: float = 2.0
    respect_retry_after_header: bool = False
    allowed_methods: frozenset[str] = field(default_factory=lambda: frozenset({"GET", "HEAD"}))
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 502, 503, 504})
    )
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.ConnectError,
        httpx.RemoteProtocolError,
    )
    backoff_jitter: float = 0.5


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    enabled: bool = True
    backend: CacheBackend = "memory"
    sqlite_path: str | None = None
    default_ttl_seconds: float | None = None
    refresh_ttl_on_access: bool = True
    should_cache: ShouldCacheHook | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 10.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    default_headers: Mapping[str, str] | None = None


def cache_config_from_environment(
    *,
    sqlite_path: str | None = None,
    should_cache: ShouldCacheHook | None = None,
) -> CacheConfig | None:
    """Return the HTTP cache selected by ``ETHISCAN_HTTP_CACHE`` (off by default)."""

    value = (optional_env_var(HTTP_CACHE_ENV_VAR) or "off").lower()
    if value in {"off", "none", "0", "false"}:
        return None
    if value == "memory":
        return CacheConfig(backend="memory", should_cache=should_cache)
    if value == "sqlite":
        return CacheConfig(backend="sqlite", sqlite_path=sqlite_path, should_cache=should_cache)
    raise ConfigurationError(
        f"Unsupported {HTTP_CACHE_ENV_VAR} value: {value}", variables=(HTTP_CACHE_ENV_VAR,)
    )
