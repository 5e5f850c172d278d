"""Application configuration helpers."""

from __future__ import annotations

from .barcodelookup import BarcodeLookupConfig, get_barcodelookup_config
from .brand_ratings import BrandRatingsConfig, get_brand_ratings_config
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .ethicalconsumer import EthicalConsumerConfig, get_ethicalconsumer_config
from .google_search import GoogleSearchConfig, get_google_search_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .openfoodfacts import OpenFoodFactsConfig, get_openfoodfacts_config
from .resolver import ResolverConfig, get_resolver_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "BarcodeLookupConfig",
    "BrandRatingsConfig",
    "CacheConfig",
    "ConfigurationError",
    "EthicalConsumerConfig",
    "GoogleSearchConfig",
    "MissingConfigurationError",
    "OpenFoodFactsConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResolverConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_barcodelookup_config",
    "get_brand_ratings_config",
    "get_ethicalconsumer_config",
    "get_google_search_config",
    "get_openfoodfacts_config",
    "get_resolver_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
