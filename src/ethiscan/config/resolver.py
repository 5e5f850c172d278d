"""Aggregate configuration for the barcode resolver."""

from __future__ import annotations

from dataclasses import dataclass

from .barcodelookup import BarcodeLookupConfig, get_barcodelookup_config
from .brand_ratings import BrandRatingsConfig, get_brand_ratings_config
from .ethicalconsumer import EthicalConsumerConfig, get_ethicalconsumer_config
from .google_search import GoogleSearchConfig, get_google_search_config
from .openfoodfacts import OpenFoodFactsConfig, get_openfoodfacts_config
from .storage import get_storage_config


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    openfoodfacts: OpenFoodFactsConfig
    brand_ratings: BrandRatingsConfig
    barcodelookup: BarcodeLookupConfig
    ethicalconsumer: EthicalConsumerConfig
    google_search: GoogleSearchConfig


def get_resolver_config() -> ResolverConfig:
    storage = get_storage_config()
    return ResolverConfig(
        openfoodfacts=get_openfoodfacts_config(storage=storage),
        brand_ratings=get_brand_ratings_config(storage=storage),
        barcodelookup=get_barcodelookup_config(),
        ethicalconsumer=get_ethicalconsumer_config(),
        google_search=get_google_search_config(),
    )
