"""Open Food Facts product catalog adapter."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ethiscan.adapters.http_resilience import ProviderSession, http_get_checked
from ethiscan.config.openfoodfacts import get_openfoodfacts_config
from ethiscan.domain.model import ProviderId
from ethiscan.domain.ports.lookups import MalformedResponseError

from .schema import ProductResponse
from .translator import translate_product

if TYPE_CHECKING:
    from ethiscan.adapters.http_resilience import ClientFactory, ResilientClient
    from ethiscan.config.openfoodfacts import OpenFoodFactsConfig
    from ethiscan.domain.model import ProductRecord

log = getLogger(__name__)

PRODUCT_PATH_TEMPLATE = "/api/v0/product/{barcode}.json"
PRODUCT_FIELDS = "product_name,brands,categories,labels,ingredients_text,nutriscore_grade"


def should_cache_payload(payload: object) -> bool:
    """Only keep hits in the HTTP cache; unknown barcodes get added over time."""

    return isinstance(payload, dict) and payload.get("status") == 1


class OpenFoodFactsCatalog:
    """Product catalog backed by the public Open Food Facts API."""

    provider = ProviderId.OPENFOODFACTS

    def __init__(
        self,
        *,
        config: OpenFoodFactsConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_openfoodfacts_config(cache_predicate=should_cache_payload)
        self._session = ProviderSession(self._config.resilience, client_factory)

    def query(self, barcode: str, /) -> ProductRecord | None:
        return self._session.run(lambda client: self._query_async(client, barcode))

    def close(self) -> None:
        self._session.close()

    async def _query_async(self, client: ResilientClient, barcode: str) -> ProductRecord | None:
        response = await http_get_checked(
            client,
            PRODUCT_PATH_TEMPLATE.format(barcode=barcode),
            provider=self.provider,
            params={"fields": PRODUCT_FIELDS},
        )
        if response is None:
            return None

        try:
            payload = ProductResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected Open Food Facts payload for {barcode}", provider=self.provider
            ) from exc

        if not payload.is_found or payload.product is None:
            log.debug("Open Food Facts status %r for %s", payload.status_verbose, barcode)
            return None
        return translate_product(payload.product)
