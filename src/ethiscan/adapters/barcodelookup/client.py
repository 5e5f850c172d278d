"""BarcodeLookup retailer directory adapter (barcode to manufacturer)."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ethiscan.adapters.http_resilience import ProviderSession, http_get_checked
from ethiscan.config.barcodelookup import get_barcodelookup_config
from ethiscan.domain.model import ProviderId
from ethiscan.domain.ports.lookups import MalformedResponseError

from .schema import ProductsResponse

if TYPE_CHECKING:
    from ethiscan.adapters.http_resilience import ClientFactory, ResilientClient
    from ethiscan.config.barcodelookup import BarcodeLookupConfig

log = getLogger(__name__)

PRODUCTS_PATH = "products"


class BarcodeLookupDirectory:
    """Resolve a barcode to the manufacturer named by BarcodeLookup."""

    provider = ProviderId.BARCODELOOKUP

    def __init__(
        self,
        *,
        config: BarcodeLookupConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_barcodelookup_config()
        self._session = ProviderSession(self._config.resilience, client_factory)

    def query(self, barcode: str, /) -> str | None:
        return self._session.run(lambda client: self._query_async(client, barcode))

    def close(self) -> None:
        self._session.close()

    async def _query_async(self, client: ResilientClient, barcode: str) -> str | None:
        response = await http_get_checked(
            client,
            PRODUCTS_PATH,
            provider=self.provider,
            params={"barcode": barcode, "formatted": "y", "key": self._config.api_key},
        )
        if response is None:
            return None

        try:
            payload = ProductsResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected BarcodeLookup payload for {barcode}", provider=self.provider
            ) from exc

        manufacturer = payload.manufacturer
        if manufacturer is None:
            log.debug(
                "BarcodeLookup returned %d product(s) without manufacturer for %s",
                len(payload.products),
                barcode,
            )
        return manufacturer
