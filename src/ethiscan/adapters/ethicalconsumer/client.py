"""Ethical Consumer site-search adapter."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ethiscan.adapters.http_resilience import ProviderSession, http_get_checked
from ethiscan.config.ethicalconsumer import get_ethicalconsumer_config
from ethiscan.domain.model import ProviderId

from .translator import translate_search_page

if TYPE_CHECKING:
    from ethiscan.adapters.http_resilience import ClientFactory, ResilientClient
    from ethiscan.config.ethicalconsumer import EthicalConsumerConfig
    from ethiscan.domain.ports.lookups import SearchHit

log = getLogger(__name__)


class EthicalConsumerSearch:
    """Search ethicalconsumer.org for a brand and return the first listed result."""

    provider = ProviderId.ETHICAL_CONSUMER

    def __init__(
        self,
        *,
        config: EthicalConsumerConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_ethicalconsumer_config()
        self._session = ProviderSession(self._config.resilience, client_factory)

    def query(self, brand: str, /) -> SearchHit | None:
        return self._session.run(lambda client: self._query_async(client, brand))

    def close(self) -> None:
        self._session.close()

    async def _query_async(self, client: ResilientClient, brand: str) -> SearchHit | None:
        response = await http_get_checked(
            client,
            self._config.search_path,
            provider=self.provider,
            params={"keywords": brand},
        )
        if response is None:
            return None

        hit = translate_search_page(
            response.text,
            page_url=str(response.url),
            selectors=self._config.result_selectors,
        )
        if hit is None:
            log.debug("Ethical Consumer lists no results for %r", brand)
        return hit
