"""Google Custom Search adapter returning the first result snippet."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ethiscan.adapters.http_resilience import ProviderSession, http_get_checked
from ethiscan.config.google_search import GOOGLE_SEARCH_PATH, get_google_search_config
from ethiscan.domain.model import ProviderId
from ethiscan.domain.ports.lookups import MalformedResponseError, TransportError

from .schema import SearchResponse

if TYPE_CHECKING:
    from ethiscan.adapters.http_resilience import ClientFactory, ResilientClient
    from ethiscan.config.google_search import GoogleSearchConfig

log = getLogger(__name__)


class GoogleWebSearch:
    """Web search via the Custom Search JSON API."""

    provider = ProviderId.GOOGLE_SEARCH

    def __init__(
        self,
        *,
        config: GoogleSearchConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_google_search_config()
        self._session = ProviderSession(self._config.resilience, client_factory)

    def query(self, text: str, /) -> str | None:
        return self._session.run(lambda client: self._query_async(client, text))

    def close(self) -> None:
        self._session.close()

    async def _query_async(self, client: ResilientClient, text: str) -> str | None:
        response = await http_get_checked(
            client,
            GOOGLE_SEARCH_PATH,
            provider=self.provider,
            not_found_statuses=frozenset(),
            params={"q": text, "key": self._config.api_key, "cx": self._config.engine_id},
        )
        if response is None:
            return None

        try:
            payload = SearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedResponseError(
                "Unexpected Custom Search payload", provider=self.provider
            ) from exc

        if payload.error is not None:
            message = f"Custom Search error {payload.error.code}: {payload.error.message}"
            log.warning("%s (query %r)", message, text)
            raise TransportError(message, provider=self.provider)

        snippet = payload.first_snippet
        if snippet is None:
            log.debug("Custom Search returned no snippet for %r", text)
        return snippet
