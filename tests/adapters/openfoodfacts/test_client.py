from __future__ import annotations

import asyncio

import httpx
import pytest

from ethiscan.adapters.http_resilience import ResilientClient
from ethiscan.adapters.openfoodfacts import OpenFoodFactsCatalog, should_cache_payload
from ethiscan.config.http_resilience import CacheConfig, ResilienceConfig, RetryPolicy
from ethiscan.config.openfoodfacts import OpenFoodFactsConfig
from ethiscan.domain.model import ProductRecord, ProviderId
from ethiscan.domain.ports.lookups import MalformedResponseError, TransportError
from tests.helpers.http_mocks import RecordingHandler, json_response, make_client_factory

BARCODE = "3017620422003"


def _catalog(
    handler: RecordingHandler,
    *,
    cache: CacheConfig | None = None,
) -> OpenFoodFactsCatalog:
    config = OpenFoodFactsConfig(
        resilience=ResilienceConfig(
            name="openfoodfacts",
            base_url="https://world.openfoodfacts.org",
            timeout_seconds=5.0,
            retry=RetryPolicy(backoff_factor=0, backoff_jitter=0),
            cache=cache,
            default_headers={"User-Agent": "ethiscan-tests"},
        )
    )
    return OpenFoodFactsCatalog(config=config, client_factory=make_client_factory(handler))


def test_found_product_is_translated() -> None:
    handler = RecordingHandler(
        json_response(
            {
                "status": 1,
                "code": BARCODE,
                "product": {
                    "product_name": "Nutella",
                    "brands": "Ferrero",
                    "categories": "Spreads, Breakfast foods",
                    "labels": "",
                    "ingredients_text": "Sugar, palm oil",
                    "nutriscore_grade": "e",
                },
            }
        )
    )

    record = _catalog(handler).query(BARCODE)

    assert record == ProductRecord(
        name="Nutella",
        brand="Ferrero",
        category="Spreads, Breakfast foods",
        labels=None,
        ingredients_text="Sugar, palm oil",
        nutriscore="E",
    )
    request = handler.last
    assert request.url.path == f"/api/v0/product/{BARCODE}.json"
    assert request.headers["User-Agent"] == "ethiscan-tests"
    assert "nutriscore_grade" in request.url.params["fields"].split(",")


def test_status_zero_is_not_found() -> None:
    handler = RecordingHandler(
        json_response({"status": 0, "status_verbose": "product not found", "code": BARCODE})
    )

    assert _catalog(handler).query(BARCODE) is None


def test_http_404_is_not_found() -> None:
    handler = RecordingHandler(json_response({"status": 0}, status_code=404))

    assert _catalog(handler).query(BARCODE) is None


def test_server_error_is_a_transport_error() -> None:
    handler = RecordingHandler(json_response({}, status_code=500))

    with pytest.raises(TransportError) as excinfo:
        _catalog(handler).query(BARCODE)

    assert excinfo.value.provider is ProviderId.OPENFOODFACTS


def test_connection_error_is_a_transport_error() -> None:
    def respond(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(TransportError):
        _catalog(RecordingHandler(respond)).query(BARCODE)


def test_unexpected_shape_is_malformed() -> None:
    handler = RecordingHandler(json_response({"status": 1, "product": ["not", "an", "object"]}))

    with pytest.raises(MalformedResponseError):
        _catalog(handler).query(BARCODE)


def test_only_found_payloads_are_cached() -> None:
    assert should_cache_payload({"status": 1, "product": {}})
    assert not should_cache_payload({"status": 0})
    assert not should_cache_payload(["status", 1])


def test_transient_failure_is_retried_through_the_adapter() -> None:
    statuses = iter([503, 200])

    def respond(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(next(statuses), json={"status": 1, "product": {"brands": "Acme"}})

    handler = RecordingHandler(respond)

    record = _catalog(handler).query(BARCODE)

    assert record == ProductRecord(brand="Acme")
    assert len(handler.requests) == 2


def test_slow_catalog_fails_within_its_time_budget() -> None:
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1.0)
        return httpx.Response(200, json={"status": 1}, request=request)

    catalog = OpenFoodFactsCatalog(
        config=OpenFoodFactsConfig(
            resilience=ResilienceConfig(
                name="openfoodfacts",
                base_url="https://world.openfoodfacts.org",
                timeout_seconds=0.05,
            )
        ),
        client_factory=lambda config: ResilientClient(config, transport=httpx.MockTransport(slow)),
    )

    with pytest.raises(TransportError, match="openfoodfacts request failed"):
        catalog.query(BARCODE)
    catalog.close()


def test_memory_cache_serves_repeated_hits() -> None:
    handler = RecordingHandler(
        json_response({"status": 1, "product": {"product_name": "Nutella"}})
    )
    catalog = _catalog(handler, cache=CacheConfig(should_cache=should_cache_payload))

    first = catalog.query(BARCODE)
    second = catalog.query(BARCODE)
    catalog.close()

    assert first == second == ProductRecord(name="Nutella")
    assert len(handler.requests) == 1


def test_memory_cache_skips_unknown_barcodes() -> None:
    handler = RecordingHandler(json_response({"status": 0, "code": BARCODE}))
    catalog = _catalog(handler, cache=CacheConfig(should_cache=should_cache_payload))

    assert catalog.query(BARCODE) is None
    assert catalog.query(BARCODE) is None
    catalog.close()

    assert len(handler.requests) == 2
