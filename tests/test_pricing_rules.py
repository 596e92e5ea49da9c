import asyncio

import httpx

from errandrunners.core import dependencies
from errandrunners.models.pricing import PricingRules
from errandrunners.services.pricing_rules import PricingRulesClient
from errandrunners.services.service_area import ServiceAreaGate

DEFAULTS = PricingRules(base_price=800, price_per_km=150, minimum_price=800)


def make_client(handler, base_url="https://backend.test"):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PricingRulesClient(
        base_url=base_url,
        default_rules=DEFAULTS,
        api_key="anon-key",
        http_client=http_client,
    )


def run(coro):
    return asyncio.run(coro)


def test_fetches_and_caches_rules():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(
            200,
            json=[{"base_price": "1000", "price_per_km": 175, "minimum_price": 1000}],
        )

    async def scenario():
        client = make_client(handler)
        first = await client.get_pricing_rules()
        second = await client.get_pricing_rules()
        await client.close()
        return first, second

    first, second = run(scenario())

    assert first == PricingRules(base_price=1000, price_per_km=175, minimum_price=1000)
    assert second == first
    assert len(calls) == 1
    assert calls[0].url.path == "/rest/v1/pricing_rules"
    assert calls[0].headers["apikey"] == "anon-key"
    assert calls[0].headers["Authorization"] == "Bearer anon-key"


def test_clear_cache_refetches():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(
            200,
            json=[{"base_price": 900, "price_per_km": 150, "minimum_price": 900}],
        )

    async def scenario():
        client = make_client(handler)
        await client.get_pricing_rules()
        client.clear_cache()
        await client.get_pricing_rules()
        await client.close()

    run(scenario())
    assert len(calls) == 2


def test_server_error_falls_back_to_defaults():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    async def scenario():
        client = make_client(handler)
        rules = await client.get_pricing_rules()
        await client.close()
        return rules

    assert run(scenario()) == DEFAULTS


def test_connection_error_falls_back_to_defaults():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    async def scenario():
        client = make_client(handler)
        rules = await client.get_pricing_rules()
        await client.close()
        return rules

    assert run(scenario()) == DEFAULTS


def test_empty_or_malformed_rows_fall_back_to_defaults():
    responses = iter([[], [{"base_price": 1000}]])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=next(responses))

    async def scenario():
        client = make_client(handler)
        empty = await client.get_pricing_rules()
        malformed = await client.get_pricing_rules()
        await client.close()
        return empty, malformed

    assert run(scenario()) == (DEFAULTS, DEFAULTS)


def test_without_backend_serves_defaults_offline():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async def scenario():
        client = make_client(handler, base_url=None)
        rules = await client.get_pricing_rules()
        zones = await client.get_service_zones()
        await client.close()
        return rules, zones

    assert run(scenario()) == (DEFAULTS, {})


def test_service_zones():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/v1/service_zones"
        return httpx.Response(
            200,
            json=[
                {"zone_name": "East Bank Demerara", "is_active": False},
                {"zone_name": "Georgetown", "is_active": True},
            ],
        )

    async def scenario():
        client = make_client(handler)
        zones = await client.get_service_zones()
        await client.close()
        return zones

    assert run(scenario()) == {"East Bank Demerara": False, "Georgetown": True}


def test_service_zones_error_returns_empty():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async def scenario():
        client = make_client(handler)
        zones = await client.get_service_zones()
        await client.close()
        return zones

    assert run(scenario()) == {}


def test_sync_service_zones_applies_backend_flags(monkeypatch):
    gate = ServiceAreaGate()
    monkeypatch.setattr(dependencies, "service_area_gate", gate)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"zone_name": "Berbice", "is_active": True},
                {"zone_name": "Georgetown", "is_active": False},
            ],
        )

    async def scenario():
        client = make_client(handler)
        monkeypatch.setattr(dependencies, "rules_client", client)
        await dependencies.sync_service_zones()
        await client.close()

    run(scenario())

    assert not gate.is_zone_active("Georgetown")
    assert gate.active_zones() == ["East Bank Demerara", "East Coast Demerara"]
