"""Tests for the OpenRouteService adapter against a mocked HTTP transport."""

import asyncio
import json

import httpx
import pytest
from marketplace.delivery.routing import build_routing_provider
from marketplace.delivery.routing.fake_adapter import FakeRoutingProvider
from marketplace.delivery.routing.openroute_adapter import (
    DIRECTIONS_URL,
    OpenRouteServiceProvider,
    parse_summary,
)
from marketplace.delivery.routing.port import RouteSummary, RoutingError

START = [121.07793, 14.64068]
END = [121.07496, 14.63995]


def _route_body(distance=420.5, duration=330.0):
    return {"features": [{"properties": {"summary": {"distance": distance, "duration": duration}}}]}


def _provider(handler, api_key="test-key"):
    return OpenRouteServiceProvider(api_key=api_key, transport=httpx.MockTransport(handler))


def _route(provider):
    return asyncio.run(provider.walking_route(START, END))


class TestParseSummary:
    def test_reads_first_feature(self):
        assert parse_summary(_route_body()) == RouteSummary(meters=420.5, seconds=330.0)

    def test_missing_fields_use_defaults(self):
        assert parse_summary({"features": [{"properties": {}}]}) == RouteSummary(meters=500, seconds=600)

    def test_empty_feature_list_uses_defaults(self):
        assert parse_summary({"features": []}) == RouteSummary(meters=500, seconds=600)

    def test_non_object_body_uses_defaults(self):
        assert parse_summary([]) == RouteSummary(meters=500, seconds=600)

    def test_zero_distance_is_kept(self):
        assert parse_summary(_route_body(distance=0, duration=0)) == RouteSummary(meters=0, seconds=0)


class TestOpenRouteServiceProvider:
    def test_posts_coordinates_with_api_key(self):
        captured = {}

        def handler(request):
            captured["url"] = str(request.url)
            captured["authorization"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_route_body())

        summary = _route(_provider(handler))

        assert summary == RouteSummary(meters=420.5, seconds=330.0)
        assert captured["url"] == DIRECTIONS_URL
        assert captured["authorization"] == "test-key"
        assert captured["body"] == {"coordinates": [START, END]}

    def test_missing_api_key_raises(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(RoutingError, match="ORS_API_KEY"):
            _route(_provider(handler, api_key=None))

    def test_error_status_raises(self):
        provider = _provider(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(RoutingError, match="ORS 503"):
            _route(provider)

    def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RoutingError, match="request failed"):
            _route(_provider(handler))

    def test_non_json_body_raises(self):
        provider = _provider(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(RoutingError, match="non-JSON"):
            _route(provider)


class TestBuildRoutingProvider:
    def test_openrouteservice_is_selected(self, app_config):
        config = app_config.model_copy(update={"routing_adapter": "openrouteservice", "ors_api_key": "k"})

        provider = build_routing_provider(config)

        assert isinstance(provider, OpenRouteServiceProvider)
        assert provider.api_key == "k"

    def test_fake_is_selected(self, app_config):
        assert isinstance(build_routing_provider(app_config), FakeRoutingProvider)

    def test_unknown_adapter(self, app_config):
        config = app_config.model_copy(update={"routing_adapter": "carrier-pigeon"})

        with pytest.raises(ValueError, match="Unknown routing adapter"):
            build_routing_provider(config)
