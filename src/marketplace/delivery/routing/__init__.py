"""Routing adapter abstraction: pluggable walking-directions integration."""

from marketplace.delivery.routing.port import RouteSummary, RoutingError, RoutingProvider


def build_routing_provider(config) -> RoutingProvider:
    """Return the routing adapter selected by ``config.routing_adapter``.

    Uses OpenRouteService by default; ``fake`` selects the deterministic
    adapter for development without network access.
    """
    adapter = config.routing_adapter
    if adapter == "openrouteservice":
        from marketplace.delivery.routing.openroute_adapter import OpenRouteServiceProvider

        return OpenRouteServiceProvider(api_key=config.ors_api_key, url=config.ors_base_url)
    if adapter == "fake":
        from marketplace.delivery.routing.fake_adapter import FakeRoutingProvider

        return FakeRoutingProvider()
    raise ValueError(f"Unknown routing adapter: {adapter}")


__all__ = ["RouteSummary", "RoutingError", "RoutingProvider", "build_routing_provider"]
