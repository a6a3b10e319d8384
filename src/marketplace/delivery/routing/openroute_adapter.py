"""OpenRouteService adapter: walking directions over HTTP."""

import httpx
import structlog

from marketplace.delivery.routing.port import (
    DEFAULT_DISTANCE_METERS,
    DEFAULT_DURATION_SECONDS,
    RouteSummary,
    RoutingError,
    RoutingProvider,
)

logger = structlog.get_logger(__name__)

DIRECTIONS_URL = "https://api.openrouteservice.org/v2/directions/foot-walking/geojson"


def parse_summary(data) -> RouteSummary:
    """Read distance/duration from the first feature of a GeoJSON route collection.

    Missing fields fall back to 500 m and 600 s.
    """
    features = data.get("features") if isinstance(data, dict) else None
    first = features[0] if isinstance(features, list) and features else {}
    summary = (first.get("properties") or {}).get("summary") or {}

    meters = summary.get("distance")
    seconds = summary.get("duration")
    return RouteSummary(
        meters=DEFAULT_DISTANCE_METERS if meters is None else meters,
        seconds=DEFAULT_DURATION_SECONDS if seconds is None else seconds,
    )


class OpenRouteServiceProvider(RoutingProvider):
    """Calls the OpenRouteService foot-walking directions endpoint.

    No timeout is configured here; a slow provider is bounded only by the
    transport defaults.
    """

    def __init__(self, api_key: str | None, url: str = DIRECTIONS_URL, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = api_key
        self.url = url
        self.transport = transport

    async def walking_route(self, start: list[float], end: list[float]) -> RouteSummary:
        if not self.api_key:
            raise RoutingError("ORS_API_KEY is not configured")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url,
                    headers={"Authorization": self.api_key, "Content-Type": "application/json"},
                    json={"coordinates": [start, end]},
                )
            except httpx.HTTPError as exc:
                raise RoutingError(f"ORS request failed: {exc}") from exc

        if not response.is_success:
            raise RoutingError(f"ORS {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise RoutingError("ORS returned a non-JSON body") from exc

        summary = parse_summary(data)
        logger.debug("Route fetched", meters=summary.meters, seconds=summary.seconds)
        return summary
