"""Delivery estimate between two pickup points.

The routing provider is unreliable, so every failure on its side collapses
into a fixed FALLBACK result. Only an unknown pickup label is reported back to
the caller as an error.
"""

import math
from dataclasses import asdict, dataclass
from enum import Enum

import structlog

from marketplace.delivery.pickup_points import lookup
from marketplace.delivery.routing.port import RoutingProvider

logger = structlog.get_logger(__name__)

BASE_FEE = 10
FEE_PER_100_METERS = 0.5

FALLBACK_METERS = 500
FALLBACK_MINUTES = 10
FALLBACK_FEE = 20

UNKNOWN_PICKUP_POINT = "Unknown pickup point"


class EstimateOutcome(Enum):
    OK = "ok"
    FALLBACK = "fallback"
    CLIENT_ERROR = "client_error"


@dataclass(frozen=True)
class DeliveryQuote:
    meters: float
    minutes: int
    fee: int


@dataclass(frozen=True)
class EstimateResult:
    outcome: EstimateOutcome
    quote: DeliveryQuote | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, quote: DeliveryQuote) -> "EstimateResult":
        return cls(outcome=EstimateOutcome.OK, quote=quote)

    @classmethod
    def fallback(cls, reason: str | None = None) -> "EstimateResult":
        return cls(
            outcome=EstimateOutcome.FALLBACK,
            quote=DeliveryQuote(meters=FALLBACK_METERS, minutes=FALLBACK_MINUTES, fee=FALLBACK_FEE),
            reason=reason,
        )

    @classmethod
    def client_error(cls, reason: str) -> "EstimateResult":
        return cls(outcome=EstimateOutcome.CLIENT_ERROR, reason=reason)

    def to_response(self) -> dict:
        """JSON body for the estimate endpoint."""
        if self.outcome is EstimateOutcome.CLIENT_ERROR:
            return {"error": self.reason}
        body = asdict(self.quote)
        if self.outcome is EstimateOutcome.FALLBACK:
            body["note"] = "fallback"
        return body


def delivery_fee(meters: float) -> int:
    """10 plus 0.5 per started 100 m, rounded up."""
    return math.ceil(BASE_FEE + math.ceil(meters / 100) * FEE_PER_100_METERS)


def walking_minutes(seconds: float) -> int:
    return math.ceil(seconds / 60)


async def estimate(from_label, to_label, provider: RoutingProvider) -> EstimateResult:
    start = lookup(from_label)
    end = lookup(to_label)
    if start is None or end is None:
        return EstimateResult.client_error(UNKNOWN_PICKUP_POINT)

    try:
        route = await provider.walking_route(start.coordinates, end.coordinates)
        quote = DeliveryQuote(
            meters=route.meters,
            minutes=walking_minutes(route.seconds),
            fee=delivery_fee(route.meters),
        )
    except Exception as exc:
        logger.warning(
            "Routing provider failed, using fallback estimate",
            origin=start.label,
            destination=end.label,
            error=str(exc),
        )
        return EstimateResult.fallback(reason=str(exc))

    return EstimateResult.ok(quote)
