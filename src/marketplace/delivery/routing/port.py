"""Routing port: abstract interface for walking-directions providers.

Delivery estimates program against the port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_DISTANCE_METERS = 500
DEFAULT_DURATION_SECONDS = 600


class RoutingError(Exception):
    """The routing provider could not produce a route."""


@dataclass(frozen=True)
class RouteSummary:
    """Distance and duration of the first route a provider returned."""

    meters: float = DEFAULT_DISTANCE_METERS
    seconds: float = DEFAULT_DURATION_SECONDS


class RoutingProvider(ABC):
    """Abstract interface for routing adapters."""

    @abstractmethod
    async def walking_route(self, start: list[float], end: list[float]) -> RouteSummary:
        """Walking route between two [longitude, latitude] pairs.

        Raises:
            RoutingError: the provider is unconfigured, unreachable, or
                answered with a non-success status.
        """
        ...
