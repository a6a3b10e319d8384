"""Fake routing adapter: deterministic routes for testing and development."""

from marketplace.delivery.routing.port import RouteSummary, RoutingError, RoutingProvider


class FakeRoutingProvider(RoutingProvider):
    """Fake provider that always succeeds by default."""

    def __init__(self, meters: float = 750, seconds: float = 540):
        self.meters = meters
        self.seconds = seconds
        self.should_succeed = True
        self.failure_reason = "Routing provider unavailable"
        self.calls = []

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Routing provider unavailable",
        meters: float | None = None,
        seconds: float | None = None,
    ):
        """Configure the fake provider behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        if meters is not None:
            self.meters = meters
        if seconds is not None:
            self.seconds = seconds

    async def walking_route(self, start: list[float], end: list[float]) -> RouteSummary:
        self.calls.append((start, end))
        if not self.should_succeed:
            raise RoutingError(self.failure_reason)
        return RouteSummary(meters=self.meters, seconds=self.seconds)
