"""Campus pickup points and their [longitude, latitude] coordinates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PickupPoint:
    label: str
    campus: str
    longitude: float
    latitude: float

    @property
    def coordinates(self) -> list[float]:
        """[longitude, latitude], the order routing providers expect."""
        return [self.longitude, self.latitude]


PICKUP_POINTS = {
    point.label: point
    for point in (
        PickupPoint("SEC-A Lobby", "ADMU", 121.07793, 14.64068),
        PickupPoint("Gate 2.5", "ADMU", 121.07888, 14.6418),
        PickupPoint("Regis", "ADMU", 121.07496, 14.63995),
        PickupPoint("Katipunan LRT", "ADMU", 121.07309, 14.63909),
        PickupPoint("AS Steps", "UPD", 121.0647, 14.6547),
        PickupPoint("Shopping Center", "UPD", 121.0657, 14.653),
        PickupPoint("Sunken Garden", "UPD", 121.0644, 14.6536),
        PickupPoint("Main Gate", "UST", 120.989, 14.6096),
        PickupPoint("Quadricentennial Park", "UST", 120.9898, 14.6101),
        PickupPoint("Beato Library", "UST", 120.9904, 14.6092),
    )
}


def lookup(label) -> PickupPoint | None:
    if not isinstance(label, str):
        return None
    return PICKUP_POINTS.get(label)


def points_for_campus(campus: str | None = None) -> list[PickupPoint]:
    return [point for point in PICKUP_POINTS.values() if not campus or point.campus == campus]
