"""
DC Proximity Table — which distribution center is closer to a demand point.

A fixed lookup of known (distribution center, demand location) pairs. Only an
exact pair present in the table counts as closer; unknown pairs never do.
No distance is computed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationPair:
    distribution_center: str
    demand_location: str
    closer: bool = True


DEFAULT_LOCATION_PAIRS: tuple[LocationPair, ...] = (
    LocationPair("Chicago DC", "Detroit"),
    LocationPair("Los Angeles DC", "San Francisco"),
    LocationPair("New York DC", "Boston"),
    LocationPair("Dallas DC", "Houston"),
)


class ProximityTable:
    """Exact-match lookup over a set of location pairs."""

    def __init__(self, pairs: tuple[LocationPair, ...] | list[LocationPair] = DEFAULT_LOCATION_PAIRS):
        self._closer = {(p.distribution_center, p.demand_location) for p in pairs if p.closer}

    def is_closer(self, distribution_center: str, demand_location: str) -> bool:
        return (distribution_center, demand_location) in self._closer

    def __len__(self) -> int:
        return len(self._closer)
