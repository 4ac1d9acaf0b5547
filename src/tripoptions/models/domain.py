"""Domain models handed over by the trip search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..services.profile.stats import Stats


@dataclass(slots=True, frozen=True)
class StopRef:
    stop_id: str
    name: str


@dataclass(slots=True, frozen=True)
class RouteShort:
    """Display-oriented reference to a transit route."""

    route_id: str
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    mode: Optional[str] = None
    agency_id: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.short_name is not None:
            return self.short_name
        if self.long_name is not None:
            return self.long_name
        return self.route_id


@dataclass(slots=True, eq=False)
class Ride:
    """One boarding-to-alighting hop, linked backwards to the ride before it.

    Rides are built and owned by the trip search. ``access_time`` (seconds) and
    ``access_dist`` (metres) describe the street leg leading to the boarding stop.
    """

    from_stop: StopRef
    to_stop: StopRef
    route_ids: List[str]
    ride_stats: "Stats"
    wait_stats: Optional["Stats"] = None
    access_time: int = 0
    access_dist: float = 0.0
    previous: Optional["Ride"] = field(default=None, repr=False)


@dataclass(slots=True, frozen=True)
class StopAtDistance:
    """A stop reached from the origin (or the destination) over the street network."""

    stop: StopRef
    mode: str
    time: int
    distance: float
