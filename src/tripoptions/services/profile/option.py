"""Trip options assembled from a ride chain and its street legs."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Mapping, Optional

from ...models.domain import Ride, RouteShort, StopAtDistance
from .fares import Fare, FareCalculator
from .rides import clear_first_access, rides_in_order
from .segment import Segment
from .stats import Stats
from .street import StreetSegment, street_segments_from_paths

NON_TRANSIT_SUMMARY = "Non-transit options"


class Option:
    """One candidate trip: access legs, an optional chain of rides, egress legs.

    Fares are kept apart from the transit segments because a single fare can
    cover several consecutive rides.
    """

    def __init__(
        self,
        tail: Optional[Ride],
        access_paths: Optional[Iterable[StopAtDistance]],
        egress_paths: Optional[Iterable[StopAtDistance]],
        *,
        routes: Mapping[str, RouteShort],
        fare_calculator: FareCalculator,
    ):
        self.access: List[StreetSegment] = street_segments_from_paths(access_paths)
        self.egress: List[StreetSegment] = street_segments_from_paths(egress_paths)
        self.transit: Optional[List[Segment]] = None
        self.stats = Stats()
        # An option with only access still ends up with num >= 1.
        self.stats.add_street_segments(self.access)
        self.stats.add_street_segments(self.egress)

        rides = rides_in_order(tail)
        if rides:
            clear_first_access(rides)
            self.transit = []
            for ride in rides:
                segment = Segment(ride, routes)
                self.transit.append(segment)
                self.stats.add(segment.walk_time)
                if segment.wait_stats is not None:
                    self.stats.add(segment.wait_stats)
                self.stats.add(segment.ride_stats)

        self.fares: List[Fare] = fare_calculator.calculate_fares(rides)
        self.summary = self.generate_summary()
        logging.debug(f"Built option '{self.summary}' with {len(rides)} rides and {len(self.fares)} fares")

    def generate_summary(self) -> str:
        """Make a human readable text summary of this option."""

        if not self.transit:
            return NON_TRANSIT_SUMMARY
        routes = [segment.route_label() for segment in self.transit]
        # The last alighting stop is the destination, not a via point.
        vias = [segment.to_name for segment in self.transit][:-1]
        summary = "routes " + ", ".join(routes)
        if vias:
            summary += " via " + ", ".join(vias)
        return summary

    def has_empty_rides(self) -> bool:
        """Rides or transfers may contain no patterns after applying the time window."""

        if not self.transit:
            return False
        return any(segment.is_empty() for segment in self.transit)


class SortOrder(str, Enum):
    MIN = "min"
    AVG = "avg"
    MAX = "max"


OptionComparator = Callable[[Option, Option], float]


def min_comparator(one: Option, two: Option) -> float:
    return one.stats.min - two.stats.min


def avg_comparator(one: Option, two: Option) -> float:
    return one.stats.avg - two.stats.avg


def max_comparator(one: Option, two: Option) -> float:
    return one.stats.max - two.stats.max


def comparator_for(order: SortOrder | str) -> OptionComparator:
    match str(getattr(order, "value", order)).lower():
        case "min":
            return min_comparator
        case "avg":
            return avg_comparator
        case "max":
            return max_comparator
        case _:
            raise ValueError(f"Unknown sort order '{order}'.")
