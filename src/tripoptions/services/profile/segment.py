"""Presentable view of a single transit ride."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from ...models.domain import Ride, RouteShort
from .stats import Stats


def _resolve_routes(route_ids: List[str], routes: Mapping[str, RouteShort]) -> List[RouteShort]:
    resolved: List[RouteShort] = []
    for route_id in route_ids:
        route = routes.get(route_id)
        if route is None:
            logging.warning(f"Route '{route_id}' missing from route lookup, using its id as name")
            route = RouteShort(route_id=route_id)
        resolved.append(route)
    return resolved


class Segment:
    """One ride of an option, with the statistics shown to riders."""

    def __init__(self, ride: Ride, routes: Mapping[str, RouteShort]):
        self.from_id = ride.from_stop.stop_id
        self.from_name = ride.from_stop.name
        self.to_id = ride.to_stop.stop_id
        self.to_name = ride.to_stop.name
        self.routes = _resolve_routes(ride.route_ids, routes)
        # A cleared or zero-length access leg is no walk at all, not a 0 s sample.
        self.walk_time = Stats.from_duration(ride.access_time) if ride.access_time > 0 else Stats()
        self.walk_dist = ride.access_dist
        # None means no headway data, not a zero wait.
        self.wait_stats: Optional[Stats] = ride.wait_stats
        self.ride_stats = ride.ride_stats

    def route_label(self) -> str:
        return "/".join(route.display_name for route in self.routes)

    def is_empty(self) -> bool:
        """Return True when no trip of this ride survives the departure window."""

        if self.ride_stats.num == 0:
            return True
        return self.wait_stats is not None and self.wait_stats.num == 0
