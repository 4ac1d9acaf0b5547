"""Helpers for the backward-linked ride chains produced by the trip search."""

from __future__ import annotations

import logging
from typing import List, Optional

from ...models.domain import Ride


def rides_in_order(tail: Optional[Ride]) -> List[Ride]:
    """Walk ``previous`` links back from ``tail`` and return the rides in boarding order."""

    rides: List[Ride] = []
    seen: set[int] = set()
    ride = tail
    while ride is not None:
        if id(ride) in seen:
            logging.warning(
                f"Ride chain loops back to {ride.from_stop.stop_id} -> {ride.to_stop.stop_id}; "
                f"truncating after {len(rides)} rides"
            )
            break
        seen.add(id(ride))
        rides.append(ride)
        ride = ride.previous
    rides.reverse()
    return rides


def clear_first_access(rides: List[Ride]) -> None:
    """Zero the access leg of the first ride in place.

    The access leg is already accounted for by the option's street segments.
    The chain must belong to the option being built; calling this twice is harmless.
    """

    if not rides:
        return
    first = rides[0]
    first.access_time = 0
    first.access_dist = 0.0
