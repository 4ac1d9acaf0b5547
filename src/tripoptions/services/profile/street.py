"""Access and egress street legs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ...models.domain import StopAtDistance, StopRef


@dataclass(slots=True, frozen=True)
class StreetSegment:
    mode: str
    time: int
    distance: float
    stop: Optional[StopRef] = None


def street_segments_from_paths(candidates: Optional[Iterable[StopAtDistance]]) -> List[StreetSegment]:
    """Turn street search results into street legs, one per candidate, order preserved."""

    if candidates is None:
        return []
    return [
        StreetSegment(mode=candidate.mode, time=candidate.time, distance=candidate.distance, stop=candidate.stop)
        for candidate in candidates
    ]
