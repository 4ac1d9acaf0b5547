"""Travel-time distribution summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

if TYPE_CHECKING:
    from .street import StreetSegment


@dataclass(slots=True)
class Stats:
    """Min/avg/max of a set of travel-time samples, in seconds.

    ``num`` counts the samples behind the summary. A Stats with ``num == 0`` has
    no feasible realisation and carries no meaningful min/avg/max.
    """

    min: int = 0
    avg: float = 0.0
    max: int = 0
    num: int = 0

    @classmethod
    def from_durations(cls, durations: Iterable[int]) -> Stats:
        values = list(durations)
        if not values:
            return cls()
        return cls(min=min(values), avg=sum(values) / len(values), max=max(values), num=len(values))

    @classmethod
    def from_duration(cls, duration: int) -> Stats:
        return cls(min=duration, avg=float(duration), max=duration, num=1)

    @classmethod
    def merge(cls, stats: Iterable[Stats]) -> Stats:
        merged = cls()
        for other in stats:
            merged.add(other)
        return merged

    @property
    def is_empty(self) -> bool:
        return self.num == 0

    def add(self, other: Stats) -> None:
        """Fold another summary into this one, weighting the average by sample count."""

        if other.num == 0:
            return
        if self.num == 0:
            self.min, self.avg, self.max, self.num = other.min, other.avg, other.max, other.num
            return
        total = self.num + other.num
        self.avg = (self.avg * self.num + other.avg * other.num) / total
        self.min = min(self.min, other.min)
        self.max = max(self.max, other.max)
        self.num = total

    def add_street_segments(self, segments: Optional[Sequence[StreetSegment]]) -> None:
        """Fold in street legs, each candidate counting as one sample."""

        if not segments:
            return
        self.add(Stats.from_durations(segment.time for segment in segments))
