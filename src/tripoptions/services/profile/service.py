"""Option building and ranking orchestration."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from ...config import settings
from ...models.domain import Ride, RouteShort, StopAtDistance
from ...schemas.options import OptionsResponse
from ..outputs.option_formatter import options_response
from .fares import FareCalculator, ModeFareCalculator
from .option import Option, SortOrder, comparator_for


@dataclass(slots=True)
class OptionCandidate:
    """A ride chain found by the trip search together with its street legs."""

    tail: Optional[Ride]
    access_paths: List[StopAtDistance] = field(default_factory=list)
    egress_paths: List[StopAtDistance] = field(default_factory=list)


def build_options(
    candidates: Sequence[OptionCandidate],
    *,
    routes: Mapping[str, RouteShort],
    fare_calculator: FareCalculator | None = None,
) -> list[Option]:
    calculator = fare_calculator or ModeFareCalculator.from_settings(routes)
    return [
        Option(
            candidate.tail,
            candidate.access_paths,
            candidate.egress_paths,
            routes=routes,
            fare_calculator=calculator,
        )
        for candidate in candidates
    ]


def rank_options(
    options: Sequence[Option],
    order: SortOrder | str | None = None,
    limit: int | None = None,
    drop_empty: bool = True,
) -> list[Option]:
    """Drop unrealisable options, sort the rest by one stats field and keep the best ``limit``."""

    kept = list(options)
    if drop_empty:
        kept = [option for option in options if not option.has_empty_rides()]
        dropped = len(options) - len(kept)
        if dropped:
            logging.info(f"Dropped {dropped} of {len(options)} options with no trips in the time window")
    comparator = comparator_for(order or settings.default_sort_order)
    ranked = sorted(kept, key=functools.cmp_to_key(comparator))
    limit = settings.max_options if limit is None else limit
    return ranked[: max(limit, 0)]


def plan_options(
    candidates: Sequence[OptionCandidate],
    *,
    routes: Mapping[str, RouteShort],
    order: SortOrder | str | None = None,
    limit: int | None = None,
    fare_calculator: FareCalculator | None = None,
) -> OptionsResponse:
    options = build_options(candidates, routes=routes, fare_calculator=fare_calculator)
    ranked = rank_options(options, order=order, limit=limit)
    order_value = str(getattr(order, "value", order or settings.default_sort_order)).lower()
    logging.info(f"Planned {len(ranked)} of {len(candidates)} candidate options ordered by {order_value}")
    return options_response(
        ranked,
        order=order_value,
        metadata={"candidates": len(candidates), "returned": len(ranked)},
    )
