"""Serializers for trip options."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from typing import Optional, Sequence

from ...schemas.options import OptionModel, OptionsResponse
from ..profile.option import Option
from ..profile.stats import Stats
from ..profile.street import StreetSegment


def _stats_to_json(stats: Optional[Stats]) -> Optional[dict]:
    if stats is None:
        return None
    return asdict(stats)


def _street_to_json(segment: StreetSegment) -> dict:
    return {
        "mode": segment.mode,
        "time": segment.time,
        "distance": segment.distance,
        "stop_id": segment.stop.stop_id if segment.stop else None,
    }


def option_to_json(option: Option) -> dict:
    transit = None
    if option.transit is not None:
        transit = [
            {
                "from_id": segment.from_id,
                "from_name": segment.from_name,
                "to_id": segment.to_id,
                "to_name": segment.to_name,
                "routes": [
                    {
                        "route_id": route.route_id,
                        "short_name": route.short_name,
                        "long_name": route.long_name,
                        "mode": route.mode,
                    }
                    for route in segment.routes
                ],
                "walk_time": _stats_to_json(segment.walk_time),
                "walk_dist": segment.walk_dist,
                "wait_stats": _stats_to_json(segment.wait_stats),
                "ride_stats": _stats_to_json(segment.ride_stats),
            }
            for segment in option.transit
        ]
    return {
        "summary": option.summary,
        "stats": _stats_to_json(option.stats),
        "access": [_street_to_json(segment) for segment in option.access],
        "egress": [_street_to_json(segment) for segment in option.egress],
        "transit": transit,
        "fares": [asdict(fare) for fare in option.fares],
    }


def options_response(options: Sequence[Option], order: str, metadata: Optional[dict] = None) -> OptionsResponse:
    return OptionsResponse(
        order=order,
        metadata=metadata or {},
        options=[OptionModel.model_validate(option_to_json(option)) for option in options],
    )


def options_to_csv(options: Sequence[Option]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "option",
        "summary",
        "leg",
        "routes",
        "from_name",
        "to_name",
        "ride_min",
        "ride_avg",
        "ride_max",
        "wait_avg",
        "total_min",
        "total_avg",
        "total_max",
        "fare_total",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for index, option in enumerate(options, start=1):
        base = {
            "option": index,
            "summary": option.summary,
            "total_min": option.stats.min,
            "total_avg": round(option.stats.avg, 1),
            "total_max": option.stats.max,
            "fare_total": round(sum(fare.low for fare in option.fares), 2),
        }
        if not option.transit:
            writer.writerow(base)
            continue
        for leg, segment in enumerate(option.transit, start=1):
            writer.writerow(
                {
                    **base,
                    "leg": leg,
                    "routes": segment.route_label(),
                    "from_name": segment.from_name,
                    "to_name": segment.to_name,
                    "ride_min": segment.ride_stats.min,
                    "ride_avg": round(segment.ride_stats.avg, 1),
                    "ride_max": segment.ride_stats.max,
                    "wait_avg": round(segment.wait_stats.avg, 1) if segment.wait_stats is not None else None,
                }
            )
    return buffer.getvalue()
