"""Trip option response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class StatsModel(BaseModel):
    min: int
    avg: float
    max: int
    num: int = Field(..., ge=0, description="Number of samples; 0 means not realisable.")


class StreetSegmentModel(BaseModel):
    mode: str
    time: int
    distance: float
    stop_id: Optional[str] = None


class RouteModel(BaseModel):
    route_id: str
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    mode: Optional[str] = None


class SegmentModel(BaseModel):
    from_id: str
    from_name: str
    to_id: str
    to_name: str
    routes: List[RouteModel]
    walk_time: StatsModel
    walk_dist: float
    wait_stats: Optional[StatsModel] = None
    ride_stats: StatsModel


class FareModel(BaseModel):
    fare_type: str
    low: float
    peak: float
    senior: float
    currency: str
    ride_count: int


class OptionModel(BaseModel):
    summary: str
    stats: StatsModel
    access: List[StreetSegmentModel]
    egress: List[StreetSegmentModel]
    transit: Optional[List[SegmentModel]] = None
    fares: List[FareModel]


class OptionsResponse(BaseModel):
    order: str
    metadata: dict
    options: List[OptionModel]
