"""Fare computation contract and a mode-priced calculator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol, Sequence

from ...config import settings
from ...models.domain import Ride, RouteShort


@dataclass(slots=True, frozen=True)
class Fare:
    """A price covering one or more consecutive rides."""

    fare_type: str
    low: float
    peak: float
    senior: float
    currency: str
    ride_count: int = 1


class FareCalculator(Protocol):
    def calculate_fares(self, rides: Sequence[Ride]) -> List[Fare]:
        ...


class ModeFareCalculator:
    """Charge one fare per run of consecutive rides in the same mode.

    A ride's mode is the mode of its first route. Transfers within a run are free.
    """

    def __init__(
        self,
        routes: Mapping[str, RouteShort],
        mode_fares: Mapping[str, float],
        *,
        default_fare: float,
        currency: str,
        peak_multiplier: float = 1.0,
        senior_multiplier: float = 1.0,
    ):
        self.routes = routes
        self.mode_fares = {mode.upper(): price for mode, price in mode_fares.items()}
        self.default_fare = default_fare
        self.currency = currency
        self.peak_multiplier = peak_multiplier
        self.senior_multiplier = senior_multiplier

    @classmethod
    def from_settings(cls, routes: Mapping[str, RouteShort]) -> ModeFareCalculator:
        return cls(
            routes,
            settings.mode_fares,
            default_fare=settings.default_fare,
            currency=settings.fare_currency,
            peak_multiplier=settings.peak_multiplier,
            senior_multiplier=settings.senior_multiplier,
        )

    def _ride_mode(self, ride: Ride) -> Optional[str]:
        for route_id in ride.route_ids:
            route = self.routes.get(route_id)
            if route is not None and route.mode:
                return route.mode.upper()
        return None

    def _fare(self, mode: Optional[str], ride_count: int) -> Fare:
        low = self.mode_fares.get(mode, self.default_fare) if mode else self.default_fare
        return Fare(
            fare_type=mode or "DEFAULT",
            low=low,
            peak=round(low * self.peak_multiplier, 2),
            senior=round(low * self.senior_multiplier, 2),
            currency=self.currency,
            ride_count=ride_count,
        )

    def calculate_fares(self, rides: Sequence[Ride]) -> List[Fare]:
        fares: List[Fare] = []
        current_mode: Optional[str] = None
        run_length = 0
        for ride in rides:
            mode = self._ride_mode(ride)
            if run_length and mode is not None and mode == current_mode:
                run_length += 1
                continue
            if run_length:
                fares.append(self._fare(current_mode, run_length))
            current_mode = mode
            run_length = 1
        if run_length:
            fares.append(self._fare(current_mode, run_length))
        return fares
