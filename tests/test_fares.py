from src.tripoptions.models.domain import Ride, RouteShort, StopRef
from src.tripoptions.services.profile.fares import ModeFareCalculator
from src.tripoptions.services.profile.stats import Stats

ROUTES = {
    "R1": RouteShort(route_id="R1", short_name="1", mode="BUS"),
    "R2": RouteShort(route_id="R2", short_name="2", mode="bus"),
    "R3": RouteShort(route_id="R3", short_name="Red", mode="RAIL"),
    "R4": RouteShort(route_id="R4", short_name="Shuttle"),
}


def _ride(route_id: str) -> Ride:
    return Ride(
        from_stop=StopRef("A", "A"),
        to_stop=StopRef("B", "B"),
        route_ids=[route_id],
        ride_stats=Stats.from_duration(300),
    )


def _calculator() -> ModeFareCalculator:
    return ModeFareCalculator(
        ROUTES,
        {"bus": 1.5, "rail": 3.0},
        default_fare=2.0,
        currency="USD",
        peak_multiplier=2.0,
        senior_multiplier=0.5,
    )


def test_consecutive_rides_in_same_mode_share_a_fare():
    fares = _calculator().calculate_fares([_ride("R1"), _ride("R2"), _ride("R3"), _ride("R4")])

    assert [fare.fare_type for fare in fares] == ["BUS", "RAIL", "DEFAULT"]
    assert [fare.ride_count for fare in fares] == [2, 1, 1]
    bus = fares[0]
    assert bus.low == 1.5
    assert bus.peak == 3.0
    assert bus.senior == 0.75
    assert bus.currency == "USD"
    assert fares[2].low == 2.0


def test_mode_change_back_starts_new_fare():
    fares = _calculator().calculate_fares([_ride("R1"), _ride("R3"), _ride("R2")])

    assert [fare.fare_type for fare in fares] == ["BUS", "RAIL", "BUS"]


def test_rides_without_mode_are_priced_separately():
    fares = _calculator().calculate_fares([_ride("R4"), _ride("R4"), _ride("R1")])

    assert [fare.fare_type for fare in fares] == ["DEFAULT", "DEFAULT", "BUS"]
    assert [fare.ride_count for fare in fares] == [1, 1, 1]


def test_no_rides_no_fares():
    assert _calculator().calculate_fares([]) == []


def test_from_settings_uses_configured_table(monkeypatch):
    from src.tripoptions.config import settings

    monkeypatch.setattr(settings, "mode_fares", {"BUS": 1.0})
    monkeypatch.setattr(settings, "fare_currency", "EUR")

    fares = ModeFareCalculator.from_settings(ROUTES).calculate_fares([_ride("R1")])

    assert fares[0].low == 1.0
    assert fares[0].currency == "EUR"
