from src.tripoptions.models.domain import Ride, StopRef
from src.tripoptions.services.profile.rides import clear_first_access, rides_in_order
from src.tripoptions.services.profile.stats import Stats


def _chain(*stop_ids: str) -> Ride:
    tail = None
    for index in range(len(stop_ids) - 1):
        tail = Ride(
            from_stop=StopRef(stop_ids[index], f"Stop {stop_ids[index]}"),
            to_stop=StopRef(stop_ids[index + 1], f"Stop {stop_ids[index + 1]}"),
            route_ids=["R1"],
            ride_stats=Stats.from_duration(300),
            access_time=120,
            access_dist=150.0,
            previous=tail,
        )
    return tail


def test_rides_in_order_restores_boarding_order():
    rides = rides_in_order(_chain("A", "B", "C", "D"))

    assert [ride.from_stop.stop_id for ride in rides] == ["A", "B", "C"]
    assert rides[-1].to_stop.stop_id == "D"


def test_rides_in_order_without_tail_is_empty():
    assert rides_in_order(None) == []


def test_rides_in_order_stops_on_cycle():
    tail = _chain("A", "B", "C")
    tail.previous.previous = tail

    rides = rides_in_order(tail)

    assert len(rides) == 2


def test_clear_first_access_only_touches_first_ride():
    rides = rides_in_order(_chain("A", "B", "C"))

    clear_first_access(rides)
    clear_first_access(rides)

    assert rides[0].access_time == 0
    assert rides[0].access_dist == 0
    assert rides[1].access_time == 120
    assert rides[1].access_dist == 150.0


def test_clear_first_access_on_empty_list():
    rides: list[Ride] = []
    clear_first_access(rides)

    assert rides == []
