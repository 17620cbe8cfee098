import random
import threading

import pytest

from codekata.parking import (
    ParkingLevel,
    ParkingLot,
    Spot,
    UnsupportedVehicleError,
    Vehicle,
    VehicleType,
)


def _run_concurrently(*targets):
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_vehicle_type_from_number():
    assert VehicleType(0) is VehicleType.CAR


def test_vehicle_constructors_set_type():
    assert Vehicle.car("CAR-001").vehicle_type is VehicleType.CAR
    assert Vehicle.motorcycle("MC-001").vehicle_type is VehicleType.MOTORCYCLE
    assert Vehicle.truck("TRK-001").vehicle_type is VehicleType.TRUCK


def test_spot_in():
    spot = Spot(VehicleType.CAR)
    vehicle = Vehicle.car("TEST-PLATE")
    spot.park(vehicle)
    assert spot.vehicle is vehicle
    assert not spot.is_free()


def test_spot_in_with_unsupported_vehicle():
    spot = Spot(VehicleType.CAR)
    vehicle = Vehicle.motorcycle("TEST-PLATE")
    with pytest.raises(UnsupportedVehicleError):
        spot.park(vehicle)
    assert spot.vehicle is None


def test_spot_release():
    spot = Spot(VehicleType.TRUCK)
    spot.park(Vehicle.truck("TRK-001"))
    spot.release()
    assert spot.is_free()


def test_new_parking_level():
    level = ParkingLevel.with_spots(1, 4, 2, 2)
    assert len(level.spots) == 8
    assert level.max_size == 8
    assert level.free_spots(VehicleType.CAR) == 4
    assert level.free_spots(VehicleType.MOTORCYCLE) == 2
    assert level.free_spots(VehicleType.TRUCK) == 2


def test_random_level_counts_match_spots():
    level = ParkingLevel.random(0, 20, random.Random(7))
    assert level.max_size == 20
    assert sum(level.free_spots(t) for t in VehicleType) == 20
    for vehicle_type in VehicleType:
        assert level.free_spots(vehicle_type) == sum(
            1 for spot in level.spots if spot.vehicle_type is vehicle_type
        )


def test_park_and_unpark():
    level = ParkingLevel.with_spots(1, 2, 1, 1)
    car = Vehicle.car("CAR-001")
    motorcycle = Vehicle.motorcycle("MC-001")

    assert level.park(car)
    assert level.size == 1
    assert level.free_spots(VehicleType.CAR) == 1

    assert level.unpark(car)
    assert level.size == 0
    assert level.free_spots(VehicleType.CAR) == 2

    assert not level.unpark(motorcycle)


def test_is_full():
    level = ParkingLevel.with_spots(1, 2, 0, 0)
    assert not level.is_full()
    level.park(Vehicle.car("CAR-001"))
    level.park(Vehicle.car("CAR-002"))
    assert level.is_full()


def test_can_park():
    level = ParkingLevel.with_spots(1, 2, 1, 1)
    assert level.park(Vehicle.car("CAR-001"))
    car2 = Vehicle.car("CAR-002")
    assert level.can_park(car2)
    assert level.park(car2)
    assert level.park(Vehicle.motorcycle("MC-001"))
    assert level.park(Vehicle.truck("TRK-001"))
    assert not level.can_park(Vehicle.car("CAR-003"))


def test_level_concurrency():
    level = ParkingLevel.with_spots(1, 5, 3, 2)
    car = Vehicle.car("CAR-001")
    motorcycle = Vehicle.motorcycle("MC-001")
    _run_concurrently(lambda: level.park(car), lambda: level.park(motorcycle))
    assert level.size == 2
    assert level.free_spots(VehicleType.CAR) == 4
    assert level.free_spots(VehicleType.MOTORCYCLE) == 2


def test_lot_join():
    lot = ParkingLot([ParkingLevel.with_spots(1, 1, 0, 0)])
    car1 = Vehicle.car("CAR-001")
    assert lot.join(car1)
    assert not lot.join(Vehicle.car("CAR-002"))
    assert not lot.join(Vehicle.car("CAR-003"))
    assert lot.floor_of(car1.plate) == 0


def test_lot_race_condition():
    lot = ParkingLot([ParkingLevel.with_spots(1, 1, 0, 0)])
    car1 = Vehicle("CAR-001", VehicleType.CAR)
    car2 = Vehicle("CAR-002", VehicleType.CAR)
    _run_concurrently(lambda: lot.join(car1), lambda: lot.join(car2))
    assert len(lot) == 1


def test_lot_join_and_leave():
    lot = ParkingLot([ParkingLevel.with_spots(1, 1, 0, 0)])
    car1 = Vehicle.car("CAR-001")
    car2 = Vehicle.car("CAR-002")
    assert lot.join(car1)
    assert not lot.join(car2)
    assert lot.leave(car1)
    assert lot.join(car2)
    assert lot.leave(car2)
    assert len(lot) == 0


def test_lot_leave_unknown_vehicle():
    lot = ParkingLot([ParkingLevel.with_spots(0, 1, 0, 0)])
    assert not lot.leave(Vehicle.car("CAR-001"))


def test_lot_uses_next_level_when_first_full():
    lot = ParkingLot(
        [ParkingLevel.with_spots(0, 1, 0, 0), ParkingLevel.with_spots(1, 1, 0, 0)]
    )
    first, second = Vehicle.car("CAR-001"), Vehicle.car("CAR-002")
    assert lot.join(first)
    assert lot.join(second)
    assert lot.floor_of(second.plate) == 1


def test_add_level_assigns_floors():
    lot = ParkingLot()
    rng = random.Random(1)
    first = lot.add_level(3, rng)
    second = lot.add_level(4, rng)
    assert (first.floor, second.floor) == (0, 1)
    assert [level.max_size for level in lot.levels] == [3, 4]