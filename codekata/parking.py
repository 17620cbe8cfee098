"""Multi-level parking lot with typed spots."""

from __future__ import annotations

import random
import threading
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Tuple


class VehicleType(IntEnum):
    """Kinds of vehicle, each with its own kind of spot."""

    CAR = 0
    MOTORCYCLE = 1
    TRUCK = 2


@dataclass(frozen=True, eq=False)
class Vehicle:
    """A vehicle identified by its plate; compared by identity."""

    plate: str
    vehicle_type: VehicleType

    @classmethod
    def car(cls, plate: str) -> "Vehicle":
        """Create a car."""
        return cls(plate, VehicleType.CAR)

    @classmethod
    def motorcycle(cls, plate: str) -> "Vehicle":
        """Create a motorcycle."""
        return cls(plate, VehicleType.MOTORCYCLE)

    @classmethod
    def truck(cls, plate: str) -> "Vehicle":
        """Create a truck."""
        return cls(plate, VehicleType.TRUCK)


class UnsupportedVehicleError(ValueError):
    """Raised when a vehicle is put in a spot meant for another type."""

    def __init__(self) -> None:
        super().__init__("the vehicle is not supported in the selected spot")


class Spot:
    """A single parking spot for one type of vehicle."""

    def __init__(self, vehicle_type: VehicleType) -> None:
        self.vehicle_type = VehicleType(vehicle_type)
        self.vehicle: Optional[Vehicle] = None

    def __repr__(self) -> str:
        return f"Spot({self.vehicle_type.name}, vehicle={self.vehicle!r})"

    def is_free(self) -> bool:
        """Return True if no vehicle occupies the spot."""
        return self.vehicle is None

    def park(self, vehicle: Vehicle) -> None:
        """Put a vehicle in the spot; UnsupportedVehicleError on a type mismatch."""
        if vehicle.vehicle_type != self.vehicle_type:
            raise UnsupportedVehicleError()
        self.vehicle = vehicle

    def release(self) -> None:
        """Empty the spot."""
        self.vehicle = None


class ParkingLevel:
    """One floor of the lot; safe to use from several threads."""

    def __init__(self, floor: int, spots: Iterable[Spot]) -> None:
        self.floor = floor
        self._spots: List[Spot] = list(spots)
        self.max_size = len(self._spots)
        self.size = sum(1 for spot in self._spots if not spot.is_free())
        self._free: Counter = Counter(
            spot.vehicle_type for spot in self._spots if spot.is_free()
        )
        self._lock = threading.RLock()

    @classmethod
    def random(
        cls, floor: int, size: int, rng: Optional[random.Random] = None
    ) -> "ParkingLevel":
        """Create a level whose spot types are drawn at random."""
        if size < 0:
            raise ValueError("size must not be negative")
        choose = (rng or random.Random()).choice
        types = list(VehicleType)
        return cls(floor, (Spot(choose(types)) for _ in range(size)))

    @classmethod
    def with_spots(
        cls, floor: int, cars: int, motorcycles: int, trucks: int
    ) -> "ParkingLevel":
        """Create a level with the given number of spots of each type, in that order."""
        counts = (
            (VehicleType.CAR, cars),
            (VehicleType.MOTORCYCLE, motorcycles),
            (VehicleType.TRUCK, trucks),
        )
        return cls(
            floor,
            (Spot(vehicle_type) for vehicle_type, n in counts for _ in range(n)),
        )

    @property
    def spots(self) -> Tuple[Spot, ...]:
        """The level's spots in order."""
        return tuple(self._spots)

    def free_spots(self, vehicle_type: VehicleType) -> int:
        """Number of free spots for a vehicle type."""
        with self._lock:
            return self._free[VehicleType(vehicle_type)]

    def is_full(self) -> bool:
        """Return True when every spot is taken."""
        with self._lock:
            return self.size == self.max_size

    def can_park(self, vehicle: Vehicle) -> bool:
        """Return True if a spot for this vehicle's type is free."""
        with self._lock:
            return self._free[vehicle.vehicle_type] > 0

    def park(self, vehicle: Vehicle) -> bool:
        """Park in the first free matching spot; False if none."""
        with self._lock:
            for spot in self._spots:
                if spot.is_free() and spot.vehicle_type == vehicle.vehicle_type:
                    try:
                        spot.park(vehicle)
                    except UnsupportedVehicleError:
                        return False
                    self.size += 1
                    self._free[vehicle.vehicle_type] -= 1
                    return True
            return False

    def unpark(self, vehicle: Vehicle) -> bool:
        """Free the spot holding this vehicle; False if it is not parked here."""
        with self._lock:
            for spot in self._spots:
                if spot.vehicle is vehicle:
                    spot.release()
                    self.size -= 1
                    self._free[vehicle.vehicle_type] += 1
                    return True
            return False


class ParkingLot:
    """A set of levels and a record of which floor holds each plate."""

    def __init__(self, levels: Optional[Iterable[ParkingLevel]] = None) -> None:
        self._levels: List[ParkingLevel] = list(levels or [])
        self._floors: Dict[str, int] = {}
        self._lock = threading.Lock()

    @property
    def levels(self) -> Tuple[ParkingLevel, ...]:
        """The lot's levels in floor order."""
        return tuple(self._levels)

    def add_level(self, size: int, rng: Optional[random.Random] = None) -> ParkingLevel:
        """Add a level of random spots on the next floor and return it."""
        with self._lock:
            level = ParkingLevel.random(len(self._levels), size, rng)
            self._levels.append(level)
            return level

    def floor_of(self, plate: str) -> Optional[int]:
        """Index of the level holding ``plate``, or None."""
        with self._lock:
            return self._floors.get(plate)

    def __len__(self) -> int:
        with self._lock:
            return len(self._floors)

    def join(self, vehicle: Vehicle) -> bool:
        """Park on the first level that is not full and has a matching free spot."""
        with self._lock:
            for index, level in enumerate(self._levels):
                if not level.is_full() and level.can_park(vehicle):
                    parked = level.park(vehicle)
                    if parked:
                        self._floors[vehicle.plate] = index
                    return parked
            return False

    def leave(self, vehicle: Vehicle) -> bool:
        """Take a parked vehicle out of the lot; False if it is not parked."""
        with self._lock:
            index = self._floors.get(vehicle.plate)
            if index is None:
                return False
            if self._levels[index].unpark(vehicle):
                del self._floors[vehicle.plate]
                return True
            return False