"""Car collection use cases (list, lookup, create, update, delete, clear)."""

from __future__ import annotations

import logging
import threading
from typing import List, Tuple

from cars_api.domain.cars import is_full_update
from cars_api.repositories.base import CarStorage
from cars_api.schemas.car import Car, CarPayload

logger = logging.getLogger(__name__)


class CarServiceError(Exception):
    """Base exception for car workflows."""


class CarNotFoundError(CarServiceError):
    """Raised when no stored car has the requested id."""

    def __init__(self, car_id: int):
        super().__init__(f"Car {car_id} not found")
        self.car_id = car_id


class CarService:
    """Owns the car collection and the id allocator.

    Every operation holds one lock for the whole read or mutation, including
    the storage write, so writes to the backing file never interleave.
    A failed save is raised to the caller but the in-memory change stays.
    """

    def __init__(self, storage: CarStorage, cars: List[Car] | None = None) -> None:
        self.storage = storage
        self._cars: List[Car] = list(cars or [])
        self._next_id = max((car.id for car in self._cars), default=0) + 1
        self._lock = threading.Lock()

    @classmethod
    def from_storage(cls, storage: CarStorage) -> "CarService":
        cars = storage.load()
        logger.info("Loaded %d cars", len(cars))
        return cls(storage, cars)

    @property
    def next_id(self) -> int:
        return self._next_id

    def _index_of(self, car_id: int) -> int:
        for idx, car in enumerate(self._cars):
            if car.id == car_id:
                return idx
        raise CarNotFoundError(car_id)

    def list(self) -> List[Car]:
        with self._lock:
            return list(self._cars)

    def get(self, car_id: int) -> Car:
        with self._lock:
            return self._cars[self._index_of(car_id)]

    def create(self, payload: CarPayload) -> Car:
        with self._lock:
            car = payload.to_car(self._next_id)
            self._next_id += 1
            self._cars.append(car)
            logger.info("Created car %d", car.id)
            self.storage.save(self._cars)
            return car

    def update(self, car_id: int, payload: CarPayload) -> Tuple[Car, bool]:
        """Replace the stored car with payload; the flag tells a full update from a partial one."""
        with self._lock:
            idx = self._index_of(car_id)
            car = payload.to_car(car_id)
            self._cars[idx] = car
            logger.info("Updated car %d", car_id)
            self.storage.save(self._cars)
            return car, is_full_update(payload)

    def delete(self, car_id: int) -> None:
        with self._lock:
            idx = self._index_of(car_id)
            del self._cars[idx]
            logger.info("Deleted car %d", car_id)
            self.storage.save(self._cars)

    def clear(self) -> None:
        with self._lock:
            self._cars = []
            self._next_id = 1
            logger.info("Deleted all cars")
            self.storage.save(self._cars)
