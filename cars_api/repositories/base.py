"""Storage contract for the car collection."""
from __future__ import annotations

from typing import List, Protocol

from cars_api.schemas.car import Car


class StorageError(Exception):
    """Raised when the backing store cannot be written or read."""


class CorruptStorageError(StorageError):
    """Raised when the backing store exists but its contents are unusable."""


class CarStorage(Protocol):
    def load(self) -> List[Car]:
        ...

    def save(self, cars: List[Car]) -> None:
        ...
