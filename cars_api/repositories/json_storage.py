"""
JSON file persistence adapter.

The whole collection lives in a single JSON array that is rewritten on every
save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from cars_api.repositories.base import CorruptStorageError, StorageError
from cars_api.schemas.car import Car

logger = logging.getLogger(__name__)

_CARS_ADAPTER = TypeAdapter(Optional[List[Car]])


class JSONCarStorage:
    """Reads and rewrites the car collection in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> List[Car]:
        if not self.path.exists():
            logger.info("Data file %s not found, starting empty", self.path)
            return []
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise CorruptStorageError(f"cannot read {self.path}: {exc}") from exc
        try:
            cars = _CARS_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise CorruptStorageError(f"invalid data in {self.path}: {exc}") from exc
        return cars or []

    def save(self, cars: List[Car]) -> None:
        data = [car.model_dump() for car in cars]
        try:
            text = json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False)
        except ValueError as exc:
            raise StorageError(f"cannot serialize cars: {exc}") from exc
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            raise StorageError(str(exc)) from exc
