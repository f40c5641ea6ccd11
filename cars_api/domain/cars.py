"""Domain helpers for car ids and update classification."""
from __future__ import annotations

import re
from typing import Optional

from cars_api.schemas.car import CarPayload

ID_PATTERN = re.compile(r"[+-]?[0-9]+")

NOT_FOUND_MESSAGE = "Авто не найден"
INVALID_ID_MESSAGE = "Неверный ID"
METHOD_NOT_ALLOWED_MESSAGE = "Недопустимый метод"


def parse_car_id(value: str | None) -> Optional[int]:
    """Return the positive integer id in value, or None when it is not one."""
    if not value or not ID_PATTERN.fullmatch(value):
        return None
    car_id = int(value)
    if car_id <= 0:
        return None
    return car_id


def is_full_update(payload: CarPayload) -> bool:
    """True when the payload carries every field a full replacement needs."""
    return bool(payload.brand) and bool(payload.model) and payload.mileage > 0 and payload.owners >= 0
