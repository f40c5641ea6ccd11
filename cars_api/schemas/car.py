from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class CarPayload(BaseModel):
    """Body of create/update requests.

    Missing or null fields take their zero value, unknown keys are ignored
    and an ``id`` sent by the client is accepted but never trusted.
    Non-finite numbers are rejected.
    """

    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    id: Optional[int] = None
    brand: str = ""
    model: str = ""
    mileage: float = 0.0
    owners: int = 0

    @field_validator("brand", "model", "mileage", "owners", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def to_car(self, car_id: int) -> "Car":
        return Car(
            id=car_id,
            brand=self.brand,
            model=self.model,
            mileage=self.mileage,
            owners=self.owners,
        )


class Car(BaseModel):
    """A stored vehicle record."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore", allow_inf_nan=False)

    id: int
    brand: str
    model: str
    mileage: float
    owners: int
