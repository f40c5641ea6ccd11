"""Pydantic models shared by the router, the store and the storage adapter."""

from cars_api.schemas.car import Car, CarPayload

__all__ = ["Car", "CarPayload"]
