from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import ValidationError

from cars_api.domain.cars import (
    INVALID_ID_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    NOT_FOUND_MESSAGE,
    parse_car_id,
)
from cars_api.repositories.base import StorageError
from cars_api.schemas.car import Car, CarPayload
from cars_api.services.car_service import CarNotFoundError, CarService

router = APIRouter(prefix="/cars", tags=["cars"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _get_car_service(request: Request) -> CarService:
    svc = getattr(getattr(request.app, "state", None), "car_service", None)
    if not svc:
        raise RuntimeError("CarService is not configured")
    return svc


def _require_method(request: Request, method: str) -> None:
    if request.method != method:
        raise HTTPException(405, METHOD_NOT_ALLOWED_MESSAGE)


def path_car_id(car_id: str) -> int:
    """Parse the trailing path segment into a positive id or answer 400."""
    parsed = parse_car_id(car_id)
    if parsed is None:
        raise HTTPException(400, INVALID_ID_MESSAGE)
    return parsed


async def read_payload(request: Request) -> CarPayload:
    body = await request.body()
    if body.strip() == b"null":
        return CarPayload()
    try:
        return CarPayload.model_validate_json(body)
    except ValidationError as exc:
        raise HTTPException(400, str(exc))


async def read_create_payload(request: Request) -> CarPayload:
    _require_method(request, "POST")
    return await read_payload(request)


@router.api_route("", methods=ALL_METHODS, response_model=List[Car])
def list_cars(request: Request):
    _require_method(request, "GET")
    return _get_car_service(request).list()


@router.api_route("/create", methods=ALL_METHODS, status_code=201, response_model=Car)
def create_car(request: Request, payload: CarPayload = Depends(read_create_payload)):
    svc = _get_car_service(request)
    try:
        return svc.create(payload)
    except StorageError as exc:
        raise HTTPException(500, str(exc))


@router.api_route("/delete_all", methods=ALL_METHODS, status_code=204)
def delete_all_cars(request: Request):
    _require_method(request, "DELETE")
    try:
        _get_car_service(request).clear()
    except StorageError as exc:
        raise HTTPException(500, str(exc))
    return Response(status_code=204)


@router.get("/{car_id:path}", response_model=Car)
def get_car(request: Request, car_id: int = Depends(path_car_id)):
    try:
        return _get_car_service(request).get(car_id)
    except CarNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)


@router.api_route("/{car_id:path}", methods=["PUT", "PATCH"], response_model=Car)
def update_car(
    request: Request,
    car_id: int = Depends(path_car_id),
    payload: CarPayload = Depends(read_payload),
):
    """Overwrite a car; only a payload with every field filled in gets the car back."""
    try:
        car, full = _get_car_service(request).update(car_id, payload)
    except CarNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)
    except StorageError as exc:
        raise HTTPException(500, str(exc))
    if not full:
        return Response(status_code=204)
    return car


@router.delete("/{car_id:path}", status_code=204)
def delete_car(request: Request, car_id: int = Depends(path_car_id)):
    try:
        _get_car_service(request).delete(car_id)
    except CarNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)
    except StorageError as exc:
        raise HTTPException(500, str(exc))
    return Response(status_code=204)


@router.api_route("/{car_id:path}", methods=["POST", "HEAD", "OPTIONS"], include_in_schema=False)
def car_method_not_allowed(car_id: str):
    raise HTTPException(405, METHOD_NOT_ALLOWED_MESSAGE)
