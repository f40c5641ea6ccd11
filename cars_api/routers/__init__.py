"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter included by cars_api.app.
"""
