"""Vehicle records service: CRUD over a JSON-file-backed car collection."""
from cars_api.app import create_app, main

__all__ = ["create_app", "main"]
