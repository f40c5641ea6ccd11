"""
Persistence adapters.

These modules encapsulate how the car collection is stored/retrieved (today a
JSON file). The store depends on the CarStorage protocol rather than on the
file itself.
"""

from cars_api.repositories.base import CarStorage, CorruptStorageError, StorageError
from cars_api.repositories.json_storage import JSONCarStorage

__all__ = ["CarStorage", "CorruptStorageError", "JSONCarStorage", "StorageError"]
