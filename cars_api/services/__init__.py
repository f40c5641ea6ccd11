"""
High-level use cases for the cars API.

Services own the in-memory state and orchestrate the storage adapters.
Routers call these services instead of touching the JSON file directly.
"""
