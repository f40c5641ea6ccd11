"""
Core utilities shared across the cars API.

This package hosts configuration helpers (env vars, storage path, listen
address) and the logging setup used by the process entry point.
"""
