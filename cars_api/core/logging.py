"""Logging setup for the service process, called once from main()."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a plain stream handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
    ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
