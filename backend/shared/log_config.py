"""Logging setup for the portal core."""

import logging

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Apply a basic root logging configuration once per process."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True
