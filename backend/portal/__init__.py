"""
Portal wiring for the presentation layer.

- container: ServiceContainer building every service from Settings
- session_gate: startup and navigation session checks
"""

from .container import ServiceContainer, get_container, reset_container
from .session_gate import (
    BlockingNotice,
    GateResult,
    SessionGate,
    LOGIN_ROUTE,
)

__all__ = [
    "ServiceContainer",
    "get_container",
    "reset_container",
    "BlockingNotice",
    "GateResult",
    "SessionGate",
    "LOGIN_ROUTE",
]
