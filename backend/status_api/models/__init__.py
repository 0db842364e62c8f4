"""Response models served by the status routes."""

from .status import HEALTH, HELLO, HealthResponse, HelloResponse

__all__ = ["HEALTH", "HELLO", "HealthResponse", "HelloResponse"]
