from .config import (
    DISCOVERY_ENABLED,
    DISCOVERY_INTERVAL,
    DISCOVERY_PORT_AUTO_FALLBACK,
    FULLSCREEN,
    LOG_LEVEL,
    PREFERRED_DISCOVERY_PORT,
    PREFERRED_PORT,
    RECEIVER_HOST,
    RECEIVER_PORT_AUTO_FALLBACK,
)
from .ports import find_available_discovery_port, find_available_port

__all__ = [
    "DISCOVERY_ENABLED",
    "DISCOVERY_INTERVAL",
    "DISCOVERY_PORT_AUTO_FALLBACK",
    "FULLSCREEN",
    "LOG_LEVEL",
    "PREFERRED_DISCOVERY_PORT",
    "PREFERRED_PORT",
    "RECEIVER_HOST",
    "RECEIVER_PORT_AUTO_FALLBACK",
    "find_available_discovery_port",
    "find_available_port",
]
