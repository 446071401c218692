"""Adapters layer - configuration and repository implementations."""

from subway_routing.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_routing.adapters.in_memory import (
    InMemoryLineRepository,
    InMemoryStationRepository,
)

__all__ = [
    "AppConfig",
    "InMemoryLineRepository",
    "InMemoryStationRepository",
    "NetworkConfigurationLoader",
]
