"""Configuration adapters."""

from subway_routing.adapters.config.app_config import AppConfig, FareSettings
from subway_routing.adapters.config.network_configuration_loader import (
    NetworkConfiguration,
    NetworkConfigurationLoader,
)

__all__ = ["AppConfig", "FareSettings", "NetworkConfiguration", "NetworkConfigurationLoader"]
