"""12-factor configuration adapter using environment variables and a TOML network file."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subway_routing.domain.models.fare_policy import FarePolicy


class FareSettings(BaseModel):
    """Fare policy parameters. Amounts in won, distances in km, ages in years."""

    base_fare: int = Field(default=1250, ge=0, description="Fare up to the first threshold")
    first_tier_threshold: int = Field(
        default=10, gt=0, description="Distance covered by the base fare"
    )
    second_tier_threshold: int = Field(
        default=50, gt=0, description="Distance where the second tier starts"
    )
    first_tier_unit_distance: int = Field(
        default=5, gt=0, description="Distance per increment in the first tier"
    )
    first_tier_unit_fare: int = Field(default=100, ge=0, description="Increment in the first tier")
    second_tier_unit_distance: int = Field(
        default=8, gt=0, description="Distance per increment beyond the second threshold"
    )
    second_tier_unit_fare: int = Field(
        default=100, ge=0, description="Increment beyond the second threshold"
    )
    free_age_limit: int = Field(default=6, ge=0, description="Riders younger than this ride free")
    child_age_limit: int = Field(
        default=13, ge=0, description="Riders younger than this get the child discount"
    )
    teen_age_limit: int = Field(
        default=19, ge=0, description="Riders younger than this get the teen discount"
    )
    discount_deduction: int = Field(
        default=350, ge=0, description="Amount deducted before the percentage discount"
    )
    child_discount_percent: int = Field(default=50, ge=0, le=100, description="Child discount")
    teen_discount_percent: int = Field(default=20, ge=0, le=100, description="Teen discount")

    @model_validator(mode="after")
    def validate_ordering(self) -> "FareSettings":
        """Validate that tier thresholds and age limits are ordered."""
        if self.second_tier_threshold <= self.first_tier_threshold:
            raise ValueError("second_tier_threshold must be greater than first_tier_threshold")
        if not self.free_age_limit < self.child_age_limit < self.teen_age_limit:
            raise ValueError(
                "age limits must satisfy free_age_limit < child_age_limit < teen_age_limit"
            )
        return self

    def to_policy(self) -> FarePolicy:
        return FarePolicy(**self.model_dump())


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # TOML network file path
    network_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML file defining stations, lines and optional fare overrides",
    )

    # Fare policy, overridable with FARE__<FIELD> or a [fare] table in the network file
    fare: FareSettings = Field(default_factory=FareSettings)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the network TOML file, updating fare settings."""
        if not self.network_file:
            raise ValueError("network_file must be set to load the network configuration")

        config_path = Path(self.network_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update fare settings from TOML if present
        if "fare" in toml_data:
            fare = toml_data["fare"]
            if not isinstance(fare, dict):
                raise ValueError("TOML config 'fare' must be a table")
            self.fare = FareSettings(**{**self.fare.model_dump(), **fare})

        return toml_data

    def get_network_config(self) -> dict[str, list[dict[str, Any]]]:
        """Parse and return the stations and lines of the network file.

        Returns a dict with 'stations' and 'lines' lists. Either may be empty.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        lines = toml_data.get("lines", [])
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")

        return {"stations": stations, "lines": lines}

    def fare_policy(self) -> FarePolicy:
        """Return the fare policy as a domain object."""
        return self.fare.to_policy()
