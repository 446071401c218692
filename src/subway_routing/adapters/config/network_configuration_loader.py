"""Network configuration loader."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from subway_routing.adapters.config.app_config import AppConfig
from subway_routing.domain.models.line import Line, Section
from subway_routing.domain.models.station import Station

logger = logging.getLogger(__name__)


class StationEntry(BaseModel):
    """A ``[[stations]]`` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt
    name: StrictStr


class SectionEntry(BaseModel):
    """A ``[[lines.sections]]`` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    up: StrictInt
    down: StrictInt
    distance: StrictInt


class LineEntry(BaseModel):
    """A ``[[lines]]`` table; sections are validated one by one."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr
    surcharge: StrictInt = 0
    sections: list[dict[str, Any]] = Field(default_factory=list)


@dataclass(frozen=True)
class NetworkConfiguration:
    """Stations and lines loaded from configuration."""

    stations: list[Station]
    lines: list[Line]


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )


class NetworkConfigurationLoader:
    """Loads stations and lines from app config."""

    @staticmethod
    def load(config: AppConfig) -> NetworkConfiguration:
        """Load the network defined in the configured TOML file."""
        return NetworkConfigurationLoader.from_dict(config.get_network_config())

    @staticmethod
    def from_dict(network_data: dict[str, list[dict[str, Any]]]) -> NetworkConfiguration:
        """Build stations and lines from parsed configuration data.

        Numeric values must be TOML integers. Floats, booleans and strings are
        rejected rather than coerced.
        """
        stations_by_id: dict[int, Station] = {}
        for station_data in network_data.get("stations", []):
            if not isinstance(station_data, dict):
                raise ValueError(f"Station entry must be a table, got {station_data!r}")
            if "id" not in station_data or "name" not in station_data:
                raise ValueError(f"Station entry needs 'id' and 'name': {station_data}")
            try:
                entry = StationEntry.model_validate(station_data)
            except ValidationError as e:
                raise ValueError(f"Invalid station entry {station_data}: {_describe(e)}") from e

            if entry.id in stations_by_id:
                raise ValueError(f"Duplicate station id: {entry.id}")
            stations_by_id[entry.id] = Station(id=entry.id, name=entry.name)

        lines: list[Line] = []
        line_names: set[str] = set()
        for line_data in network_data.get("lines", []):
            if not isinstance(line_data, dict) or "name" not in line_data:
                raise ValueError(f"Line entry needs a 'name': {line_data!r}")
            try:
                line_entry = LineEntry.model_validate(line_data)
            except ValidationError as e:
                raise ValueError(f"Invalid line {line_data['name']}: {_describe(e)}") from e

            name = line_entry.name
            if name in line_names:
                raise ValueError(f"Duplicate line name: {name}")
            line_names.add(name)

            sections = [
                NetworkConfigurationLoader._build_section(name, section_data, stations_by_id)
                for section_data in line_entry.sections
            ]
            lines.append(Line(name, line_entry.surcharge, sections))

        logger.info(f"Loaded network with {len(stations_by_id)} station(s), {len(lines)} line(s)")
        return NetworkConfiguration(stations=list(stations_by_id.values()), lines=lines)

    @staticmethod
    def _build_section(
        line_name: str, section_data: dict[str, Any], stations_by_id: dict[int, Station]
    ) -> Section:
        missing = [key for key in ("up", "down", "distance") if key not in section_data]
        if missing:
            raise ValueError(f"Section of {line_name} is missing {', '.join(missing)}")
        try:
            entry = SectionEntry.model_validate(section_data)
        except ValidationError as e:
            raise ValueError(f"Invalid section of {line_name}: {_describe(e)}") from e

        endpoints = []
        for station_id in (entry.up, entry.down):
            if station_id not in stations_by_id:
                raise ValueError(f"Section of {line_name} references unknown station {station_id}")
            endpoints.append(stations_by_id[station_id])

        return Section(endpoints[0], endpoints[1], entry.distance)
