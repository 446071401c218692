"""Response views handed to callers of the path service."""

from pydantic import BaseModel, ConfigDict, Field

from subway_routing.domain.models.errors import PathErrorKind


class StationResponse(BaseModel):
    """A station as shown to callers."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class PathResponse(BaseModel):
    """Ordered stations of a path with its total distance and fare."""

    model_config = ConfigDict(frozen=True)

    stations: list[StationResponse]
    distance: int = Field(gt=0)
    fare: int = Field(ge=0)


class ErrorDetails(BaseModel):
    """Details about a failed path calculation, including an HTTP status code."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
    kind: PathErrorKind | None = None
