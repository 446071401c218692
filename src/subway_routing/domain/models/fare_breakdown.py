"""Fare breakdown domain model."""

from pydantic import BaseModel, ConfigDict, Field


class FareBreakdown(BaseModel):
    """Components of a path fare, in won."""

    model_config = ConfigDict(frozen=True)

    distance_fare: int = Field(ge=0)
    surcharge: int = Field(ge=0)
    discount: int = Field(ge=0)
    total: int = Field(ge=0)
