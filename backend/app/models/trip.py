"""Trip request models - user input."""

import math

from pydantic import BaseModel, ConfigDict, Field


class TripRequest(BaseModel):
    """Trip-planning parameters submitted by the caller."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    destinations: str = Field(..., min_length=1)
    budget: float = Field(..., gt=0, description="Total budget in USD")
    people: int = Field(..., gt=0)
    trip_length: int = Field(..., gt=0, alias="tripLength", description="Trip length in days")
    extra_details: str | None = Field(None, alias="extraDetails")

    @property
    def rooms_needed(self) -> int:
        """Rooms at two travelers per room."""
        return rooms_needed(self.people)


def rooms_needed(people: int) -> int:
    """Return ceil(people / 2)."""
    return math.ceil(people / 2)
