# models.py
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .airports import Airport


class SeatClass(str, Enum):
    FIRST = "first"
    BUSINESS = "business"
    ECONOMY_PLUS = "economy+"
    ECONOMY = "economy"


class FlightSeat(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    user_id: Optional[Union[int, str]] = None
    seat: Optional[str] = None
    seat_number: Optional[str] = None
    seat_class: Optional[SeatClass] = None
    guest_name: Optional[str] = None


class CreateFlight(BaseModel):
    """A flight ready to be persisted for the importing user."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="YYYY-MM-DD, local departure date")
    from_: Airport = Field(..., alias="from")
    to: Airport
    departure: Optional[str] = Field(None, description="ISO-8601 UTC")
    arrival: Optional[str] = Field(None, description="ISO-8601 UTC")
    duration: Optional[int] = Field(None, description="Seconds")
    flight_number: Optional[str] = None
    flight_reason: Optional[str] = None
    airline: Optional[str] = Field(None, description="Airline ICAO code")
    aircraft: Optional[str] = Field(None, description="Aircraft ICAO type code")
    aircraft_reg: Optional[str] = None
    note: Optional[str] = None
    seats: List[FlightSeat] = Field(default_factory=list)


class ImportResult(BaseModel):
    flights: List[CreateFlight] = Field(default_factory=list)
    unknown_airports: List[str] = Field(default_factory=list)


class PlatformOptions(BaseModel):
    """
    Per-platform import settings chosen in the import dialog. Each importer
    reads the keys it understands; unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")
