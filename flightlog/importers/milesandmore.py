"""
Miles & More statement import.

Converts the JSON export of the Miles & More frequent flyer programme
(`{"SegmentListResponses": [...]}`) into flights for the current user.
Segments whose airports the airport service cannot resolve are skipped and
their codes reported in `unknown_airports` so the caller can ask the user
to map them by hand.
"""
from __future__ import annotations

import json
import logging
import re
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from ..aircraft import AircraftResolver, default_resolver
from ..airlines import airline_from_iata
from ..airports import Airport, AirportLookup, AirportServiceClient
from ..context import SessionUser, require_user
from ..errors import ImportValidationError, MalformedImportError
from ..logging_utils import log_event
from ..models import CreateFlight, FlightSeat, ImportResult, PlatformOptions, SeatClass
from ..utils import format_number, parse_iso_datetime, to_iso_utc

logger = logging.getLogger("flightlog.import.mandm")

PLATFORM_NAME = "Miles and More"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Number = Union[int, float]

MILES_SEAT_CLASS_MAP: Dict[str, SeatClass] = {
    "F": SeatClass.FIRST,
    "C": SeatClass.BUSINESS,
    "E": SeatClass.ECONOMY_PLUS,
    "M": SeatClass.ECONOMY,
}


class MilesAndMoreSegment(BaseModel):
    """One flown segment as it appears in the export. Field names are the export's."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, extra="ignore")

    DepartureDate: str
    ArrivalDate: Optional[str] = None
    OriginCityCode: str
    OriginCityName: str
    DestinationCityCode: str
    DestinationCityName: str
    OriginAirportCode: str
    OriginAirportName: str
    DestinationAirportCode: str
    DestinationAirportName: str
    StatusPoints: Number
    GupPoints: Number
    HonPoints: Number
    AirlineDesignatorCode: str
    FlightNumber: Number
    CompartmentClass: str
    AircraftCode: Optional[str] = None
    Distance: Number
    TimeOnPlane: Optional[Number] = None
    StatusMiles: Number
    AwardMiles: Number
    DepartureTime: Optional[str] = None
    ArrivalTime: Optional[str] = None
    Honmiles: Number
    PnrrecordLocator: Optional[str] = None

    @field_validator("DepartureDate", "ArrivalDate")
    @classmethod
    def _validate_date(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is None:
            return v
        if not _DATE_RE.match(v):
            raise ValueError(f"Invalid date format in {info.field_name}")
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError(f"Invalid date format in {info.field_name}") from None
        return v

    @field_validator("DepartureTime", "ArrivalTime")
    @classmethod
    def _validate_datetime(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is None:
            return v
        try:
            dt = datetime.fromisoformat(v.strip().replace("Z", "+00:00"))
        except ValueError:
            dt = None
        # Offset (or Z) is mandatory
        if dt is None or "T" not in v or dt.tzinfo is None:
            raise ValueError(f"Invalid datetime in {info.field_name}")
        return v


class MilesAndMoreFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    SegmentListResponses: List[MilesAndMoreSegment]

    @field_validator("SegmentListResponses")
    @classmethod
    def _at_least_one(cls, v: List[MilesAndMoreSegment]) -> List[MilesAndMoreSegment]:
        if len(v) < 1:
            raise ValueError("At least one flight is required")
        return v


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _build_note(segment: MilesAndMoreSegment) -> str:
    pnr = (segment.PnrrecordLocator or "").strip()
    lines = [
        f"PNR: {pnr}" if pnr else "",
        f"Status Miles: {format_number(segment.StatusMiles)}" if segment.StatusMiles > 0 else "",
        f"Award Miles: {format_number(segment.AwardMiles)}" if segment.AwardMiles > 0 else "",
        f"HON Circle Miles: {format_number(segment.Honmiles)}" if segment.Honmiles > 0 else "",
        f"Points: {format_number(segment.StatusPoints)}" if segment.StatusPoints > 0 else "",
        f"Qualifying Points: {format_number(segment.GupPoints)}" if segment.GupPoints > 0 else "",
        f"HON Circle Points: {format_number(segment.HonPoints)}" if segment.HonPoints > 0 else "",
    ]
    return "\n".join(line for line in lines if line)


def _segment_to_flight(
    segment: MilesAndMoreSegment,
    from_airport: Airport,
    to_airport: Airport,
    user: SessionUser,
    airline_lookup: Callable[[str], Any],
    resolver: AircraftResolver,
) -> CreateFlight:
    departure = parse_iso_datetime(segment.DepartureTime or segment.DepartureDate)
    # No arrival time in the export -> same instant as departure
    arrival = parse_iso_datetime(segment.ArrivalTime) if segment.ArrivalTime else departure

    if segment.TimeOnPlane is not None:
        duration = int(segment.TimeOnPlane)
    else:
        duration = int((arrival - departure).total_seconds())

    airline_iata = segment.AirlineDesignatorCode.strip()
    airline: Optional[str] = None
    if airline_iata:
        entry = airline_lookup(airline_iata)
        airline = entry.icao if entry is not None else None

    seat_class = MILES_SEAT_CLASS_MAP.get(segment.CompartmentClass.strip())

    flight_number = airline_iata + format_number(segment.FlightNumber).strip()

    return CreateFlight(
        date=segment.DepartureDate,
        from_=from_airport,
        to=to_airport,
        departure=to_iso_utc(departure),
        arrival=to_iso_utc(arrival),
        duration=duration,
        flight_number=flight_number,
        flight_reason=None,
        airline=airline,
        aircraft=resolver.extract_icao_from_miles_and_more_code(segment.AircraftCode),
        aircraft_reg=None,
        note=_build_note(segment),
        seats=[
            FlightSeat(
                user_id=user.id,
                seat=None,
                seat_number=None,
                seat_class=seat_class,
                guest_name=None,
            )
        ],
    )


async def _convert_segments(
    segments: List[MilesAndMoreSegment],
    user: SessionUser,
    airport_lookup: AirportLookup,
    airline_lookup: Callable[[str], Any],
    resolver: AircraftResolver,
) -> ImportResult:
    flights: List[CreateFlight] = []
    unknown_airports: List[str] = []

    # Strictly in file order, one lookup at a time
    for segment in segments:
        raw_from = segment.OriginAirportCode.strip()
        raw_to = segment.DestinationAirportCode.strip()
        from_airport = await airport_lookup(raw_from)
        to_airport = await airport_lookup(raw_to)

        if from_airport is None or to_airport is None:
            for raw, resolved in ((raw_from, from_airport), (raw_to, to_airport)):
                if resolved is None and raw and raw not in unknown_airports:
                    unknown_airports.append(raw)
                    log_event(logger, "mandm_unknown_airport", iata=raw)
            continue

        flights.append(
            _segment_to_flight(segment, from_airport, to_airport, user, airline_lookup, resolver)
        )

    return ImportResult(flights=flights, unknown_airports=unknown_airports)


async def process_mandm_file(
    content: str,
    options: Optional[PlatformOptions] = None,
    *,
    airport_lookup: Optional[AirportLookup] = None,
    airline_lookup: Callable[[str], Any] = airline_from_iata,
    resolver: Optional[AircraftResolver] = None,
) -> ImportResult:
    """
    Parse a Miles & More export and map every segment to a flight.

    Raises UserNotFoundError when no user is bound to the current context,
    MalformedImportError for unparseable JSON and ImportValidationError when
    the document does not have the export's shape. Nothing is returned in
    those cases. Unknown airports, airlines, aircraft and seat classes are
    not errors.

    Without an `airport_lookup` an AirportServiceClient is opened for the
    duration of the run.
    """
    user = require_user()

    try:
        parsed = json.loads(content, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise MalformedImportError(PLATFORM_NAME) from e

    try:
        export = MilesAndMoreFile.model_validate(parsed)
    except ValidationError as e:
        raise ImportValidationError(e.errors(include_url=False)) from e

    segments = export.SegmentListResponses
    resolver = resolver or default_resolver

    log_event(
        logger,
        "mandm_import_started",
        user_id=user.id,
        segments=len(segments),
    )

    if airport_lookup is None:
        async with AirportServiceClient() as client:
            result = await _convert_segments(segments, user, client, airline_lookup, resolver)
    else:
        result = await _convert_segments(segments, user, airport_lookup, airline_lookup, resolver)

    log_event(
        logger,
        "mandm_import_finished",
        user_id=user.id,
        segments=len(segments),
        flights=len(result.flights),
        unknown_airports=len(result.unknown_airports),
    )
    return result
