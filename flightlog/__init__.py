"""
flightlog package

Public API:
    - validate_user / UserSchema / EditUserSchema
    - AircraftResolver, aircraft_from_icao, get_aircraft_label,
      extract_icao_from_miles_and_more_code
    - airline_from_iata, airline_from_icao
    - AirportServiceClient, StaticAirportLookup
    - process_file, process_mandm_file
    - user_session, require_user
"""

from .aircraft import (
    AircraftLabelCache,
    AircraftResolver,
    aircraft_from_icao,
    extract_icao_from_miles_and_more_code,
    get_aircraft_label,
)
from .airlines import airline_from_iata, airline_from_icao
from .airports import Airport, AirportServiceClient, StaticAirportLookup
from .context import SessionUser, current_user, require_user, user_session
from .errors import (
    FlightlogError,
    ImportValidationError,
    MalformedImportError,
    UnsupportedPlatformError,
    UserNotFoundError,
)
from .importers import process_file, process_mandm_file
from .models import CreateFlight, FlightSeat, ImportResult, PlatformOptions, SeatClass
from .users import AddUserSchema, EditUserSchema, UserSchema, validate_user

__version__ = "0.1.0"
