import json

import pytest

from flightlog.aircraft import AircraftResolver
from flightlog.airports import Airport, StaticAirportLookup
from flightlog.context import SessionUser, user_session
from flightlog.data.aircraft import AircraftEntry


@pytest.fixture
def user():
    u = SessionUser(id=7, username="pilot_7", display_name="Pilot Seven")
    with user_session(u):
        yield u


@pytest.fixture
def airports():
    return StaticAirportLookup(
        {
            "FRA": Airport(id=1, iata="FRA", icao="EDDF", name="Frankfurt am Main"),
            "MUC": Airport(id=2, iata="MUC", icao="EDDM", name="Munich"),
            "JFK": Airport(id=3, iata="JFK", icao="KJFK", name="John F Kennedy Intl"),
        }
    )


@pytest.fixture
def small_table():
    return (
        AircraftEntry("A223", "Airbus A220-300", "M"),
        AircraftEntry("A20N", "Airbus A320neo", "M"),
        AircraftEntry("A320", "Airbus A320", "M"),
        AircraftEntry("E195", "Embraer E195", "M"),
        AircraftEntry("CRJ9", "Bombardier CRJ-900", "M"),
    )


@pytest.fixture
def resolver(small_table):
    return AircraftResolver(table=small_table)


def make_segment(**overrides):
    segment = {
        "DepartureDate": "2024-03-01",
        "OriginCityCode": "FRA",
        "OriginCityName": "Frankfurt",
        "DestinationCityCode": "MUC",
        "DestinationCityName": "Munich",
        "OriginAirportCode": "FRA",
        "OriginAirportName": "Frankfurt am Main",
        "DestinationAirportCode": "MUC",
        "DestinationAirportName": "Munich",
        "StatusPoints": 0,
        "GupPoints": 0,
        "HonPoints": 0,
        "AirlineDesignatorCode": "LH",
        "FlightNumber": 100,
        "CompartmentClass": "M",
        "Distance": 185,
        "StatusMiles": 0,
        "AwardMiles": 0,
        "Honmiles": 0,
    }
    segment.update(overrides)
    return segment


def make_export(*segments):
    return json.dumps({"SegmentListResponses": list(segments)})
