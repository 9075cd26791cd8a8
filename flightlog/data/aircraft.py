# data/aircraft.py
# ---------------------------------------------------------------------
# Reference table of aircraft types. Names follow the
# "Manufacturer Model [variant]" convention; the first two words are used
# for display labels. ICAO codes are unique. Treated as immutable.

from typing import NamedTuple, Optional, Tuple


class AircraftEntry(NamedTuple):
    icao: str
    name: str
    wtc: Optional[str] = None  # ICAO wake turbulence category: L / M / H / J


AIRCRAFT: Tuple[AircraftEntry, ...] = (
    # ==== AIRBUS ====
    AircraftEntry("BCS1", "Airbus A220-100", "M"),
    AircraftEntry("BCS3", "Airbus A220-300", "M"),
    AircraftEntry("A318", "Airbus A318", "M"),
    AircraftEntry("A319", "Airbus A319", "M"),
    AircraftEntry("A19N", "Airbus A319neo", "M"),
    AircraftEntry("A320", "Airbus A320", "M"),
    AircraftEntry("A20N", "Airbus A320neo", "M"),
    AircraftEntry("A321", "Airbus A321", "M"),
    AircraftEntry("A21N", "Airbus A321neo", "M"),
    AircraftEntry("A306", "Airbus A300-600", "H"),
    AircraftEntry("A310", "Airbus A310", "H"),
    AircraftEntry("A332", "Airbus A330-200", "H"),
    AircraftEntry("A333", "Airbus A330-300", "H"),
    AircraftEntry("A338", "Airbus A330-800neo", "H"),
    AircraftEntry("A339", "Airbus A330-900neo", "H"),
    AircraftEntry("A343", "Airbus A340-300", "H"),
    AircraftEntry("A346", "Airbus A340-600", "H"),
    AircraftEntry("A359", "Airbus A350-900", "H"),
    AircraftEntry("A35K", "Airbus A350-1000", "H"),
    AircraftEntry("A388", "Airbus A380-800", "J"),

    # ==== BOEING ====
    AircraftEntry("B712", "Boeing 717-200", "M"),
    AircraftEntry("B733", "Boeing 737-300", "M"),
    AircraftEntry("B734", "Boeing 737-400", "M"),
    AircraftEntry("B735", "Boeing 737-500", "M"),
    AircraftEntry("B736", "Boeing 737-600", "M"),
    AircraftEntry("B737", "Boeing 737-700", "M"),
    AircraftEntry("B738", "Boeing 737-800", "M"),
    AircraftEntry("B739", "Boeing 737-900", "M"),
    AircraftEntry("B37M", "Boeing 737 MAX 7", "M"),
    AircraftEntry("B38M", "Boeing 737 MAX 8", "M"),
    AircraftEntry("B39M", "Boeing 737 MAX 9", "M"),
    AircraftEntry("B744", "Boeing 747-400", "H"),
    AircraftEntry("B748", "Boeing 747-8", "H"),
    AircraftEntry("B752", "Boeing 757-200", "M"),
    AircraftEntry("B753", "Boeing 757-300", "M"),
    AircraftEntry("B762", "Boeing 767-200", "H"),
    AircraftEntry("B763", "Boeing 767-300", "H"),
    AircraftEntry("B764", "Boeing 767-400", "H"),
    AircraftEntry("B772", "Boeing 777-200", "H"),
    AircraftEntry("B77L", "Boeing 777-200LR", "H"),
    AircraftEntry("B773", "Boeing 777-300", "H"),
    AircraftEntry("B77W", "Boeing 777-300ER", "H"),
    AircraftEntry("B788", "Boeing 787-8 Dreamliner", "H"),
    AircraftEntry("B789", "Boeing 787-9 Dreamliner", "H"),
    AircraftEntry("B78X", "Boeing 787-10 Dreamliner", "H"),

    # ==== EMBRAER ====
    AircraftEntry("E135", "Embraer ERJ-135", "M"),
    AircraftEntry("E145", "Embraer ERJ-145", "M"),
    AircraftEntry("E170", "Embraer E170", "M"),
    AircraftEntry("E75L", "Embraer E175", "M"),
    AircraftEntry("E190", "Embraer E190", "M"),
    AircraftEntry("E195", "Embraer E195", "M"),
    AircraftEntry("E290", "Embraer E190-E2", "M"),
    AircraftEntry("E295", "Embraer E195-E2", "M"),

    # ==== BOMBARDIER / DE HAVILLAND CANADA ====
    AircraftEntry("CRJ2", "Bombardier CRJ-200", "M"),
    AircraftEntry("CRJ7", "Bombardier CRJ-700", "M"),
    AircraftEntry("CRJ9", "Bombardier CRJ-900", "M"),
    AircraftEntry("CRJX", "Bombardier CRJ-1000", "M"),
    AircraftEntry("DH8D", "De Havilland Dash 8-400", "M"),

    # ==== TURBOPROPS / OTHERS ====
    AircraftEntry("AT45", "ATR 42-500", "M"),
    AircraftEntry("AT75", "ATR 72-500", "M"),
    AircraftEntry("AT76", "ATR 72-600", "M"),
    AircraftEntry("SF34", "Saab 340", "M"),
    AircraftEntry("SU95", "Sukhoi Superjet 100", "M"),
    AircraftEntry("C172", "Cessna 172 Skyhawk", "L"),
    AircraftEntry("PC12", "Pilatus PC-12", "L"),
    AircraftEntry("DA42", "Diamond DA42 Twin Star", "L"),
)
