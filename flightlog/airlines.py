# airlines.py
# ---------------------------------------------------------------------
# A *small* subset of the world's airlines, weighted towards the carriers
# that show up in Star Alliance / Miles & More statements.
# Extend freely; lookups never need to change.

from typing import Dict, NamedTuple, Optional


class Airline(NamedTuple):
    iata: str
    icao: str
    name: str


AIRLINE_CODES: Dict[str, Dict[str, str]] = {
    # ==== LUFTHANSA GROUP ====
    "LH": {"icao": "DLH", "name": "Lufthansa"},
    "CL": {"icao": "CLH", "name": "Lufthansa CityLine"},
    "VL": {"icao": "LHX", "name": "Lufthansa City Airlines"},
    "EN": {"icao": "DLA", "name": "Air Dolomiti"},
    "LX": {"icao": "SWR", "name": "Swiss International Air Lines"},
    "WK": {"icao": "EDW", "name": "Edelweiss Air"},
    "OS": {"icao": "AUA", "name": "Austrian Airlines"},
    "SN": {"icao": "BEL", "name": "Brussels Airlines"},
    "EW": {"icao": "EWG", "name": "Eurowings"},
    "4Y": {"icao": "OCN", "name": "Discover Airlines"},
    "AZ": {"icao": "ITY", "name": "ITA Airways"},

    # ==== STAR ALLIANCE ====
    "A3": {"icao": "AEE", "name": "Aegean Airlines"},
    "AC": {"icao": "ACA", "name": "Air Canada"},
    "CA": {"icao": "CCA", "name": "Air China"},
    "AI": {"icao": "AIC", "name": "Air India"},
    "NZ": {"icao": "ANZ", "name": "Air New Zealand"},
    "NH": {"icao": "ANA", "name": "All Nippon Airways"},
    "OZ": {"icao": "AAR", "name": "Asiana Airlines"},
    "OU": {"icao": "CTN", "name": "Croatia Airlines"},
    "MS": {"icao": "MSR", "name": "EgyptAir"},
    "ET": {"icao": "ETH", "name": "Ethiopian Airlines"},
    "BR": {"icao": "EVA", "name": "EVA Air"},
    "LO": {"icao": "LOT", "name": "LOT Polish Airlines"},
    "SK": {"icao": "SAS", "name": "Scandinavian Airlines"},
    "ZH": {"icao": "CSZ", "name": "Shenzhen Airlines"},
    "SQ": {"icao": "SIA", "name": "Singapore Airlines"},
    "SA": {"icao": "SAA", "name": "South African Airways"},
    "TP": {"icao": "TAP", "name": "TAP Air Portugal"},
    "TG": {"icao": "THA", "name": "Thai Airways"},
    "TK": {"icao": "THY", "name": "Turkish Airlines"},
    "UA": {"icao": "UAL", "name": "United Airlines"},
    "CM": {"icao": "CMP", "name": "Copa Airlines"},
    "AV": {"icao": "AVA", "name": "Avianca"},

    # ==== MILES & MORE PARTNERS ====
    "LG": {"icao": "LGL", "name": "Luxair"},
    "EK": {"icao": "UAE", "name": "Emirates"},
    "EY": {"icao": "ETD", "name": "Etihad Airways"},
    "VN": {"icao": "HVN", "name": "Vietnam Airlines"},
    "WY": {"icao": "OMA", "name": "Oman Air"},
    "JU": {"icao": "ASL", "name": "Air Serbia"},
    "BT": {"icao": "BTI", "name": "airBaltic"},

    # ==== OTHER MAJORS ====
    "AA": {"icao": "AAL", "name": "American Airlines"},
    "DL": {"icao": "DAL", "name": "Delta Air Lines"},
    "BA": {"icao": "BAW", "name": "British Airways"},
    "AF": {"icao": "AFR", "name": "Air France"},
    "KL": {"icao": "KLM", "name": "KLM Royal Dutch Airlines"},
    "IB": {"icao": "IBE", "name": "Iberia"},
    "AY": {"icao": "FIN", "name": "Finnair"},
    "QR": {"icao": "QTR", "name": "Qatar Airways"},
    "CX": {"icao": "CPA", "name": "Cathay Pacific"},
    "JL": {"icao": "JAL", "name": "Japan Airlines"},
    "QF": {"icao": "QFA", "name": "Qantas"},
    "FR": {"icao": "RYR", "name": "Ryanair"},
    "U2": {"icao": "EZY", "name": "easyJet"},
    "W6": {"icao": "WZZ", "name": "Wizz Air"},
    "VY": {"icao": "VLG", "name": "Vueling"},
    "DE": {"icao": "CFG", "name": "Condor"},
}


def airline_from_iata(code: Optional[str]) -> Optional[Airline]:
    iata = (code or "").strip().upper()
    rec = AIRLINE_CODES.get(iata)
    if rec is None:
        return None
    return Airline(iata=iata, icao=rec["icao"], name=rec["name"])


def airline_from_icao(code: Optional[str]) -> Optional[Airline]:
    icao = (code or "").strip().upper()
    if not icao:
        return None
    for iata, data in AIRLINE_CODES.items():
        if data.get("icao", "").upper() == icao:
            return Airline(iata=iata, icao=data["icao"], name=data["name"])
    return None
