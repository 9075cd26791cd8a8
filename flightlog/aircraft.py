"""
Aircraft type lookups.

  - exact ICAO lookup against the reference table
  - display labels ("Airbus A320neo") with a memoizing cache
  - best-guess ICAO codes for the loose aircraft codes found in
    Miles & More exports ("32N", "E95", "CR9", ...)

The label cache never evicts: entries stay valid as long as the reference
table does. A resolver owns its cache, so a host that wants per-request
caching builds its own AircraftResolver instead of using the module-level
helpers. The cache is not synchronized; share a resolver across threads
only behind a lock.
"""
from __future__ import annotations

import logging
import re as _re
from typing import Callable, Dict, NamedTuple, Optional, Pattern, Sequence

from .data.aircraft import AIRCRAFT, AircraftEntry
from .utils import to_title_case

logger = logging.getLogger("flightlog.aircraft")

WTC_TO_LABEL: Dict[str, str] = {
    "L": "Light",
    "M": "Medium",
    "H": "Heavy",
    "J": "Super",
}


class AircraftLabelCache:
    """ICAO code -> display label, or None for codes known to have no label."""

    def __init__(self) -> None:
        self._labels: Dict[str, Optional[str]] = {}

    def __contains__(self, icao: str) -> bool:
        return icao in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def get(self, icao: str) -> Optional[str]:
        return self._labels.get(icao)

    def set(self, icao: str, label: Optional[str]) -> None:
        self._labels[icao] = label

    def clear(self) -> None:
        self._labels.clear()


# ================= Miles & More code rules =================

Table = Sequence[AircraftEntry]


class _CodeRule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    resolve: Callable[[Table, str], Optional[AircraftEntry]]


_A320_FAMILY_RE: Pattern[str] = _re.compile(r"32[A-Z]?", _re.IGNORECASE)
_EMBRAER_RE: Pattern[str] = _re.compile(r"E[0-9]{2}", _re.IGNORECASE)
_CRJ_SHORT_RE: Pattern[str] = _re.compile(r"CR[0-9]", _re.IGNORECASE)
_CRJ_LONG_RE: Pattern[str] = _re.compile(r"CR[0-9]{2}", _re.IGNORECASE)
_NUMERIC_RE: Pattern[str] = _re.compile(r"[0-9]{3}")


def _first(table: Table, predicate: Callable[[AircraftEntry], bool]) -> Optional[AircraftEntry]:
    return next((a for a in table if predicate(a)), None)


def _name_contains(table: Table, needle: str) -> Optional[AircraftEntry]:
    needle = needle.lower()
    return _first(table, lambda a: needle in (a.name or "").lower())


def _resolve_a320_family(table: Table, code: str) -> Optional[AircraftEntry]:
    if code.upper().endswith("N"):
        return _name_contains(table, "a320neo")
    return _first(
        table,
        lambda a: "a320" in (a.name or "").lower() and "neo" not in (a.name or "").lower(),
    )


def _is_crj_code(code: str) -> bool:
    # "CR9", or "CR90" style codes that dropped the J
    if _CRJ_SHORT_RE.fullmatch(code):
        return True
    return bool(_CRJ_LONG_RE.fullmatch(code)) and code[2].isdigit()


# Evaluated top to bottom; the first rule whose guard matches decides the
# result, even when its target type is missing from the table.
MILES_AND_MORE_RULES: Sequence[_CodeRule] = (
    _CodeRule(
        "a220-300",
        lambda code: code == "223",
        lambda table, _code: _first(table, lambda a: "A220-300" in (a.name or "")),
    ),
    _CodeRule(
        "a320-family",
        lambda code: bool(_A320_FAMILY_RE.fullmatch(code)),
        _resolve_a320_family,
    ),
    _CodeRule(
        "embraer-e195",
        lambda code: bool(_EMBRAER_RE.fullmatch(code)),
        lambda table, _code: _name_contains(table, "e195"),
    ),
    _CodeRule(
        "crj-900",
        _is_crj_code,
        lambda table, _code: _name_contains(table, "crj-900"),
    ),
    _CodeRule(
        "airbus-numeric",
        lambda code: bool(_NUMERIC_RE.fullmatch(code)),
        lambda table, code: _first(table, lambda a: a.icao == "A" + code),
    ),
)


class AircraftResolver:
    def __init__(
        self,
        table: Table = AIRCRAFT,
        cache: Optional[AircraftLabelCache] = None,
    ) -> None:
        self.table = table
        self.cache = cache if cache is not None else AircraftLabelCache()

    def aircraft_from_icao(self, icao: str) -> Optional[AircraftEntry]:
        return _first(self.table, lambda a: a.icao == icao)

    def get_aircraft_label(self, icao: str) -> Optional[str]:
        """
        "A20N" -> "Airbus A320neo". Misses are cached too, so an unknown code
        only costs one table scan.
        """
        if icao in self.cache:
            return self.cache.get(icao)

        aircraft = self.aircraft_from_icao(icao)
        if not aircraft or not aircraft.name:
            self.cache.set(icao, None)
            return None

        parts = aircraft.name.split()
        label = " ".join(to_title_case(p) for p in parts[:2])
        self.cache.set(icao, label)
        return label

    def get_wake_category_label(self, icao: str) -> Optional[str]:
        aircraft = self.aircraft_from_icao(icao)
        if not aircraft or not aircraft.wtc:
            return None
        return WTC_TO_LABEL.get(aircraft.wtc)

    def extract_icao_from_miles_and_more_code(
        self, aircraft_code: Optional[str]
    ) -> Optional[str]:
        if not aircraft_code:
            return None
        code = aircraft_code.strip()
        if not code:
            return None

        for rule in MILES_AND_MORE_RULES:
            if not rule.matches(code):
                continue
            entry = rule.resolve(self.table, code)
            if entry is None:
                logger.debug(
                    "Aircraft code %r matched rule %s but no table entry", code, rule.name
                )
                return None
            return entry.icao

        return None


default_resolver = AircraftResolver()


def aircraft_from_icao(icao: str) -> Optional[AircraftEntry]:
    return default_resolver.aircraft_from_icao(icao)


def get_aircraft_label(icao: str) -> Optional[str]:
    return default_resolver.get_aircraft_label(icao)


def get_wake_category_label(icao: str) -> Optional[str]:
    return default_resolver.get_wake_category_label(icao)


def extract_icao_from_miles_and_more_code(aircraft_code: Optional[str]) -> Optional[str]:
    return default_resolver.extract_icao_from_miles_and_more_code(aircraft_code)
