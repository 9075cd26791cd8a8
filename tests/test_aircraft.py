import pytest

from flightlog import aircraft
from flightlog.aircraft import (
    AircraftLabelCache,
    AircraftResolver,
    MILES_AND_MORE_RULES,
    WTC_TO_LABEL,
)
from flightlog.data.aircraft import AIRCRAFT, AircraftEntry
from flightlog.utils import to_title_case


def test_reference_table_has_unique_icao_codes():
    codes = [a.icao for a in AIRCRAFT]
    assert len(codes) == len(set(codes))


def test_aircraft_from_icao(resolver):
    assert resolver.aircraft_from_icao("A20N").name == "Airbus A320neo"
    assert resolver.aircraft_from_icao("a20n") is None
    assert resolver.aircraft_from_icao("ZZZZ") is None


def test_label_uses_first_two_words_title_cased():
    r = AircraftResolver(table=(AircraftEntry("B789", "BOEING 787-9 dreamliner"),))
    assert r.get_aircraft_label("B789") == "Boeing 787-9"


def test_label_from_default_table():
    assert aircraft.get_aircraft_label("A20N") == "Airbus A320neo"
    assert aircraft.get_aircraft_label("B77W") == "Boeing 777-300er"


def test_label_single_word_name():
    r = AircraftResolver(table=(AircraftEntry("ZEPP", "zeppelin"),))
    assert r.get_aircraft_label("ZEPP") == "Zeppelin"


def test_label_entry_without_name_is_cached_as_absent():
    r = AircraftResolver(table=(AircraftEntry("NONE", ""),))
    assert r.get_aircraft_label("NONE") is None
    assert "NONE" in r.cache
    assert r.cache.get("NONE") is None


class _CountingResolver(AircraftResolver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lookups = 0

    def aircraft_from_icao(self, icao):
        self.lookups += 1
        return super().aircraft_from_icao(icao)


def test_unknown_label_looked_up_once(small_table):
    r = _CountingResolver(table=small_table)
    assert r.get_aircraft_label("XXXX") is None
    assert r.get_aircraft_label("XXXX") is None
    assert r.lookups == 1


def test_known_label_looked_up_once(small_table):
    r = _CountingResolver(table=small_table)
    assert r.get_aircraft_label("A320") == "Airbus A320"
    assert r.get_aircraft_label("A320") == "Airbus A320"
    assert r.lookups == 1


def test_resolvers_do_not_share_caches(small_table):
    shared = AircraftLabelCache()
    a = AircraftResolver(table=small_table, cache=shared)
    b = AircraftResolver(table=small_table, cache=shared)
    c = AircraftResolver(table=small_table)
    a.get_aircraft_label("E195")
    assert "E195" in b.cache
    assert "E195" not in c.cache
    assert len(shared) == 1
    shared.clear()
    assert len(shared) == 0


def test_wake_category_label():
    r = AircraftResolver(table=(AircraftEntry("A388", "Airbus A380-800", "J"), AircraftEntry("X", "Foo Bar")))
    assert r.get_wake_category_label("A388") == WTC_TO_LABEL["J"] == "Super"
    assert r.get_wake_category_label("X") is None
    assert r.get_wake_category_label("NOPE") is None


@pytest.mark.parametrize(
    "code, expected",
    [
        ("223", "A223"),
        ("32N", "A20N"),
        ("32n", "A20N"),
        ("320", "A320"),
        ("32A", "A320"),
        (" 32 ", "A320"),
        ("E95", "E195"),
        ("e90", "E195"),
        ("CR9", "CRJ9"),
        ("cr7", "CRJ9"),
        ("CR90", "CRJ9"),
    ],
)
def test_miles_and_more_codes(resolver, code, expected):
    assert resolver.extract_icao_from_miles_and_more_code(code) == expected


@pytest.mark.parametrize("code", [None, "", "   ", "XYZ", "3200", "E195", "CRJ", "CR900", "7M8"])
def test_miles_and_more_codes_without_match(resolver, code):
    assert resolver.extract_icao_from_miles_and_more_code(code) is None


def test_numeric_fallback_prepends_a(small_table):
    r = AircraftResolver(table=small_table + (AircraftEntry("A999", "Airbus A999"),))
    assert r.extract_icao_from_miles_and_more_code("999") == "A999"


def test_numeric_fallback_without_entry(resolver):
    assert resolver.extract_icao_from_miles_and_more_code("999") is None


def test_223_without_a220_entry():
    r = AircraftResolver(table=(AircraftEntry("A223", "Something Else"),))
    assert r.extract_icao_from_miles_and_more_code("223") is None


def test_rules_are_ordered():
    assert [rule.name for rule in MILES_AND_MORE_RULES] == [
        "a220-300",
        "a320-family",
        "embraer-e195",
        "crj-900",
        "airbus-numeric",
    ]


def test_codes_against_default_table():
    assert aircraft.extract_icao_from_miles_and_more_code("223") == "BCS3"
    assert aircraft.extract_icao_from_miles_and_more_code("32N") == "A20N"
    assert aircraft.extract_icao_from_miles_and_more_code("E95") == "E195"
    assert aircraft.extract_icao_from_miles_and_more_code("CR9") == "CRJ9"
    assert aircraft.extract_icao_from_miles_and_more_code("359") == "A359"


def test_to_title_case():
    assert to_title_case("AIRBUS a320neo") == "Airbus A320neo"
    assert to_title_case("de havilland") == "De Havilland"
