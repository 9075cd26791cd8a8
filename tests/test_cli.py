import json

from flightlog import __main__ as cli
from flightlog.airports import Airport, StaticAirportLookup

from .conftest import make_export, make_segment


class _FakeClient(StaticAirportLookup):
    def __init__(self, *args, **kwargs):
        super().__init__({"FRA": Airport(id=1, iata="FRA"), "MUC": Airport(id=2, iata="MUC")})

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None


def test_import_mandm_prints_result(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("flightlog.importers.milesandmore.AirportServiceClient", _FakeClient)
    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    path = tmp_path / "statement.json"
    path.write_text(make_export(make_segment()), encoding="utf-8")

    assert cli.main(["import-mandm", str(path), "--user-id", "42"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["unknown_airports"] == []
    assert out["flights"][0]["from"]["iata"] == "FRA"
    assert out["flights"][0]["seats"][0]["user_id"] == "42"


def test_import_mandm_reports_bad_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    path = tmp_path / "statement.json"
    path.write_text("not json", encoding="utf-8")

    assert cli.main(["import-mandm", str(path), "--user-id", "42"]) == 1
    assert "Invalid JSON" in capsys.readouterr().err
