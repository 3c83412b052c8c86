"""Tests for the command-line interface."""

import json

import pytest

from sky_planner import cli
from sky_planner.models.weather import Reading
from sky_planner.providers.base import ProviderError, TransportError


@pytest.fixture
def serve_reading(monkeypatch):
    """Replace the weather lookup with a canned reading or error."""

    def install(result):
        locations = []

        async def fake_fetch(location: str) -> Reading:
            locations.append(location)
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(cli, "_fetch_reading", fake_fetch)
        return locations

    return install


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_weather(serve_reading, severe_reading, capsys):
    locations = serve_reading(severe_reading)

    assert cli.main(["weather", "Mombasa, Kenya"]) == 0

    out = capsys.readouterr().out
    assert locations == ["Mombasa, Kenya"]
    assert "Weather for Mombasa, Kenya:" in out
    assert "Temperature: 38°C" in out
    assert "Uv index: 9 (Very High)" in out


def test_recommend(serve_reading, severe_reading, capsys):
    serve_reading(severe_reading)

    assert cli.main(["recommend", "Mombasa, Kenya"]) == 0

    out = capsys.readouterr().out
    assert "Risk: high" in out
    assert "  - Windbreaker" in out
    assert "  10:00  low" in out
    assert "16:00" not in out


def test_recommend_json(serve_reading, mild_reading, capsys):
    serve_reading(mild_reading)

    assert cli.main(["recommend", "Nairobi", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["risk_level"] == "low"
    assert data["packing_list"] == ["Water bottle"]
    assert len(data["time_slots"]) == 3


def test_provider_error_exit_code(serve_reading, capsys):
    serve_reading(ProviderError("You have not supplied a valid API Access Key.", provider="weatherstack"))

    assert cli.main(["weather", "Nairobi"]) == 1

    err = capsys.readouterr().err
    assert "Weather API error: You have not supplied a valid API Access Key." in err


def test_transport_error_message(serve_reading, capsys):
    serve_reading(TransportError("API responded with status 500", provider="weatherstack"))

    assert cli.main(["recommend", "Nairobi"]) == 1

    assert "Please check your API key and connection" in capsys.readouterr().err


def test_blank_location(serve_reading, capsys):
    serve_reading(ValueError("Location is required"))

    assert cli.main(["weather", "  "]) == 2
    assert "Location is required" in capsys.readouterr().err
