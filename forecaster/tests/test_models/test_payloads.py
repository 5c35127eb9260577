"""Tests for strict decoding of NWS payloads."""

import json

import pytest
from pydantic import ValidationError

from forecaster.models.alerts import AlertsResponse
from forecaster.models.forecast import GridpointForecast, PointsResponse


def _period(**overrides) -> dict:
    period = {
        "name": "Tonight",
        "temperature": 40,
        "temperatureUnit": "F",
        "windSpeed": "5 mph",
        "windDirection": "NW",
        "shortForecast": "Clear",
    }
    period.update(overrides)
    return period


def _grid(*periods: dict) -> str:
    return json.dumps({"properties": {"periods": list(periods)}})


class TestAlertsResponse:
    def test_decodes_fixture(self, load_fixture):
        data = load_fixture("nws_alerts_ca.json")
        result = AlertsResponse.model_validate_json(json.dumps(data))
        assert len(result.alerts) == 2
        first = result.alerts[0]
        assert first.event == "Wind Advisory"
        assert first.area == "San Bernardino County Mountains"
        assert first.severity == "Moderate"
        assert first.status == "Actual"

    def test_empty_features(self):
        result = AlertsResponse.model_validate_json('{"features": []}')
        assert result.alerts == []

    def test_missing_area_fails(self, load_fixture):
        data = load_fixture("nws_alerts_ca.json")
        del data["features"][1]["properties"]["areaDesc"]
        with pytest.raises(ValidationError):
            AlertsResponse.model_validate_json(json.dumps(data))

    def test_null_headline_fails(self, load_fixture):
        data = load_fixture("nws_alerts_ca.json")
        data["features"][0]["properties"]["headline"] = None
        with pytest.raises(ValidationError):
            AlertsResponse.model_validate_json(json.dumps(data))

    def test_missing_features_fails(self):
        with pytest.raises(ValidationError):
            AlertsResponse.model_validate_json('{"type": "FeatureCollection"}')


class TestPointsResponse:
    def test_forecast_url(self, load_fixture):
        data = load_fixture("nws_points_sea.json")
        result = PointsResponse.model_validate_json(json.dumps(data))
        assert result.forecast_url == (
            "https://test-nws.example.com/gridpoints/SEW/125,68/forecast"
        )

    def test_missing_forecast_fails(self):
        with pytest.raises(ValidationError):
            PointsResponse.model_validate_json('{"properties": {"gridId": "SEW"}}')


class TestGridpointForecast:
    def test_decodes_fixture(self, load_fixture):
        data = load_fixture("nws_forecast_sea.json")
        result = GridpointForecast.model_validate_json(json.dumps(data))
        assert [p.name for p in result.periods] == ["Tonight", "Tomorrow"]
        assert result.periods[0].temperature == 40
        assert result.periods[1].wind_speed == "5 to 10 mph"

    def test_string_temperature_fails(self):
        with pytest.raises(ValidationError):
            GridpointForecast.model_validate_json(_grid(_period(temperature="40")))

    def test_float_temperature_fails(self):
        with pytest.raises(ValidationError):
            GridpointForecast.model_validate_json(_grid(_period(temperature=40.5)))

    def test_one_bad_period_fails_whole_decode(self):
        bad = _period(name="Tomorrow")
        del bad["windDirection"]
        with pytest.raises(ValidationError):
            GridpointForecast.model_validate_json(_grid(_period(), bad))

    def test_models_are_frozen(self):
        result = GridpointForecast.model_validate_json(_grid(_period()))
        with pytest.raises(ValidationError):
            result.periods[0].temperature = 99
