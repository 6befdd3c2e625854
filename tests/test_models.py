"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from openweathermap_lib.core.errors import ValidationFailedError
from openweathermap_lib.models.location import Location
from openweathermap_lib.models.weather import (
    Clouds,
    Coord,
    Main,
    Sys,
    WeatherResponse,
    Wind,
    format_speed,
    format_temperature,
)


class TestLocation:
    """Test Location validation and rendering."""

    def test_valid_coordinates(self, location_payload):
        """Test that valid coordinates are accepted unchanged."""
        loc = Location(**location_payload)
        assert loc.lat == 43.6532
        assert loc.lon == -79.3832

        # Edge cases
        Location(zip="", name="", lat=90.0, lon=180.0, country="")
        Location(zip="", name="", lat=-90.0, lon=-180.0, country="")

    @pytest.mark.parametrize("lat,lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -181.0)])
    def test_invalid_coordinates(self, lat, lon):
        """Test that out of range coordinates are rejected."""
        with pytest.raises(ValidationError):
            Location(zip="N7L", name="Chatham", lat=lat, lon=lon, country="CA")

    def test_parse_reports_field_issues(self, location_payload):
        """Test that parse raises ValidationFailedError naming the offending field."""
        location_payload["lat"] = 123.0

        with pytest.raises(ValidationFailedError) as exc_info:
            Location.parse(location_payload)

        assert exc_info.value.model == "Location"
        assert [issue.field for issue in exc_info.value.issues] == ["lat"]
        assert exc_info.value.issues[0].value == 123.0

    def test_immutable(self, location):
        """Test that locations cannot be modified after construction."""
        with pytest.raises(ValidationError):
            location.lat = 10.0

    def test_placeholder(self):
        """Test the all-empty placeholder used in error envelopes."""
        placeholder = Location.placeholder()
        assert placeholder.model_dump() == {
            "zip": "",
            "name": "",
            "lat": 0.0,
            "lon": 0.0,
            "country": "",
        }

    def test_detailed_display(self, location):
        """Test that rendering is labelled and ignores units."""
        expected = "name: [Chatham]\ncountry: [CA]\nzip: [N7L]\nlat: [43.6532]\nlon: [-79.3832]"
        assert location.detailed_display("metric") == expected
        assert location.detailed_display("imperial") == expected
        assert str(location) == expected


class TestWeatherRecords:
    """Test nested weather record invariants."""

    def test_coord_range(self):
        assert Coord(lon=-180.0, lat=90.0).lat == 90.0
        with pytest.raises(ValidationError):
            Coord(lon=181.0, lat=0.0)
        with pytest.raises(ValidationError):
            Coord(lon=0.0, lat=-90.5)

    @pytest.mark.parametrize("humidity", [0, 1, 50, 99, 100])
    def test_humidity_in_range(self, humidity):
        assert Main(humidity=humidity).humidity == humidity

    @pytest.mark.parametrize("humidity", [-1, 101, 250])
    def test_humidity_out_of_range(self, humidity):
        with pytest.raises(ValidationError):
            Main(humidity=humidity)

    def test_measurements_all_optional(self):
        """Test that every measurement may be missing upstream."""
        main = Main()
        assert main.temp is None
        assert main.humidity is None
        assert main.grnd_level is None

    @pytest.mark.parametrize("speed,deg", [(0.0, 0), (3.5, 180), (40.0, 360)])
    def test_wind_valid(self, speed, deg):
        wind = Wind(speed=speed, deg=deg)
        assert wind.speed == speed
        assert wind.deg == deg

    @pytest.mark.parametrize(
        "fields",
        [
            {"speed": -0.1, "deg": 10},
            {"speed": 1.0, "deg": -1},
            {"speed": 1.0, "deg": 361},
            {"speed": 1.0, "deg": 10, "gust": -2.0},
        ],
    )
    def test_wind_invalid(self, fields):
        with pytest.raises(ValidationError):
            Wind(**fields)

    def test_clouds_range(self):
        assert Clouds(all=100).all == 100
        with pytest.raises(ValidationError):
            Clouds(all=101)

    @pytest.mark.parametrize("country", ["ca", "CAN", "C", "", "C1"])
    def test_sys_country_code(self, country):
        with pytest.raises(ValidationError):
            Sys(country=country, sunrise=1, sunset=2)

    def test_sys_type_alias(self):
        """Test that the upstream ``type`` key maps to ``sys_type`` and back."""
        sys = Sys.parse({"type": 2, "id": 7, "country": "CA", "sunrise": 1, "sunset": 2})
        assert sys.sys_type == 2
        assert sys.model_dump(by_alias=True)["type"] == 2


class TestWeatherResponse:
    """Test the weather envelope."""

    def test_parses_upstream_payload(self, weather_payload):
        """Test that a full response parses and unknown keys are ignored."""
        response = WeatherResponse.parse(weather_payload)

        assert response.name == "Chatham"
        assert response.main.temp == 20.0
        assert response.sys.sys_type == 2
        assert [c.main for c in response.weather] == ["Clouds", "Mist"]
        assert not hasattr(response, "rain")

    def test_large_identifiers(self, weather_payload):
        weather_payload["id"] = 2**40
        weather_payload["dt"] = 2**35
        response = WeatherResponse.parse(weather_payload)
        assert response.id == 2**40
        assert response.dt == 2**35

    def test_partial_measurements(self, weather_payload):
        weather_payload["main"] = {"temp": 1.5}
        response = WeatherResponse.parse(weather_payload)
        assert response.main.temp == 1.5
        assert response.main.pressure is None

    def test_negative_visibility_rejected(self, weather_payload):
        weather_payload["visibility"] = -5
        with pytest.raises(ValidationFailedError) as exc_info:
            WeatherResponse.parse(weather_payload)
        assert exc_info.value.issues[0].field == "visibility"

    def test_nested_issue_field_path(self, weather_payload):
        weather_payload["main"]["humidity"] = 140
        with pytest.raises(ValidationFailedError) as exc_info:
            WeatherResponse.parse(weather_payload)
        assert exc_info.value.issues[0].field == "main.humidity"
        assert exc_info.value.issues[0].value == 140

    def test_json_serialization(self, weather_payload):
        """Test that the envelope serializes back to upstream key names."""
        response = WeatherResponse.parse(weather_payload)
        data = response.model_dump(mode="json", by_alias=True)

        assert data["main"]["temp"] == 20.0
        assert data["sys"]["type"] == 2
        assert data["weather"][0]["icon"] == "04d"


class TestRendering:
    """Test deterministic text rendering."""

    def test_temperature(self):
        assert format_temperature(27.77, "metric") == "27.8°C"
        assert format_temperature(27.77, "imperial") == "82.0°F"
        assert format_temperature(27.77, "standard") == "27.8°K"
        assert format_temperature(27.77, "furlongs") == "27.8°K"
        assert format_temperature(None, "metric") == "n/a"

    def test_speed(self):
        assert format_speed(4.12, "metric") == "4.1 m/s"
        assert format_speed(4.12, "standard") == "4.1 m/s"
        assert format_speed(4.12, "unknown") == "4.1 m/s"
        assert format_speed(4.12, "imperial") == "4.1 mph"

    def test_detailed_display_metric(self, weather_payload):
        response = WeatherResponse.parse(weather_payload)

        assert response.detailed_display("metric") == (
            "Weather in Chatham\n"
            "Coordinates: (43.6532, -79.3832)\n"
            "Temperature: 20.0°C (feels like 19.6°C)\n"
            "Humidity: 64%\n"
            "Wind: 4.1 m/s at 250°\n"
            "Clouds: 75%\n"
            "Visibility: 10000 m\n"
            "Conditions: Clouds (broken clouds) [04d]"
        )

    def test_detailed_display_is_deterministic(self, weather_payload):
        response = WeatherResponse.parse(weather_payload)
        assert response.detailed_display("imperial") == response.detailed_display("imperial")
        assert "mph" in response.detailed_display("imperial")

    def test_detailed_display_without_conditions(self, weather_payload):
        weather_payload["weather"] = []
        weather_payload["main"] = {}
        response = WeatherResponse.parse(weather_payload)

        rendered = response.detailed_display("standard")

        assert rendered.endswith("Conditions:  () []")
        assert "Temperature: n/a (feels like n/a)" in rendered
        assert "Humidity: n/a" in rendered

    def test_detailed_display_reads_metric_values(self, weather_payload):
        """Test that a metric response can be displayed in imperial units."""
        response = WeatherResponse.parse(weather_payload)

        rendered = response.detailed_display("imperial")

        assert "Temperature: 68.0°F (feels like 67.3°F)" in rendered
        assert "Wind: 4.1 mph at 250°" in rendered
