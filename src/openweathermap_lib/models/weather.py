"""Current weather records returned by the OpenWeatherMap conditions endpoint."""

from pydantic import Field

from .base import ValidatedModel


def format_temperature(value: float | None, units: str) -> str:
    """Render a temperature with one decimal for the given unit system.

    Values are read as Celsius for ``imperial`` output. Unrecognized unit
    systems fall back to the ``standard`` rendering.

    Example:
        >>> format_temperature(27.77, "metric")
        '27.8°C'
        >>> format_temperature(27.77, "imperial")
        '82.0°F'
        >>> format_temperature(27.77, "standard")
        '27.8°K'
    """
    if value is None:
        return "n/a"
    if units == "metric":
        return f"{value:.1f}°C"
    if units == "imperial":
        return f"{value * 9 / 5 + 32:.1f}°F"
    return f"{value:.1f}°K"


def format_speed(value: float | None, units: str) -> str:
    """Render a speed with one decimal for the given unit system.

    Example:
        >>> format_speed(4.12, "metric")
        '4.1 m/s'
        >>> format_speed(4.12, "imperial")
        '4.1 mph'
    """
    if value is None:
        return "n/a"
    if units == "imperial":
        return f"{value:.1f} mph"
    return f"{value:.1f} m/s"


class Coord(ValidatedModel):
    """Geographic coordinates of the observed location."""

    lon: float = Field(..., description="Longitude in decimal degrees", ge=-180.0, le=180.0)
    lat: float = Field(..., description="Latitude in decimal degrees", ge=-90.0, le=90.0)


class WeatherCondition(ValidatedModel):
    """One weather condition entry (``weather[i]`` in the upstream payload).

    Example:
        >>> cond = WeatherCondition(id=800, main="Clear", description="clear sky", icon="01d")
        >>> cond.description
        'clear sky'
    """

    id: int = Field(..., description="Weather condition id")
    main: str = Field(..., description="Group of weather parameters (Rain, Snow, Clouds...)")
    description: str = Field(..., description="Condition description within the group")
    icon: str = Field(..., description="Weather icon id")


class Main(ValidatedModel):
    """Main measurements. Every field may be missing upstream."""

    temp: float | None = Field(None, description="Current temperature")
    feels_like: float | None = Field(None, description="Perceived temperature")
    temp_min: float | None = Field(None, description="Minimum temperature at the moment")
    temp_max: float | None = Field(None, description="Maximum temperature at the moment")
    pressure: int | None = Field(None, description="Atmospheric pressure in hPa")
    humidity: int | None = Field(None, description="Humidity percentage", ge=0, le=100)
    sea_level: int | None = Field(None, description="Pressure at sea level in hPa")
    grnd_level: int | None = Field(None, description="Pressure at ground level in hPa")


class Wind(ValidatedModel):
    """Wind measurements; speed units follow the requested unit system.

    Example:
        >>> Wind(speed=4.1, deg=250).gust is None
        True
    """

    speed: float = Field(..., description="Wind speed", ge=0.0)
    deg: int = Field(..., description="Wind direction in meteorological degrees", ge=0, le=360)
    gust: float | None = Field(None, description="Wind gust speed", ge=0.0)


class Clouds(ValidatedModel):
    """Cloud coverage."""

    all: int = Field(..., description="Cloudiness percentage", ge=0, le=100)


class Sys(ValidatedModel):
    """System block: country and sun times."""

    sys_type: int | None = Field(None, alias="type", description="Internal data source parameter")
    id: int | None = Field(None, description="Internal data source parameter")
    country: str = Field(
        ...,
        description="Country code (ISO 3166-1 alpha-2)",
        pattern=r"^[A-Z]{2}$",
    )
    sunrise: int = Field(..., description="Sunrise time, unix UTC")
    sunset: int = Field(..., description="Sunset time, unix UTC")


class WeatherResponse(ValidatedModel):
    """Full current-conditions response for one location.

    Example:
        >>> response = WeatherResponse.parse({
        ...     "coord": {"lon": -82.191, "lat": 42.4048},
        ...     "weather": [],
        ...     "base": "stations",
        ...     "main": {"temp": 20.0},
        ...     "visibility": 10000,
        ...     "wind": {"speed": 3.6, "deg": 240},
        ...     "clouds": {"all": 0},
        ...     "dt": 1760800000,
        ...     "sys": {"country": "CA", "sunrise": 1760786000, "sunset": 1760825000},
        ...     "timezone": -14400,
        ...     "id": 5920450,
        ...     "name": "Chatham",
        ...     "cod": 200,
        ... })
        >>> response.main.temp
        20.0
    """

    coord: Coord
    weather: tuple[WeatherCondition, ...] = Field(
        default=(),
        description="Weather conditions, possibly empty or several",
    )
    base: str = Field(..., description="Internal data source parameter")
    main: Main
    visibility: int = Field(..., description="Visibility in meters", ge=0)
    wind: Wind
    clouds: Clouds
    dt: int = Field(..., description="Time of data calculation, unix UTC")
    sys: Sys
    timezone: int = Field(..., description="Shift in seconds from UTC")
    id: int = Field(..., description="City id")
    name: str = Field(..., description="City name")
    cod: int = Field(..., description="Internal response status code")

    def detailed_display(self, units: str) -> str:
        """Render a human readable summary for the given unit system.

        Stored temperatures are read as Celsius, i.e. the response is expected
        to have been fetched with ``metric`` units; ``units`` only selects the
        display unit. An ``imperial`` response rendered as ``imperial`` is
        converted a second time. Speeds are rendered as stored, only the unit
        label follows ``units``.

        The headline condition is the first entry of ``weather``; its fields
        render empty when the list is empty.
        """
        headline = self.weather[0] if self.weather else None
        humidity = f"{self.main.humidity}%" if self.main.humidity is not None else "n/a"

        return "\n".join(
            [
                f"Weather in {self.name}",
                f"Coordinates: ({self.coord.lat}, {self.coord.lon})",
                f"Temperature: {format_temperature(self.main.temp, units)}"
                f" (feels like {format_temperature(self.main.feels_like, units)})",
                f"Humidity: {humidity}",
                f"Wind: {format_speed(self.wind.speed, units)} at {self.wind.deg}°",
                f"Clouds: {self.clouds.all}%",
                f"Visibility: {self.visibility} m",
                f"Conditions: {headline.main if headline else ''}"
                f" ({headline.description if headline else ''})"
                f" [{headline.icon if headline else ''}]",
            ]
        )
