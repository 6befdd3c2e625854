"""Geocoordinate record returned by the postal code lookup."""

from pydantic import Field

from .base import ValidatedModel


class Location(ValidatedModel):
    """Resolved location for a postal code.

    Example:
        >>> loc = Location(zip="N7L", name="Chatham", lat=42.4048, lon=-82.191, country="CA")
        >>> loc.name
        'Chatham'
        >>> loc.lat
        42.4048
    """

    zip: str = Field(..., description="ZIP or postal code")
    name: str = Field(..., description="City or locality name")
    lat: float = Field(
        ...,
        description="Latitude in decimal degrees",
        ge=-90.0,
        le=90.0,
    )
    lon: float = Field(
        ...,
        description="Longitude in decimal degrees",
        ge=-180.0,
        le=180.0,
    )
    country: str = Field(..., description="Two-letter country code (ISO 3166-1 alpha-2)")

    @classmethod
    def placeholder(cls) -> "Location":
        """All-empty location used in error envelopes.

        Example:
            >>> Location.placeholder()
            Location(zip='', name='', lat=0.0, lon=0.0, country='')
        """
        return cls(zip="", name="", lat=0.0, lon=0.0, country="")

    def detailed_display(self, units: str = "metric") -> str:
        """Render the location as labelled lines; ``units`` does not affect the output.

        Example:
            >>> loc = Location(zip="N7L", name="Chatham", lat=42.4048, lon=-82.191, country="CA")
            >>> print(loc.detailed_display())
            name: [Chatham]
            country: [CA]
            zip: [N7L]
            lat: [42.4048]
            lon: [-82.191]
        """
        return (
            f"name: [{self.name}]\n"
            f"country: [{self.country}]\n"
            f"zip: [{self.zip}]\n"
            f"lat: [{self.lat}]\n"
            f"lon: [{self.lon}]"
        )

    def __str__(self) -> str:
        return self.detailed_display()
