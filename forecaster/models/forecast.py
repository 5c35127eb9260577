"""NWS points and gridpoint forecast models."""

from pydantic import BaseModel, ConfigDict, Field

_STRICT = ConfigDict(frozen=True, strict=True, populate_by_name=True)


class PointProperties(BaseModel):
    model_config = _STRICT

    forecast_url: str = Field(alias="forecast")


class PointsResponse(BaseModel):
    """Body of /points/{lat},{lon}: metadata for the covering forecast grid."""

    model_config = _STRICT

    properties: PointProperties

    @property
    def forecast_url(self) -> str:
        return self.properties.forecast_url


class Period(BaseModel):
    model_config = _STRICT

    name: str
    temperature: int
    temperature_unit: str = Field(alias="temperatureUnit")
    wind_speed: str = Field(alias="windSpeed")
    wind_direction: str = Field(alias="windDirection")
    short_forecast: str = Field(alias="shortForecast")


class GridpointProperties(BaseModel):
    model_config = _STRICT

    periods: list[Period]


class GridpointForecast(BaseModel):
    model_config = _STRICT

    properties: GridpointProperties

    @property
    def periods(self) -> list[Period]:
        return self.properties.periods
