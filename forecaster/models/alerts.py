"""NWS active-alerts response models."""

from pydantic import BaseModel, ConfigDict, Field

_STRICT = ConfigDict(frozen=True, strict=True, populate_by_name=True)


class AlertProperties(BaseModel):
    model_config = _STRICT

    event: str
    area: str = Field(alias="areaDesc")
    severity: str
    status: str
    headline: str


class Feature(BaseModel):
    model_config = _STRICT

    properties: AlertProperties


class AlertsResponse(BaseModel):
    """Body of /alerts/active. One feature per active alert."""

    model_config = _STRICT

    features: list[Feature]

    @property
    def alerts(self) -> list[AlertProperties]:
        return [f.properties for f in self.features]
