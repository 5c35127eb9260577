"""Async NWS API client: GET a URL and decode the body into a model."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from forecaster.config.defaults import NWS_API_BASE, USER_AGENT
from forecaster.ingest.errors import NwsDecodeError, NwsStatusError, NwsTransportError
from forecaster.models.alerts import AlertsResponse
from forecaster.models.forecast import GridpointForecast, PointsResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class NwsClient:
    def __init__(
        self,
        base_url: str = NWS_API_BASE,
        user_agent: str = USER_AGENT,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._http = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            **kwargs,
        )

    async def __aenter__(self) -> "NwsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_json(self, url: str, model: type[T]) -> T:
        """GET ``url`` and parse a 200 body as ``model``.

        Raises NwsTransportError when no response arrives or the URL cannot
        be sent, NwsStatusError for any status other than 200 and
        NwsDecodeError when the body does not match the model. No retries.
        """
        logger.info("Making request to: %s", url)
        try:
            resp = await self._http.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NwsTransportError(f"Request failed: {e}") from e

        logger.debug("Received response: %s %s", resp.status_code, resp.url)

        if resp.status_code != httpx.codes.OK:
            raise NwsStatusError(url, resp.status_code)
        try:
            return model.model_validate_json(resp.content)
        except ValidationError as e:
            raise NwsDecodeError(f"Failed to parse response: {e}") from e

    async def get_active_alerts(self, state: str) -> AlertsResponse:
        url = f"{self.base_url}/alerts/active?area={state}"
        return await self.fetch_json(url, AlertsResponse)

    async def get_point(self, latitude: str, longitude: str) -> PointsResponse:
        url = f"{self.base_url}/points/{latitude},{longitude}"
        return await self.fetch_json(url, PointsResponse)

    async def get_gridpoint_forecast(self, forecast_url: str) -> GridpointForecast:
        return await self.fetch_json(forecast_url, GridpointForecast)
