"""The two weather tools: alerts by state and forecast by coordinates.

Every failure is logged and folded into a fixed text result; callers never
see an exception and cannot tell "not found" apart from "upstream error".
"""

import logging

from forecaster.ingest.errors import NwsError
from forecaster.ingest.nws_client import NwsClient
from forecaster.reporting.formatters import format_alerts, format_forecast

logger = logging.getLogger(__name__)

ALERTS_FAILED = "No alerts found or an error occurred."
FORECAST_FAILED = "No forecast found or an error occurred."


class WeatherTools:
    def __init__(self, nws: NwsClient):
        self.nws = nws

    async def get_alerts(self, state: str) -> str:
        logger.info("Received request for weather alerts in state: %s", state)
        try:
            result = await self.nws.get_active_alerts(state)
        except NwsError as e:
            logger.error("Failed to fetch alerts: %s", e)
            return ALERTS_FAILED
        return format_alerts(result.alerts)

    async def get_forecast(self, latitude: str, longitude: str) -> str:
        logger.info(
            "Received coordinates: latitude = %s, longitude = %s",
            latitude, longitude,
        )
        try:
            point = await self.nws.get_point(latitude, longitude)
        except NwsError as e:
            logger.error("Failed to fetch points: %s", e)
            return FORECAST_FAILED

        try:
            forecast = await self.nws.get_gridpoint_forecast(point.forecast_url)
        except NwsError as e:
            logger.error("Failed to fetch forecast: %s", e)
            return FORECAST_FAILED
        return format_forecast(forecast.periods)
