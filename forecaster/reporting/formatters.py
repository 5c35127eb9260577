"""Plain-text renderers for alert and forecast results."""

from forecaster.models.alerts import AlertProperties
from forecaster.models.forecast import Period

NO_ACTIVE_ALERTS = "No active alerts found."
NO_FORECAST_DATA = "No forecast data available."


def format_alert(alert: AlertProperties) -> str:
    return (
        f"Event: {alert.event}\n"
        f"Area: {alert.area}\n"
        f"Severity: {alert.severity}\n"
        f"Status: {alert.status}\n"
        f"Headline: {alert.headline}\n"
        "---\n"
    )


def format_alerts(alerts: list[AlertProperties]) -> str:
    """One block per alert, in input order, each closed by a '---' line."""
    if not alerts:
        return NO_ACTIVE_ALERTS
    return "".join(format_alert(a) for a in alerts)


def format_period(period: Period) -> str:
    return (
        f"Name: {period.name}\n"
        f"Temperature: {period.temperature}°{period.temperature_unit}\n"
        f"Wind: {period.wind_speed} {period.wind_direction}\n"
        f"Forecast: {period.short_forecast}\n"
        "---\n"
    )


def format_forecast(periods: list[Period]) -> str:
    if not periods:
        return NO_FORECAST_DATA
    return "".join(format_period(p) for p in periods)
