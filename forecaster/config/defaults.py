"""Default NWS endpoint, client identity and bind address."""

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/2.0"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_MCP_PATH = "/mcp"
DEFAULT_LOG_LEVEL = "DEBUG"
