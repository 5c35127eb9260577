"""MCP server exposing the weather tools."""

import asyncio
import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from forecaster.config.schema import AppConfig, Transport
from forecaster.ingest.nws_client import NwsClient
from forecaster.tools import WeatherTools

logger = logging.getLogger(__name__)

SERVER_NAME = "weather"
INSTRUCTIONS = "A simple weather forecaster"

StateArg = Annotated[str, Field(description="the US state to get alerts for")]
LatitudeArg = Annotated[
    str, Field(description="latitude of the location in decimal format")
]
LongitudeArg = Annotated[
    str, Field(description="longitude of the location in decimal format")
]


def build_server(config: AppConfig, tools: WeatherTools) -> FastMCP:
    mcp = FastMCP(
        SERVER_NAME,
        instructions=INSTRUCTIONS,
        host=config.server.host,
        port=config.server.port,
        streamable_http_path=config.server.path,
        log_level=config.log_level,
    )

    @mcp.tool(description="Get weather alerts for a US state")
    async def get_alerts(state: StateArg) -> str:
        return await tools.get_alerts(state)

    @mcp.tool(description="Get forecast using latitude and longitude coordinates")
    async def get_forecast(latitude: LatitudeArg, longitude: LongitudeArg) -> str:
        return await tools.get_forecast(latitude, longitude)

    return mcp


async def serve(config: AppConfig) -> None:
    """Run the server until the transport ends; the NWS client lives as long."""
    async with NwsClient(
        base_url=config.nws.base_url,
        user_agent=config.nws.user_agent,
        timeout=config.nws.timeout,
    ) as nws:
        mcp = build_server(config, WeatherTools(nws))
        transport = config.server.transport
        if transport == Transport.STDIO:
            logger.info("Serving MCP over stdio")
            await mcp.run_stdio_async()
        elif transport == Transport.SSE:
            logger.info(
                "Serving MCP over SSE on %s:%d",
                config.server.host, config.server.port,
            )
            await mcp.run_sse_async()
        else:
            logger.info(
                "Serving MCP on http://%s:%d%s",
                config.server.host, config.server.port, config.server.path,
            )
            await mcp.run_streamable_http_async()


def run_server(config: AppConfig) -> None:
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Server interrupted, shutting down")
