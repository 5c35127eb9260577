"""CLI entry point for the weather tool server."""

import argparse
import asyncio

from pydantic import BaseModel, ValidationError

from forecaster.config.loader import ConfigError, get_config_value, load_config
from forecaster.config.schema import AppConfig, Transport
from forecaster.ingest.nws_client import NwsClient
from forecaster.logging_setup import configure_logging
from forecaster.server import run_server
from forecaster.tools import WeatherTools

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="forecaster",
        description="NWS weather alerts and forecasts as MCP tools",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the MCP server")
    serve_p.add_argument("--host", help="Bind host")
    serve_p.add_argument("--port", type=int, help="Bind port")
    serve_p.add_argument(
        "--transport", choices=[t.value for t in Transport], help="MCP transport"
    )

    # one-shot tool calls
    alerts_p = sub.add_parser("alerts", help="Print active alerts for a US state")
    alerts_p.add_argument("state", help="Two-letter US state code, e.g. CA")
    forecast_p = sub.add_parser("forecast", help="Print the forecast for a point")
    forecast_p.add_argument("latitude")
    forecast_p.add_argument("longitude")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (ValidationError, ConfigError) as e:
        print(f"Error: {e}")
        return 1

    configure_logging(config.log_level)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "alerts":
        return _cmd_alerts(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: AppConfig, args) -> int:
    overrides = {
        k: v
        for k, v in (
            ("host", args.host),
            ("port", args.port),
            ("transport", args.transport),
        )
        if v is not None
    }
    if overrides:
        config = config.model_copy(
            update={"server": config.server.model_copy(update=overrides)}
        )
    run_server(config)
    return 0


async def _call_tool(config: AppConfig, name: str, *tool_args: str) -> str:
    async with NwsClient(
        base_url=config.nws.base_url,
        user_agent=config.nws.user_agent,
        timeout=config.nws.timeout,
    ) as nws:
        tools = WeatherTools(nws)
        return await getattr(tools, name)(*tool_args)


def _cmd_alerts(config: AppConfig, args) -> int:
    text = asyncio.run(_call_tool(config, "get_alerts", args.state))
    print(text.rstrip("\n"))
    return 0


def _cmd_forecast(config: AppConfig, args) -> int:
    text = asyncio.run(
        _call_tool(config, "get_forecast", args.latitude, args.longitude)
    )
    print(text.rstrip("\n"))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        print(value.model_dump_json(indent=2) if isinstance(value, BaseModel) else value)
        return 0
    print("Use: config show | config get KEY")
    return 1
