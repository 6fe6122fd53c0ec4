"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Sequence

import uvicorn

from .chat_adapters.slack_adapter import SlackAdapter
from .core import Config, ConfigError, load_config
from .server import create_app

LOGGER = logging.getLogger(__name__)


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="message-relay",
        description="Message Relay - Slack shortcut that relays a message to another user",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP listener (default)")
    _add_serve_arguments(parser)
    # SUPPRESS keeps flags given before the subcommand from being reset to None
    _add_serve_arguments(serve_parser, default=argparse.SUPPRESS)

    manifest_parser = subparsers.add_parser(
        "manifest",
        help="Print the Slack app manifest",
    )
    manifest_parser.add_argument(
        "--request-url",
        help="Public base URL Slack should post callbacks to",
    )

    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        help="Configuration options",
    )
    slack_parser = config_subparsers.add_parser(
        "slack",
        help="Configure Slack integration (guided setup)",
    )
    slack_parser.add_argument(
        "--env-file", default=argparse.SUPPRESS, help="Path of the .env file to write"
    )

    args = parser.parse_args(argv)

    if args.command == "manifest":
        from .commands import run_manifest_command

        return run_manifest_command(args)
    elif args.command == "config":
        if args.config_command == "slack":
            from .commands import run_config_slack_command

            return run_config_slack_command(args)
        config_parser.print_help()
        return 1

    try:
        asyncio.run(_run_async(args.env_file, args.host, args.port))
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1
    except KeyboardInterrupt:
        LOGGER.info("Interrupted by user")
        return 130
    return 0


def run() -> None:
    raise SystemExit(cli())


def _add_serve_arguments(parser: argparse.ArgumentParser, default: object = None) -> None:
    parser.add_argument(
        "--env-file", default=default, help="Path of a .env file to load (default: ./.env)"
    )
    parser.add_argument("--host", default=default, help="Interface to bind (overrides HOST)")
    parser.add_argument(
        "--port", type=int, default=default, help="Port to listen on (overrides PORT)"
    )


async def _run_async(env_file: str | Path | None, host: str | None, port: int | None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config: Config = load_config(env_file)
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))

    slack_adapter = SlackAdapter(bot_token=config.slack_bot_token)
    app = create_app(config, slack_adapter)

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=host or config.host,
            port=port or config.port,
            log_config=None,
        )
    )
    LOGGER.info("Server is running on port %s", port or config.port)
    await server.serve()
    LOGGER.info("Shutdown complete")


if __name__ == "__main__":
    run()
