"""CLI entry point for Meshgaze."""

from __future__ import annotations

import argparse
import sys

from meshgaze import __version__
from meshgaze.config import AppConfig, ConfigError
from meshgaze.logging_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="meshgaze",
        description="Live status of a mesh network node: addresses, throughput and routes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"meshgaze {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to TOML config file",
    )
    parser.add_argument(
        "--source",
        metavar="PATH",
        help="Path to the node's JSON status export",
    )
    parser.add_argument(
        "--command",
        metavar="CMD",
        help="Command printing the JSON status export (takes precedence over --source)",
    )
    parser.add_argument(
        "--instance",
        metavar="ID",
        help="Network instance to show (default: first instance)",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        metavar="SECS",
        help="Status source refresh interval in seconds (default: 1.0)",
    )
    parser.add_argument(
        "--rate-interval",
        type=float,
        metavar="SECS",
        help="Throughput sampling interval in seconds (default: 2.0)",
    )
    parser.add_argument(
        "--si",
        action="store_true",
        help="Use SI (1000-based) units instead of binary (1024-based)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write debug/diagnostic logs to this file",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> dict:
    """Map parsed arguments onto AppConfig field overrides."""
    overrides: dict = {}
    if args.source:
        overrides["source_path"] = args.source
    if args.command:
        overrides["source_command"] = args.command
    if args.instance:
        overrides["instance"] = args.instance
    if args.poll_interval is not None:
        overrides["poll_interval"] = args.poll_interval
    if args.rate_interval is not None:
        overrides["rate_interval"] = args.rate_interval
    if args.si:
        overrides["si_units"] = True
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.log_level:
        overrides["log_level"] = args.log_level
    return overrides


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    try:
        config = AppConfig.load(config_path=args.config, cli_overrides=build_overrides(args))
    except ConfigError as exc:
        sys.exit(f"meshgaze: {exc}")
    setup_logging(config.log_file, config.log_level)

    from meshgaze.app import MeshgazeApp

    app = MeshgazeApp(config)
    app.run()


if __name__ == "__main__":
    main()
