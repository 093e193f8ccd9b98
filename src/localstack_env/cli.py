"""Command-line interface for LocalStack environments."""

from __future__ import annotations

import argparse
import json
import logging
import time

from .core.utils import logger, setup_localstack_env_logging
from .environment import LocalstackEnvironment, build_container_config, build_host_config
from .errors import LocalstackEnvError
from .services import DEFAULT_PORTS, parse_selection
from .settings import LocalstackSettings, get_settings
from .types import ServiceSelection


def _selection_arg(value: str) -> ServiceSelection:
    """argparse type for NAME[:PORT] selections."""
    try:
        return parse_selection(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _settings_from_args(args: argparse.Namespace) -> LocalstackSettings:
    settings = get_settings()
    if args.image:
        settings = settings.model_copy(update={"image": args.image})
    return settings


def _wait_for_interrupt() -> None:
    """Block until the user presses Ctrl+C."""
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass


def cmd_services(args: argparse.Namespace) -> int:
    """Handle the services command."""
    print("Supported services:")
    for service, port in DEFAULT_PORTS.items():
        print(f"  - {service.value:<16} {port}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the config command."""
    settings = _settings_from_args(args)
    selections = args.service or []
    container_config = build_container_config(settings.image, selections)
    host_config = build_host_config(selections)
    output = {
        "image": container_config.image,
        "env": list(container_config.env),
        "port_bindings": host_config.to_dict(),
    }
    print(json.dumps(output, indent=2))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the run command."""
    settings = _settings_from_args(args)
    env = LocalstackEnvironment.create(args.service or [], settings=settings)
    try:
        env.start()
        print("Endpoints:")
        for service, url in env.endpoints().items():
            print(f"  - {service.value:<16} {url}")
        print("Press Ctrl+C to stop")
        _wait_for_interrupt()
    finally:
        env.stop()
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="localstack-env",
        description="Run a LocalStack container for a set of AWS services",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--image",
        default=None,
        help="LocalStack image (default: LOCALSTACK_ENV_IMAGE env var or docker.io/localstack/localstack)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # services command
    services_parser = subparsers.add_parser(
        "services",
        help="List supported services and their default ports",
    )
    services_parser.set_defaults(func=cmd_services)

    selection_help = "Service to run as NAME or NAME:PORT (repeatable; default: all services)"

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Print the resolved container config without touching Docker",
    )
    config_parser.add_argument(
        "-s",
        "--service",
        action="append",
        type=_selection_arg,
        help=selection_help,
    )
    config_parser.set_defaults(func=cmd_config)

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="Create and start the container, stop it on Ctrl+C",
    )
    run_parser.add_argument(
        "-s",
        "--service",
        action="append",
        type=_selection_arg,
        help=selection_help,
    )
    run_parser.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_localstack_env_logging(logging.DEBUG if args.verbose else get_settings().log_level)

    try:
        return args.func(args)
    except LocalstackEnvError as e:
        logger.error(str(e))
        return 1


__all__ = ["create_parser", "main"]
