"""Main entry point for the console I/O server - CLI."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from suit_io.config import get_settings, load_settings_from_json
from suit_io.output import OutputFile, Segment
from suit_io.output_type import OutputType
from suit_io.server import IOServer
from suit_io.step import indented

logger = logging.getLogger(__name__)


def load_config(args, server: IOServer) -> bool:
    """Load config from specified path or default config.json."""
    config_path = Path(args.config) if args.config else Path("config.json")

    if not config_path.exists():
        if args.config:
            server.write_line(f"Error: Config file not found: {config_path}", OutputType.ERROR)
            return False
        return True

    try:
        load_settings_from_json(config_path)
        logger.info("Loaded config from: %s", config_path)
        return True
    except (json.JSONDecodeError, ValueError) as e:
        server.write_line(f"Error: Invalid config file: {e}", OutputType.ERROR)
        return False


def create_server(args) -> Optional[IOServer]:
    """Build a server from the loaded settings, or None if the config is unusable."""
    server = IOServer()
    if not load_config(args, server):
        return None

    try:
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
    except ValueError as e:
        server.write_line(f"Error: Invalid configuration: {e}", OutputType.ERROR)
        return None
    return IOServer.from_settings(settings)


def _run_with_output(args, body) -> int:
    """Run body(server), writing to --output instead of stdout if given."""
    server = create_server(args)
    if server is None:
        return 1

    if not args.output:
        return body(server)

    with OutputFile(Path(args.output), append=args.append) as stream:
        server.output = stream
        try:
            return body(server)
        finally:
            server.reset_output()


def _demo(server: IOServer) -> int:
    server.write_line("Output types", OutputType.LIST_TITLE)
    with indented(server):
        for output_type in OutputType:
            server.write_line(output_type.name, output_type)

    server.write_line("Nested block", OutputType.LIST_TITLE)
    with indented(server):
        server.write_line("level 1")
        with indented(server, "--> "):
            server.write_line("level 2", OutputType.CUSTOM_INFO)
        server.write_line("back to level 1")

    server.write_colored_line(
        [
            Segment("status: "),
            Segment("ok", server.select_color(OutputType.ALL_OK)),
            Segment(", errors: "),
            Segment("0", server.select_color(OutputType.ERROR)),
        ],
        OutputType.MOBILE_SUIT_INFO,
    )
    server.write_line()
    return 0


def cli_demo(args):
    """Show every output type, indentation and a multi-colored line."""
    return _run_with_output(args, _demo)


def cli_echo(args):
    """Echo lines from the input back until end of input."""
    def echo(server: IOServer) -> int:
        count = 0
        while True:
            line = server.read_line("", args.default)
            if line is None:
                break
            count += 1
            server.write_line(line, OutputType.ALL_OK)
        server.write_line(f"{count} line(s) read", OutputType.MOBILE_SUIT_INFO)
        return 0

    return _run_with_output(args, echo)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Console I/O server",
        prog="suit-io",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Show the output formats")
    demo_parser.add_argument("-c", "--config", help="Path to JSON config file")
    demo_parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    demo_parser.add_argument("--append", action="store_true", help="Append to the output file")
    demo_parser.set_defaults(func=cli_demo)

    # Echo command
    echo_parser = subparsers.add_parser("echo", help="Echo input lines")
    echo_parser.add_argument("-c", "--config", help="Path to JSON config file")
    echo_parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    echo_parser.add_argument("--append", action="store_true", help="Append to the output file")
    echo_parser.add_argument("-d", "--default", default="", help="Value used for blank lines")
    echo_parser.set_defaults(func=cli_echo)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
