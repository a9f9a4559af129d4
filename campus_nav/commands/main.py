# -*- coding: utf-8 -*-
"""``campus_nav`` command line entry point.

Subcommands are plugins registered under the ``campus_nav.actions`` entry
point group; each one receives the remaining arguments and returns an exit
status.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import EntryPoints
from importlib.metadata import entry_points

import campus_nav

logger = logging.getLogger(__name__)

COMMANDS_GROUP = "campus_nav.actions"


def build_parser(commands: EntryPoints) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus_nav",
        description="Offline campus routing and building hit-testing",
        epilog="Run `campus_nav <command> --help` for the options of a command.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {campus_nav.__version__}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the diagnostics written to stderr",
    )
    parser.add_argument("command", choices=sorted(commands.names))
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    commands = entry_points(group=COMMANDS_GROUP)
    parsed_args = build_parser(commands).parse_args(argv)

    logging.basicConfig(
        level=parsed_args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    command_fn = commands[parsed_args.command].load()
    logger.debug("Running `%s` with %s", parsed_args.command, parsed_args.args)
    return command_fn(parsed_args.args)
