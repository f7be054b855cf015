#!/usr/bin/env python3
""" Command-line entry point for pysh-core. """
import argparse
import logging
import os
import sys

from constants import LOG_LEVEL_VAR
from shell import Shell

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level):
    """ Send log records to stderr at the given level name or number. """
    if isinstance(level, str):
        level = level.upper()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="A small interactive shell with quoting and output redirection"
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_VAR, "WARNING").upper(),
        help=f"logging level (default: ${LOG_LEVEL_VAR} or WARNING)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="shorthand for --log-level DEBUG"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging("DEBUG" if args.debug else args.log_level)
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())
