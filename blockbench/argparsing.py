# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import argparse

from .constants import ITERATIONS


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="time parsing of a bitcoin block from its json and hex encodings")
    parser.add_argument(
        "--blocks-dir",
        action="store",
        dest="blocks_dir",
        type=str,
        help="directory holding <height>.json and <height>.hex (defaults to ./blocks or "
        "the BLOCKS_DIR environment variable)",
    )
    parser.add_argument(
        "--height",
        action="store",
        dest="height",
        type=int,
        help="height of the block to load; default=623200 (or BLOCK_HEIGHT)",
    )
    parser.add_argument(
        "--iterations",
        action="store",
        dest="iterations",
        default=ITERATIONS,
        type=positive_int,
        help=f"number of timed parses per encoding; default={ITERATIONS}",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        action="store",
        dest="verbosity",
        const="info",
        nargs=argparse.OPTIONAL,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Set logging verbosity",
    )
    return parser
