# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import logging
import os
import time
from pathlib import Path
from typing import Any

from .argparsing import get_parser
from .block_files import block_json_path, block_hex_path, read_block_json, read_block_hex
from .constants import (
    BLOCKS_DIR_VARNAME,
    BLOCK_HEIGHT_VARNAME,
    DEFAULT_BLOCKS_DIR,
    DEFAULT_BLOCK_HEIGHT,
    ITERATIONS,
    LABEL_HEX,
    LABEL_HEX2,
    LABEL_JSON,
)
from .deserializer import hex_decode, hex_to_bytes, parse_block, parse_json_block
from .logging_client import set_logging_level, setup_console_logging
from .measure import Clock, measure

logger = logging.getLogger("blockbench-runner")


DEFAULT_ENV_VARS = [
    (BLOCKS_DIR_VARNAME, DEFAULT_BLOCKS_DIR, "blocks_dir"),
    (BLOCK_HEIGHT_VARNAME, DEFAULT_BLOCK_HEIGHT, "height"),
]


def get_env_vars() -> dict[str, Any]:
    env_vars = {}
    for varname, vardefault, configname in DEFAULT_ENV_VARS:
        varvalue = vardefault
        if varname in os.environ:
            varvalue = type(vardefault)(os.environ[varname])
        env_vars[configname] = varvalue
    return env_vars


def parse_args(argv: list[str] | None = None) -> dict[str, Any]:
    parser = get_parser()
    args = parser.parse_args(argv)

    config_options = args.__dict__
    config_options = {
        key: value for key, value in config_options.items() if value is not None
    }
    return config_options


def setup(argv: list[str] | None = None) -> dict[str, Any]:
    config = {}
    config.update(get_env_vars())
    config.update(parse_args(argv))  # overrides
    set_logging_level(logging.WARNING, config.get("verbosity"))
    setup_console_logging()
    return config


def run(blocks_dir: Path, height: int, iterations: int = ITERATIONS,
        clock: Clock = time.perf_counter) -> dict[str, list[float]]:
    """Each file is read outside of the timed region. For the hex benchmarks the hex -> bytes
    conversion is part of what gets timed, for json only `json.loads` is."""
    results: dict[str, list[float]] = {}

    json_path = block_json_path(blocks_dir, height)
    data_json = read_block_json(json_path)
    results[LABEL_JSON] = measure(LABEL_JSON, iterations,
        lambda: parse_json_block(data_json), clock)

    hex_path = block_hex_path(blocks_dir, height)
    data_hex = read_block_hex(hex_path)
    results[LABEL_HEX] = measure(LABEL_HEX, iterations,
        lambda: parse_block(hex_to_bytes(data_hex)), clock)
    results[LABEL_HEX2] = measure(LABEL_HEX2, iterations,
        lambda: parse_block(hex_decode(data_hex)), clock)
    return results


def main(argv: list[str] | None = None) -> None:
    config = setup(argv)
    logger.info(f"Benchmarking block {config['height']} from {config['blocks_dir']}")
    run(Path(config["blocks_dir"]), config["height"], config["iterations"])
