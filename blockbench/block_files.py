# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import logging
from pathlib import Path

from .constants import JSON_EXTENSION, HEX_EXTENSION

logger = logging.getLogger("blockbench-block-files")


def block_json_path(blocks_dir: Path, height: int) -> Path:
    return Path(blocks_dir) / f"{height}{JSON_EXTENSION}"


def block_hex_path(blocks_dir: Path, height: int) -> Path:
    return Path(blocks_dir) / f"{height}{HEX_EXTENSION}"


def read_block_json(filepath: Path) -> str:
    with open(filepath, "r", encoding="utf-8") as f:
        data = f.read()
    logger.debug(f"Read {len(data)} bytes of block json from {filepath}")
    return data


def read_block_hex(filepath: Path) -> str:
    # Node dumps end with a trailing newline
    with open(filepath, "r", encoding="utf-8") as f:
        data = f.read().strip()
    logger.debug(f"Read {len(data)} hex symbols from {filepath}")
    return data
