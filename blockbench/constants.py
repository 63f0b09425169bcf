# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import os

ITERATIONS = 100
BLOCK_HEADER_LENGTH = 80

# The original harness was always run against this mainnet block
DEFAULT_BLOCK_HEIGHT = 623200
DEFAULT_BLOCKS_DIR = os.path.join(os.getcwd(), "blocks")

JSON_EXTENSION = ".json"
HEX_EXTENSION = ".hex"

LOGGING_FORMAT = "%(asctime)s %(levelname)s %(message)s"

LOGGING_LEVEL_VARNAME = "logging_level"
BLOCKS_DIR_VARNAME = "BLOCKS_DIR"
BLOCK_HEIGHT_VARNAME = "BLOCK_HEIGHT"

LABEL_JSON = "JSON"
LABEL_HEX = "HEX"
LABEL_HEX2 = "HEX2"
