# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import logging
import os
import sys

from .constants import LOGGING_FORMAT, LOGGING_LEVEL_VARNAME

CONSOLE_HANDLER_NAME = "blockbench-console"

LOGGING_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "critical": logging.CRITICAL,
    "debug": logging.DEBUG,
    "error": logging.ERROR,
}


def set_logging_level(logging_level: int, verbosity: str | None = None) -> None:
    """`verbosity` (from the command line) takes precedence over the environment variable"""
    if verbosity is not None:
        logging_level = LOGGING_LEVELS[verbosity]
    elif LOGGING_LEVEL_VARNAME in os.environ:
        logging_level_name = os.environ[LOGGING_LEVEL_VARNAME].lower()
        if logging_level_name not in LOGGING_LEVELS:
            print(
                f"Environment variable '{LOGGING_LEVEL_VARNAME}' invalid. "
                f"Must be one of {LOGGING_LEVELS.keys()}"
            )
            sys.exit(1)
        logging_level = LOGGING_LEVELS[logging_level_name]
    logging.root.setLevel(logging_level)


def setup_console_logging() -> None:
    if any(h.get_name() == CONSOLE_HANDLER_NAME for h in logging.root.handlers):
        return

    # stderr so that the report on stdout can be redirected on its own
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOGGING_FORMAT))
    logging.root.addHandler(handler)
