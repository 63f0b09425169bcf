# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

__all__ = [
    "measure",
    "summarize",
    "TimingSummary",
    "parse_block",
    "parse_json_block",
    "TruncatedBlockError",
    "run",
]

from .measure import measure, summarize, TimingSummary
from .deserializer import parse_block, parse_json_block, TruncatedBlockError
from .runner import run
