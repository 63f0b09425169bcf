# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import os
from pathlib import Path


MODULE_DIR = Path(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = MODULE_DIR / "data"

os.environ.pop("logging_level", None)
os.environ.pop("BLOCKS_DIR", None)
os.environ.pop("BLOCK_HEIGHT", None)

with open(DATA_DIR / "block0.json", "r") as f:
    TEST_BLOCK_0_JSON = f.read()

with open(DATA_DIR / "block0.hex", "r") as f:
    TEST_BLOCK_0_HEX = f.read().strip()

GENESIS_BLOCK_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
GENESIS_MERKLE_ROOT = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"


class FakeClock:
    """Advances by the next entry of `steps` (in seconds) on every second call so that each
    before/after pair of readings is `steps[i]` apart"""

    def __init__(self, steps: list[float]) -> None:
        self.steps = list(steps)
        self.now = 0.0
        self.calls = 0

    def __call__(self) -> float:
        if self.calls % 2 == 1:
            self.now += self.steps[self.calls // 2]
        self.calls += 1
        return self.now
