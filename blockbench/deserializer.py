# Copyright (c) 2020-2023, Hayden Donnelly
#
# All rights reserved.
#
# Licensed under the MIT License; see LICENCE for details.

import json
from io import BytesIO
from typing import Any, NamedTuple

from bitcoinx import read_varint, unpack_header, Tx

from .constants import BLOCK_HEADER_LENGTH


class TruncatedBlockError(ValueError):
    pass


class ParsedBlock(NamedTuple):
    header: tuple[int, bytes, bytes, int, int, int]
    transactions: list[Tx]


def parse_json_block(text: str) -> Any:
    return json.loads(text)


def hex_to_bytes(text: str) -> bytes:
    return bytes.fromhex(text)


def _make_hex_table() -> list[int]:
    table = [-1] * 256
    for i, sym in enumerate(b"0123456789abcdef"):
        table[sym] = i
    return table


HEX_TABLE = _make_hex_table()


def hex_decode(text: str) -> bytearray:
    """Lowercase only. This is the hand-rolled alternative to `bytes.fromhex` for the HEX2
    benchmark"""
    data = text.encode("ascii", errors="replace")
    if len(data) % 2 != 0:
        raise ValueError(f"Odd-length hex string: {len(data)} symbols")

    table = HEX_TABLE
    result = bytearray(len(data) // 2)
    for pos in range(0, len(data), 2):
        high = table[data[pos]]
        low = table[data[pos + 1]]
        if high == -1 or low == -1:
            bad = text[pos] if high == -1 else text[pos + 1]
            raise ValueError(f"Not hex symbol: {bad}")
        result[pos // 2] = (high << 4) + low
    return result


def parse_block(raw: bytes | bytearray) -> ParsedBlock:
    f = BytesIO(raw)
    raw_header = f.read(BLOCK_HEADER_LENGTH)
    if len(raw_header) != BLOCK_HEADER_LENGTH:
        raise TruncatedBlockError(f"Block header requires {BLOCK_HEADER_LENGTH} bytes, "
            f"got {len(raw_header)}")

    tx_count = read_varint(f.read)
    transactions = []
    for tx_pos in range(tx_count):
        transactions.append(Tx.read(f.read))
    return ParsedBlock(unpack_header(raw_header), transactions)
