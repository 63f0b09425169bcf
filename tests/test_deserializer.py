import json

import bitcoinx
import pytest
from bitcoinx import hash_to_hex_str

from blockbench.measure import measure
from blockbench.deserializer import hex_decode, hex_to_bytes, parse_block, parse_json_block, \
    TruncatedBlockError

from .conftest import TEST_BLOCK_0_HEX, TEST_BLOCK_0_JSON, GENESIS_BLOCK_HASH, \
    GENESIS_MERKLE_ROOT


def test_parse_json_block() -> None:
    block = parse_json_block(TEST_BLOCK_0_JSON)
    assert block["hash"] == GENESIS_BLOCK_HASH
    assert block["height"] == 0
    assert block["nTx"] == len(block["tx"]) == 1


def test_parse_json_block_malformed() -> None:
    with pytest.raises(json.JSONDecodeError):
        parse_json_block('{"height": 623200')


def test_parse_block_genesis() -> None:
    raw = hex_to_bytes(TEST_BLOCK_0_HEX)
    assert len(raw) == 285

    block = parse_block(raw)
    version, prev_hash, merkle_root, timestamp, bits, nonce = block.header
    assert version == 1
    assert prev_hash == bytes(32)
    assert hash_to_hex_str(merkle_root) == GENESIS_MERKLE_ROOT
    assert timestamp == 1231006505
    assert bits == 0x1d00ffff
    assert nonce == 2083236893
    assert hash_to_hex_str(bitcoinx.double_sha256(raw[0:80])) == GENESIS_BLOCK_HASH

    assert len(block.transactions) == 1
    assert hash_to_hex_str(block.transactions[0].hash()) == GENESIS_MERKLE_ROOT


def test_parse_block_one_byte_is_not_a_header() -> None:
    with pytest.raises(TruncatedBlockError):
        parse_block(hex_to_bytes("00"))


def test_hex_decode_matches_fromhex() -> None:
    assert hex_decode(TEST_BLOCK_0_HEX) == hex_to_bytes(TEST_BLOCK_0_HEX)
    assert hex_decode("") == b""
    assert hex_decode("00ff0a") == b"\x00\xff\x0a"


def test_hex_decode_parses_genesis() -> None:
    block = parse_block(hex_decode(TEST_BLOCK_0_HEX))
    assert len(block.transactions) == 1


@pytest.mark.parametrize("text", ["0g", "AB", "0 ", "é0"])
def test_hex_decode_rejects_non_hex_symbols(text: str) -> None:
    with pytest.raises(ValueError, match="Not hex symbol"):
        hex_decode(text)


def test_hex_decode_rejects_odd_length() -> None:
    with pytest.raises(ValueError, match="Odd-length"):
        hex_decode("abc")


def test_measure_one_byte_block_fails_on_first_iteration(capsys) -> None:
    calls = []

    def work() -> None:
        calls.append(1)
        parse_block(hex_to_bytes("00"))

    with pytest.raises(TruncatedBlockError):
        measure("HEX", 100, work)
    assert len(calls) == 1
    assert capsys.readouterr().out == ""
