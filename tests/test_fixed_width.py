import base64

import pytest
from ethereum_types.bytes import Bytes32

from algotx.exceptions import DecodeError, FieldLengthError
from algotx.utils.fixed_width import (
    b64_to_bytes,
    b64_to_bytes32,
    bytes_to_bytes32,
    check_byte_budget,
)


def test_b64_to_bytes() -> None:
    assert b64_to_bytes("arg", "aGVsbG8=") == b"hello"


def test_b64_to_bytes_empty() -> None:
    assert b64_to_bytes("arg", "") == b""


@pytest.mark.parametrize("value", ["not base64!", "aGVsbG8", "aGV*bG8="])
def test_b64_to_bytes_malformed(value: str) -> None:
    with pytest.raises(DecodeError) as exc_info:
        b64_to_bytes("arg", value)
    assert "arg" in str(exc_info.value)


def test_b64_to_bytes32() -> None:
    raw = bytes(range(32))
    value = b64_to_bytes32("vote_key", base64.b64encode(raw).decode())
    assert isinstance(value, Bytes32)
    assert value == raw


@pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
def test_b64_to_bytes32_wrong_length(length: int) -> None:
    encoded = base64.b64encode(b"\x01" * length).decode()
    with pytest.raises(FieldLengthError) as exc_info:
        b64_to_bytes32("vote_key", encoded)
    assert exc_info.value.field == "vote_key"
    assert exc_info.value.limit == 32
    assert exc_info.value.value == encoded


def test_field_length_error_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        b64_to_bytes32("selection_key", base64.b64encode(b"short").decode())


def test_bytes_to_bytes32() -> None:
    assert bytes_to_bytes32("genesis_hash", b"\xff" * 32) == b"\xff" * 32


def test_bytes_to_bytes32_wrong_length() -> None:
    with pytest.raises(FieldLengthError):
        bytes_to_bytes32("genesis_hash", b"\xff" * 33)


@pytest.mark.parametrize(
    "value, limit",
    [("", 8), ("ABCDEFGH", 8), (b"\x00" * 1024, 1024), ("é" * 4, 8)],
)
def test_check_byte_budget_within(value: str, limit: int) -> None:
    check_byte_budget("unit_name", value, limit)


@pytest.mark.parametrize(
    "value, limit",
    [("ABCDEFGHI", 8), (b"\x00" * 1025, 1024), ("é" * 5, 8)],
)
def test_check_byte_budget_exceeded(value: str, limit: int) -> None:
    with pytest.raises(FieldLengthError) as exc_info:
        check_byte_budget("unit_name", value, limit)
    assert exc_info.value.field == "unit_name"
    assert exc_info.value.limit == limit
    assert "unit_name" in str(exc_info.value)
