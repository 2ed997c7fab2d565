"""
Fixed-Width Field Codec
^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Keys and hashes travel as base64 strings but are stored in fixed 32 byte
arrays. Decoding either yields an array of exactly the right width or raises;
there is no truncation or padding.
"""
import base64
import binascii
from typing import Union

from ethereum_types.bytes import Bytes, Bytes32

from ..exceptions import DecodeError, FieldLengthError

FIXED_WIDTH = 32


def b64_to_bytes(field: str, value: str) -> Bytes:
    """
    Strictly decode a base64 string.

    Parameters
    ----------
    field :
        Name of the parameter, used in error messages.
    value :
        The base64 payload.

    Returns
    -------
    decoded : `bytes`
        The decoded payload.
    """
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, TypeError, ValueError) as e:
        raise DecodeError(f"{field}: malformed base64 {value!r}") from e


def b64_to_bytes32(field: str, value: str) -> Bytes32:
    """
    Decode a base64 string into exactly 32 bytes.

    Parameters
    ----------
    field :
        Name of the parameter, used in error messages.
    value :
        The base64 payload.

    Returns
    -------
    decoded : `ethereum_types.bytes.Bytes32`
        The decoded fixed-width value.
    """
    return bytes_to_bytes32(field, b64_to_bytes(field, value), original=value)


def bytes_to_bytes32(
    field: str, value: Bytes, original: Union[str, Bytes, None] = None
) -> Bytes32:
    """
    Require `value` to be exactly 32 bytes long.
    """
    if len(value) != FIXED_WIDTH:
        raise FieldLengthError(
            field,
            value if original is None else original,
            FIXED_WIDTH,
            exact=True,
        )
    return Bytes32(value)


def check_byte_budget(field: str, value: Union[str, Bytes], limit: int) -> None:
    """
    Reject `value` if its encoded length exceeds `limit` bytes. Strings are
    measured in UTF-8.
    """
    encoded = value.encode("utf-8") if isinstance(value, str) else value
    if len(encoded) > limit:
        raise FieldLengthError(field, value, limit)
