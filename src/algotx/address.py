"""
Address Codec
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Accounts are displayed as 58 character base32 strings carrying a 4 byte
checksum. The checksum arithmetic is delegated to `algosdk.encoding`; this
module only translates its failures into `AddressDecodeError` and applies the
"empty string means absent" convention for optional address fields.
"""
import binascii

from algosdk import encoding
from algosdk.error import WrongChecksumError, WrongKeyLengthError

from .exceptions import AddressDecodeError
from .ledger_types import ZERO_ADDRESS, Address


def decode_address(field: str, value: str) -> Address:
    """
    Decode a checksummed address string into its 32 byte form.

    Parameters
    ----------
    field :
        Name of the parameter, used in error messages.
    value :
        The human-readable address.

    Returns
    -------
    address : `algotx.ledger_types.Address`
        The decoded public key.
    """
    if not isinstance(value, str):
        raise AddressDecodeError(field, value, "expected a string")
    if value == "":
        raise AddressDecodeError(field, value, "address is required")
    try:
        decoded = encoding.decode_address(value)
    except WrongChecksumError as e:
        raise AddressDecodeError(field, value, "bad checksum") from e
    except WrongKeyLengthError as e:
        raise AddressDecodeError(field, value, "bad length") from e
    except (binascii.Error, ValueError) as e:
        raise AddressDecodeError(field, value, "not base32") from e
    return Address(decoded)


def decode_optional_address(field: str, value: str) -> Address:
    """
    Decode an optional address field. An empty string yields the zero
    address and is never handed to the decoder.
    """
    if value == "":
        return ZERO_ADDRESS
    return decode_address(field, value)


def encode_address(address: Address) -> str:
    """
    Encode a 32 byte address as a checksummed string.
    """
    return encoding.encode_address(bytes(address))
