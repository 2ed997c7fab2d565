"""
Transaction Fees
^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Fees are charged per byte of the *signed* encoding. The size of a
transaction is therefore measured before its real signature exists by
signing a copy with a disposable key of the same scheme. Whatever the
computation path, the resulting fee never drops below the protocol minimum.
"""
from ethereum_types.numeric import U64, Uint

from .exceptions import InvalidFieldError
from .ledger_types import MicroAlgos
from .logger import get_logger
from .params import DEFAULT_PROTOCOL_PARAMETERS, ProtocolParameters
from .signing import generate_throwaway_key, sign_transaction
from .transactions import T, Transaction, transaction_type, with_fee

logger = get_logger(__name__)


def estimate_size(tx: Transaction) -> Uint:
    """
    Number of bytes `tx` occupies once canonically encoded and signed.

    The throwaway key only lives for the duration of this call.

    Parameters
    ----------
    tx :
        Fully assembled transaction.

    Returns
    -------
    size : `ethereum_types.numeric.Uint`
        Length of the signed encoding.
    """
    _, signed = sign_transaction(generate_throwaway_key(), tx)
    return Uint(len(signed))


def normalize_fee(
    fee: int, params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS
) -> MicroAlgos:
    """
    Clamp `fee` to the protocol minimum.
    """
    fee = max(int(fee), params.min_txn_fee)
    if fee > int(U64.MAX_VALUE):
        raise InvalidFieldError("fee", f"{fee} exceeds {int(U64.MAX_VALUE)}")
    return MicroAlgos(fee)


def per_byte_fee(
    size: int,
    fee_per_byte: int,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> MicroAlgos:
    """
    Fee for `size` bytes at `fee_per_byte`, subject to the minimum.
    """
    return normalize_fee(int(size) * int(fee_per_byte), params)


def apply_per_byte_fee(
    tx: T,
    fee_per_byte: int,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> T:
    """
    Return `tx` with the fee its signed size costs at `fee_per_byte`.
    """
    size = estimate_size(tx)
    fee = per_byte_fee(size, fee_per_byte, params)
    logger.debug(
        "%s transaction: %d signed bytes at %d per byte, fee %d",
        transaction_type(tx).value,
        int(size),
        fee_per_byte,
        int(fee),
    )
    return with_fee(tx, fee)


def apply_flat_fee(
    tx: T, fee: int, params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS
) -> T:
    """
    Return `tx` with a flat `fee`, raised to the minimum if below it.
    """
    return with_fee(tx, normalize_fee(fee, params))
