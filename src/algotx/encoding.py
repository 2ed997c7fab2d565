"""
Canonical Encoding
^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Transactions are serialized as canonical msgpack: maps with short protocol
field names, keys in sorted order, and every zero-valued field omitted.
The same encoding, prefixed with a domain separator, is what gets hashed into
transaction and group identifiers and what gets signed.

The wire format itself belongs to `algosdk`. Records are converted into
`algosdk.transaction` objects here, and the SDK produces the encodings,
identifiers and group digests from them.
"""

import base64
from typing import List, Optional, Sequence

from algosdk import constants, encoding, error
from algosdk import transaction as sdk
from ethereum_types.bytes import Bytes32

from .address import encode_address
from .exceptions import EncodingError, TransactionTypeError
from .ledger_types import (
    ZERO_ADDRESS,
    ZERO_DIGEST,
    Address,
    Hash32,
    Signature,
)
from .transactions import (
    ApplicationCallTransaction,
    AssetConfigTransaction,
    AssetFreezeTransaction,
    AssetTransferTransaction,
    Header,
    KeyRegistrationTransaction,
    PaymentTransaction,
    StateSchema,
    Transaction,
    transaction_type,
)

TX_PREFIX = constants.txid_prefix

_SDK_ERRORS = (
    TypeError,
    ValueError,
    IndexError,
    OverflowError,
    error.WrongAmountType,
    error.WrongNoteType,
    error.WrongNoteLength,
    error.TransactionGroupSizeError,
)


def _optional_address(address: Address) -> Optional[str]:
    if address == ZERO_ADDRESS:
        return None
    return encode_address(address)


def _optional_key(key: Bytes32) -> Optional[str]:
    if not any(key):
        return None
    return base64.b64encode(bytes(key)).decode()


def _state_schema(schema: StateSchema) -> sdk.StateSchema:
    return sdk.StateSchema(int(schema.num_uint), int(schema.num_byte_slice))


def _suggested_params(header: Header) -> sdk.SuggestedParams:
    return sdk.SuggestedParams(
        fee=int(header.fee),
        first=int(header.first_valid),
        last=int(header.last_valid),
        gh=base64.b64encode(bytes(header.genesis_hash)).decode(),
        gen=header.genesis_id or None,
        flat_fee=True,
    )


def _sdk_transaction(tx: Transaction) -> sdk.Transaction:
    sp = _suggested_params(tx.header)
    sender = encode_address(tx.header.sender)
    note = bytes(tx.header.note) or None

    if isinstance(tx, PaymentTransaction):
        return sdk.PaymentTxn(
            sender,
            sp,
            encode_address(tx.receiver),
            int(tx.amount),
            close_remainder_to=_optional_address(tx.close_remainder_to),
            note=note,
        )
    elif isinstance(tx, KeyRegistrationTransaction):
        return sdk.KeyregTxn(
            sender,
            sp,
            _optional_key(tx.vote_pk),
            _optional_key(tx.selection_pk),
            int(tx.vote_first),
            int(tx.vote_last),
            int(tx.vote_key_dilution),
            note=note,
        )
    elif isinstance(tx, AssetConfigTransaction):
        params = tx.params
        return sdk.AssetConfigTxn(
            sender,
            sp,
            index=int(tx.config_asset),
            total=int(params.total) or None,
            default_frozen=params.default_frozen,
            unit_name=params.unit_name or None,
            asset_name=params.asset_name or None,
            manager=_optional_address(params.manager),
            reserve=_optional_address(params.reserve),
            freeze=_optional_address(params.freeze),
            clawback=_optional_address(params.clawback),
            note=note,
            strict_empty_address_check=False,
        )
    elif isinstance(tx, AssetTransferTransaction):
        return sdk.AssetTransferTxn(
            sender,
            sp,
            encode_address(tx.asset_receiver),
            int(tx.asset_amount),
            int(tx.xfer_asset),
            close_assets_to=_optional_address(tx.asset_close_to),
            revocation_target=_optional_address(tx.asset_sender),
            note=note,
        )
    elif isinstance(tx, AssetFreezeTransaction):
        return sdk.AssetFreezeTxn(
            sender,
            sp,
            int(tx.freeze_asset),
            encode_address(tx.freeze_account),
            tx.asset_frozen,
            note=note,
        )
    elif isinstance(tx, ApplicationCallTransaction):
        return sdk.ApplicationCallTxn(
            sender,
            sp,
            int(tx.application_id),
            sdk.OnComplete(int(tx.on_completion)),
            local_schema=_state_schema(tx.local_state_schema),
            global_schema=_state_schema(tx.global_state_schema),
            approval_program=bytes(tx.approval_program),
            clear_program=bytes(tx.clear_state_program),
            app_args=[bytes(arg) for arg in tx.application_args],
            accounts=[encode_address(a) for a in tx.accounts],
            foreign_apps=[int(app) for app in tx.foreign_apps],
            foreign_assets=[int(asset) for asset in tx.foreign_assets],
            note=note,
        )
    else:
        raise TransactionTypeError(type(tx))


def to_sdk_transaction(tx: Transaction) -> sdk.Transaction:
    """
    Convert `tx` into the equivalent `algosdk.transaction.Transaction`.

    Parameters
    ----------
    tx :
        Record to convert.

    Returns
    -------
    sdk_txn : `algosdk.transaction.Transaction`
        SDK object carrying the same fields, group included.
    """
    transaction_type(tx)
    try:
        sdk_txn = _sdk_transaction(tx)
    except _SDK_ERRORS as e:
        raise EncodingError(
            f"cannot convert {transaction_type(tx).value} transaction: {e}"
        ) from e
    if tx.header.group != ZERO_DIGEST:
        sdk_txn.group = bytes(tx.header.group)
    return sdk_txn


def _msgpack(obj: object) -> bytes:
    try:
        return base64.b64decode(encoding.msgpack_encode(obj))
    except _SDK_ERRORS as e:
        raise EncodingError(f"msgpack encoding failed: {e}") from e


def encode_transaction(tx: Transaction) -> bytes:
    """
    Canonically encode an unsigned transaction.
    """
    return _msgpack(to_sdk_transaction(tx))


def encode_signed_transaction(tx: Transaction, signature: Signature) -> bytes:
    """
    Canonically encode `tx` together with its signature.

    Parameters
    ----------
    tx :
        The transaction that was signed.
    signature :
        Signature over `bytes_to_sign(tx)`.

    Returns
    -------
    encoded : `bytes`
        The signed transaction as it would be submitted.
    """
    signed = sdk.SignedTransaction(
        to_sdk_transaction(tx), base64.b64encode(bytes(signature)).decode()
    )
    return _msgpack(signed)


def bytes_to_sign(tx: Transaction) -> bytes:
    """
    Domain-separated encoding that signatures and identifiers commit to.
    """
    return TX_PREFIX + encode_transaction(tx)


def transaction_id_digest(tx: Transaction) -> Hash32:
    """
    Raw 32 byte identifier of `tx`.
    """
    return Hash32(encoding.checksum(bytes_to_sign(tx)))


def transaction_id(tx: Transaction) -> str:
    """
    Identifier of `tx` as the unpadded base32 string explorers display.
    """
    return to_sdk_transaction(tx).get_txid()


def compute_group_id(txns: Sequence[Transaction]) -> Hash32:
    """
    Digest binding the ordered `txns` into one atomic group.

    The digest commits to every transaction identifier in order, so
    permuting the input yields a different group.

    Parameters
    ----------
    txns :
        Transactions of the group, in execution order.

    Returns
    -------
    group : `algotx.ledger_types.Hash32`
        The group identifier.
    """
    sdk_txns: List[sdk.Transaction] = [to_sdk_transaction(tx) for tx in txns]
    try:
        return Hash32(sdk.calculate_group_id(sdk_txns))
    except _SDK_ERRORS as e:
        raise EncodingError(f"cannot compute group id: {e}") from e
