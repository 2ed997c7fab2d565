"""
Transaction Builders
^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

One constructor per transaction kind. Each takes human-facing parameters,
validates all of them before doing any work (addresses first, then the
genesis hash, then byte-budgeted strings and keys, then numeric ranges),
assembles the record and prices it from its signed size at the given rate
per byte.

Every constructor has a `_with_flat_fee` twin which validates and assembles
the same record and then sets a flat fee instead of measuring the record.
Either way the fee is never below the protocol minimum.

Optional address parameters use the empty string for "absent"; such fields
hold the zero address.
"""
from typing import Optional, Sequence, Tuple, Union

from ethereum_types.bytes import Bytes, Bytes32
from ethereum_types.numeric import U64

from .address import decode_address, decode_optional_address
from .exceptions import InvalidFieldError, MissingRequiredFieldError
from .fees import apply_flat_fee, apply_per_byte_fee
from .ledger_types import ZERO_DIGEST, Address, Digest
from .params import DEFAULT_PROTOCOL_PARAMETERS, ProtocolParameters
from .transactions import (
    EMPTY_STATE_SCHEMA,
    ApplicationCallTransaction,
    AssetConfigTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    Header,
    KeyRegistrationTransaction,
    OnCompletion,
    PaymentTransaction,
    StateSchema,
)
from .utils.fixed_width import (
    b64_to_bytes32,
    bytes_to_bytes32,
    check_byte_budget,
)

GenesisHash = Union[Bytes, str]


def _u64(field: str, value: int) -> U64:
    try:
        return U64(value)
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidFieldError(
            field, f"{value!r} is not an unsigned 64-bit integer"
        ) from e


def _asset_index(field: str, value: int) -> U64:
    index = _u64(field, value)
    if index == 0:
        raise InvalidFieldError(field, "an existing asset is required")
    return index


def _on_completion(value: int) -> OnCompletion:
    try:
        return OnCompletion(value)
    except ValueError as e:
        raise InvalidFieldError(
            "on_completion", f"{value!r} is not an application action"
        ) from e


def _app_arg(field: str, value: Bytes) -> Bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise InvalidFieldError(
            field, f"expected bytes, got {type(value).__name__}"
        )
    return bytes(value)


def _genesis_hash(value: Optional[GenesisHash]) -> Digest:
    """
    Accept the genesis hash either raw or base64-encoded.
    """
    if value is None or len(value) == 0:
        raise MissingRequiredFieldError("genesis_hash")
    if isinstance(value, str):
        return Digest(b64_to_bytes32("genesis_hash", value))
    return Digest(bytes_to_bytes32("genesis_hash", bytes(value)))


def _note(value: Optional[Bytes], params: ProtocolParameters) -> Bytes:
    note = b"" if value is None else bytes(value)
    check_byte_budget("note", note, params.max_note_bytes)
    return note


def _optional_key(field: str, value: str) -> Bytes32:
    if value == "":
        return ZERO_DIGEST
    return b64_to_bytes32(field, value)


def _management_addresses(
    manager: str, reserve: str, freeze: str, clawback: str
) -> Tuple[Address, Address, Address, Address]:
    return (
        decode_optional_address("manager", manager),
        decode_optional_address("reserve", reserve),
        decode_optional_address("freeze", freeze),
        decode_optional_address("clawback", clawback),
    )


def _header(
    sender: Address,
    fee: int,
    first_round: int,
    last_round: int,
    note: Bytes,
    genesis_id: str,
    genesis_hash: Digest,
) -> Header:
    first_valid = _u64("first_round", first_round)
    last_valid = _u64("last_round", last_round)
    if first_valid > last_valid:
        raise InvalidFieldError(
            "last_round",
            f"{last_valid} precedes first_round {first_valid}",
        )
    return Header(
        sender=sender,
        fee=_u64("fee", fee),
        first_valid=first_valid,
        last_valid=last_valid,
        note=note,
        genesis_id=genesis_id,
        genesis_hash=genesis_hash,
        group=ZERO_DIGEST,
    )


#
# Payments
#


def _payment(
    sender: str,
    receiver: str,
    fee: int,
    amount: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    close_remainder_to: str,
    genesis_id: str,
    genesis_hash: GenesisHash,
    params: ProtocolParameters,
) -> PaymentTransaction:
    sender_address = decode_address("sender", sender)
    receiver_address = decode_address("receiver", receiver)
    close_address = decode_optional_address(
        "close_remainder_to", close_remainder_to
    )
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)

    return PaymentTransaction(
        header=_header(
            sender_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        receiver=receiver_address,
        amount=_u64("amount", amount),
        close_remainder_to=close_address,
    )


def make_payment_txn(
    sender: str,
    receiver: str,
    fee_per_byte: int,
    amount: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    close_remainder_to: str,
    genesis_id: str,
    genesis_hash: GenesisHash,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> PaymentTransaction:
    """
    Build a payment priced per byte.

    Parameters
    ----------
    sender :
        Checksummed address paying `amount` and the fee.
    receiver :
        Checksummed address receiving `amount`.
    fee_per_byte :
        Fee rate in microalgos per byte of the signed transaction, as
        suggested by the node.
    amount :
        Microalgos to transfer.
    first_round :
        First round the transaction is valid in.
    last_round :
        Last round the transaction is valid in.
    note :
        Arbitrary bytes, or `None`.
    close_remainder_to :
        Address receiving the sender's remaining balance as the account is
        closed, or the empty string.
    genesis_id :
        Network identifier, e.g. ``"testnet-v1.0"``.
    genesis_hash :
        Genesis hash of the network, raw or base64-encoded.
    params :
        Protocol parameters.

    Returns
    -------
    tx : `PaymentTransaction`
        The unsigned payment.
    """
    tx = _payment(
        sender,
        receiver,
        fee_per_byte,
        amount,
        first_round,
        last_round,
        note,
        close_remainder_to,
        genesis_id,
        genesis_hash,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_payment_txn_with_flat_fee(
    sender: str,
    receiver: str,
    fee: int,
    amount: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    close_remainder_to: str,
    genesis_id: str,
    genesis_hash: GenesisHash,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> PaymentTransaction:
    """
    Build a payment paying the flat `fee`. See `make_payment_txn`.
    """
    tx = _payment(
        sender,
        receiver,
        fee,
        amount,
        first_round,
        last_round,
        note,
        close_remainder_to,
        genesis_id,
        genesis_hash,
        params,
    )
    return apply_flat_fee(tx, fee, params)


#
# Key registration
#


def _key_reg(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    vote_key: str,
    selection_key: str,
    vote_first: int,
    vote_last: int,
    vote_key_dilution: int,
    params: ProtocolParameters,
) -> KeyRegistrationTransaction:
    account_address = decode_address("account", account)
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)
    vote_pk = _optional_key("vote_key", vote_key)
    selection_pk = _optional_key("selection_key", selection_key)

    first_vote = _u64("vote_first", vote_first)
    last_vote = _u64("vote_last", vote_last)
    if first_vote > last_vote:
        raise InvalidFieldError(
            "vote_last", f"{last_vote} precedes vote_first {first_vote}"
        )

    return KeyRegistrationTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        vote_pk=vote_pk,
        selection_pk=selection_pk,
        vote_first=first_vote,
        vote_last=last_vote,
        vote_key_dilution=_u64("vote_key_dilution", vote_key_dilution),
    )


def make_key_reg_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    vote_key: str,
    selection_key: str,
    vote_first: int,
    vote_last: int,
    vote_key_dilution: int,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> KeyRegistrationTransaction:
    """
    Build a key registration priced per byte.

    Parameters
    ----------
    account :
        Checksummed address registering the participation key.
    fee_per_byte :
        Fee rate in microalgos per byte of the signed transaction.
    first_round :
        First round the transaction is valid in. Unrelated to the key's
        own validity range.
    last_round :
        Last round the transaction is valid in.
    note :
        Arbitrary bytes, or `None`.
    genesis_id :
        Network identifier.
    genesis_hash :
        Genesis hash of the network, raw or base64-encoded.
    vote_key :
        Base64 root participation public key. Empty to go offline.
    selection_key :
        Base64 VRF public key. Empty to go offline.
    vote_first :
        First round the participation key is valid in.
    vote_last :
        Last round the participation key is valid in.
    vote_key_dilution :
        Dilution of the two-level participation key.
    params :
        Protocol parameters.

    Returns
    -------
    tx : `KeyRegistrationTransaction`
        The unsigned key registration.
    """
    tx = _key_reg(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        vote_key,
        selection_key,
        vote_first,
        vote_last,
        vote_key_dilution,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_key_reg_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    vote_key: str,
    selection_key: str,
    vote_first: int,
    vote_last: int,
    vote_key_dilution: int,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> KeyRegistrationTransaction:
    """
    Build a key registration paying the flat `fee`. See `make_key_reg_txn`.
    """
    tx = _key_reg(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        vote_key,
        selection_key,
        vote_first,
        vote_last,
        vote_key_dilution,
        params,
    )
    return apply_flat_fee(tx, fee, params)


#
# Asset configuration
#


def _asset_create(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    total: int,
    default_frozen: bool,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    unit_name: str,
    asset_name: str,
    params: ProtocolParameters,
) -> AssetConfigTransaction:
    account_address = decode_address("account", account)
    manager_address, reserve_address, freeze_address, clawback_address = (
        _management_addresses(manager, reserve, freeze, clawback)
    )
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)
    check_byte_budget("unit_name", unit_name, params.max_unit_name_bytes)
    check_byte_budget("asset_name", asset_name, params.max_asset_name_bytes)

    return AssetConfigTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        config_asset=U64(0),
        params=AssetParams(
            total=_u64("total", total),
            default_frozen=bool(default_frozen),
            unit_name=unit_name,
            asset_name=asset_name,
            manager=manager_address,
            reserve=reserve_address,
            freeze=freeze_address,
            clawback=clawback_address,
        ),
    )


def make_asset_create_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    total: int,
    default_frozen: bool,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    unit_name: str,
    asset_name: str,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Build an asset creation priced per byte.

    Parameters
    ----------
    account :
        Checksummed address creating the asset and receiving its supply.
    fee_per_byte :
        Fee rate in microalgos per byte of the signed transaction.
    first_round :
        First round the transaction is valid in.
    last_round :
        Last round the transaction is valid in.
    note :
        Arbitrary bytes, or `None`.
    genesis_id :
        Network identifier.
    genesis_hash :
        Genesis hash of the network, raw or base64-encoded.
    total :
        Total number of units ever issued.
    default_frozen :
        Whether holdings start out frozen.
    manager :
        Address allowed to reconfigure or destroy the asset, or empty.
    reserve :
        Address holding non-minted units, or empty.
    freeze :
        Address allowed to freeze holdings, or empty.
    clawback :
        Address allowed to revoke holdings, or empty.
    unit_name :
        Short unit name, at most `params.max_unit_name_bytes` bytes.
    asset_name :
        Asset name, at most `params.max_asset_name_bytes` bytes.
    params :
        Protocol parameters.

    Returns
    -------
    tx : `AssetConfigTransaction`
        The unsigned asset creation.
    """
    tx = _asset_create(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        total,
        default_frozen,
        manager,
        reserve,
        freeze,
        clawback,
        unit_name,
        asset_name,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_asset_create_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    total: int,
    default_frozen: bool,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    unit_name: str,
    asset_name: str,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Build an asset creation paying the flat `fee`. See
    `make_asset_create_txn`.
    """
    tx = _asset_create(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        total,
        default_frozen,
        manager,
        reserve,
        freeze,
        clawback,
        unit_name,
        asset_name,
        params,
    )
    return apply_flat_fee(tx, fee, params)


def _asset_config(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    params: ProtocolParameters,
) -> AssetConfigTransaction:
    account_address = decode_address("account", account)
    manager_address, reserve_address, freeze_address, clawback_address = (
        _management_addresses(manager, reserve, freeze, clawback)
    )
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)

    return AssetConfigTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        config_asset=_asset_index("index", index),
        params=AssetParams(
            total=U64(0),
            default_frozen=False,
            unit_name="",
            asset_name="",
            manager=manager_address,
            reserve=reserve_address,
            freeze=freeze_address,
            clawback=clawback_address,
        ),
    )


def make_asset_config_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Build a reconfiguration of the management addresses of asset `index`,
    priced per byte. It must be sent by the current manager. An empty
    address clears that role for good.
    """
    tx = _asset_config(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        manager,
        reserve,
        freeze,
        clawback,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_asset_config_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    manager: str,
    reserve: str,
    freeze: str,
    clawback: str,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Like `make_asset_config_txn`, paying the flat `fee`.
    """
    tx = _asset_config(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        manager,
        reserve,
        freeze,
        clawback,
        params,
    )
    return apply_flat_fee(tx, fee, params)


def make_asset_destroy_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Build the destruction of asset `index`, priced per byte. Only succeeds
    on chain when the creator holds the entire supply.
    """
    return make_asset_config_txn(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        "",
        "",
        "",
        "",
        params=params,
    )


def make_asset_destroy_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetConfigTransaction:
    """
    Like `make_asset_destroy_txn`, paying the flat `fee`.
    """
    return make_asset_config_txn_with_flat_fee(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        "",
        "",
        "",
        "",
        params=params,
    )


#
# Asset transfer and freeze
#


def _asset_transfer(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    amount: int,
    receiver: str,
    close_assets_to: str,
    revocation_target: str,
    params: ProtocolParameters,
) -> AssetTransferTransaction:
    account_address = decode_address("account", account)
    receiver_address = decode_address("receiver", receiver)
    close_address = decode_optional_address("close_assets_to", close_assets_to)
    target_address = decode_optional_address(
        "revocation_target", revocation_target
    )
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)

    return AssetTransferTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        xfer_asset=_asset_index("index", index),
        asset_amount=_u64("amount", amount),
        asset_sender=target_address,
        asset_receiver=receiver_address,
        asset_close_to=close_address,
    )


def make_asset_transfer_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    amount: int,
    receiver: str,
    close_assets_to: str = "",
    revocation_target: str = "",
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetTransferTransaction:
    """
    Build a transfer of `amount` units of asset `index`, priced per byte.

    A zero-amount transfer from an account to itself opts the account in to
    the asset. When `revocation_target` is set, `account` must be the
    asset's clawback address and the units are taken from the target.
    `close_assets_to` receives the remaining holding as the sender opts out.
    """
    tx = _asset_transfer(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        amount,
        receiver,
        close_assets_to,
        revocation_target,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_asset_transfer_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    amount: int,
    receiver: str,
    close_assets_to: str = "",
    revocation_target: str = "",
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetTransferTransaction:
    """
    Like `make_asset_transfer_txn`, paying the flat `fee`.
    """
    tx = _asset_transfer(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        amount,
        receiver,
        close_assets_to,
        revocation_target,
        params,
    )
    return apply_flat_fee(tx, fee, params)


def _asset_freeze(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    target: str,
    frozen: bool,
    params: ProtocolParameters,
) -> AssetFreezeTransaction:
    account_address = decode_address("account", account)
    target_address = decode_address("target", target)
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)

    return AssetFreezeTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        freeze_asset=_asset_index("index", index),
        freeze_account=target_address,
        asset_frozen=bool(frozen),
    )


def make_asset_freeze_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    target: str,
    frozen: bool,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetFreezeTransaction:
    """
    Build a freeze (or unfreeze) of `target`'s holding of asset `index`,
    priced per byte. `account` must be the asset's freeze address.
    """
    tx = _asset_freeze(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        target,
        frozen,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_asset_freeze_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    index: int,
    target: str,
    frozen: bool,
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> AssetFreezeTransaction:
    """
    Like `make_asset_freeze_txn`, paying the flat `fee`.
    """
    tx = _asset_freeze(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        index,
        target,
        frozen,
        params,
    )
    return apply_flat_fee(tx, fee, params)


#
# Application calls
#


def _application_call(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    application_id: int,
    on_completion: OnCompletion,
    app_args: Sequence[Bytes],
    accounts: Sequence[str],
    foreign_apps: Sequence[int],
    foreign_assets: Sequence[int],
    local_state_schema: Optional[StateSchema],
    global_state_schema: Optional[StateSchema],
    approval_program: Bytes,
    clear_program: Bytes,
    params: ProtocolParameters,
) -> ApplicationCallTransaction:
    account_address = decode_address("account", account)
    account_addresses = tuple(
        decode_address(f"accounts[{i}]", address)
        for i, address in enumerate(accounts)
    )
    gh = _genesis_hash(genesis_hash)
    note_bytes = _note(note, params)
    args = tuple(
        _app_arg(f"app_args[{i}]", arg) for i, arg in enumerate(app_args)
    )

    return ApplicationCallTransaction(
        header=_header(
            account_address,
            fee,
            first_round,
            last_round,
            note_bytes,
            genesis_id,
            gh,
        ),
        application_id=_u64("application_id", application_id),
        on_completion=_on_completion(on_completion),
        application_args=args,
        accounts=account_addresses,
        foreign_apps=tuple(
            _u64(f"foreign_apps[{i}]", app)
            for i, app in enumerate(foreign_apps)
        ),
        foreign_assets=tuple(
            _u64(f"foreign_assets[{i}]", asset)
            for i, asset in enumerate(foreign_assets)
        ),
        local_state_schema=local_state_schema or EMPTY_STATE_SCHEMA,
        global_state_schema=global_state_schema or EMPTY_STATE_SCHEMA,
        approval_program=bytes(approval_program),
        clear_state_program=bytes(clear_program),
    )


def make_application_call_txn(
    account: str,
    fee_per_byte: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    application_id: int,
    on_completion: OnCompletion,
    app_args: Sequence[Bytes] = (),
    accounts: Sequence[str] = (),
    foreign_apps: Sequence[int] = (),
    foreign_assets: Sequence[int] = (),
    local_state_schema: Optional[StateSchema] = None,
    global_state_schema: Optional[StateSchema] = None,
    approval_program: Bytes = b"",
    clear_program: Bytes = b"",
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> ApplicationCallTransaction:
    """
    Build an application call priced per byte.

    Parameters
    ----------
    account :
        Checksummed address sending the call.
    fee_per_byte :
        Fee rate in microalgos per byte of the signed transaction.
    first_round :
        First round the transaction is valid in.
    last_round :
        Last round the transaction is valid in.
    note :
        Arbitrary bytes, or `None`.
    genesis_id :
        Network identifier.
    genesis_hash :
        Genesis hash of the network, raw or base64-encoded.
    application_id :
        Application being called, or 0 to create one.
    on_completion :
        Side effect of the call once confirmed.
    app_args :
        Arguments readable by the application logic, each of them bytes.
    accounts :
        Addresses, besides the sender, whose state the logic may read.
    foreign_apps :
        Applications whose global state the logic may read.
    foreign_assets :
        Assets whose parameters the logic may read.
    local_state_schema :
        Per-account storage reserved at creation; immutable afterwards.
    global_state_schema :
        Global storage reserved at creation; immutable afterwards.
    approval_program :
        Compiled approval program, for creation and updates.
    clear_program :
        Compiled clear-state program, for creation and updates.
    params :
        Protocol parameters.

    Returns
    -------
    tx : `ApplicationCallTransaction`
        The unsigned application call.
    """
    tx = _application_call(
        account,
        fee_per_byte,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        application_id,
        on_completion,
        app_args,
        accounts,
        foreign_apps,
        foreign_assets,
        local_state_schema,
        global_state_schema,
        approval_program,
        clear_program,
        params,
    )
    return apply_per_byte_fee(tx, fee_per_byte, params)


def make_application_call_txn_with_flat_fee(
    account: str,
    fee: int,
    first_round: int,
    last_round: int,
    note: Optional[Bytes],
    genesis_id: str,
    genesis_hash: GenesisHash,
    application_id: int,
    on_completion: OnCompletion,
    app_args: Sequence[Bytes] = (),
    accounts: Sequence[str] = (),
    foreign_apps: Sequence[int] = (),
    foreign_assets: Sequence[int] = (),
    local_state_schema: Optional[StateSchema] = None,
    global_state_schema: Optional[StateSchema] = None,
    approval_program: Bytes = b"",
    clear_program: Bytes = b"",
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> ApplicationCallTransaction:
    """
    Like `make_application_call_txn`, paying the flat `fee`.
    """
    tx = _application_call(
        account,
        fee,
        first_round,
        last_round,
        note,
        genesis_id,
        genesis_hash,
        application_id,
        on_completion,
        app_args,
        accounts,
        foreign_apps,
        foreign_assets,
        local_state_schema,
        global_state_schema,
        approval_program,
        clear_program,
        params,
    )
    return apply_flat_fee(tx, fee, params)


__all__ = [
    "make_application_call_txn",
    "make_application_call_txn_with_flat_fee",
    "make_asset_config_txn",
    "make_asset_config_txn_with_flat_fee",
    "make_asset_create_txn",
    "make_asset_create_txn_with_flat_fee",
    "make_asset_destroy_txn",
    "make_asset_destroy_txn_with_flat_fee",
    "make_asset_freeze_txn",
    "make_asset_freeze_txn_with_flat_fee",
    "make_asset_transfer_txn",
    "make_asset_transfer_txn_with_flat_fee",
    "make_key_reg_txn",
    "make_key_reg_txn_with_flat_fee",
    "make_payment_txn",
    "make_payment_txn_with_flat_fee",
]
