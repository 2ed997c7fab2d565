"""
Transactions
^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Transactions are the atomic units of work submitted to the ledger. Each kind
of transaction is its own immutable dataclass carrying the common `Header`
and only the fields that belong to that kind; `Transaction` is the union of
all of them and `transaction_type` recovers the wire discriminant.

A record is created once by the builders in `algotx.builders` and afterwards
only ever replaced wholesale by `with_fee` and `with_group`.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Tuple, TypeVar, Union

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import U64

from .exceptions import TransactionTypeError
from .ledger_types import (
    VRFPK,
    Address,
    AppIndex,
    AssetIndex,
    Digest,
    MicroAlgos,
    Round,
    VotePK,
)


class TransactionType(str, Enum):
    """
    Wire discriminant of each transaction kind.
    """

    PAYMENT = "pay"
    KEY_REGISTRATION = "keyreg"
    ASSET_CONFIG = "acfg"
    ASSET_TRANSFER = "axfer"
    ASSET_FREEZE = "afrz"
    APPLICATION_CALL = "appl"


class OnCompletion(IntEnum):
    """
    Side effect an application call has once it is confirmed.
    """

    NO_OP = 0
    OPT_IN = 1
    CLOSE_OUT = 2
    CLEAR_STATE = 3
    UPDATE_APPLICATION = 4
    DELETE_APPLICATION = 5


@slotted_freezable
@dataclass
class Header:
    """
    Fields shared by every transaction kind.
    """

    sender: Address
    fee: MicroAlgos
    first_valid: Round
    last_valid: Round
    note: Bytes
    genesis_id: str
    genesis_hash: Digest
    group: Digest


@slotted_freezable
@dataclass
class PaymentTransaction:
    """
    Moves microalgos from the sender to `receiver`, optionally closing the
    sender's account into `close_remainder_to`.
    """

    header: Header
    receiver: Address
    amount: MicroAlgos
    close_remainder_to: Address


@slotted_freezable
@dataclass
class KeyRegistrationTransaction:
    """
    Registers participation keys for the sender's account.
    """

    header: Header
    vote_pk: VotePK
    selection_pk: VRFPK
    vote_first: Round
    vote_last: Round
    vote_key_dilution: U64


@slotted_freezable
@dataclass
class AssetParams:
    """
    Parameters of an asset. Unused management addresses are zero.
    """

    total: U64
    default_frozen: bool
    unit_name: str
    asset_name: str
    manager: Address
    reserve: Address
    freeze: Address
    clawback: Address


@slotted_freezable
@dataclass
class AssetConfigTransaction:
    """
    Creates (`config_asset == 0`), reconfigures or destroys an asset.
    Destroying is a reconfiguration with all-zero parameters.
    """

    header: Header
    config_asset: AssetIndex
    params: AssetParams


@slotted_freezable
@dataclass
class AssetTransferTransaction:
    """
    Moves units of an asset. `asset_sender` is only set for clawback
    revocations.
    """

    header: Header
    xfer_asset: AssetIndex
    asset_amount: U64
    asset_sender: Address
    asset_receiver: Address
    asset_close_to: Address


@slotted_freezable
@dataclass
class AssetFreezeTransaction:
    """
    Freezes or unfreezes an account's holding of an asset.
    """

    header: Header
    freeze_asset: AssetIndex
    freeze_account: Address
    asset_frozen: bool


@slotted_freezable
@dataclass
class StateSchema:
    """
    Number of integers and byte slices an application may store.
    """

    num_uint: U64
    num_byte_slice: U64


@slotted_freezable
@dataclass
class ApplicationCallTransaction:
    """
    Calls, creates (`application_id == 0`), updates or deletes an
    application.
    """

    header: Header
    application_id: AppIndex
    on_completion: OnCompletion
    application_args: Tuple[Bytes, ...]
    accounts: Tuple[Address, ...]
    foreign_apps: Tuple[AppIndex, ...]
    foreign_assets: Tuple[AssetIndex, ...]
    local_state_schema: StateSchema
    global_state_schema: StateSchema
    approval_program: Bytes
    clear_state_program: Bytes


Transaction = Union[
    PaymentTransaction,
    KeyRegistrationTransaction,
    AssetConfigTransaction,
    AssetTransferTransaction,
    AssetFreezeTransaction,
    ApplicationCallTransaction,
]

T = TypeVar("T", bound=Transaction)

EMPTY_STATE_SCHEMA = StateSchema(num_uint=U64(0), num_byte_slice=U64(0))


def transaction_type(tx: Transaction) -> TransactionType:
    """
    Return the wire discriminant of `tx`.

    Parameters
    ----------
    tx :
        Transaction of interest.

    Returns
    -------
    type : `TransactionType`
        The kind of `tx`.
    """
    if isinstance(tx, PaymentTransaction):
        return TransactionType.PAYMENT
    elif isinstance(tx, KeyRegistrationTransaction):
        return TransactionType.KEY_REGISTRATION
    elif isinstance(tx, AssetConfigTransaction):
        return TransactionType.ASSET_CONFIG
    elif isinstance(tx, AssetTransferTransaction):
        return TransactionType.ASSET_TRANSFER
    elif isinstance(tx, AssetFreezeTransaction):
        return TransactionType.ASSET_FREEZE
    elif isinstance(tx, ApplicationCallTransaction):
        return TransactionType.APPLICATION_CALL
    else:
        raise TransactionTypeError(type(tx))


def with_fee(tx: T, fee: MicroAlgos) -> T:
    """
    Return a copy of `tx` whose header carries `fee`.
    """
    return replace(tx, header=replace(tx.header, fee=MicroAlgos(fee)))


def with_group(tx: T, group: Digest) -> T:
    """
    Return a copy of `tx` bound to the atomic group `group`.
    """
    return replace(tx, header=replace(tx.header, group=Digest(group)))
