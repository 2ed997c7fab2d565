"""
Algorand Transaction Construction
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

Builds signing-ready transaction records for the Algorand ledger: payments,
key registrations, asset configuration, transfer and freeze, and application
calls. Human-facing parameters (checksummed addresses, base64 keys, round
ranges, amounts) are validated and translated into canonical records whose
fee is derived from their exact signed size, and ordered sets of records can
be bound into an atomic group.
"""

__version__ = "0.1.0"

from .application import ApplicationCallBuilder
from .builders import (
    make_application_call_txn,
    make_application_call_txn_with_flat_fee,
    make_asset_config_txn,
    make_asset_config_txn_with_flat_fee,
    make_asset_create_txn,
    make_asset_create_txn_with_flat_fee,
    make_asset_destroy_txn,
    make_asset_destroy_txn_with_flat_fee,
    make_asset_freeze_txn,
    make_asset_freeze_txn_with_flat_fee,
    make_asset_transfer_txn,
    make_asset_transfer_txn_with_flat_fee,
    make_key_reg_txn,
    make_key_reg_txn_with_flat_fee,
    make_payment_txn,
    make_payment_txn_with_flat_fee,
)
from .fees import estimate_size
from .group import assign_group_id
from .params import (
    DEFAULT_PROTOCOL_PARAMETERS,
    MIN_TXN_FEE,
    ProtocolParameters,
)

__all__ = [
    "ApplicationCallBuilder",
    "DEFAULT_PROTOCOL_PARAMETERS",
    "MIN_TXN_FEE",
    "ProtocolParameters",
    "assign_group_id",
    "estimate_size",
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
