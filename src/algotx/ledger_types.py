"""
Ledger Types
^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Fixed-width and numeric types re-used throughout the package.
"""

from ethereum_types.bytes import Bytes, Bytes32, Bytes64
from ethereum_types.numeric import U64, Uint

Hash32 = Bytes32

Address = Bytes32
Digest = Hash32
VotePK = Bytes32
VRFPK = Bytes32
Signature = Bytes64

Round = U64
MicroAlgos = U64
AssetIndex = U64
AppIndex = U64

ZERO_ADDRESS = Address(b"\x00" * 32)
ZERO_DIGEST = Digest(b"\x00" * 32)

__all__ = [
    "Address",
    "AppIndex",
    "AssetIndex",
    "Bytes",
    "Digest",
    "Hash32",
    "MicroAlgos",
    "Round",
    "Signature",
    "Uint",
    "U64",
    "VRFPK",
    "VotePK",
    "ZERO_ADDRESS",
    "ZERO_DIGEST",
]
