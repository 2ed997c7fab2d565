"""
Transaction Signing
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Produces the signed encoding of a transaction. Within this package it is
used only to measure the size a transaction will have once signed.

The message and the signed envelope both come from `algosdk`; only the
Ed25519 signature itself is computed here. The envelope never carries an
authorizing address, even when the key is not the sender's.
"""
from typing import Tuple

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey

from .encoding import bytes_to_sign, encode_signed_transaction
from .exceptions import EncodingError, SigningError
from .ledger_types import Address, Signature
from .transactions import Transaction


def generate_throwaway_key() -> SigningKey:
    """
    Generate a fresh Ed25519 key from the operating system's random source.
    """
    return SigningKey.generate()


def sign_transaction(
    signing_key: SigningKey, tx: Transaction
) -> Tuple[Address, bytes]:
    """
    Sign `tx` and return the signer together with the signed encoding.

    Parameters
    ----------
    signing_key :
        Private key to sign with.
    tx :
        Transaction to sign.

    Returns
    -------
    signer : `algotx.ledger_types.Address`
        Public key matching `signing_key`.
    signed : `bytes`
        Canonical encoding of the signed transaction.
    """
    try:
        message = bytes_to_sign(tx)
        signature = Signature(signing_key.sign(message).signature)
        signed = encode_signed_transaction(tx, signature)
    except EncodingError as e:
        raise SigningError(f"cannot sign transaction: {e}") from e
    except (CryptoError, TypeError) as e:
        raise SigningError(f"signing failed: {e}") from e
    return Address(bytes(signing_key.verify_key)), signed
