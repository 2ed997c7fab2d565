import base64
from typing import Callable

import pytest

from algotx.builders import make_payment_txn_with_flat_fee
from algotx.transactions import PaymentTransaction
from tests.helpers import (
    TESTNET_GENESIS_HASH,
    TESTNET_GENESIS_ID,
    random_address,
)


@pytest.fixture
def genesis_id() -> str:
    return TESTNET_GENESIS_ID


@pytest.fixture
def genesis_hash() -> str:
    return TESTNET_GENESIS_HASH


@pytest.fixture
def raw_genesis_hash() -> bytes:
    return base64.b64decode(TESTNET_GENESIS_HASH)


@pytest.fixture
def sender() -> str:
    return random_address()


@pytest.fixture
def receiver() -> str:
    return random_address()


@pytest.fixture
def make_address() -> Callable[[], str]:
    return random_address


@pytest.fixture
def payment(sender: str, receiver: str) -> PaymentTransaction:
    """A flat-fee payment of 12345 microalgos."""
    return make_payment_txn_with_flat_fee(
        sender,
        receiver,
        1000,
        12345,
        1000,
        2000,
        b"hello",
        "",
        TESTNET_GENESIS_ID,
        TESTNET_GENESIS_HASH,
    )
