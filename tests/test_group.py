import logging
from typing import Callable, List

import pytest

from algotx.address import decode_address
from algotx.builders import make_payment_txn_with_flat_fee
from algotx.encoding import compute_group_id, transaction_id
from algotx.exceptions import AddressDecodeError, GroupComputationError
from algotx.group import assign_group_id
from algotx.ledger_types import ZERO_DIGEST
from algotx.params import ProtocolParameters
from algotx.transactions import Transaction
from tests.helpers import TESTNET_GENESIS_HASH, TESTNET_GENESIS_ID


def _pay(sender: str, receiver: str, amount: int) -> Transaction:
    return make_payment_txn_with_flat_fee(
        sender,
        receiver,
        1000,
        amount,
        1,
        100,
        None,
        "",
        TESTNET_GENESIS_ID,
        TESTNET_GENESIS_HASH,
    )


@pytest.fixture
def swap(sender: str, receiver: str) -> List[Transaction]:
    return [
        _pay(sender, receiver, 100),
        _pay(receiver, sender, 200),
        _pay(sender, receiver, 300),
    ]


def test_assign_all(swap: List[Transaction]) -> None:
    grouped = assign_group_id(swap)
    assert len(grouped) == 3
    expected = compute_group_id(swap)
    for tx in grouped:
        assert tx.header.group == expected
        assert tx.header.group != ZERO_DIGEST


def test_assign_preserves_order_and_fields(swap: List[Transaction]) -> None:
    grouped = assign_group_id(swap)
    assert [tx.amount for tx in grouped] == [100, 200, 300]  # type: ignore
    for before, after in zip(swap, grouped):
        assert after.header.sender == before.header.sender
        assert after.header.fee == before.header.fee


def test_assign_leaves_input_untouched(swap: List[Transaction]) -> None:
    ids = [transaction_id(tx) for tx in swap]
    assign_group_id(swap)
    assert [tx.header.group for tx in swap] == [ZERO_DIGEST] * 3
    assert [transaction_id(tx) for tx in swap] == ids


def test_assign_is_deterministic(swap: List[Transaction]) -> None:
    first = assign_group_id(swap)
    second = assign_group_id(swap)
    assert [transaction_id(tx) for tx in first] == [
        transaction_id(tx) for tx in second
    ]


def test_order_changes_group(swap: List[Transaction]) -> None:
    forward = assign_group_id(swap)[0].header.group
    backward = assign_group_id(list(reversed(swap)))[0].header.group
    assert forward != backward


def test_filter_by_sender(
    swap: List[Transaction], sender: str, receiver: str
) -> None:
    expected = compute_group_id(swap)

    mine = assign_group_id(swap, sender)
    assert [tx.amount for tx in mine] == [100, 300]  # type: ignore
    assert all(
        tx.header.sender == decode_address("sender", sender) for tx in mine
    )
    assert all(tx.header.group == expected for tx in mine)

    theirs = assign_group_id(swap, receiver)
    assert [tx.amount for tx in theirs] == [200]  # type: ignore
    assert theirs[0].header.group == expected


def test_filter_without_match(
    swap: List[Transaction], make_address: Callable[[], str]
) -> None:
    assert assign_group_id(swap, make_address()) == []


def test_filter_bad_address(swap: List[Transaction]) -> None:
    with pytest.raises(AddressDecodeError) as exc_info:
        assign_group_id(swap, "nonsense")
    assert exc_info.value.field == "sender"


def test_already_grouped(swap: List[Transaction]) -> None:
    grouped = assign_group_id(swap)
    with pytest.raises(GroupComputationError):
        assign_group_id(grouped)


def test_group_too_large(sender: str, receiver: str) -> None:
    transactions = [_pay(sender, receiver, i) for i in range(17)]
    with pytest.raises(GroupComputationError):
        assign_group_id(transactions)
    assert len(assign_group_id(transactions[:16])) == 16


def test_group_size_from_params(swap: List[Transaction]) -> None:
    with pytest.raises(GroupComputationError):
        assign_group_id(swap, params=ProtocolParameters(max_group_size=2))


def test_group_is_logged(
    caplog: pytest.LogCaptureFixture, swap: List[Transaction], sender: str
) -> None:
    caplog.set_level(logging.DEBUG, logger="algotx")
    assign_group_id(swap, sender)
    messages = [
        r.getMessage() for r in caplog.records if r.name == "algotx.group"
    ]
    assert len(messages) == 1
    assert messages[0].startswith("bound 3 transactions into group ")
    assert messages[0].endswith("returning 2")
