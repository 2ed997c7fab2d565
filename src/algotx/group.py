"""
Atomic Groups
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Transactions bound by a common group identifier are executed all together
or not at all. The identifier commits to every member in order; a caller
that only signs for one account may ask for just the members it sends, but
those still carry the identifier of the whole group.
"""
import base64
from typing import List, Sequence

from .address import decode_address
from .encoding import compute_group_id
from .exceptions import EncodingError, GroupComputationError
from .ledger_types import ZERO_DIGEST, Hash32
from .logger import get_logger
from .params import DEFAULT_PROTOCOL_PARAMETERS, ProtocolParameters
from .transactions import Transaction, with_group

logger = get_logger(__name__)


def _group_id(
    transactions: Sequence[Transaction], params: ProtocolParameters
) -> Hash32:
    if len(transactions) > params.max_group_size:
        raise GroupComputationError(
            f"group of {len(transactions)} transactions exceeds "
            f"the maximum of {params.max_group_size}"
        )
    for index, tx in enumerate(transactions):
        if tx.header.group != ZERO_DIGEST:
            raise GroupComputationError(
                f"transaction {index} already belongs to group "
                f"{base64.b64encode(bytes(tx.header.group)).decode()}"
            )
    try:
        return compute_group_id(transactions)
    except EncodingError as e:
        raise GroupComputationError(f"cannot compute group id: {e}") from e


def assign_group_id(
    transactions: Sequence[Transaction],
    sender: str = "",
    *,
    params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS,
) -> List[Transaction]:
    """
    Bind `transactions` into an atomic group.

    Parameters
    ----------
    transactions :
        Every member of the group, in execution order.
    sender :
        Address whose transactions are returned. An empty string returns all
        of them.
    params :
        Protocol parameters limiting the group size.

    Returns
    -------
    grouped : `List[Transaction]`
        The selected transactions, in input order, each carrying the group
        identifier computed over the full input.
    """
    group = _group_id(transactions, params)

    selected = None
    if sender != "":
        selected = decode_address("sender", sender)

    result = [
        with_group(tx, group)
        for tx in transactions
        if selected is None or tx.header.sender == selected
    ]
    logger.debug(
        "bound %d transactions into group %s, returning %d",
        len(transactions),
        base64.b64encode(bytes(group)).decode(),
        len(result),
    )
    return result
