import pytest
from pydantic import ValidationError

from algotx.params import DEFAULT_PROTOCOL_PARAMETERS, ProtocolParameters


def test_defaults() -> None:
    params = DEFAULT_PROTOCOL_PARAMETERS
    assert params.min_txn_fee == 1000
    assert params.max_unit_name_bytes == 8
    assert params.max_asset_name_bytes == 32
    assert params.max_note_bytes == 1024
    assert params.max_group_size == 16


def test_override() -> None:
    params = ProtocolParameters(min_txn_fee=2000, max_group_size=4)
    assert params.min_txn_fee == 2000
    assert params.max_group_size == 4
    assert params.max_note_bytes == 1024


def test_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_PROTOCOL_PARAMETERS.min_txn_fee = 0  # type: ignore


@pytest.mark.parametrize(
    "field, value",
    [("min_txn_fee", -1), ("max_note_bytes", -1), ("max_group_size", 0)],
)
def test_rejects_out_of_range(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        ProtocolParameters(**{field: value})
