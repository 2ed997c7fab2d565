"""
A module for managing protocol parameters.

Classes:
- ProtocolParameters: Holds the consensus constants used to validate and
  price transactions.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProtocolParameters(BaseModel):
    """Consensus constants consulted while building transactions."""

    model_config = ConfigDict(frozen=True)

    min_txn_fee: int = Field(1000, ge=0)
    """Fee floor in microalgos, applied after every fee computation."""

    max_unit_name_bytes: int = Field(8, ge=0)
    """Maximum byte length of an asset unit name."""

    max_asset_name_bytes: int = Field(32, ge=0)
    """Maximum byte length of an asset name."""

    max_note_bytes: int = Field(1024, ge=0)
    """Maximum byte length of a transaction note."""

    max_group_size: int = Field(16, ge=1)
    """Maximum number of transactions in one atomic group."""


DEFAULT_PROTOCOL_PARAMETERS = ProtocolParameters()

MIN_TXN_FEE = DEFAULT_PROTOCOL_PARAMETERS.min_txn_fee
