"""
Application Call Builder
^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Application calls take many optional parameters, so besides
`make_application_call_txn` they can be assembled step by step. The builder
is an immutable model: every setter returns a new builder and the record is
only produced, validated and priced by `build`.
"""
from typing import Any, Optional, Sequence, Tuple, Union

from ethereum_types.numeric import U64
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from .builders import (
    make_application_call_txn,
    make_application_call_txn_with_flat_fee,
)
from .params import DEFAULT_PROTOCOL_PARAMETERS, ProtocolParameters
from .transactions import ApplicationCallTransaction, OnCompletion, StateSchema
from .utils.fixed_width import b64_to_bytes


class ApplicationCallBuilder(BaseModel):
    """
    Accumulates the parameters of an application call.
    """

    model_config = ConfigDict(frozen=True)

    sender: str = ""
    fee: int = Field(0, ge=0)
    flat_fee: bool = False
    first_round: int = Field(0, ge=0)
    last_round: int = Field(0, ge=0)
    note: Optional[bytes] = None
    genesis_id: str = ""
    genesis_hash: Union[bytes, str] = b""

    application_id: int = Field(0, ge=0)
    on_completion: OnCompletion = OnCompletion.NO_OP
    app_args: Tuple[bytes, ...] = ()
    accounts: Tuple[str, ...] = ()
    foreign_apps: Tuple[int, ...] = ()
    foreign_assets: Tuple[int, ...] = ()
    local_state_schema: Tuple[NonNegativeInt, NonNegativeInt] = (0, 0)
    global_state_schema: Tuple[NonNegativeInt, NonNegativeInt] = (0, 0)
    approval_program: bytes = b""
    clear_program: bytes = b""

    def copy(self, **kwargs: Any) -> "ApplicationCallBuilder":
        """Create a copy of the builder with the updated fields validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))

    def with_sender(self, sender: str) -> "ApplicationCallBuilder":
        """Checksummed address sending the call."""
        return self.copy(sender=sender)

    def with_params(
        self,
        first_round: int,
        last_round: int,
        genesis_id: str,
        genesis_hash: Union[bytes, str],
    ) -> "ApplicationCallBuilder":
        """Validity window and network binding, as suggested by a node."""
        return self.copy(
            first_round=first_round,
            last_round=last_round,
            genesis_id=genesis_id,
            genesis_hash=genesis_hash,
        )

    def with_fee_per_byte(self, fee: int) -> "ApplicationCallBuilder":
        """Price the call by its signed size."""
        return self.copy(fee=fee, flat_fee=False)

    def with_flat_fee(self, fee: int) -> "ApplicationCallBuilder":
        """Pay a flat fee, raised to the protocol minimum if below it."""
        return self.copy(fee=fee, flat_fee=True)

    def with_note(self, note: Optional[bytes]) -> "ApplicationCallBuilder":
        return self.copy(note=note)

    def with_application_id(
        self, application_id: int
    ) -> "ApplicationCallBuilder":
        """
        ApplicationID is the application being interacted with, or 0 if
        creating a new application.
        """
        return self.copy(application_id=application_id)

    def with_on_completion(
        self, on_completion: OnCompletion
    ) -> "ApplicationCallBuilder":
        """
        Distinguishes application actions: what side effect the call has
        once it makes it into a block.
        """
        return self.copy(on_completion=on_completion)

    def opt_in(self, opt_in: bool = True) -> "ApplicationCallBuilder":
        """
        Opt the sender in with the same call, sparing a separate opt-in
        transaction when creating an application.
        """
        return self.with_on_completion(
            OnCompletion.OPT_IN if opt_in else OnCompletion.NO_OP
        )

    def with_args(self, app_args: Sequence[bytes]) -> "ApplicationCallBuilder":
        """Arguments accessible from the application logic."""
        return self.copy(app_args=tuple(app_args))

    def with_args_base64(
        self, app_args: Sequence[str]
    ) -> "ApplicationCallBuilder":
        """
        Same as `with_args`, with each argument base64-encoded. Malformed
        arguments raise `DecodeError` immediately.
        """
        return self.with_args(
            [
                b64_to_bytes(f"app_args[{i}]", arg)
                for i, arg in enumerate(app_args)
            ]
        )

    def with_accounts(
        self, accounts: Sequence[str]
    ) -> "ApplicationCallBuilder":
        """
        Accounts, in addition to the sender, that may be accessed from the
        application logic.
        """
        return self.copy(accounts=tuple(accounts))

    def with_foreign_apps(
        self, foreign_apps: Sequence[int]
    ) -> "ApplicationCallBuilder":
        """
        Applications whose global state may be read by this application.
        """
        return self.copy(foreign_apps=tuple(foreign_apps))

    def with_foreign_assets(
        self, foreign_assets: Sequence[int]
    ) -> "ApplicationCallBuilder":
        return self.copy(foreign_assets=tuple(foreign_assets))

    def with_local_state_schema(
        self, num_uint: int, num_byte_slice: int
    ) -> "ApplicationCallBuilder":
        """
        Limits on what may be stored in each opted-in account's local state.
        Larger limits raise the minimum balance of opted-in accounts.
        Immutable once the application exists.
        """
        return self.copy(local_state_schema=(num_uint, num_byte_slice))

    def with_global_state_schema(
        self, num_uint: int, num_byte_slice: int
    ) -> "ApplicationCallBuilder":
        """
        Limits on what may be stored in the global state. Larger limits
        raise the creator's minimum balance. Immutable once the application
        exists.
        """
        return self.copy(global_state_schema=(num_uint, num_byte_slice))

    def with_programs(
        self, approval_program: bytes, clear_program: bytes
    ) -> "ApplicationCallBuilder":
        """Compiled programs, for creation and updates."""
        return self.copy(
            approval_program=approval_program, clear_program=clear_program
        )

    def build(
        self, params: ProtocolParameters = DEFAULT_PROTOCOL_PARAMETERS
    ) -> ApplicationCallTransaction:
        """
        Validate the accumulated parameters and produce the priced call.
        """
        make = (
            make_application_call_txn_with_flat_fee
            if self.flat_fee
            else make_application_call_txn
        )
        return make(
            self.sender,
            self.fee,
            self.first_round,
            self.last_round,
            self.note,
            self.genesis_id,
            self.genesis_hash,
            self.application_id,
            self.on_completion,
            self.app_args,
            self.accounts,
            self.foreign_apps,
            self.foreign_assets,
            _state_schema(self.local_state_schema),
            _state_schema(self.global_state_schema),
            self.approval_program,
            self.clear_program,
            params=params,
        )


def _state_schema(schema: Tuple[int, int]) -> StateSchema:
    num_uint, num_byte_slice = schema
    return StateSchema(
        num_uint=U64(num_uint), num_byte_slice=U64(num_byte_slice)
    )
