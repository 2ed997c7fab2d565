"""
Error types raised while building transactions.
"""

from typing import Any, Final


class AlgoTxException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class DecodeError(AlgoTxException):
    """
    Thrown when an encoded input (base64 payload, address string) cannot be
    decoded.
    """


class AddressDecodeError(DecodeError):
    """
    Thrown when an address string has a bad checksum, length or alphabet.
    """

    field: Final[str]
    """
    Name of the parameter holding the address.
    """

    def __init__(self, field: str, value: Any, reason: str = ""):
        message = f"{field}: cannot decode address {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field


class FieldLengthError(DecodeError):
    """
    Thrown when a fixed-width field does not have its exact length, or when a
    string field exceeds its byte budget.
    """

    field: Final[str]
    value: Final[Any]
    limit: Final[int]

    def __init__(
        self, field: str, value: Any, limit: int, exact: bool = False
    ):
        if exact:
            message = f"{field} {value!r} is not {limit} bytes"
        else:
            message = f"{field} {value!r} too long (max {limit} bytes)"
        super().__init__(message)
        self.field = field
        self.value = value
        self.limit = limit


class MissingRequiredFieldError(AlgoTxException):
    """
    Thrown when a field the protocol requires was not supplied.
    """

    field: Final[str]

    def __init__(self, field: str):
        super().__init__(f"transaction must contain a {field}")
        self.field = field


class InvalidFieldError(AlgoTxException):
    """
    Thrown when a numeric field is out of range or inconsistent with another
    field.
    """

    field: Final[str]

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class TransactionTypeError(AlgoTxException):
    """
    Thrown when an object is not one of the transaction variants.
    """

    transaction_class: Final[type]
    """
    The class of the offending object.
    """

    def __init__(self, transaction_class: type):
        super().__init__(
            f"unknown transaction type `{transaction_class.__name__}`"
        )
        self.transaction_class = transaction_class


class EncodingError(AlgoTxException):
    """
    Indicates that a transaction could not be canonically encoded.
    """


class SigningError(AlgoTxException):
    """
    Thrown when signing a transaction fails.
    """


class GroupComputationError(AlgoTxException):
    """
    Thrown when a group identifier cannot be computed.
    """
