"""Decibel codec error codes and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCategory(IntEnum):
    ENCODING = 0x01
    DERIVATION = 0x02
    INTERNAL = 0xFF


class ErrorCode(IntEnum):
    # Encoding
    ENCODING_ERROR = 0x0100
    UNSUPPORTED_ARGUMENT_KIND = 0x0101
    INVALID_ADDRESS = 0x0102
    INVALID_IDENTIFIER = 0x0103
    OVERFLOW = 0x0104

    # Derivation
    INVALID_SEED = 0x0200
    DERIVATION_ERROR = 0x0201

    # Internal
    INTERNAL_ERROR = 0xFF00


@dataclass(frozen=True)
class CodecError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.name}({self.code:#06x}): {self.message}"


# Allow Python's Exception machinery to set __traceback__/__context__/__cause__
# while keeping dataclass fields frozen (Python 3.13 contextlib compat).
_EXCEPTION_ATTRS = frozenset(("__traceback__", "__context__", "__cause__"))
_frozen_setattr = CodecError.__setattr__


def _codec_error_setattr(self: CodecError, name: str, value: object) -> None:
    if name in _EXCEPTION_ATTRS:
        object.__setattr__(self, name, value)
    else:
        _frozen_setattr(self, name, value)


CodecError.__setattr__ = _codec_error_setattr  # type: ignore[method-assign]


class EncodingError(CodecError):
    """Structurally invalid input for the canonical encoder."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR) -> None:
        super().__init__(code=code, message=message)


class UnsupportedArgumentKind(CodecError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED_ARGUMENT_KIND, message=message)


class InvalidSeed(CodecError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_SEED, message=message)


class DerivationError(CodecError):
    """The hash primitive backing address derivation is unavailable."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.DERIVATION_ERROR, message=message)


class PrebuiltPayloadTagWarning(UserWarning):
    """A pre-encoded legacy payload did not start with the expected outer tag."""


def category_of(code: ErrorCode) -> ErrorCategory:
    return ErrorCategory(int(code) >> 8)
