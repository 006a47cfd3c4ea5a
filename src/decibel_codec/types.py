"""Payload model for Decibel transactions.

Everything here is a frozen dataclass built once, encoded once and discarded.
Tagged unions are closed: `TypeTag` carries its variant as a `TypeTagKind`,
call arguments are one class per variant, and `Executable` / `ExtraConfig`
each have a single implemented variant. Wire tags live in `config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

from .config import ADDRESS_LENGTH, TypeTagKind
from .encoding import expect_address
from .errors import EncodingError, ErrorCode


def address_from_hex(text: str) -> bytes:
    """Parse `0x`-prefixed or bare hex, left-padding short forms like `0x1`."""
    v = text[2:] if text.startswith(("0x", "0X")) else text
    if not v or len(v) > ADDRESS_LENGTH * 2:
        raise EncodingError(f"invalid address hex: {text!r}", ErrorCode.INVALID_ADDRESS)
    try:
        return bytes.fromhex(v.rjust(ADDRESS_LENGTH * 2, "0"))
    except ValueError as exc:
        raise EncodingError(f"invalid address hex: {text!r}", ErrorCode.INVALID_ADDRESS) from exc


def address_to_hex(addr: bytes) -> str:
    return "0x" + expect_address("address", addr).hex()


def _freeze(obj: object, name: str, items: Sequence) -> None:
    object.__setattr__(obj, name, tuple(items))


def _set_identifier(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if isinstance(value, str):
        object.__setattr__(obj, name, Identifier(value))
    elif not isinstance(value, Identifier):
        raise EncodingError(
            f"{name} must be an Identifier or str, got {type(value).__name__}",
            ErrorCode.INVALID_IDENTIFIER,
        )


def _expect_module(obj: object) -> None:
    if not isinstance(obj.module, ModuleId):
        raise EncodingError(f"module must be a ModuleId, got {type(obj.module).__name__}")


@dataclass(frozen=True)
class Identifier:
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise EncodingError("identifier must be str", ErrorCode.INVALID_IDENTIFIER)
        if not self.name:
            raise EncodingError("identifier must not be empty", ErrorCode.INVALID_IDENTIFIER)
        if "\x00" in self.name:
            raise EncodingError("identifier must not contain NUL", ErrorCode.INVALID_IDENTIFIER)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ModuleId:
    address: bytes
    name: Identifier

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", expect_address("module address", self.address))
        _set_identifier(self, "name")

    @classmethod
    def parse(cls, text: str) -> "ModuleId":
        """Parse `<address>::<module>`."""
        addr, sep, name = text.partition("::")
        if not sep or "::" in name:
            raise EncodingError(f"invalid module id: {text!r}")
        return cls(address_from_hex(addr), Identifier(name))

    def __str__(self) -> str:
        return f"{address_to_hex(self.address)}::{self.name}"


# --- TypeTag ---


@dataclass(frozen=True)
class StructTag:
    address: bytes
    module: Identifier
    name: Identifier
    type_args: Tuple["TypeTag", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", expect_address("struct address", self.address))
        _set_identifier(self, "module")
        _set_identifier(self, "name")
        _freeze(self, "type_args", self.type_args)


@dataclass(frozen=True)
class TypeTag:
    kind: TypeTagKind
    element: Optional["TypeTag"] = None
    struct: Optional[StructTag] = None

    def __post_init__(self) -> None:
        if self.kind == TypeTagKind.VECTOR and self.element is None:
            raise EncodingError("vector type tag requires an element tag")
        if self.kind != TypeTagKind.VECTOR and self.element is not None:
            raise EncodingError("only vector type tags carry an element tag")
        if self.kind == TypeTagKind.STRUCT and self.struct is None:
            raise EncodingError("struct type tag requires a struct")
        if self.kind != TypeTagKind.STRUCT and self.struct is not None:
            raise EncodingError("only struct type tags carry a struct")

    @classmethod
    def vector(cls, element: "TypeTag") -> "TypeTag":
        return cls(TypeTagKind.VECTOR, element=element)

    @classmethod
    def of_struct(cls, struct: StructTag) -> "TypeTag":
        return cls(TypeTagKind.STRUCT, struct=struct)


# --- Call arguments ---


@dataclass(frozen=True)
class BoolArg:
    value: bool


@dataclass(frozen=True)
class U8Arg:
    value: int


@dataclass(frozen=True)
class U16Arg:
    value: int


@dataclass(frozen=True)
class U32Arg:
    value: int


@dataclass(frozen=True)
class U64Arg:
    value: int


@dataclass(frozen=True)
class U128Arg:
    value: int


@dataclass(frozen=True)
class AddressArg:
    value: bytes


@dataclass(frozen=True)
class StringArg:
    value: str


@dataclass(frozen=True)
class U64VectorArg:
    values: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "values", self.values)


@dataclass(frozen=True)
class OptionArg:
    """Move `Option<T>`; `value=None` is the empty option."""

    value: Optional["CallArgument"] = None


CallArgument = Union[
    BoolArg,
    U8Arg,
    U16Arg,
    U32Arg,
    U64Arg,
    U128Arg,
    AddressArg,
    StringArg,
    U64VectorArg,
    OptionArg,
]


# --- Entry functions ---


@dataclass(frozen=True)
class EntryFunctionPayload:
    """Legacy standalone entry-function payload (outer tag 2)."""

    module: ModuleId
    function: Identifier
    type_args: Tuple[TypeTag, ...] = ()
    args: Tuple[CallArgument, ...] = ()

    def __post_init__(self) -> None:
        _expect_module(self)
        _set_identifier(self, "function")
        _freeze(self, "type_args", self.type_args)
        _freeze(self, "args", self.args)


@dataclass(frozen=True)
class EntryFunctionCall:
    """`TransactionExecutable::EntryFunction` (tag 1)."""

    module: ModuleId
    function: Identifier
    type_args: Tuple[TypeTag, ...] = ()
    args: Tuple[CallArgument, ...] = ()

    def __post_init__(self) -> None:
        _expect_module(self)
        _set_identifier(self, "function")
        _freeze(self, "type_args", self.type_args)
        _freeze(self, "args", self.args)

    @classmethod
    def from_entry_function_payload(cls, payload: EntryFunctionPayload) -> "EntryFunctionCall":
        return cls(payload.module, payload.function, payload.type_args, payload.args)


@dataclass(frozen=True)
class PrebuiltEntryFunction:
    """An entry function known only by its encoded legacy payload bytes.

    Encodes under the same executable tag as `EntryFunctionCall` by splicing
    the bytes with their one-byte outer tag removed.
    """

    encoded_payload: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.encoded_payload, (bytes, bytearray)):
            raise EncodingError("prebuilt payload must be bytes")
        object.__setattr__(self, "encoded_payload", bytes(self.encoded_payload))

    @classmethod
    def from_encoded_payload(cls, raw: bytes) -> "PrebuiltEntryFunction":
        """Wrap legacy payload bytes produced by another encoder."""
        return cls(raw)


Executable = Union[EntryFunctionCall, PrebuiltEntryFunction]


# --- Extra config ---


@dataclass(frozen=True)
class ExtraConfigV1:
    multisig_address: Optional[bytes] = None
    replay_protection_nonce: Optional[int] = None

    def __post_init__(self) -> None:
        if self.multisig_address is not None:
            object.__setattr__(
                self, "multisig_address", expect_address("multisig_address", self.multisig_address)
            )


ExtraConfig = ExtraConfigV1


@dataclass(frozen=True)
class InnerPayloadV1:
    """`TransactionPayload::Payload(TransactionInnerPayload::V1 { .. })`."""

    executable: Executable
    extra_config: ExtraConfig = field(default_factory=ExtraConfigV1)
