"""Entry-function argument encoding.

Arguments travel as a vector of opaque byte strings: each one is encoded on
its own and then length-prefixed. The receiving function's on-chain signature
carries the types, the wire does not.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..encoding import Writer
from ..errors import UnsupportedArgumentKind
from ..types import (
    AddressArg,
    BoolArg,
    CallArgument,
    OptionArg,
    StringArg,
    U8Arg,
    U16Arg,
    U32Arg,
    U64Arg,
    U64VectorArg,
    U128Arg,
)


def _write_u64_vector(w: Writer, arg: U64VectorArg) -> None:
    w.write_varint(len(arg.values))
    for v in arg.values:
        w.write_u64(v)


def _write_option(w: Writer, arg: OptionArg) -> None:
    if arg.value is None:
        w.write_bool(False)
        return
    w.write_bool(True)
    write_argument(w, arg.value)


_WRITERS: Dict[type, Callable[[Writer, CallArgument], None]] = {
    BoolArg: lambda w, a: w.write_bool(a.value),
    U8Arg: lambda w, a: w.write_u8(a.value),
    U16Arg: lambda w, a: w.write_u16(a.value),
    U32Arg: lambda w, a: w.write_u32(a.value),
    U64Arg: lambda w, a: w.write_u64(a.value),
    U128Arg: lambda w, a: w.write_u128(a.value),
    AddressArg: lambda w, a: w.write_address(a.value),
    StringArg: lambda w, a: w.write_str(a.value),
    U64VectorArg: _write_u64_vector,
    OptionArg: _write_option,
}


def write_argument(w: Writer, arg: CallArgument) -> None:
    writer = _WRITERS.get(type(arg))
    if writer is None:
        raise UnsupportedArgumentKind(f"no encoding for argument of type {type(arg).__name__}")
    writer(w, arg)


def encode_argument(arg: CallArgument) -> bytes:
    """Standalone canonical encoding of one argument."""
    w = Writer()
    write_argument(w, arg)
    return w.to_bytes()


def write_entry_function_argument(w: Writer, arg: CallArgument) -> None:
    w.write_length_prefixed_bytes(encode_argument(arg))


def write_argument_list(w: Writer, args) -> None:
    w.write_varint(len(args))
    for arg in args:
        write_entry_function_argument(w, arg)
