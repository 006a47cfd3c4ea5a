"""Transaction payload encoding (orderless `Payload::V1` and legacy entry functions)."""

from __future__ import annotations

import warnings

from ..config import (
    ExecutableTag,
    ExtraConfigTag,
    InnerPayloadTag,
    PayloadTag,
    TypeTagKind,
)
from ..encoding import Writer
from ..errors import EncodingError, PrebuiltPayloadTagWarning
from ..types import (
    EntryFunctionCall,
    EntryFunctionPayload,
    ExtraConfigV1,
    InnerPayloadV1,
    ModuleId,
    PrebuiltEntryFunction,
    StructTag,
    TypeTag,
)
from .arguments import write_argument_list

# Tags whose variant carries no payload beyond the tag itself
_PRIMITIVE_TYPE_TAGS = frozenset(
    {
        TypeTagKind.BOOL,
        TypeTagKind.U8,
        TypeTagKind.U16,
        TypeTagKind.U32,
        TypeTagKind.U64,
        TypeTagKind.U128,
        TypeTagKind.U256,
        TypeTagKind.ADDRESS,
        TypeTagKind.SIGNER,
    }
)


def write_module_id(w: Writer, module: ModuleId) -> None:
    w.write_address(module.address)
    w.write_str(module.name.name)


def write_struct_tag(w: Writer, struct: StructTag) -> None:
    w.write_address(struct.address)
    w.write_str(struct.module.name)
    w.write_str(struct.name.name)
    w.write_varint(len(struct.type_args))
    for tag in struct.type_args:
        write_type_tag(w, tag)


def write_type_tag(w: Writer, tag: TypeTag) -> None:
    if not isinstance(tag, TypeTag):
        raise EncodingError(f"type argument must be a TypeTag, got {type(tag).__name__}")
    w.write_varint(int(tag.kind))
    if tag.kind in _PRIMITIVE_TYPE_TAGS:
        return
    if tag.kind == TypeTagKind.VECTOR:
        write_type_tag(w, tag.element)
    elif tag.kind == TypeTagKind.STRUCT:
        write_struct_tag(w, tag.struct)
    else:
        raise EncodingError(f"unknown type tag kind: {tag.kind!r}")


def write_entry_function(w: Writer, call, emit_tag: bool = True) -> None:
    """Write the entry-function body shared by the legacy payload and the executable.

    With `emit_tag` the legacy outer tag (2) is written first; the executable
    writer passes `emit_tag=False` after writing its own tag.
    """
    if emit_tag:
        w.write_varint(int(PayloadTag.ENTRY_FUNCTION))
    write_module_id(w, call.module)
    w.write_str(call.function.name)
    w.write_varint(len(call.type_args))
    for tag in call.type_args:
        write_type_tag(w, tag)
    write_argument_list(w, call.args)


def encode_entry_function_payload(payload: EntryFunctionPayload) -> bytes:
    w = Writer()
    write_entry_function(w, payload, emit_tag=True)
    return w.to_bytes()


def splice_prebuilt(w: Writer, encoded_payload: bytes) -> None:
    """Write an executable from fully encoded legacy payload bytes.

    The legacy outer tag (2) always encodes as a single ULEB128 byte, so the
    body starts at offset 1.
    """
    if len(encoded_payload) == 0:
        raise EncodingError("empty prebuilt payload")
    if encoded_payload[0] != int(PayloadTag.ENTRY_FUNCTION):
        warnings.warn(
            f"prebuilt payload starts with tag {encoded_payload[0]:#04x}, "
            f"expected {int(PayloadTag.ENTRY_FUNCTION):#04x}",
            PrebuiltPayloadTagWarning,
            stacklevel=2,
        )
    w.write_varint(int(ExecutableTag.ENTRY_FUNCTION))
    w.write_bytes(encoded_payload[1:])


def write_executable(w: Writer, executable) -> None:
    if isinstance(executable, EntryFunctionCall):
        w.write_varint(int(ExecutableTag.ENTRY_FUNCTION))
        write_entry_function(w, executable, emit_tag=False)
    elif isinstance(executable, PrebuiltEntryFunction):
        splice_prebuilt(w, executable.encoded_payload)
    else:
        raise EncodingError(f"unsupported executable: {type(executable).__name__}")


def write_extra_config(w: Writer, config) -> None:
    if not isinstance(config, ExtraConfigV1):
        raise EncodingError(f"unsupported extra config: {type(config).__name__}")
    w.write_varint(int(ExtraConfigTag.V1))
    if config.multisig_address is None:
        w.write_bool(False)
    else:
        w.write_bool(True)
        w.write_address(config.multisig_address)
    if config.replay_protection_nonce is None:
        w.write_bool(False)
    else:
        w.write_bool(True)
        w.write_u64(config.replay_protection_nonce)


def write_inner_payload(w: Writer, payload: InnerPayloadV1) -> None:
    w.write_varint(int(PayloadTag.PAYLOAD))
    w.write_varint(int(InnerPayloadTag.V1))
    write_executable(w, payload.executable)
    write_extra_config(w, payload.extra_config)


def encode_executable(executable) -> bytes:
    w = Writer()
    write_executable(w, executable)
    return w.to_bytes()


def encode_inner_payload(payload: InnerPayloadV1) -> bytes:
    """Encode the payload bytes placed verbatim into the signed transaction."""
    w = Writer()
    write_inner_payload(w, payload)
    return w.to_bytes()


def encode_payload(payload) -> bytes:
    """Encode either payload shape under its own outer tag."""
    if isinstance(payload, InnerPayloadV1):
        return encode_inner_payload(payload)
    if isinstance(payload, EntryFunctionPayload):
        return encode_entry_function_payload(payload)
    raise EncodingError(f"unsupported payload: {type(payload).__name__}")
