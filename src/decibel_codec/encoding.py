"""Canonical (BCS) wire encoding primitives."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import (
    ADDRESS_LENGTH,
    MAX_ULEB128_VALUE,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
)
from .errors import EncodingError, ErrorCode


def encode_uleb128(value: int) -> bytes:
    """Unsigned LEB128 of a u32 (7-bit groups, high bit = continuation)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError("uleb128 value must be an int")
    if value < 0 or value > MAX_ULEB128_VALUE:
        raise EncodingError(f"uleb128 value out of u32 range: {value}", ErrorCode.OVERFLOW)
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _expect_uint(name: str, value: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"{name} value must be an int")
    if value < 0 or value > maximum:
        raise EncodingError(f"{name} value out of range: {value}", ErrorCode.OVERFLOW)
    return value


@dataclass
class Writer:
    buf: bytearray = field(default_factory=bytearray)

    def write_varint(self, v: int) -> None:
        self.buf.extend(encode_uleb128(v))

    def write_u8(self, v: int) -> None:
        self.buf.extend(_expect_uint("u8", v, U8_MAX).to_bytes(1, "little", signed=False))

    def write_u16(self, v: int) -> None:
        self.buf.extend(_expect_uint("u16", v, U16_MAX).to_bytes(2, "little", signed=False))

    def write_u32(self, v: int) -> None:
        self.buf.extend(_expect_uint("u32", v, U32_MAX).to_bytes(4, "little", signed=False))

    def write_u64(self, v: int) -> None:
        self.buf.extend(_expect_uint("u64", v, U64_MAX).to_bytes(8, "little", signed=False))

    def write_u128(self, v: int) -> None:
        self.buf.extend(_expect_uint("u128", v, U128_MAX).to_bytes(16, "little", signed=False))

    def write_bool(self, v: bool) -> None:
        if not isinstance(v, bool):
            raise EncodingError("bool value must be a bool")
        self.buf.append(1 if v else 0)

    def write_bytes(self, b: bytes) -> None:
        """Splice pre-encoded bytes verbatim (no length prefix)."""
        if not isinstance(b, (bytes, bytearray)):
            raise EncodingError("raw bytes must be bytes")
        self.buf.extend(b)

    def write_length_prefixed_bytes(self, b: bytes) -> None:
        if not isinstance(b, (bytes, bytearray)):
            raise EncodingError("byte string must be bytes")
        self.write_varint(len(b))
        self.buf.extend(b)

    def write_str(self, s: str) -> None:
        if not isinstance(s, str):
            raise EncodingError("string value must be str")
        self.write_length_prefixed_bytes(s.encode("utf-8"))

    def write_address(self, a: bytes) -> None:
        expect_address("address", a)
        self.buf.extend(a)

    def to_bytes(self) -> bytes:
        return bytes(self.buf)


def expect_address(name: str, value: bytes) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise EncodingError(f"{name} must be bytes", ErrorCode.INVALID_ADDRESS)
    if len(value) != ADDRESS_LENGTH:
        raise EncodingError(f"{name} must be {ADDRESS_LENGTH} bytes", ErrorCode.INVALID_ADDRESS)
    return bytes(value)
