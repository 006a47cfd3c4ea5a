"""Deterministic object address derivation (SHA3-256 with the 0xFE scheme byte)."""

from __future__ import annotations

import hashlib
from typing import Iterable

from ..config import (
    OBJECT_ADDRESS_SCHEME,
    PRIMARY_SUBACCOUNT_SEED,
    SUBACCOUNT_MANAGER_SEED,
    USDC_SEED,
)
from ..encoding import encode_uleb128, expect_address
from ..errors import DerivationError, EncodingError, InvalidSeed

try:
    from Cryptodome.Hash import SHA3_256 as _cryptodome_sha3  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    _cryptodome_sha3 = None


def _sha3_256():
    try:
        return hashlib.new("sha3_256")
    except ValueError:
        if _cryptodome_sha3 is not None:
            return _cryptodome_sha3.new()
    raise DerivationError("SHA3-256 requires hashlib sha3 support or pycryptodomex")


def derive(segments: Iterable[bytes]) -> bytes:
    """Hash `concat(segments) || 0xFE` into a 32-byte address."""
    hasher = _sha3_256()
    for segment in segments:
        if not isinstance(segment, (bytes, bytearray)):
            raise EncodingError(f"derivation segment must be bytes, got {type(segment).__name__}")
        hasher.update(bytes(segment))
    hasher.update(bytes([OBJECT_ADDRESS_SCHEME]))
    return hasher.digest()


def _seed_bytes(seed: str) -> bytes:
    if not isinstance(seed, str):
        raise InvalidSeed("seed label must be str")
    if not seed:
        raise InvalidSeed("seed label must not be empty")
    return seed.encode("utf-8")


def create_object_address(publisher: bytes, seed: str) -> bytes:
    """sha3-256(publisher || seed || 0xFE)"""
    return derive([expect_address("publisher", publisher), _seed_bytes(seed)])


def create_nested_address(publisher: bytes, manager_seed: str, owner: bytes, seed: str) -> bytes:
    """Derive an owner-scoped address under a named manager object.

    The owner seed is `owner || bcs(String(seed))`: the label is length
    prefixed, not raw.
    """
    manager = create_object_address(publisher, manager_seed)
    data = _seed_bytes(seed)
    return derive([manager, expect_address("owner", owner), encode_uleb128(len(data)), data])


def primary_subaccount_address(package: bytes, owner: bytes) -> bytes:
    return create_nested_address(package, SUBACCOUNT_MANAGER_SEED, owner, PRIMARY_SUBACCOUNT_SEED)


def usdc_address(package: bytes) -> bytes:
    return create_object_address(package, USDC_SEED)
