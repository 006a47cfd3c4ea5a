"""Decibel codec configuration constants.

Keep the tag tables aligned with the Aptos `TransactionPayload`,
`TransactionExecutable`, `TransactionExtraConfig` and `TypeTag` enums; they are
shared with every other encoder of the same wire protocol.
"""

from __future__ import annotations

from enum import IntEnum


class PayloadTag(IntEnum):
    """Outer `TransactionPayload` variants."""

    ENTRY_FUNCTION = 2
    PAYLOAD = 4


class InnerPayloadTag(IntEnum):
    V1 = 0


class ExecutableTag(IntEnum):
    ENTRY_FUNCTION = 1


class ExtraConfigTag(IntEnum):
    V1 = 0


class TypeTagKind(IntEnum):
    BOOL = 0
    U8 = 1
    U64 = 2
    U128 = 3
    ADDRESS = 4
    SIGNER = 5
    VECTOR = 6
    STRUCT = 7
    U16 = 8
    U32 = 9
    U256 = 10


# Address space
ADDRESS_LENGTH = 32
OBJECT_ADDRESS_SCHEME = 0xFE  # trailing marker for derived object addresses

# ULEB128 values (lengths, variant tags) are bounded to u32
MAX_ULEB128_VALUE = 0xFFFFFFFF

U8_MAX = (1 << 8) - 1
U16_MAX = (1 << 16) - 1
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1

# Decibel DEX modules
USDC_MODULE = "usdc"
DEX_ACCOUNTS_MODULE = "dex_accounts"

FN_MINT = "mint"
FN_DEPOSIT_TO_SUBACCOUNT = "deposit_to_subaccount_at"
FN_PLACE_ORDER = "place_order_to_subaccount"
FN_PLACE_BULK_ORDERS = "place_bulk_orders_to_subaccount"

# Derivation seeds
SUBACCOUNT_MANAGER_SEED = "GlobalSubaccountManager"
PRIMARY_SUBACCOUNT_SEED = "primary_subaccount"
USDC_SEED = "USDC"
