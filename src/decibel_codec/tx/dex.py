"""Decibel DEX entry-function payload builders.

Builders only assemble payload values; sequence numbers, gas, signing and
submission belong to the caller.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence

from ..config import (
    DEX_ACCOUNTS_MODULE,
    FN_DEPOSIT_TO_SUBACCOUNT,
    FN_MINT,
    FN_PLACE_BULK_ORDERS,
    FN_PLACE_ORDER,
    USDC_MODULE,
)
from ..types import (
    AddressArg,
    BoolArg,
    EntryFunctionCall,
    EntryFunctionPayload,
    ExtraConfigV1,
    Identifier,
    InnerPayloadV1,
    ModuleId,
    OptionArg,
    StringArg,
    U8Arg,
    U64Arg,
    U64VectorArg,
)


class TimeInForce(IntEnum):
    GOOD_TILL_CANCELED = 0
    POST_ONLY = 1
    IMMEDIATE_OR_CANCEL = 2


def _some_u64(value: Optional[int]) -> OptionArg:
    return OptionArg(None if value is None else U64Arg(value))


def _call(package: bytes, module: str, function: str, args: list) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        module=ModuleId(package, Identifier(module)),
        function=Identifier(function),
        type_args=(),
        args=tuple(args),
    )


def mint_usdc(package: bytes, to: bytes, amount: int) -> EntryFunctionPayload:
    return _call(package, USDC_MODULE, FN_MINT, [AddressArg(to), U64Arg(amount)])


def deposit_to_subaccount(
    package: bytes, subaccount: bytes, asset: bytes, amount: int
) -> EntryFunctionPayload:
    return _call(
        package,
        DEX_ACCOUNTS_MODULE,
        FN_DEPOSIT_TO_SUBACCOUNT,
        [AddressArg(subaccount), AddressArg(asset), U64Arg(amount)],
    )


def place_order(
    package: bytes,
    subaccount: bytes,
    market: bytes,
    price: int,
    size: int,
    is_buy: bool,
    time_in_force: TimeInForce,
    is_reduce_only: bool,
    client_order_id: Optional[str] = None,
    stop_price: Optional[int] = None,
    tp_trigger_price: Optional[int] = None,
    tp_limit_price: Optional[int] = None,
    sl_trigger_price: Optional[int] = None,
    sl_limit_price: Optional[int] = None,
    builder_address: Optional[bytes] = None,
    builder_fee: Optional[int] = None,
) -> EntryFunctionPayload:
    args = [
        AddressArg(subaccount),
        AddressArg(market),
        U64Arg(price),
        U64Arg(size),
        BoolArg(is_buy),
        U8Arg(int(time_in_force)),
        BoolArg(is_reduce_only),
        OptionArg(None if client_order_id is None else StringArg(client_order_id)),
        _some_u64(stop_price),
        _some_u64(tp_trigger_price),
        _some_u64(tp_limit_price),
        _some_u64(sl_trigger_price),
        _some_u64(sl_limit_price),
        OptionArg(None if builder_address is None else AddressArg(builder_address)),
        _some_u64(builder_fee),
    ]
    return _call(package, DEX_ACCOUNTS_MODULE, FN_PLACE_ORDER, args)


def place_bulk_orders(
    package: bytes,
    subaccount: bytes,
    market: bytes,
    sequence_number: int,
    bid_prices: Sequence[int],
    bid_sizes: Sequence[int],
    ask_prices: Sequence[int],
    ask_sizes: Sequence[int],
) -> EntryFunctionPayload:
    args = [
        AddressArg(subaccount),
        AddressArg(market),
        U64Arg(sequence_number),
        U64VectorArg(tuple(bid_prices)),
        U64VectorArg(tuple(bid_sizes)),
        U64VectorArg(tuple(ask_prices)),
        U64VectorArg(tuple(ask_sizes)),
    ]
    return _call(package, DEX_ACCOUNTS_MODULE, FN_PLACE_BULK_ORDERS, args)


def cancel_bulk_orders(
    package: bytes, subaccount: bytes, market: bytes, sequence_number: int
) -> EntryFunctionPayload:
    """Empty bid and ask ladders cancel every order at `sequence_number`."""
    return place_bulk_orders(package, subaccount, market, sequence_number, [], [], [], [])


def orderless(
    payload: EntryFunctionPayload,
    nonce: int,
    multisig_address: Optional[bytes] = None,
) -> InnerPayloadV1:
    """Wrap a legacy payload as a replay-protected orderless payload."""
    return InnerPayloadV1(
        executable=EntryFunctionCall.from_entry_function_payload(payload),
        extra_config=ExtraConfigV1(
            multisig_address=multisig_address,
            replay_protection_nonce=nonce,
        ),
    )
