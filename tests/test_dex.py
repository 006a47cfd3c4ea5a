"""Decibel DEX payload builders."""

from __future__ import annotations

from decibel_codec.crypto.address import primary_subaccount_address, usdc_address
from decibel_codec.tx import dex
from decibel_codec.tx.payload import encode_inner_payload, encode_payload
from decibel_codec.types import (
    AddressArg,
    BoolArg,
    EntryFunctionCall,
    InnerPayloadV1,
    OptionArg,
    StringArg,
    U8Arg,
    U64Arg,
    U64VectorArg,
)

MARKET = bytes([0x22]) * 32


def _u64(v: int) -> bytes:
    return v.to_bytes(8, "little")


def test_mint_usdc_wire(package, owner, wire_vector) -> None:
    payload = dex.mint_usdc(package, owner, 1_000_000)
    encoded = encode_payload(payload)
    assert encoded == (
        b"\x02"
        + package
        + b"\x04usdc"
        + b"\x04mint"
        + b"\x00"
        + b"\x02"
        + b"\x20" + owner
        + b"\x08" + _u64(1_000_000)
    )
    wire_vector("dex_mint_usdc", {"function": "usdc::mint", "expected_hex": encoded.hex()})


def test_deposit_to_subaccount_args(package, owner) -> None:
    sub = primary_subaccount_address(package, owner)
    usdc = usdc_address(package)
    payload = dex.deposit_to_subaccount(package, sub, usdc, 500)
    assert payload.module.name.name == "dex_accounts"
    assert payload.function.name == "deposit_to_subaccount_at"
    assert payload.args == (AddressArg(sub), AddressArg(usdc), U64Arg(500))


def test_place_order_argument_layout(package, owner) -> None:
    sub = primary_subaccount_address(package, owner)
    payload = dex.place_order(
        package, sub, MARKET, 260_000_000, 100_000, True,
        dex.TimeInForce.POST_ONLY, False,
    )
    assert payload.function.name == "place_order_to_subaccount"
    assert len(payload.args) == 15
    assert payload.args[:7] == (
        AddressArg(sub),
        AddressArg(MARKET),
        U64Arg(260_000_000),
        U64Arg(100_000),
        BoolArg(True),
        U8Arg(1),
        BoolArg(False),
    )
    assert all(arg == OptionArg() for arg in payload.args[7:])
    # each empty option is a one-byte argument behind a one-byte length prefix
    assert encode_payload(payload).endswith(b"\x01\x00" * 8)


def test_place_order_optional_values(package, owner) -> None:
    payload = dex.place_order(
        package, owner, MARKET, 1, 1, False,
        dex.TimeInForce.IMMEDIATE_OR_CANCEL, True,
        client_order_id="abc",
        stop_price=5,
        builder_address=MARKET,
        builder_fee=7,
    )
    assert payload.args[5] == U8Arg(2)
    assert payload.args[7] == OptionArg(StringArg("abc"))
    assert payload.args[8] == OptionArg(U64Arg(5))
    assert payload.args[9] == OptionArg()
    assert payload.args[13] == OptionArg(AddressArg(MARKET))
    assert payload.args[14] == OptionArg(U64Arg(7))
    assert encode_payload(payload).endswith(b"\x09\x01" + _u64(7))


def test_place_bulk_orders_args(package, owner) -> None:
    payload = dex.place_bulk_orders(
        package, owner, MARKET, 3, [100, 200], [10, 20], [300], [30]
    )
    assert payload.function.name == "place_bulk_orders_to_subaccount"
    assert payload.args[2] == U64Arg(3)
    assert payload.args[3] == U64VectorArg((100, 200))
    assert payload.args[6] == U64VectorArg((30,))


def test_cancel_bulk_orders_sends_empty_ladders(package, owner) -> None:
    payload = dex.cancel_bulk_orders(package, owner, MARKET, 9)
    assert payload.args[3:] == (U64VectorArg(()),) * 4
    assert encode_payload(payload).endswith(b"\x01\x00" * 4)


def test_orderless_wraps_with_nonce(package, owner, wire_vector) -> None:
    payload = dex.mint_usdc(package, owner, 1_000_000)
    inner = dex.orderless(payload, 42)
    assert isinstance(inner, InnerPayloadV1)
    assert inner.executable == EntryFunctionCall.from_entry_function_payload(payload)
    assert inner.extra_config.replay_protection_nonce == 42
    assert inner.extra_config.multisig_address is None

    legacy = encode_payload(payload)
    encoded = encode_inner_payload(inner)
    assert encoded == b"\x04\x00\x01" + legacy[1:] + b"\x00\x00\x01" + _u64(42)
    wire_vector(
        "dex_mint_usdc_orderless",
        {"function": "usdc::mint", "nonce": 42, "expected_hex": encoded.hex()},
    )


def test_orderless_with_multisig(package, owner) -> None:
    inner = dex.orderless(dex.mint_usdc(package, owner, 1), 1, multisig_address=MARKET)
    assert encode_inner_payload(inner).endswith(b"\x00\x01" + MARKET + b"\x01" + _u64(1))
