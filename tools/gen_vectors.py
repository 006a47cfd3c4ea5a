#!/usr/bin/env python3
"""Generate payload/address/quantization YAML vectors from the Python codec."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tools"))

from decibel_codec.crypto.address import (  # noqa: E402
    create_object_address,
    primary_subaccount_address,
    usdc_address,
)
from decibel_codec.market import price_to_tick, size_to_lot  # noqa: E402
from decibel_codec.tx import dex  # noqa: E402
from decibel_codec.tx.payload import encode_payload  # noqa: E402
from decibel_codec.types import address_from_hex, address_to_hex  # noqa: E402
from yaml_dump import write_yaml  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_ADDRESS = "0x" + "1b" * 32


@dataclass
class VectorConfig:
    """Settings for vector generation."""
    vector_dir: str = str(ROOT / "vectors")
    package_address: str = DEFAULT_PACKAGE_ADDRESS
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "VectorConfig":
        """Load configuration from environment variables."""
        config = cls()
        config.vector_dir = os.environ.get("VECTOR_DIR", config.vector_dir)
        config.package_address = os.environ.get("PACKAGE_ADDRESS", config.package_address)
        config.verbose = os.environ.get("VERBOSE", "").lower() in ("true", "1", "yes")
        return config


def _addr(byte: int) -> bytes:
    return bytes([byte]) * 32


def payload_vectors(package: bytes) -> Dict[str, Any]:
    owner = _addr(0x11)
    market = _addr(0x22)
    subaccount = primary_subaccount_address(package, owner)
    usdc = usdc_address(package)

    cases = [
        ("mint_usdc", dex.mint_usdc(package, owner, 1_000_000)),
        ("deposit_to_subaccount", dex.deposit_to_subaccount(package, subaccount, usdc, 500_000)),
        (
            "place_order_gtc_buy",
            dex.place_order(
                package, subaccount, market, 260_000_000, 100_000, True,
                dex.TimeInForce.GOOD_TILL_CANCELED, False,
            ),
        ),
        (
            "place_order_client_id",
            dex.place_order(
                package, subaccount, market, 260_000_100, 101_000, False,
                dex.TimeInForce.POST_ONLY, True, client_order_id="order-1",
            ),
        ),
        (
            "place_bulk_orders",
            dex.place_bulk_orders(
                package, subaccount, market, 7,
                [259_000_000, 258_000_000], [1_000, 2_000],
                [261_000_000, 262_000_000], [1_000, 2_000],
            ),
        ),
        ("cancel_bulk_orders", dex.cancel_bulk_orders(package, subaccount, market, 8)),
    ]

    vectors: List[Dict[str, Any]] = []
    for name, payload in cases:
        vectors.append(
            {
                "name": name,
                "package": address_to_hex(package),
                "function": f"{payload.module}::{payload.function}",
                "expected_hex": encode_payload(payload).hex(),
            }
        )
        vectors.append(
            {
                "name": f"{name}_orderless",
                "package": address_to_hex(package),
                "function": f"{payload.module}::{payload.function}",
                "nonce": 42,
                "expected_hex": encode_payload(dex.orderless(payload, 42)).hex(),
            }
        )
    return {"test_vectors": vectors}


def address_vectors(package: bytes) -> Dict[str, Any]:
    vectors: List[Dict[str, Any]] = []
    for seed in ("USDC", "GlobalSubaccountManager"):
        vectors.append(
            {
                "name": f"object_{seed.lower()}",
                "publisher": address_to_hex(package),
                "seed": seed,
                "expected": address_to_hex(create_object_address(package, seed)),
            }
        )
    for byte in (0x00, 0x11, 0xFF):
        owner = _addr(byte)
        vectors.append(
            {
                "name": f"primary_subaccount_{byte:02x}",
                "publisher": address_to_hex(package),
                "owner": address_to_hex(owner),
                "expected": address_to_hex(primary_subaccount_address(package, owner)),
            }
        )
    return {"test_vectors": vectors}


def quantize_vectors() -> Dict[str, Any]:
    vectors: List[Dict[str, Any]] = []
    for raw, round_up, tick in (
        (260_000_000, False, 100),
        (260_000_099, False, 100),
        (260_000_001, True, 100),
        (0, True, 100),
        (-5, True, 100),
    ):
        vectors.append(
            {
                "name": f"price_{raw}_{'up' if round_up else 'down'}_{tick}",
                "kind": "price",
                "raw": raw,
                "round_up": round_up,
                "step": tick,
                "expected": price_to_tick(raw, round_up, tick),
            }
        )
    for raw, lot in ((100_000, 1_000), (100_001, 1_000), (1, 1_000)):
        vectors.append(
            {
                "name": f"size_{raw}_{lot}",
                "kind": "size",
                "raw": raw,
                "step": lot,
                "expected": size_to_lot(raw, lot),
            }
        )
    return {"test_vectors": vectors}


@click.command()
@click.option("--output", default=None, help="Directory to write vector files")
@click.option("--package-address", default=None, help="DEX package address (hex)")
@click.option("--verbose", is_flag=True, help="Enable verbose output")
def main(output: Optional[str], package_address: Optional[str], verbose: bool) -> None:
    """Write payload, address and quantization vectors as YAML."""
    config = VectorConfig.from_env()
    if output:
        config.vector_dir = output
    if package_address:
        config.package_address = package_address
    if verbose:
        config.verbose = True
    if config.verbose:
        logger.setLevel(logging.DEBUG)

    package = address_from_hex(config.package_address)
    out = Path(config.vector_dir)
    out.mkdir(parents=True, exist_ok=True)

    files = {
        "payloads.yaml": payload_vectors(package),
        "addresses.yaml": address_vectors(package),
        "quantize.yaml": quantize_vectors(),
    }
    for filename, data in files.items():
        write_yaml(out / filename, data)
        logger.debug(f"{filename}: {len(data['test_vectors'])} vectors")

    logger.info(f"Wrote {len(files)} vector files to {out}")


if __name__ == "__main__":
    main()
