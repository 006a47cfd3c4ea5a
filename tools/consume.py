"""Consume vector files and validate them against the Python codec."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Dict, Optional

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tools"))

from decibel_codec.crypto.address import (  # noqa: E402
    create_object_address,
    primary_subaccount_address,
)
from decibel_codec.market import price_to_tick, size_to_lot  # noqa: E402
from decibel_codec.types import address_from_hex, address_to_hex  # noqa: E402
from gen_vectors import VectorConfig, payload_vectors  # noqa: E402
from yaml_dump import read_yaml  # noqa: E402

VECTOR_FILES = ("payloads.yaml", "addresses.yaml", "quantize.yaml")


def _check_payloads(path: Path, default_package: str) -> list[str]:
    failures: list[str] = []
    by_package: Dict[str, Dict[str, str]] = {}
    for vec in read_yaml(path).get("test_vectors", []):
        package = vec.get("package", default_package)
        if package not in by_package:
            generated = payload_vectors(address_from_hex(package))["test_vectors"]
            by_package[package] = {v["name"]: v["expected_hex"] for v in generated}
        actual = by_package[package].get(vec["name"])
        if actual is None:
            failures.append(f"{vec['name']}: unknown_vector")
        elif actual != vec["expected_hex"]:
            failures.append(f"{vec['name']}: wire_mismatch")
    return failures


def _check_addresses(path: Path) -> list[str]:
    failures: list[str] = []
    for vec in read_yaml(path).get("test_vectors", []):
        publisher = address_from_hex(vec["publisher"])
        if "owner" in vec:
            actual = primary_subaccount_address(publisher, address_from_hex(vec["owner"]))
        else:
            actual = create_object_address(publisher, vec["seed"])
        if address_to_hex(actual) != vec["expected"]:
            failures.append(f"{vec['name']}: address_mismatch")
    return failures


def _check_quantize(path: Path) -> list[str]:
    failures: list[str] = []
    for vec in read_yaml(path).get("test_vectors", []):
        if vec["kind"] == "price":
            actual = price_to_tick(vec["raw"], vec["round_up"], vec["step"])
        else:
            actual = size_to_lot(vec["raw"], vec["step"])
        if actual != vec["expected"]:
            failures.append(f"{vec['name']}: quantize_mismatch")
    return failures


def main(vector_dir: Optional[str] = None, package_address: Optional[str] = None) -> None:
    config = VectorConfig.from_env()
    vectors = Path(vector_dir or config.vector_dir)
    package = package_address or config.package_address

    present = [name for name in VECTOR_FILES if (vectors / name).exists()]
    if not present:
        print(f"FAIL no vector files in {vectors}")
        raise SystemExit(1)

    failures: list[str] = []

    payloads = vectors / "payloads.yaml"
    if payloads.exists():
        failures.extend(_check_payloads(payloads, package))
    addresses = vectors / "addresses.yaml"
    if addresses.exists():
        failures.extend(_check_addresses(addresses))
    quantize = vectors / "quantize.yaml"
    if quantize.exists():
        failures.extend(_check_quantize(quantize))

    if failures:
        for f in failures:
            print("FAIL", f)
        raise SystemExit(1)

    print(f"All vectors passed ({', '.join(present)})")


if __name__ == "__main__":
    main()
