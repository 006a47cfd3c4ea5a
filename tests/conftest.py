"""Pytest hooks to collect wire vectors while tests run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

_WIRE_VECTORS: list[dict[str, Any]] = []
_VECTOR_CASES: dict[str, list[dict[str, Any]]] = {}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--output",
        action="store",
        default=None,
        help="Output directory for collected vectors",
    )


@pytest.fixture
def wire_vector() -> Callable[[str, dict[str, Any]], None]:
    """Collect a wire-format vector case."""

    def _wire_vector(name: str, vector: dict[str, Any]) -> None:
        payload = {"name": name}
        payload.update(vector)
        _WIRE_VECTORS.append(payload)

    return _wire_vector


@pytest.fixture
def vector_test_group() -> Callable[[str, dict[str, Any]], None]:
    """Collect test_vectors under a specific output path."""

    def _vector_test_group(rel_path: str, vector: dict[str, Any]) -> None:
        _VECTOR_CASES.setdefault(rel_path, []).append(vector)

    return _vector_test_group


@pytest.fixture
def package() -> bytes:
    return bytes([0x1B]) * 32


@pytest.fixture
def owner() -> bytes:
    return bytes([0x11]) * 32


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    output_dir = session.config.getoption("--output")
    if not output_dir:
        return

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    if _WIRE_VECTORS:
        (out / "wire_format.json").write_text(
            json.dumps({"vectors": _WIRE_VECTORS}, indent=2)
        )

    for rel_path, vectors in _VECTOR_CASES.items():
        if not vectors:
            continue
        target = out / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps({"test_vectors": vectors}, indent=2))
