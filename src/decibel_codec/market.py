"""Market parameters and price/size quantization.

Prices and sizes are pre-scaled fixed-point integers (e.g. 260000000 for 2.60
with 8 price decimals). Decimal counts are informational and never applied here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .types import address_from_hex


def _expect_int(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _expect_step(name: str, value: int) -> int:
    _expect_int(name, value)
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value


def _ceil_to_step(raw: int, step: int) -> int:
    return step * ((max(raw, 1) - 1) // step + 1)


def price_to_tick(raw: int, round_up: bool, tick: int) -> int:
    """Round a price to a multiple of `tick`, down or up.

    Rounding up never yields less than one tick, even for non-positive input.
    """
    _expect_int("price", raw)
    _expect_step("tick size", tick)
    if round_up:
        return _ceil_to_step(raw, tick)
    return tick * (raw // tick)


def size_to_lot(raw: int, lot: int) -> int:
    """Round a size up to a multiple of `lot`."""
    _expect_int("size", raw)
    _expect_step("lot size", lot)
    return _ceil_to_step(raw, lot)


@dataclass(frozen=True)
class MarketParams:
    tick_size: int
    lot_size: int
    min_size: int = 0
    sz_decimals: int = 0
    px_decimals: int = 0
    market_addr: Optional[bytes] = None
    market_name: str = ""
    max_leverage: int = 0
    max_open_interest: int = 0

    def __post_init__(self) -> None:
        _expect_step("tick_size", self.tick_size)
        _expect_step("lot_size", self.lot_size)

    @classmethod
    def from_json(cls, node: Mapping[str, Any]) -> "MarketParams":
        """Build from one already-parsed entry of the `/api/v1/markets` response."""
        addr = node.get("market_addr")
        return cls(
            tick_size=int(node["tick_size"]),
            lot_size=int(node["lot_size"]),
            min_size=int(node.get("min_size", 0)),
            sz_decimals=int(node.get("sz_decimals", 0)),
            px_decimals=int(node.get("px_decimals", 0)),
            market_addr=address_from_hex(addr) if addr else None,
            market_name=str(node.get("market_name", "")),
            max_leverage=int(node.get("max_leverage", 0)),
            max_open_interest=int(node.get("max_open_interest", 0)),
        )

    def price_to_tick(self, raw: int, round_up: bool) -> int:
        return price_to_tick(raw, round_up, self.tick_size)

    def size_to_lot(self, raw: int) -> int:
        return size_to_lot(raw, self.lot_size)
