"""Simulated gas fee estimation.

fee = base gas units x gas price (gwei) x 1e-9, rounded to 8 decimal places.
Native ETH transfers use 21000 gas units, every other asset 140.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .money import format_fee, quantize_fee


NATIVE_ASSET = "ETH"
NATIVE_TRANSFER_GAS = 21000
TOKEN_TRANSFER_GAS = 140
DEFAULT_GAS_PRICE_GWEI = 30
GWEI = Decimal("1e-9")


@dataclass(frozen=True, slots=True)
class GasQuote:
    gas_fee: Decimal
    gas_price_gwei: int
    total: Decimal

    def to_dict(self) -> dict[str, str]:
        return {
            "gasFee": format_fee(self.gas_fee),
            "gasPrice": f"{self.gas_price_gwei} gwei",
            "total": format_fee(self.total),
        }


def base_gas_units(asset_type: str | None) -> int:
    return NATIVE_TRANSFER_GAS if asset_type == NATIVE_ASSET else TOKEN_TRANSFER_GAS


class GasEstimator:
    def __init__(self, gas_price_gwei: int = DEFAULT_GAS_PRICE_GWEI) -> None:
        self.gas_price_gwei = gas_price_gwei

    def estimate(self, asset_type: str | None, gas_price_gwei: int | None = None) -> Decimal:
        price = self.gas_price_gwei if gas_price_gwei is None else gas_price_gwei
        return quantize_fee(Decimal(base_gas_units(asset_type)) * Decimal(price) * GWEI)

    def estimate_total(self, amount: Decimal, fee: Decimal) -> Decimal:
        return quantize_fee(amount + fee)

    def quote(self, amount: Decimal, asset_type: str | None) -> GasQuote:
        fee = self.estimate(asset_type)
        return GasQuote(gas_fee=fee, gas_price_gwei=self.gas_price_gwei, total=self.estimate_total(amount, fee))
