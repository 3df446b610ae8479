"""Presentation settings shared by the budget tracker front ends."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

__all__ = ["TrackerSettings", "round_half_up"]


def round_half_up(value: float, places: int) -> Decimal:
    """Round the shortest decimal form of ``value`` half-up to ``places`` digits."""
    # str() gives the shortest repr, so 1.005 rounds as written rather than as stored.
    exact = Decimal(str(value))
    context = Context(prec=max(28, exact.adjusted() + places + 2))
    return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context)


@dataclass(frozen=True)
class TrackerSettings:
    currency_symbol: str = "$"
    amount_places: int = 2
    percent_places: int = 1

    def format_amount(self, amount: float) -> str:
        """Render an amount with the currency symbol, e.g. ``$12.50``."""
        return f"{self.currency_symbol}{round_half_up(amount, self.amount_places)}"

    def format_percentage(self, percentage: float) -> str:
        return f"{round_half_up(percentage, self.percent_places)}%"
