"""
Currency display.

The storefront sells in a single currency chosen by configuration
(STORE_CURRENCY). Each supported currency carries its locale conventions:
symbol, grouping and decimal separators, and symbol placement.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from storefront.config import STORE_CURRENCY
from storefront.services.money import Number, round_money

NBSP = "\u00a0"


@dataclass(frozen=True)
class CurrencyFormat:
    """Locale conventions for displaying one currency."""
    symbol: str
    decimal_separator: str
    group_separator: str
    symbol_first: bool = True
    spacer: str = NBSP


# Matches Intl.NumberFormat output for the locale each currency is sold in
CURRENCY_FORMATS: Dict[str, CurrencyFormat] = {
    "BRL": CurrencyFormat(symbol="R$", decimal_separator=",", group_separator="."),  # pt-BR
    "USD": CurrencyFormat(symbol="$", decimal_separator=".", group_separator=",", spacer=""),  # en-US
    "EUR": CurrencyFormat(symbol="€", decimal_separator=",", group_separator=".", symbol_first=False),  # pt-PT
}


class CurrencyFormatter:
    """
    Formats amounts as display strings.

    Amounts are rounded to cents with ROUND_HALF_UP at format time. The same
    amount always yields the same string, so a line subtotal and the grand
    total are rounded the same way.
    """

    def __init__(self, currency: Optional[str] = None) -> None:
        code = (currency or STORE_CURRENCY).upper()
        if code not in CURRENCY_FORMATS:
            raise ValueError(f"Unsupported currency: {code}")
        self.currency = code
        self.spec = CURRENCY_FORMATS[code]

    def format(self, amount: Number) -> str:
        rounded = round_money(amount)
        sign = "-" if rounded < 0 else ""

        # Python renders "1,234.56"; swap in the locale separators in one pass
        digits = f"{abs(rounded):,.2f}".translate(
            str.maketrans({",": self.spec.group_separator, ".": self.spec.decimal_separator})
        )

        if self.spec.symbol_first:
            return f"{sign}{self.spec.symbol}{self.spec.spacer}{digits}"
        return f"{sign}{digits}{self.spec.spacer}{self.spec.symbol}"

    __call__ = format
