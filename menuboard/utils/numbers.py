"""Number, price and spreadsheet time parsing."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from menuboard.core.catalog import RegionalConfig

logger = logging.getLogger(__name__)

MINUTES_PER_DAY: int = 24 * 60


def parse_number(value: str | None, number_format: str = "us") -> Decimal | None:
    """Parse a CSV number; ``it`` format uses a comma as decimal separator."""
    if not value:
        return None
    text = str(value).strip()
    if number_format == "it":
        text = text.replace(",", ".", 1)
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def parse_price(
    value: str | None,
    number_format: str = "us",
    regional: RegionalConfig | None = None,
) -> tuple[Decimal | None, str]:
    """Return ``(amount, display)`` for a price cell.

    Unparsable prices keep their literal text as display string so that cells
    like "market price" or "8/10" still show up on the menu.
    """
    if not value or not str(value).strip():
        return None, ""
    raw = str(value).strip()
    text = raw
    if regional is not None and regional.currency_symbol:
        text = text.replace(regional.currency_symbol, "").strip()
    amount = parse_number(text, number_format)
    if amount is None:
        logger.debug("Price %r is not numeric; keeping literal text", raw)
        return None, raw
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return amount, format_amount(amount, regional)


def format_amount(amount: Decimal, regional: RegionalConfig | None = None) -> str:
    separator = regional.decimal_separator if regional is not None else ","
    return f"{amount:.2f}".replace(".", separator)


def format_price(amount: Decimal | None, display: str, regional: RegionalConfig) -> str:
    """Price label with currency symbol, or the literal display text."""
    if amount is None:
        return display
    return f"{regional.currency_symbol} {format_amount(amount, regional)}".strip()


def parse_time_value(value: str | None, number_format: str = "us") -> str:
    """Normalize a spreadsheet time cell to ``HH:MM``.

    Cells are either ``HH:MM`` literals or fractions of a day as serialized by
    spreadsheet exports (0.5 == 12:00). Anything else is returned unchanged.
    """
    if not value:
        return ""
    text = str(value).strip()
    if ":" in text:
        return text
    fraction = parse_number(text, number_format)
    if fraction is None:
        logger.debug("Time %r is neither HH:MM nor a day fraction", text)
        return text
    total_minutes = int((fraction * MINUTES_PER_DAY).to_integral_value(rounding=ROUND_HALF_UP))
    hours = (total_minutes // 60) % 24
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"
