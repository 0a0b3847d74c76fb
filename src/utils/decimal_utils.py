"""Helpers for Decimal normalization and formatting."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two places using half-up rounding."""
    return coerce_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Format an amount with exactly two decimals and no grouping.

    Args:
        value: Amount to format.

    Returns:
        str: Plain representation such as ``1000.00`` or ``-12.50``.
    """
    return f"{quantize_cents(value):.2f}"


def format_currency(value: Decimal, currency_code: str = "BRL") -> str:
    """Format currency values for display using pt-BR separators."""
    symbol = "R$" if currency_code == "BRL" else currency_code
    grouped = f"{quantize_cents(value):,.2f}"
    localized = (
        grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    )
    return f"{symbol} {localized}"


__all__ = [
    "CENTS",
    "coerce_decimal",
    "quantize_cents",
    "format_amount",
    "format_currency",
]
