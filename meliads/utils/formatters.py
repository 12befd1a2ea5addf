"""
Output Formatting Utilities

Display formatting for the dashboard. Money is shown in BRL with Brazilian
separators (R$ 1.234,56); ratios keep a dot decimal as on the campaign
screens.
"""

from datetime import date, datetime
from typing import Union

CURRENCY_SYMBOL = "R$"


def _swap_separators(text: str) -> str:
    # 1,234.56 -> 1.234,56
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float, currency: str = CURRENCY_SYMBOL) -> str:
    """
    Format number as currency.

    Args:
        value: Numeric value
        currency: Currency symbol

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {_swap_separators(f'{abs(value):,.2f}')}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """
    Format number as percentage.

    Args:
        value: Value already in percent (12.34 means 12.34%)
        decimals: Number of decimal places
    """
    return f"{value:.{decimals}f}%"


def format_multiplier(value: float, decimals: int = 2) -> str:
    """ROAS style: 3.00x"""
    return f"{value:.{decimals}f}x"


def format_count(value: int) -> str:
    """Thousands with a dot separator: 8.550"""
    return _swap_separators(f"{int(value):,}")


def format_date(value: Union[date, datetime]) -> str:
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime) -> str:
    return f"{value.strftime('%d/%m/%Y')} às {value.strftime('%H:%M:%S')}"


def initials(name: str) -> str:
    """Avatar text for the header."""
    return (name or '')[:2].upper()
