"""Parsing of account balances and adjustment values."""

import re
from decimal import Decimal, InvalidOperation

# Optional sign, optional US dollar sign, digits with optional comma grouping,
# optional decimals. Ecuadorian ledgers are kept in USD.
BALANCE_PATTERN = re.compile(r"^([+-]?)\$?(\d{1,3}(?:,\d{3})+|\d+)(\.\d+)?$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a balance as exported by accounting software.

    Accepts "1234.56", "-1234.56", "1,234.56", "$1,234.56" and the
    accountant's "(1,234.56)" for negative balances.

    Raises:
        ValueError: If the text is not a balance
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1].strip()

    match = BALANCE_PATTERN.match(text)
    if match is None or (negative and match.group(1)):
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    sign, whole, decimals = match.groups()
    try:
        amount = Decimal(whole.replace(",", "") + (decimals or ""))
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")
    if negative or sign == "-":
        amount = -amount
    return amount
