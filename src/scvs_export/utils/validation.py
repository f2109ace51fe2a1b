"""Input validation helpers."""

import re

RUC_PATTERN = re.compile(r"^[0-9]{13}$")


def validate_ruc(ruc: str) -> bool:
    """Check an Ecuadorian RUC for basic shape: exactly 13 numeric digits.

    Province and check-digit rules are not verified.
    """
    return bool(RUC_PATTERN.match(ruc or ""))
