"""Utility functions for scvs_export."""

from scvs_export.utils.amount_parser import parse_amount
from scvs_export.utils.validation import validate_ruc

__all__ = ["parse_amount", "validate_ruc"]
