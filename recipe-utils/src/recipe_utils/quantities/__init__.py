"""Quantity parsing, formatting and scaling utilities."""

from .formatting import FRACTION_DENOMINATORS, FRACTION_TOLERANCE, format_quantity
from .models import ParsedQuantity
from .parsing import parse_quantity_string
from .scaling import SCALABLE_FIELDS, scale_ingredient

__all__ = [
    "parse_quantity_string",
    "format_quantity",
    "scale_ingredient",
    "ParsedQuantity",
    "FRACTION_DENOMINATORS",
    "FRACTION_TOLERANCE",
    "SCALABLE_FIELDS",
]
