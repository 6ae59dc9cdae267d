"""GS1 barcode (GTIN) normalisation and check digit validation."""

import re

from ..core.exceptions import ValidationError

GTIN_LENGTHS = frozenset({8, 12, 13, 14})

_SEPARATORS = re.compile(r"[\s-]")


def normalize_gtin(value: str) -> str:
    return _SEPARATORS.sub("", value or "")


def calculate_check_digit(digits: str) -> int:
    """Return the GS1 check digit for a GTIN without its last digit.

    Weights alternate 3, 1, 3... starting from the rightmost digit.
    """
    total = 0
    for position, digit in enumerate(reversed(digits)):
        weight = 3 if position % 2 == 0 else 1
        total += int(digit) * weight
    return (10 - total % 10) % 10


def is_valid_gtin(value: str) -> bool:
    gtin = normalize_gtin(value)
    if not gtin.isdigit() or len(gtin) not in GTIN_LENGTHS:
        return False
    return calculate_check_digit(gtin[:-1]) == int(gtin[-1])


def validate_gtin(value: str, field: str = "gtin") -> str:
    """Return the normalised GTIN or raise ValidationError."""
    if not is_valid_gtin(value):
        raise ValidationError(
            "GTIN format is invalid. Must be a valid GTIN-8, GTIN-12, GTIN-13, "
            "or GTIN-14 with correct check digit.",
            field=field,
        )
    return normalize_gtin(value)
