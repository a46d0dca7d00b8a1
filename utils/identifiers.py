"""
Structural checks for Indonesian taxpayer identifiers.

Only digit counts are checked. NPWP and NIK checksums are out of scope.
"""

import re

from core.exceptions import InvalidTaxIdError

_NON_DIGIT = re.compile(r"\D")

# Legacy NPWP is 15 digits; the NIK-based NPWP introduced in 2024 is 16
NPWP_LENGTHS = (15, 16)
NIK_LENGTH = 16


def digits_only(value: str) -> str:
    """Strip every non-digit character ("01.234.567.8-901.000" -> "012345678901000")."""
    return _NON_DIGIT.sub("", value or "")


def normalize_npwp(value: str) -> str:
    """
    Return the bare digits of an NPWP.

    Raises:
        InvalidTaxIdError: Not 15 or 16 digits after stripping punctuation.
    """
    digits = digits_only(value)
    if len(digits) not in NPWP_LENGTHS:
        raise InvalidTaxIdError("NPWP", value, "15 or 16")
    return digits


def normalize_nik(value: str) -> str:
    """
    Return the bare digits of a NIK (national identity number).

    Raises:
        InvalidTaxIdError: Not exactly 16 digits after stripping punctuation.
    """
    digits = digits_only(value)
    if len(digits) != NIK_LENGTH:
        raise InvalidTaxIdError("NIK", value, str(NIK_LENGTH))
    return digits
