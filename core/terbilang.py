"""
Indonesian spelled-out amounts ("terbilang") for Rupiah.

    terbilang_rupiah(11433000)
    -> "Sebelas Juta Empat Ratus Tiga Puluh Tiga Ribu Rupiah"

The integer part is split into groups of three digits. Each group is spelled
with spell_below_thousand() and suffixed with its scale word. Two irregular
forms exist: "Seratus" for one hundred and "Seribu" for a thousands group
of exactly one. Higher scales keep "Satu" ("Satu Juta", "Satu Triliun").

Amounts are rounded half-up to whole sen before spelling. There is no upper
limit: a trillions group above 999 is itself spelled as an integer
("Seribu Triliun").

NaN and infinity are spelled "Nol Rupiah". Non-numeric input raises.
"""

import logging
import math
from decimal import Decimal

from utils.money import split_rupiah, to_decimal

logger = logging.getLogger(__name__)

ZERO_WORD = "Nol"
CURRENCY_WORD = "Rupiah"
MINOR_UNIT_WORD = "Sen"
NEGATIVE_WORD = "Minus"

# Index = value. Ones and teens are lexically distinct, not composed.
_BELOW_TWENTY = (
    "", "Satu", "Dua", "Tiga", "Empat", "Lima",
    "Enam", "Tujuh", "Delapan", "Sembilan", "Sepuluh",
    "Sebelas", "Dua Belas", "Tiga Belas", "Empat Belas", "Lima Belas",
    "Enam Belas", "Tujuh Belas", "Delapan Belas", "Sembilan Belas",
)

THOUSAND = "Ribu"
MILLION = "Juta"
BILLION = "Milyar"
TRILLION = "Triliun"

# Most significant first; the trailing 0-999 group has no scale word
SCALES = (TRILLION, BILLION, MILLION, THOUSAND)


def spell_below_hundred(value: int) -> str:
    """Spell 0-99. Zero is the empty string."""
    if value < 20:
        return _BELOW_TWENTY[value]

    tens, ones = divmod(value, 10)
    words = [_BELOW_TWENTY[tens], "Puluh"]
    if ones:
        words.append(_BELOW_TWENTY[ones])
    return " ".join(words)


def spell_below_thousand(value: int) -> str:
    """
    Spell 0-999. Zero is the empty string so callers can skip empty groups.

    A hundreds digit of one is "Seratus", never "Satu Ratus".
    """
    hundreds, remainder = divmod(value, 100)

    words = []
    if hundreds == 1:
        words.append("Seratus")
    elif hundreds > 1:
        words.append(f"{_BELOW_TWENTY[hundreds]} Ratus")
    if remainder:
        words.append(spell_below_hundred(remainder))
    return " ".join(words)


def split_groups(value: int) -> list[int]:
    """
    Split a non-negative integer into [trillions, billions, millions, thousands, units].

    Every group except trillions is 0-999. Trillions take whatever is left.
    """
    value, units = divmod(value, 1000)
    value, thousands = divmod(value, 1000)
    value, millions = divmod(value, 1000)
    trillions, billions = divmod(value, 1000)
    return [trillions, billions, millions, thousands, units]


def spell_group(value: int, scale: str) -> str:
    """
    Spell one scaled group, e.g. (433, "Ribu") -> "Empat Ratus Tiga Puluh Tiga Ribu".

    Returns the empty string for zero.
    """
    if value == 0:
        return ""
    if scale == THOUSAND and value == 1:
        return "Seribu"
    if value >= 1000:
        return f"{spell_integer(value)} {scale}"
    return f"{spell_below_thousand(value)} {scale}"


def spell_integer(value: int) -> str:
    """Spell a non-negative integer without currency words. Zero is "Nol"."""
    if value == 0:
        return ZERO_WORD

    *scaled, units = split_groups(value)
    tokens = [spell_group(group, scale) for group, scale in zip(scaled, SCALES)]
    tokens.append(spell_below_thousand(units))
    return " ".join(token for token in tokens if token)


def _is_non_finite(amount) -> bool:
    if isinstance(amount, float):
        return not math.isfinite(amount)
    if isinstance(amount, Decimal):
        return not amount.is_finite()
    return False


def terbilang_rupiah(amount) -> str:
    """
    Spell a Rupiah amount in Indonesian words.

    Args:
        amount: int, float, str or Decimal. Negative amounts are allowed.

    Returns:
        Words ending in "Rupiah", followed by "<words> Sen" when the rounded
        amount has a fractional part. Zero, NaN and infinity are exactly
        "Nol Rupiah".

    Raises:
        InvalidAmountError: amount is not a number, e.g. "abc".
    """
    if _is_non_finite(amount):
        logger.warning(f"Non-finite amount {amount!r} spelled as zero")
        return f"{ZERO_WORD} {CURRENCY_WORD}"

    value = to_decimal(amount)
    if value == 0:
        return f"{ZERO_WORD} {CURRENCY_WORD}"

    rupiah, sen = split_rupiah(value.copy_abs())

    tokens = [spell_integer(rupiah), CURRENCY_WORD]
    if sen:
        tokens.extend([spell_below_thousand(sen), MINOR_UNIT_WORD])
    if value < 0:
        tokens.insert(0, NEGATIVE_WORD)

    return " ".join(tokens)
