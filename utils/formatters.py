"""
Indonesian display formats for invoice documents.

Display only. Nothing here feeds tax math; totals come from
core.services.tax_calculator.
"""

from datetime import date, datetime

from utils.identifiers import digits_only
from utils.money import round_to_cents, to_decimal
from utils.timezone import DEFAULT_TIMEZONE, local_date

MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)

DATE_STYLES = ("long", "medium", "short")


def format_rupiah(amount, include_decimals: bool = False) -> str:
    """
    Format an amount as Rupiah with Indonesian separators.

        format_rupiah(1000000)             -> "Rp 1.000.000"
        format_rupiah(1234567.89, True)    -> "Rp 1.234.567,89"
        format_rupiah(-5000)               -> "-Rp 5.000"

    The amount is rounded half-up to sen first. Without decimals the sen
    are dropped, not rounded into the rupiah.
    """
    value = to_decimal(amount)
    rounded = round_to_cents(value.copy_abs())
    integer_part, _, decimal_part = f"{rounded:f}".partition(".")

    result = f"{int(integer_part):,}".replace(",", ".")
    if include_decimals:
        result = f"{result},{decimal_part}"

    sign = "-" if value < 0 else ""
    return f"{sign}Rp {result}"


def format_tanggal(
    value: date | datetime,
    style: str = "long",
    tz_name: str = DEFAULT_TIMEZONE,
) -> str:
    """
    Format a date the Indonesian way.

    Styles:
        long   -> "17 Desember 2024"
        medium -> "17 Des 2024"
        short  -> "17/12/2024"

    Aware datetimes are converted to tz_name before the date is taken.

    Raises:
        ValueError: Unknown style
    """
    if style not in DATE_STYLES:
        raise ValueError(f"Unknown date style: {style}")

    day = local_date(value, tz_name)

    if style == "short":
        return f"{day.day:02d}/{day.month:02d}/{day.year}"
    if style == "medium":
        return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]} {day.year}"
    return f"{day.day} {MONTH_NAMES[day.month - 1]} {day.year}"


def format_npwp(npwp: str | None) -> str:
    """
    Format a 15-digit NPWP as XX.XXX.XXX.X-XXX.XXX.

    Input with any other digit count (including the 16-digit NPWP) is
    returned unchanged.
    """
    if not npwp:
        return ""

    digits = digits_only(npwp)
    if len(digits) != 15:
        return npwp

    return (
        f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}.{digits[8]}"
        f"-{digits[9:12]}.{digits[12:15]}"
    )


def format_phone(phone: str | None) -> str:
    """
    Group an Indonesian phone number.

        format_phone("081234567890")      -> "0812-3456-7890"
        format_phone("+62 812 3456 7890") -> "0812-3456-7890"

    Numbers that are not 10-13 digits or do not start with 0 or 62 are
    returned unchanged.
    """
    if not phone:
        return ""

    digits = digits_only(phone)
    if not 10 <= len(digits) <= 13:
        return phone

    if digits.startswith("0"):
        if len(digits) == 13:
            return f"{digits[:4]}-{digits[4:9]}-{digits[9:]}"
        if len(digits) in (11, 12):
            return f"{digits[:4]}-{digits[4:8]}-{digits[8:]}"
        return digits

    if digits.startswith("62"):
        return format_phone("0" + digits[2:])

    return phone
