"""Utility modules for cross-cutting concerns."""

from utils.money import to_decimal, percent_of, round_to_cents, split_rupiah, ExactDecimal, Rupiah
from utils.timezone import to_local, local_date
from utils.identifiers import digits_only, normalize_npwp, normalize_nik
from utils.formatters import format_rupiah, format_tanggal, format_npwp, format_phone
