"""Tests for utils/identifiers.py - NPWP and NIK digit-count checks."""

import pytest

from core.exceptions import InvalidTaxIdError
from utils.identifiers import digits_only, normalize_nik, normalize_npwp


class TestDigitsOnly:
    """Tests for digits_only()."""

    def test_strips_punctuation(self):
        assert digits_only("01.234.567.8-901.000") == "012345678901000"

    def test_none_is_empty(self):
        assert digits_only(None) == ""


class TestNormalizeNpwp:
    """Tests for normalize_npwp()."""

    def test_formatted_legacy(self):
        assert normalize_npwp("01.234.567.8-901.000") == "012345678901000"

    def test_sixteen_digits(self):
        assert normalize_npwp("3171011201900001") == "3171011201900001"

    @pytest.mark.parametrize("value", ["", "12345", "01234567890100", "01234567890123456"])
    def test_wrong_length(self, value):
        with pytest.raises(InvalidTaxIdError, match="NPWP"):
            normalize_npwp(value)


class TestNormalizeNik:
    """Tests for normalize_nik()."""

    def test_valid(self):
        assert normalize_nik("3171-0112-0190-0001") == "3171011201900001"

    def test_fifteen_digits_rejected(self):
        """A legacy NPWP length is not a NIK."""
        with pytest.raises(InvalidTaxIdError, match="NIK must have 16 digits"):
            normalize_nik("012345678901000")
