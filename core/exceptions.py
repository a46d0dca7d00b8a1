"""Typed exceptions for invoice input failures."""


class InvoiceError(Exception):
    """Base class for invoice input errors."""


class InvalidAmountError(InvoiceError, ValueError):
    """
    Amount cannot be used as Rupiah.

    Raised for NaN, infinity, or strings that are not numbers.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid amount: {value!r}")


class InvalidTaxIdError(InvoiceError, ValueError):
    """
    NPWP or NIK does not have the expected number of digits.

    Only the digit count is checked. Checksums are not validated.
    """

    def __init__(self, kind: str, value: str, expected: str):
        self.kind = kind
        self.value = value
        super().__init__(f"{kind} must have {expected} digits, got {value!r}")
