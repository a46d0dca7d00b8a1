"""Seller, buyer and payment details printed on invoices."""

from pydantic import BaseModel, Field, field_validator

from utils.identifiers import normalize_nik, normalize_npwp


class PartyInfo(BaseModel):
    """Fields shared by sellers and buyers."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., max_length=500)
    city: str | None = Field(None, max_length=100)
    province: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, pattern=r"^\d{5}$")
    phone: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=255)
    npwp: str | None = None

    model_config = {"frozen": True}

    @field_validator("npwp")
    @classmethod
    def validate_npwp(cls, value: str | None) -> str | None:
        """Store NPWP as bare digits; only the digit count is checked."""
        if not value:
            return None
        return normalize_npwp(value)

    @property
    def full_address(self) -> str:
        """Address line followed by city, province and postal code."""
        region = " ".join(p for p in [self.province, self.postal_code] if p)
        parts = [p for p in [self.address, self.city, region] if p]
        return ", ".join(parts)


class SellerInfo(PartyInfo):
    """The issuing business (Pengusaha Kena Pajak on tax invoices)."""

    logo: str | None = None  # URL or data URI, passed through to templating


class BuyerInfo(PartyInfo):
    """The invoiced party. Individuals without NPWP may give a NIK."""

    nik: str | None = None

    @field_validator("nik")
    @classmethod
    def validate_nik(cls, value: str | None) -> str | None:
        """Store NIK as bare digits; only the digit count is checked."""
        if not value:
            return None
        return normalize_nik(value)


class BankAccount(BaseModel):
    """A transfer destination shown under payment info."""

    bank_name: str = Field(..., min_length=1, max_length=100)
    account_number: str = Field(..., min_length=1, max_length=50)
    account_name: str = Field(..., min_length=1, max_length=255)

    model_config = {"frozen": True}


class PaymentInfo(BaseModel):
    """How the buyer can pay."""

    methods: list[str] = Field(default_factory=list)
    bank_accounts: list[BankAccount] = Field(default_factory=list)
    notes: str | None = Field(None, max_length=2000)

    model_config = {"frozen": True}
