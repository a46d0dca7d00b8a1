"""Invoice domain models.

Two documents share one record shape:
- InvoiceData: a standard commercial invoice. PPN is optional.
- TaxInvoiceData: a faktur pajak. PPN is mandatory and computed on DPP
  (dasar pengenaan pajak), which also subtracts any down payment.

Optional tax fields are None when the caller did not set them. Defaults
(PPN rate 11, PPN included when the rate is positive) are applied by the
calculator, not stored here.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from core.models.line_item import DiscountSpec, LineItem
from core.models.party import BuyerInfo, PaymentInfo, SellerInfo
from utils.money import ExactDecimal, Rupiah, exact_context


class DocumentType(str, Enum):
    """Which document a summary was produced for."""

    INVOICE = "invoice"
    TAX_INVOICE = "faktur_pajak"


class AdditionalFee(BaseModel):
    """Charge added after discounts. Never discounted, never taxed."""

    name: str = Field(..., min_length=1, max_length=255)
    amount: Rupiah

    model_config = {"frozen": True}


class InvoiceData(BaseModel):
    """A standard invoice as supplied by the caller."""

    invoice_number: str = Field(..., min_length=1, max_length=100)
    invoice_date: datetime | date
    due_date: datetime | date | None = None
    seller: SellerInfo
    buyer: BuyerInfo
    items: list[LineItem] = Field(default_factory=list)
    discount: DiscountSpec | None = None  # Global, applied after subtotal
    ppn_rate: ExactDecimal | None = None  # Percent; None -> default rate
    include_ppn: bool | None = None  # None -> included when rate > 0
    payment_info: PaymentInfo | None = None
    notes: str | None = Field(None, max_length=2000)
    additional_fees: list[AdditionalFee] = Field(default_factory=list)

    model_config = {"frozen": True}


class TaxInvoiceData(InvoiceData):
    """A faktur pajak. Extends the standard invoice with tax-base fields."""

    nsfp: str | None = Field(None, max_length=50)  # Opaque serial number
    down_payment: Rupiah | None = None
    ppnbm: Rupiah | None = None  # Explicit amount, wins over ppnbm_rate
    ppnbm_rate: ExactDecimal | None = None
    item_codes: list[str] = Field(default_factory=list)


class StandardTotals(BaseModel):
    """Computed totals of a standard invoice."""

    subtotal: Decimal
    discount: Decimal
    ppn: Decimal
    additional_fees: Decimal
    total: Decimal

    model_config = {"frozen": True}

    @property
    def after_discount(self) -> Decimal:
        """Subtotal less the global discount. May be negative."""
        with exact_context(self.subtotal, self.discount):
            return self.subtotal - self.discount


class TaxInvoiceTotals(BaseModel):
    """Computed totals of a tax invoice."""

    subtotal: Decimal
    discount: Decimal
    down_payment: Decimal
    dpp: Decimal
    ppn: Decimal
    ppnbm: Decimal
    total: Decimal

    model_config = {"frozen": True}


class InvoiceSummary(BaseModel):
    """
    Everything a templating component needs besides the raw invoice.

    Templating must take amounts from here and never redo tax math.
    """

    document_type: DocumentType
    invoice_number: str
    invoice_date: str
    due_date: str | None = None
    nsfp: str | None = None
    totals: StandardTotals | TaxInvoiceTotals
    total_display: str
    terbilang: str | None = None

    model_config = {"frozen": True}
