"""Core domain models."""

from core.models.line_item import DiscountSpec, LineItem
from core.models.party import PartyInfo, SellerInfo, BuyerInfo, BankAccount, PaymentInfo
from core.models.invoice import (
    AdditionalFee,
    DocumentType,
    InvoiceData,
    InvoiceSummary,
    StandardTotals,
    TaxInvoiceData,
    TaxInvoiceTotals,
)

__all__ = [
    # LineItem
    "DiscountSpec", "LineItem",
    # Parties
    "PartyInfo", "SellerInfo", "BuyerInfo", "BankAccount", "PaymentInfo",
    # Invoice
    "AdditionalFee", "DocumentType", "InvoiceData", "TaxInvoiceData",
    # Totals
    "StandardTotals", "TaxInvoiceTotals", "InvoiceSummary",
]
