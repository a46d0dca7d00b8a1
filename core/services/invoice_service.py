"""
Invoice service for totals and printable summaries.

Composes the tax calculator with the terbilang converter and the display
formatters. Templating and export live outside this package; they receive
an InvoiceSummary and must not recompute any amount.
"""

import logging
from datetime import date, datetime

from core.config import InvoiceConfig
from core.models import (
    DocumentType,
    InvoiceData,
    InvoiceSummary,
    StandardTotals,
    TaxInvoiceData,
    TaxInvoiceTotals,
)
from core.services.tax_calculator import (
    calculate_invoice_totals,
    calculate_tax_invoice_totals,
)
from core.terbilang import terbilang_rupiah
from utils.formatters import format_rupiah, format_tanggal

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice and tax-invoice computations."""

    def __init__(self, config: InvoiceConfig | None = None):
        self.config = config or InvoiceConfig()

    def calculate(self, invoice: InvoiceData) -> StandardTotals:
        """Totals of a standard invoice using the configured default PPN rate."""
        return calculate_invoice_totals(invoice, self.config.default_ppn_rate)

    def calculate_tax_invoice(self, invoice: TaxInvoiceData) -> TaxInvoiceTotals:
        """Totals of a tax invoice using the configured default PPN rate."""
        return calculate_tax_invoice_totals(invoice, self.config.default_ppn_rate)

    def summarize(self, invoice: InvoiceData) -> InvoiceSummary:
        """
        Totals plus display strings for a standard invoice.

        Args:
            invoice: Standard invoice record

        Returns:
            Summary with formatted dates, formatted total and, when
            show_terbilang is set, the total in words.
        """
        totals = self.calculate(invoice)
        return self._build_summary(DocumentType.INVOICE, invoice, totals)

    def summarize_tax_invoice(self, invoice: TaxInvoiceData) -> InvoiceSummary:
        """
        Totals plus display strings for a tax invoice.

        Same as summarize() but with DPP-based totals and the NSFP carried over.
        """
        totals = self.calculate_tax_invoice(invoice)
        return self._build_summary(
            DocumentType.TAX_INVOICE, invoice, totals, nsfp=invoice.nsfp
        )

    def terbilang(self, amount) -> str:
        """Amount in Indonesian words, e.g. "Seribu Rupiah"."""
        return terbilang_rupiah(amount)

    def format_rupiah(self, amount) -> str:
        """Amount formatted with the configured decimals setting."""
        return format_rupiah(amount, self.config.include_decimals)

    def _format_date(self, value: date | datetime | None) -> str | None:
        if value is None:
            return None
        return format_tanggal(value, self.config.date_format, self.config.timezone)

    def _build_summary(
        self,
        document_type: DocumentType,
        invoice: InvoiceData,
        totals: StandardTotals | TaxInvoiceTotals,
        nsfp: str | None = None,
    ) -> InvoiceSummary:
        words = terbilang_rupiah(totals.total) if self.config.show_terbilang else None

        summary = InvoiceSummary(
            document_type=document_type,
            invoice_number=invoice.invoice_number,
            invoice_date=self._format_date(invoice.invoice_date),
            due_date=self._format_date(invoice.due_date),
            nsfp=nsfp,
            totals=totals,
            total_display=self.format_rupiah(totals.total),
            terbilang=words,
        )

        logger.info(
            f"Summarized {document_type.value} {invoice.invoice_number}: "
            f"total={summary.total_display}"
        )
        return summary
