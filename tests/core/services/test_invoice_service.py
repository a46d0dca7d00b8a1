"""Tests for InvoiceService."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from core.config import InvoiceConfig
from core.models import (
    DiscountSpec,
    DocumentType,
    InvoiceData,
    StandardTotals,
    TaxInvoiceData,
    TaxInvoiceTotals,
)


@pytest.fixture
def invoice_service():
    """InvoiceService with default config."""
    from core.services.invoice_service import InvoiceService

    return InvoiceService()


class TestCalculate:
    """Tests for calculate() / calculate_tax_invoice()."""

    def test_standard_uses_default_rate(self, invoice_service, invoice_fields):
        totals = invoice_service.calculate(InvoiceData(**invoice_fields))
        assert isinstance(totals, StandardTotals)
        assert totals.total == Decimal("22200000")

    def test_configured_rate(self, invoice_fields):
        from core.services.invoice_service import InvoiceService

        service = InvoiceService(InvoiceConfig(default_ppn_rate=12))
        assert service.calculate(InvoiceData(**invoice_fields)).ppn == Decimal("2400000")

    def test_tax_invoice(self, invoice_service, invoice_fields):
        invoice = TaxInvoiceData(**invoice_fields, down_payment=5_000_000)
        totals = invoice_service.calculate_tax_invoice(invoice)
        assert isinstance(totals, TaxInvoiceTotals)
        assert totals.total == Decimal("16650000")


class TestSummarize:
    """Tests for summarize()."""

    def test_summary_fields(self, invoice_service, invoice_fields):
        invoice_fields["due_date"] = date(2025, 1, 16)
        summary = invoice_service.summarize(InvoiceData(**invoice_fields))

        assert summary.document_type == DocumentType.INVOICE
        assert summary.invoice_number == "INV-2024-001"
        assert summary.invoice_date == "17 Desember 2024"
        assert summary.due_date == "16 Januari 2025"
        assert summary.nsfp is None
        assert summary.total_display == "Rp 22.200.000"
        assert summary.terbilang == "Dua Puluh Dua Juta Dua Ratus Ribu Rupiah"

    def test_terbilang_follows_discounted_total(self, invoice_service, invoice_fields):
        invoice = InvoiceData(**invoice_fields, discount=DiscountSpec.percent(10))
        summary = invoice_service.summarize(invoice)

        assert summary.totals.total == Decimal("19980000")
        assert summary.terbilang == (
            "Sembilan Belas Juta Sembilan Ratus Delapan Puluh Ribu Rupiah"
        )

    def test_no_due_date(self, invoice_service, invoice_fields):
        summary = invoice_service.summarize(InvoiceData(**invoice_fields))
        assert summary.due_date is None

    def test_terbilang_disabled(self, invoice_fields):
        from core.services.invoice_service import InvoiceService

        service = InvoiceService(InvoiceConfig(show_terbilang=False))
        summary = service.summarize(InvoiceData(**invoice_fields))
        assert summary.terbilang is None

    def test_config_controls_display(self, invoice_fields):
        from core.services.invoice_service import InvoiceService

        service = InvoiceService(InvoiceConfig(include_decimals=True, date_format="short"))
        summary = service.summarize(InvoiceData(**invoice_fields))

        assert summary.total_display == "Rp 22.200.000,00"
        assert summary.invoice_date == "17/12/2024"

    def test_aware_datetime_dated_in_jakarta(self, invoice_service, invoice_fields):
        """20:00 UTC on the 17th is already the 18th in Jakarta (UTC+7)."""
        invoice_fields["invoice_date"] = datetime(2024, 12, 17, 20, 0, tzinfo=timezone.utc)
        summary = invoice_service.summarize(InvoiceData(**invoice_fields))
        assert summary.invoice_date == "18 Desember 2024"

    def test_summary_totals_match_calculate(self, invoice_service, invoice_fields):
        invoice = InvoiceData(**invoice_fields, discount=DiscountSpec.fixed(123_456))
        assert invoice_service.summarize(invoice).totals == invoice_service.calculate(invoice)


class TestSummarizeTaxInvoice:
    """Tests for summarize_tax_invoice()."""

    def test_summary_fields(self, invoice_service, invoice_fields):
        invoice = TaxInvoiceData(
            **invoice_fields,
            nsfp="010.000-24.12345678",
            down_payment=5_000_000,
        )
        summary = invoice_service.summarize_tax_invoice(invoice)

        assert summary.document_type == DocumentType.TAX_INVOICE
        assert summary.nsfp == "010.000-24.12345678"
        assert isinstance(summary.totals, TaxInvoiceTotals)
        assert summary.totals.dpp == Decimal("15000000")
        assert summary.total_display == "Rp 16.650.000"
        assert summary.terbilang == "Enam Belas Juta Enam Ratus Lima Puluh Ribu Rupiah"

    def test_fractional_total_spells_sen(self, invoice_service, invoice_fields):
        from core.models import LineItem

        invoice_fields["items"] = [LineItem(name="Jasa", quantity=1, unit_price=1005)]
        summary = invoice_service.summarize_tax_invoice(TaxInvoiceData(**invoice_fields))

        # DPP 1.005 + PPN 110,55
        assert summary.totals.total == Decimal("1115.55")
        assert summary.terbilang == (
            "Seribu Seratus Lima Belas Rupiah Lima Puluh Lima Sen"
        )
        assert summary.total_display == "Rp 1.115"


class TestPassThroughs:
    """Tests for terbilang() and format_rupiah() convenience methods."""

    def test_terbilang(self, invoice_service):
        assert invoice_service.terbilang(11_433_000) == (
            "Sebelas Juta Empat Ratus Tiga Puluh Tiga Ribu Rupiah"
        )

    def test_format_rupiah(self, invoice_service):
        assert invoice_service.format_rupiah(1_000_000) == "Rp 1.000.000"
