"""Shared test fixtures for the invoice test suite."""

from datetime import date

import pytest

from core.models import BuyerInfo, LineItem, SellerInfo


# =============================================================================
# PARTY CONSTANTS
# =============================================================================

SELLER_NPWP = "012345678901000"
BUYER_NPWP = "987654321098000"
BUYER_NIK = "3171011201900001"

INVOICE_DATE = date(2024, 12, 17)


# =============================================================================
# PARTY FIXTURES
# =============================================================================


@pytest.fixture
def seller() -> SellerInfo:
    """A PKP seller with a legacy 15-digit NPWP."""
    return SellerInfo(
        name="PT Contoh Sukses",
        address="Jl. Merdeka No. 123",
        city="Jakarta Pusat",
        province="DKI Jakarta",
        postal_code="10110",
        npwp=SELLER_NPWP,
    )


@pytest.fixture
def buyer() -> BuyerInfo:
    """A corporate buyer."""
    return BuyerInfo(
        name="CV Maju Jaya",
        address="Jl. Sejahtera No. 45",
        city="Bandung",
        npwp=BUYER_NPWP,
    )


# =============================================================================
# ITEM FIXTURES
# =============================================================================


@pytest.fixture
def laptop_items() -> list[LineItem]:
    """Two laptops at Rp 10.000.000, subtotal Rp 20.000.000."""
    return [LineItem(name="Laptop XYZ", quantity=2, unit_price=10_000_000, unit="pcs")]


@pytest.fixture
def invoice_fields(seller, buyer, laptop_items) -> dict:
    """Keyword arguments for InvoiceData / TaxInvoiceData, overridable per test."""
    return {
        "invoice_number": "INV-2024-001",
        "invoice_date": INVOICE_DATE,
        "seller": seller,
        "buyer": buyer,
        "items": laptop_items,
    }
