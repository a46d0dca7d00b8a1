"""
Invoice and tax-invoice arithmetic under Indonesian rules.

Order of operations:
1. Each item's own discount is applied to quantity x unit_price.
2. Item totals are summed into the subtotal.
3. The global discount is taken from the subtotal.
4. Tax invoices also subtract the down payment, giving DPP. DPP is the only
   value clamped at zero; every other intermediate may go negative.

Rates are percentages (11 means 11%), never fractions. All functions are
pure and accept int, float, str or Decimal wherever a number is expected.
Arithmetic runs in a context sized to the operands, never the caller's
decimal context, so identical inputs always give identical totals.
"""

import logging
from decimal import Decimal
from typing import Iterable

from core.models import (
    DiscountSpec,
    InvoiceData,
    LineItem,
    StandardTotals,
    TaxInvoiceData,
    TaxInvoiceTotals,
)
from utils.money import HUNDRED, ZERO, exact_context, exact_sum, percent_of, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_PPN_RATE = Decimal("11")


def _or_zero(value) -> Decimal:
    """Missing optional amounts and rates count as zero."""
    if value is None:
        return ZERO
    return to_decimal(value)


def _resolve_ppn_rate(rate, default_rate) -> Decimal:
    """Invoice rate if set, otherwise the configured default."""
    if rate is None:
        return to_decimal(default_rate)
    return to_decimal(rate)


def item_total(item: LineItem) -> Decimal:
    """quantity x unit_price with the item's own discount applied. Not clamped."""
    total = item.gross_total
    discount = item.discount
    if discount is None or not discount.is_active:
        return total
    with exact_context(total, discount.value):
        if discount.is_percentage:
            return total * (1 - discount.value / HUNDRED)
        return total - discount.value


def calculate_subtotal(items: Iterable[LineItem]) -> Decimal:
    """Sum of item totals, each item discounted before summation."""
    return exact_sum(item_total(item) for item in items)


def calculate_discount(base, discount: DiscountSpec | None) -> Decimal:
    """
    Rupiah value of a discount taken from base.

    Returns:
        0 when there is no discount or its value is <= 0.
        base * pct / 100 for percentages.
        The fixed value verbatim otherwise, even when larger than base.
    """
    if discount is None or not discount.is_active:
        return ZERO
    if discount.is_percentage:
        return percent_of(to_decimal(base), discount.value)
    return discount.value


def _dpp(subtotal: Decimal, discount: Decimal, down_payment: Decimal) -> Decimal:
    with exact_context(subtotal, discount, down_payment):
        dpp = subtotal - discount - down_payment
    if dpp < 0:
        logger.debug(f"DPP {dpp} below zero, clamped to 0")
        return ZERO
    return dpp


def calculate_dpp(
    items: Iterable[LineItem],
    discount: DiscountSpec | None = None,
    down_payment=None,
) -> Decimal:
    """
    Tax base (Dasar Pengenaan Pajak): subtotal - discount - down payment.

    Never negative. A tax base below zero is clamped to zero.
    """
    subtotal = calculate_subtotal(items)
    return _dpp(
        subtotal,
        calculate_discount(subtotal, discount),
        _or_zero(down_payment),
    )


def calculate_ppn(base, rate=DEFAULT_PPN_RATE) -> Decimal:
    """PPN (VAT) on base at rate percent. Zero when rate <= 0."""
    rate = to_decimal(rate)
    if rate <= 0:
        return ZERO
    return percent_of(to_decimal(base), rate)


def calculate_invoice_totals(
    invoice: InvoiceData,
    default_ppn_rate=DEFAULT_PPN_RATE,
) -> StandardTotals:
    """
    Totals for a standard invoice.

    PPN is charged on subtotal - discount unless include_ppn is explicitly
    False or the rate is <= 0. Additional fees are added after tax and are
    never taxed. Nothing is clamped: a fixed discount larger than the
    subtotal gives a negative total.
    """
    ppn_rate = _resolve_ppn_rate(invoice.ppn_rate, default_ppn_rate)
    include_ppn = invoice.include_ppn is not False and ppn_rate > 0

    subtotal = calculate_subtotal(invoice.items)
    discount = calculate_discount(subtotal, invoice.discount)
    with exact_context(subtotal, discount):
        after_discount = subtotal - discount

    additional_fees = exact_sum(fee.amount for fee in invoice.additional_fees)

    ppn = calculate_ppn(after_discount, ppn_rate) if include_ppn else ZERO
    total = exact_sum([after_discount, ppn, additional_fees])

    logger.debug(
        f"Invoice {invoice.invoice_number}: subtotal={subtotal} discount={discount} "
        f"ppn={ppn} fees={additional_fees} total={total}"
    )

    return StandardTotals(
        subtotal=subtotal,
        discount=discount,
        ppn=ppn,
        additional_fees=additional_fees,
        total=total,
    )


def calculate_ppnbm(dpp: Decimal, amount=None, rate=None) -> Decimal:
    """
    PPnBM (luxury-goods tax).

    An explicit amount > 0 is used verbatim and the rate is ignored.
    Otherwise a rate > 0 gives dpp * rate / 100. Otherwise zero.
    """
    amount = _or_zero(amount)
    if amount > 0:
        return amount
    rate = _or_zero(rate)
    if rate > 0:
        return percent_of(dpp, rate)
    return ZERO


def calculate_tax_invoice_totals(
    invoice: TaxInvoiceData,
    default_ppn_rate=DEFAULT_PPN_RATE,
) -> TaxInvoiceTotals:
    """
    Totals for a tax invoice (faktur pajak).

    PPN is mandatory and charged on DPP; include_ppn is ignored. Additional
    fees are not part of a tax invoice's totals. total = DPP + PPN + PPnBM.
    """
    ppn_rate = _resolve_ppn_rate(invoice.ppn_rate, default_ppn_rate)
    down_payment = _or_zero(invoice.down_payment)

    subtotal = calculate_subtotal(invoice.items)
    discount = calculate_discount(subtotal, invoice.discount)
    dpp = _dpp(subtotal, discount, down_payment)

    ppn = calculate_ppn(dpp, ppn_rate)
    ppnbm = calculate_ppnbm(dpp, invoice.ppnbm, invoice.ppnbm_rate)
    total = exact_sum([dpp, ppn, ppnbm])

    logger.debug(
        f"Tax invoice {invoice.invoice_number}: subtotal={subtotal} discount={discount} "
        f"down_payment={down_payment} dpp={dpp} ppn={ppn} ppnbm={ppnbm} total={total}"
    )

    return TaxInvoiceTotals(
        subtotal=subtotal,
        discount=discount,
        down_payment=down_payment,
        dpp=dpp,
        ppn=ppn,
        ppnbm=ppnbm,
        total=total,
    )
