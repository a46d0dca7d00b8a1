"""Line item domain models.

Prices are Rupiah as Decimal. Fractional values (sen) are allowed but never
required.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from utils.money import ExactDecimal, Rupiah, exact_context


class DiscountSpec(BaseModel):
    """
    A discount, either a percentage or a fixed Rupiah amount.

    Percentages (0-100) multiply; fixed amounts subtract. A value of zero or
    less means no discount. Nothing here clamps the discounted result.
    """

    value: ExactDecimal
    is_percentage: bool = False

    model_config = {"frozen": True}

    @classmethod
    def percent(cls, value) -> "DiscountSpec":
        """Percentage discount, e.g. percent(10) for 10%."""
        return cls(value=value, is_percentage=True)

    @classmethod
    def fixed(cls, value) -> "DiscountSpec":
        """Fixed Rupiah discount."""
        return cls(value=value, is_percentage=False)

    @property
    def is_active(self) -> bool:
        """Whether this discount changes anything."""
        return self.value > 0


class LineItem(BaseModel):
    """One billable row on an invoice."""

    name: str = Field(..., max_length=500)
    quantity: ExactDecimal = Field(..., description="Expected to be positive; not enforced")
    unit_price: Rupiah
    discount: DiscountSpec | None = None
    unit: str | None = Field(None, max_length=50)  # pcs, kg, jam, ...

    model_config = {"frozen": True}

    @property
    def gross_total(self) -> Decimal:
        """quantity x unit_price, before the item's own discount."""
        with exact_context(self.quantity, self.unit_price):
            return self.quantity * self.unit_price
