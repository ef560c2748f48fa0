"""Financial calculations for quotes, sales orders and invoices

All amounts are Decimal. Rounding to cents happens only on returned
monetary values, never on intermediate products.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Mapping, Optional, Union

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
HUNDRED = Decimal("100")
DOCUMENT_NUMBER_WIDTH = 6

_TRAILING_DIGITS = re.compile(r"([0-9]+)\Z")


@dataclass(frozen=True)
class DocumentTotals:
    """Rounded totals written onto a document header"""

    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total: Decimal

    def as_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "tax_amount": self.tax_amount,
            "discount_amount": self.discount_amount,
            "total": self.total,
        }


def to_decimal(value: Optional[Number]) -> Decimal:
    """Convert a numeric input to Decimal; None counts as zero.

    Floats go through str() so 8.5 becomes Decimal("8.5") rather than
    its binary expansion.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_currency(value: Number) -> Decimal:
    """
    Round to 2 decimal places, half away from zero

    Examples:
        round_currency(10.456) -> Decimal("10.46")
        round_currency(10.454) -> Decimal("10.45")
        round_currency(-0.005) -> Decimal("-0.01")
    """
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_line_total(
    quantity: Number,
    unit_price: Number,
    discount_percent: Number = 0,
    tax_rate: Number = 0,
) -> Decimal:
    """
    Calculate the total of a single line item

    Discount is applied first, then tax on the discounted amount:
        (quantity * unit_price) * (1 - discount/100) * (1 + tax/100)

    Example:
        calculate_line_total(5, 100, 10, 8.5)
        # 500 -> 450 after 10% discount -> 488.25 after 8.5% tax
    """
    subtotal = to_decimal(quantity) * to_decimal(unit_price)
    after_discount = subtotal * (1 - to_decimal(discount_percent) / HUNDRED)
    with_tax = after_discount * (1 + to_decimal(tax_rate) / HUNDRED)
    return round_currency(with_tax)


def _item_field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def calculate_document_totals(
    items: Iterable[Any],
    document_discount: Number = 0,
    tax_rate: Number = 0,
    shipping_amount: Number = 0,
) -> DocumentTotals:
    """
    Calculate totals for a quote, sales order or invoice

    Flow:
    1. Sum line subtotals net of their own percentage discount
    2. Subtract the document level discount (a flat amount)
    3. Add tax on the discounted amount
    4. Add shipping

    Items are mappings or objects exposing quantity, unit_price and an
    optional discount_percent. A discount larger than the subtotal is not
    rejected here and yields a negative total.

    Example:
        items = [
            {"quantity": 2, "unit_price": 50, "discount_percent": 0},
            {"quantity": 1, "unit_price": 100, "discount_percent": 10},
        ]
        calculate_document_totals(items, 0, 8.5, 15)
        # subtotal 190, tax 16.15, total 221.15
    """
    subtotal = Decimal("0")
    for item in items:
        item_subtotal = to_decimal(_item_field(item, "quantity")) * to_decimal(
            _item_field(item, "unit_price")
        )
        item_discount = item_subtotal * (to_decimal(_item_field(item, "discount_percent")) / HUNDRED)
        subtotal += item_subtotal - item_discount

    discount = to_decimal(document_discount)
    after_discount = subtotal - discount
    tax_amount = after_discount * (to_decimal(tax_rate) / HUNDRED)
    total = after_discount + tax_amount + to_decimal(shipping_amount)

    return DocumentTotals(
        subtotal=round_currency(subtotal),
        tax_amount=round_currency(tax_amount),
        discount_amount=round_currency(discount),
        total=round_currency(total),
    )


def generate_document_number(prefix: str, last_number: Optional[str]) -> str:
    """
    Generate the next number in a document series

    Format: PREFIX-NNNNNN (e.g. INV-000123). Starts the series at 000001
    when there is no previous number or it has no trailing digits. Past
    999999 the number simply grows wider.

    Not safe against concurrent callers on its own: the unique index on
    the number column is what rejects duplicates.
    """
    if not last_number:
        return f"{prefix}-{1:0{DOCUMENT_NUMBER_WIDTH}d}"

    match = _TRAILING_DIGITS.search(last_number)
    if not match:
        return f"{prefix}-{1:0{DOCUMENT_NUMBER_WIDTH}d}"

    next_number = int(match.group(1)) + 1
    return f"{prefix}-{next_number:0{DOCUMENT_NUMBER_WIDTH}d}"
