"""Pricing helpers shared by quote, sales order and invoice creation"""

from typing import List
from src.domain.calculations import calculate_line_total
from src.domain.document import LineItemBase
from .dtos import LineItemInputDTO, LineItemDTO


def price_line_items(items: List[LineItemInputDTO]) -> List[dict]:
    """
    Compute line_total for each submitted item

    Returns plain column dicts ready to build QuoteItem, SalesOrderItem or
    InvoiceLine rows. sort_order defaults to the submitted position.
    """
    priced = []
    for position, item in enumerate(items):
        priced.append(
            {
                "description": item.description,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "discount_percent": item.discount_percent,
                "tax_rate": item.tax_rate,
                "line_total": calculate_line_total(
                    item.quantity,
                    item.unit_price,
                    item.discount_percent,
                    item.tax_rate,
                ),
                "sort_order": item.sort_order if item.sort_order is not None else position,
            }
        )
    return priced


def to_line_item_dto(item: LineItemBase) -> LineItemDTO:
    return LineItemDTO(
        id=item.id,
        description=item.description,
        quantity=item.quantity,
        unit_price=item.unit_price,
        discount_percent=item.discount_percent,
        tax_rate=item.tax_rate,
        line_total=item.line_total,
        sort_order=item.sort_order,
    )
