"""CreateSalesOrder Use Case

Prices a sales order, including shipping, and stores it under the next
SO number.
"""

import logging
from datetime import date
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.quote_repository import QuoteRepository
from src.app.repositories.sales_order_repository import SalesOrderRepository
from src.domain.calculations import calculate_document_totals
from src.domain.sales_order import SalesOrder, SalesOrderStatus
from src.domain.sales_order_item import SalesOrderItem
from .document_numbering import insert_with_document_number, DEFAULT_MAX_RETRIES
from .dtos import CreateSalesOrderCommandDTO, SalesOrderResponseDTO
from .line_items import price_line_items, to_line_item_dto

logger = logging.getLogger(__name__)


class CreateSalesOrder:
    """
    Use Case: Create a pending sales order with line items

    Business Rules:
    1. Customer must exist
    2. Referenced quote, when given, must exist
    3. total = subtotal - discount + tax + shipping
    4. Order number is the next number in the SO series
    5. Header and items are committed together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        quote_repo: QuoteRepository,
        order_repo: SalesOrderRepository,
        number_prefix: str = "SO",
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.quote_repo = quote_repo
        self.order_repo = order_repo
        self.number_prefix = number_prefix
        self.max_retries = max_retries

    async def execute(self, command: CreateSalesOrderCommandDTO) -> Result[SalesOrderResponseDTO]:
        """
        Execute sales order creation

        Args:
            command: CreateSalesOrderCommandDTO

        Returns:
            Result[SalesOrderResponseDTO]: Success with order details or error
        """
        try:
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Sales orders must reference an existing customer",
                    )
                )

            if command.quote_id is not None:
                quote = await self.quote_repo.get_by_id(command.quote_id)
                if not quote:
                    return Return.err(
                        Error(
                            code="QUOTE_NOT_FOUND",
                            message=f"Quote with ID {command.quote_id} not found",
                            reason="Referenced quote does not exist",
                        )
                    )

            priced_items = price_line_items(command.items)
            totals = calculate_document_totals(
                priced_items,
                document_discount=command.discount_amount,
                tax_rate=command.tax_rate,
                shipping_amount=command.shipping_amount,
            )

            async def insert(order_number: str):
                order = await self.order_repo.create(
                    SalesOrder(
                        order_number=order_number,
                        customer_id=command.customer_id,
                        quote_id=command.quote_id,
                        order_date=command.order_date or date.today(),
                        delivery_date=command.delivery_date,
                        status=SalesOrderStatus.PENDING,
                        tax_rate=command.tax_rate,
                        shipping_amount=command.shipping_amount,
                        notes=command.notes,
                        **totals.as_dict(),
                    )
                )
                items = [
                    await self.order_repo.add_item(SalesOrderItem(order_id=order.id, **fields))
                    for fields in priced_items
                ]
                return order, items

            inserted = await insert_with_document_number(
                self.uow,
                self.number_prefix,
                self.order_repo.get_latest_number,
                insert,
                self.max_retries,
                number_column="order_number",
            )
            if inserted.is_err():
                return inserted

            order, items = inserted.value

            await self.uow.commit()
            logger.info(f"Created sales order {order.order_number} total={order.total}")

            return Return.ok(build_sales_order_response(order, items))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_SALES_ORDER_FAILED",
                    message="Failed to create sales order",
                    reason=str(e),
                )
            )


def build_sales_order_response(order: SalesOrder, items) -> SalesOrderResponseDTO:
    return SalesOrderResponseDTO(
        order_id=order.id,
        order_number=order.order_number,
        customer_id=order.customer_id,
        quote_id=order.quote_id,
        order_date=order.order_date,
        delivery_date=order.delivery_date,
        status=order.status.value,
        subtotal=order.subtotal,
        tax_rate=order.tax_rate,
        tax_amount=order.tax_amount,
        discount_amount=order.discount_amount,
        shipping_amount=order.shipping_amount,
        total=order.total,
        notes=order.notes,
        items=[to_line_item_dto(item) for item in items],
        created_at=order.created_at,
    )
