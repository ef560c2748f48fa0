"""GetSalesOrder Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.sales_order_repository import SalesOrderRepository
from .create_sales_order import build_sales_order_response
from .dtos import SalesOrderResponseDTO


class GetSalesOrder:
    """
    Use Case: Retrieve a sales order with its line items
    """

    def __init__(self, order_repo: SalesOrderRepository):
        self.order_repo = order_repo

    async def execute(self, order_id: int) -> Result[SalesOrderResponseDTO]:
        try:
            order = await self.order_repo.get_by_id(order_id)
            if not order:
                return Return.err(
                    Error(
                        code="SALES_ORDER_NOT_FOUND",
                        message=f"Sales order with ID {order_id} not found",
                        reason="Sales order does not exist",
                    )
                )

            items = await self.order_repo.get_items(order_id)
            return Return.ok(build_sales_order_response(order, items))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_SALES_ORDER_FAILED",
                    message="Failed to retrieve sales order",
                    reason=str(e),
                )
            )
