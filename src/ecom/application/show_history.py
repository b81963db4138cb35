"""Application service: Show Order History use case (query)."""

from __future__ import annotations

from ecom.application.dto import OrderSummaryDTO
from ecom.domain.repository.order_repository import OrderRepository


class ShowHistoryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderSummaryDTO]:
        return [
            OrderSummaryDTO(order_id=invoice.order_id, total=str(invoice.pre_discount_total))
            for invoice in self._order_repo.list_all()
        ]
