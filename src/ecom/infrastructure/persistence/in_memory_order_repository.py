"""In-memory implementation of OrderRepository.

Holds the process-wide order sequence and the order history for the
lifetime of one session.
"""

from __future__ import annotations

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.invoice import Invoice
from ecom.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Invoice] = {}
        self._last_id = 0

    # --- OrderRepository interface --------------------------------------------

    def save(self, invoice: Invoice) -> Invoice:
        if invoice.order_id is not None:
            raise ValidationError(f"Order #{invoice.order_id} has already been placed")

        placed = invoice.with_order_id(self._last_id + 1)
        self._store[placed.order_id] = placed
        self._last_id = placed.order_id
        return placed

    def list_all(self) -> list[Invoice]:
        return list(self._store.values())
