"""Abstract repository for placed orders (invoices)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecom.domain.model.invoice import Invoice


class OrderRepository(ABC):

    @abstractmethod
    def save(self, invoice: Invoice) -> Invoice:
        """Place a priced order and return it with its order ID assigned.

        IDs come from a process-wide sequence that starts at 1. The sequence
        advances only when the order has actually been recorded, so a failed
        save never uses up an ID.
        """

    @abstractmethod
    def list_all(self) -> list[Invoice]:
        """Return every placed order in placement order."""
