"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from ecom.infrastructure.persistence.catalog_seed import seed_products
from ecom.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from ecom.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

LOG_LEVEL_ENV_VAR = "ECOM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(seed_products())


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send ``ecom`` log records to stderr at *level*.

    Safe to call more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("ecom")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
