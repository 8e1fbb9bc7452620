"""Application service: Delete Product use case.

Deleting is not blocked by references. Cart entries for the product become
orphans that cart reads skip, and historical order lines keep the name and
price they froze at checkout.
"""

from __future__ import annotations

import structlog

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.value_objects import require_id
from shopcart.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        require_id(product_id)
        with self._uow:
            if not self._uow.products.delete(product_id):
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            self._uow.commit()

        logger.info("product_deleted", product_id=product_id)
