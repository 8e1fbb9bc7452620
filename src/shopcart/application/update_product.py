"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import ProductDTO
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.value_objects import require_id
from shopcart.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
    ) -> ProductDTO:
        """Partially update a product's name and/or price.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout time. Carts see the new price on their
        next read.
        """
        require_id(product_id)
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product.update(name=name, price=price)
            self._uow.products.save(product)
            self._uow.commit()

        logger.info(
            "product_updated",
            product_id=product.id,
            name=product.name,
            price=str(product.price),
        )
        return ProductDTO.from_domain(product)
