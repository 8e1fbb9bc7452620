"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import ProductDTO
from shopcart.domain.model.product import Product
from shopcart.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str) -> ProductDTO:
        """Add a new product to the catalog.

        Validation happens before the store is touched; the ID is assigned
        by the store on insert.
        """
        product = Product.create(name=name, price=price)

        with self._uow:
            self._uow.products.add(product)
            self._uow.commit()

        logger.info(
            "product_created",
            product_id=product.id,
            name=product.name,
            price=str(product.price),
        )
        return ProductDTO.from_domain(product)
