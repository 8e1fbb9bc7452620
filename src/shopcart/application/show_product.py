"""Application service: Show Product use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.value_objects import require_id
from shopcart.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductDTO:
        require_id(product_id)
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return ProductDTO.from_domain(product)
