"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow:
            products = self._uow.products.list_all()
        return [ProductDTO.from_domain(p) for p in products]
