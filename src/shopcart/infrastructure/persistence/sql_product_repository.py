"""SQL-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Row

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.persistence.tables import products


class SqlProductRepository(ProductRepository):
    """Runs on the connection (and transaction) of its unit of work."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._connection.execute(
            select(products).where(products.c.id == product_id)
        ).first()
        return None if row is None else self._to_domain(row)

    def list_all(self) -> list[Product]:
        rows = self._connection.execute(
            select(products).order_by(products.c.name, products.c.id)
        )
        return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        return self._connection.execute(
            select(func.count()).select_from(products)
        ).scalar_one()

    def add(self, product: Product) -> None:
        result = self._connection.execute(
            insert(products).values(name=product.name, price=product.price.amount)
        )
        product.id = result.inserted_primary_key[0]

    def save(self, product: Product) -> None:
        self._connection.execute(
            update(products)
            .where(products.c.id == product.id)
            .values(name=product.name, price=product.price.amount)
        )

    def delete(self, product_id: int) -> bool:
        result = self._connection.execute(
            delete(products).where(products.c.id == product_id)
        )
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: Row) -> Product:
        return Product(id=row.id, name=row.name, price=Money(row.price))
