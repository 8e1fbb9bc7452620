"""SQL-backed implementation of OrderRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Connection, Row

from shopcart.domain.model.order import Order, OrderLine
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.infrastructure.persistence.tables import order_lines, orders


class SqlOrderRepository(OrderRepository):

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        result = self._connection.execute(
            insert(orders).values(created_at=order.created_at)
        )
        order.id = result.inserted_primary_key[0]
        order.lines = [self._insert_line(order.id, line) for line in order.lines]

    def list_all(self) -> list[Order]:
        order_rows = self._connection.execute(
            select(orders).order_by(orders.c.id.desc())
        ).all()
        line_rows = self._connection.execute(
            select(order_lines).order_by(order_lines.c.order_id, order_lines.c.id)
        )

        lines_by_order: dict[int, list[OrderLine]] = {}
        for row in line_rows:
            lines_by_order.setdefault(row.order_id, []).append(self._line_to_domain(row))

        return [
            Order(
                id=row.id,
                lines=lines_by_order.get(row.id, []),
                created_at=self._as_utc(row.created_at),
            )
            for row in order_rows
        ]

    def count(self) -> int:
        return self._connection.execute(
            select(func.count()).select_from(orders)
        ).scalar_one()

    # --- Serialization --------------------------------------------------------

    def _insert_line(self, order_id: int, line: OrderLine) -> OrderLine:
        result = self._connection.execute(
            insert(order_lines).values(
                order_id=order_id,
                product_id=line.product_id,
                product_name=line.product_name,
                qty=line.quantity.value,
                price=line.price.amount,
            )
        )
        return replace(line, id=result.inserted_primary_key[0])

    @staticmethod
    def _line_to_domain(row: Row) -> OrderLine:
        return OrderLine(
            id=row.id,
            product_id=row.product_id,
            product_name=row.product_name,
            quantity=Quantity(row.qty),
            price=Money(row.price),
        )

    @staticmethod
    def _as_utc(value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is written in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
