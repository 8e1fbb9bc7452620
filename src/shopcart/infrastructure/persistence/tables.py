"""Relational schema for the catalog and order stores.

``order_lines.product_id`` deliberately has no foreign key: a product may
be deleted while historical orders still reference it. The product name is
copied into ``order_lines.product_name`` at checkout so those orders can
still be displayed.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.types import TypeDecorator


class DecimalText(TypeDecorator):
    """Stores ``Decimal`` as text so no float drift enters the store."""

    impl = String(32)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("price", DecimalText, nullable=False),
    sqlite_autoincrement=True,
)

orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    sqlite_autoincrement=True,
)

order_lines = Table(
    "order_lines",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("orders.id"), nullable=False),
    Column("product_id", Integer, nullable=False),
    Column("product_name", String(255), nullable=False),
    Column("qty", Integer, nullable=False),
    Column("price", DecimalText, nullable=False),
    CheckConstraint("qty > 0", name="ck_order_lines_qty_positive"),
    Index("idx_order_lines_order_id", "order_id"),
    Index("idx_order_lines_product_id", "product_id"),
    sqlite_autoincrement=True,
)
