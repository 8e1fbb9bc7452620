"""Settings shared by every command of one invocation."""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import CartState
from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@dataclass(frozen=True)
class ShopConfig:

    database_url: str = bootstrap.DEFAULT_DATABASE_URL
    verbose: bool = False

    def unit_of_work(self) -> SqlUnitOfWork:
        return bootstrap.unit_of_work(self.database_url)

    def cart(self) -> CartState:
        return bootstrap.cart()
