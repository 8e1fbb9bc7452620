import pytest
from sqlalchemy.engine import Engine

from shopcart.infrastructure.persistence.engine import create_engine_for, create_schema
from shopcart.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'shop.db'}"


@pytest.fixture
def engine(database_url) -> Engine:
    engine = create_engine_for(database_url)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def uow(engine) -> SqlUnitOfWork:
    return SqlUnitOfWork(engine)
