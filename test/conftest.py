import pytest

import server
from service.repository_service import Database


@pytest.fixture
def memory_db():
    db = Database.init(':memory:')
    yield db
    db.close()


@pytest.fixture
def bound_db(memory_db):
    server.bind_database(memory_db)
    yield memory_db
    server.bind_database(None)
