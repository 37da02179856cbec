import os

# point the app at a throwaway in-memory database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "1"
os.environ["RESET_DB"] = "0"

import pytest
from fastapi.testclient import TestClient

from inventory_api.db import SessionLocal, init_db
from inventory_api.main import app


@pytest.fixture(autouse=True)
def fresh_db():
    # every test starts from the six sample products
    init_db(reset=True)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
