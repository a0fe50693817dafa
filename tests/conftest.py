# tests/conftest.py

import os
os.environ.setdefault("APP_ENV", "testing")

import pytest
from fastapi.testclient import TestClient

from app.database import ProductStore, create_db_engine
from app.main import create_app


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
  monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def database_url(tmp_path):
  return f"sqlite:///{tmp_path / 'db' / 'products.db'}"


@pytest.fixture
def store(database_url):
  product_store = ProductStore(create_db_engine(database_url))
  product_store.ensure_schema()
  yield product_store
  product_store.close()


@pytest.fixture
def client(database_url):
  app = create_app(database_url=database_url, rate_limit_max=1000)
  with TestClient(app, raise_server_exceptions=False) as test_client:
    yield test_client
