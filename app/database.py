# app/database.py

import os
from typing import List, Optional

from sqlalchemy import insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine, select

from app.config import DATABASE_URL
from app.db_models import ProductRecord
from app.exceptions import StartupError, StorageError
from app.logger import get_logger
from app.models import Product

log = get_logger(__name__)


def _driver_message(error: SQLAlchemyError) -> str:
  # SQLAlchemy wraps the sqlite3 error, keep only the driver text
  orig = getattr(error, "orig", None)
  return str(orig) if orig is not None else str(error)


def create_db_engine(database_url: str = DATABASE_URL) -> Engine:
  """Creates the engine (and its connection pool) for a SQLite database url"""
  return create_engine(database_url, echo=False, connect_args={"check_same_thread": False})


class ProductStore:
  """
  Gateway to the products table.

  Every operation opens its own session from the engine pool and releases it
  when the statement is done, on success and on failure.
  """

  def __init__(self, engine: Engine):
    self.engine = engine

  def ensure_schema(self):
    """Creates the products table if it does not exist yet. Safe on every startup."""
    database = self.engine.url.database
    if database and database != ":memory:":
      directory = os.path.dirname(database)
      if directory:
        os.makedirs(directory, exist_ok=True)

    try:
      SQLModel.metadata.create_all(self.engine, tables=[ProductRecord.__table__], checkfirst=True)
    except SQLAlchemyError as e:
      log.error(f"Error creating products table: {e}")
      raise StorageError(_driver_message(e))
    log.info("Products table ready")

  def list_products(self, search_term: Optional[str] = None) -> List[Product]:
    """
    Returns products newest first.

    Args:
      search_term (Optional[str]): substring the name must contain. None or
        empty returns every product.

    Returns:
      List[Product]: matching products ordered by created_at descending
    """
    statement = select(ProductRecord)
    if search_term:
      statement = statement.where(ProductRecord.name.contains(search_term))
    statement = statement.order_by(ProductRecord.created_at.desc(), ProductRecord.id.desc())

    with Session(self.engine) as session:
      try:
        records = session.exec(statement).all()
      except SQLAlchemyError as e:
        log.error(f"Error fetching products: {e}")
        raise StorageError(_driver_message(e))
      products = [record.to_product() for record in records]

    log.info(f"Found {len(products)} products")
    return products

  def insert_product(self, name: str, price: float) -> Product:
    """Inserts an already validated product and returns it with its id and created_at"""
    table = ProductRecord.__table__
    # RETURNING (SQLite 3.35+) hands back id and created_at from the insert itself
    statement = insert(table).values(name=name, price=price).returning(table)

    with Session(self.engine) as session:
      try:
        row = session.exec(statement).one()
        session.commit()
      except SQLAlchemyError as e:
        log.error(f"Error inserting product: {e}")
        session.rollback()
        raise StorageError(_driver_message(e))

    product = Product(id=row.id, name=row.name, price=row.price, created_at=row.created_at)

    log.info(f"Product added: {product.name} - ${product.price}")
    return product

  def close(self):
    self.engine.dispose()


def init_store(database_url: str = DATABASE_URL) -> ProductStore:
  """
  Builds the store and prepares the schema for the application startup.

  Raises:
    StartupError: database could not be opened or the table not created
  """
  store = ProductStore(create_db_engine(database_url))
  try:
    store.ensure_schema()
  except (StorageError, OSError) as e:
    log.error(f"Error opening database {database_url}: {e}")
    store.close()
    raise StartupError(f"Database initialization failed: {e}") from e
  log.info(f"Connected to SQLite database {database_url}")
  return store
