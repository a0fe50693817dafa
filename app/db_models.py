# app/db_models.py

from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime, REAL, Text, text
from typing import Optional
from datetime import datetime

from app.models import Product

class ProductRecord(SQLModel, table=True):
  """products table, rows are append-only"""
  __tablename__ = "products"
  __table_args__ = {"sqlite_autoincrement": True}

  id: Optional[int] = Field(default=None, primary_key=True)
  name: str = Field(sa_type=Text, nullable=False)
  price: float = Field(sa_type=REAL, nullable=False)
  created_at: Optional[datetime] = Field(
    default=None,
    sa_type=DateTime,
    sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
  )

  def to_product(self) -> Product:
    return Product(id=self.id, name=self.name, price=self.price, created_at=self.created_at)
