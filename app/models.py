# app/models.py

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional
from datetime import datetime

class Product(BaseModel):
  model_config = ConfigDict(frozen=True)

  id: int
  name: str
  price: float
  created_at: Optional[datetime] = None


class ProductCreate(BaseModel):
  """Raw POST body, the validator decides what is acceptable"""
  name: Optional[Any] = None
  price: Optional[Any] = None


class ProductSummary(BaseModel):
  id: int
  name: str
  price: float


class ProductCreated(BaseModel):
  message: str
  product: ProductSummary
