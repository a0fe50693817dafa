# tests/test_ui.py

from datetime import datetime

from app.models import Product
from app.ui import COLUMNS, products_to_frame


def test_products_to_frame():
  products = [
    Product(id=2, name="Red Pen", price=3.0, created_at=datetime(2026, 10, 19, 10, 0, 0)),
    Product(id=1, name="Blue Pen", price=2.5, created_at=datetime(2026, 10, 19, 9, 0, 0)),
  ]

  frame = products_to_frame(products)
  assert list(frame.columns) == COLUMNS
  assert frame["name"].tolist() == ["Red Pen", "Blue Pen"]
  assert frame["price"].tolist() == [3.0, 2.5]


def test_empty_frame_keeps_columns():
  frame = products_to_frame([])
  assert frame.empty
  assert list(frame.columns) == COLUMNS
