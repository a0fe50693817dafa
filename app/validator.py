# app/validator.py

import re
from typing import Any, Optional, Tuple

from app.exceptions import ProductValidationError

NAME_PATTERN = re.compile(r"[A-Za-z ]+")
PRICE_PATTERN = re.compile(r"[0-9.]+")
LEADING_FLOAT = re.compile(r"\d+\.?\d*|\.\d+")

NAME_REQUIRED = "Product name is required"
NAME_CHARACTERS = "Product name can only contain English letters and spaces"
PRICE_REQUIRED = "Price is required"
PRICE_CHARACTERS = "Price can only contain numbers and decimal point"
PRICE_RANGE = "Valid price greater than 0 is required"


def _price_missing(price: Any) -> bool:
  # Zero counts as not provided, whether sent as a number or as "0"
  return not price or price == "0"


def _parse_leading_float(price_str: str) -> Optional[float]:
  """
  Parses the longest leading decimal number, "1.2.3" gives 1.2 and "5." gives 5.0.
  None when no digit leads the string ("." or "..5").
  """
  match = LEADING_FLOAT.match(price_str)
  if match is None:
    return None
  return float(match.group())


def validate_product(name: Any, price: Any) -> Tuple[str, float]:
  """
  Whitelist validation for a new product.

  Checks run in order and the first failing one decides the reason.

  Args:
    name: raw name from the request body
    price: raw price from the request body (number or string)

  Returns:
    Tuple[str, float]: trimmed name and parsed price

  Raises:
    ProductValidationError: with the human readable rejection reason
  """
  if not name or (isinstance(name, str) and not name.strip()):
    raise ProductValidationError(NAME_REQUIRED)

  if not isinstance(name, str) or not NAME_PATTERN.fullmatch(name.strip()):
    raise ProductValidationError(NAME_CHARACTERS)

  if _price_missing(price):
    raise ProductValidationError(PRICE_REQUIRED)

  price_str = str(price)
  if not PRICE_PATTERN.fullmatch(price_str):
    raise ProductValidationError(PRICE_CHARACTERS)

  numeric_price = _parse_leading_float(price_str)
  if numeric_price is None or numeric_price <= 0:
    raise ProductValidationError(PRICE_RANGE)

  return name.strip(), numeric_price
