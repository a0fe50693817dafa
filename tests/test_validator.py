# tests/test_validator.py

import pytest

from app.exceptions import ProductValidationError
from app.validator import (NAME_CHARACTERS, NAME_REQUIRED, PRICE_CHARACTERS,
                           PRICE_RANGE, PRICE_REQUIRED, validate_product)


def rejection(name, price):
  with pytest.raises(ProductValidationError) as exc_info:
    validate_product(name, price)
  return exc_info.value.reason


def test_valid_product_is_trimmed_and_parsed():
  assert validate_product("  Blue Pen  ", "2.50") == ("Blue Pen", 2.5)


def test_numeric_price_is_accepted():
  assert validate_product("Widget", 9.99) == ("Widget", 9.99)
  assert validate_product("Widget", 3) == ("Widget", 3.0)


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
def test_missing_name(name):
  assert rejection(name, "1") == NAME_REQUIRED


@pytest.mark.parametrize("name", ["Pen123", "Pen-Blue", "Café", "Pen\tBlue", "<script>", 42])
def test_name_outside_whitelist(name):
  assert rejection(name, "1") == NAME_CHARACTERS


def test_name_checked_before_price():
  assert rejection("Pen1", None) == NAME_CHARACTERS
  assert rejection("", "abc") == NAME_REQUIRED


@pytest.mark.parametrize("price", [None, "", 0, 0.0, False, "0"])
def test_missing_or_zero_price_is_required(price):
  assert rejection("Pen", price) == PRICE_REQUIRED


@pytest.mark.parametrize("price", ["-1", "1,50", "1e5", "$2", " 2", "abc", True, -5, 1e-07])
def test_price_outside_whitelist(price):
  assert rejection("Pen", price) == PRICE_CHARACTERS


@pytest.mark.parametrize("price", ["0.0", "00", ".", "..5", "0.000", "0.0.5"])
def test_price_not_greater_than_zero(price):
  assert rejection("Pen", price) == PRICE_RANGE


@pytest.mark.parametrize("price, expected", [
  ("1.2.3", 1.2),
  ("5.", 5.0),
  (".5", 0.5),
  ("12..7", 12.0),
])
def test_price_uses_leading_number(price, expected):
  assert validate_product("Pen", price) == ("Pen", expected)
