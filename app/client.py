# app/client.py

from typing import Any, Dict, List, Optional

import requests

from app.config import API_URL
from app.exceptions import ProductApiError
from app.logger import get_logger
from app.models import Product

log = get_logger(__name__)


class ProductApiClient:
  """Small requests based client for the product API"""

  def __init__(self, base_url: str = API_URL, timeout: float = 10):
    self.base_url = base_url.rstrip("/")
    self.timeout = timeout
    self.session = requests.Session()

  def _request(self, method: str, path: str, **kwargs) -> Any:
    url = f"{self.base_url}{path}"
    try:
      response = self.session.request(method, url, timeout=self.timeout, **kwargs)
    except requests.exceptions.RequestException as e:
      log.error(f"[CLIENT] {method} {url} failed: {e}")
      raise ProductApiError(status_code=None, message=f"Unable to reach the API: {e}")

    if response.status_code >= 400:
      try:
        body = response.json()
      except ValueError:
        body = {}
      message = body.get("error") if isinstance(body, dict) else None
      log.warning(f"[CLIENT] {method} {url} returned {response.status_code}: {message or response.text}")
      raise ProductApiError(status_code=response.status_code, message=message)

    return response.json()

  def root(self) -> Dict[str, Any]:
    return self._request("GET", "/")

  def list_products(self, query: Optional[str] = None) -> List[Product]:
    """
    Args:
      query (Optional[str]): name substring, all products when empty

    Returns:
      List[Product]: products newest first
    """
    params = {"q": query} if query else None
    rows = self._request("GET", "/api/products", params=params)
    return [Product(**row) for row in rows]

  def create_product(self, name: str, price: Any) -> Dict[str, Any]:
    """Returns the created product ({id, name, price})"""
    body = self._request("POST", "/api/products", json={"name": name, "price": price})
    return body["product"]

  def close(self):
    self.session.close()
