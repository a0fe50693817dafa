# app/exceptions.py

class ProductApiException(Exception):
  """All product service errors"""
  pass

class ProductValidationError(ProductApiException):
  """Client input rejected by the product validator"""
  def __init__(self, reason: str):
    self.reason = reason
    super().__init__(reason)

class StorageError(ProductApiException):
  """Opening, querying or writing the product database failed"""
  def __init__(self, message: str):
    self.message = message
    super().__init__(message)

class StartupError(ProductApiException):
  """Database could not be prepared at boot"""
  pass

class ProductApiError(ProductApiException):
  """HTTP client error raise (status_code is None on transport failure)"""
  def __init__(self, status_code, message: str = None):
    self.status_code = status_code
    self.message = message or f"HTTP error {status_code}"
    super().__init__(self.message)
