# app/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import json
from datetime import datetime, timezone

from app.config import LOG_DIR


# Request fields handlers pass through `extra`
REQUEST_FIELDS = ("method", "path", "client")


# Custom JSON Formatter
class JsonFormatter(logging.Formatter):
  def format(self, record):
    log_record = {
      "timestamp": datetime.now(timezone.utc).isoformat(),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
      "file": record.pathname,
      "line": record.lineno,
      "function": record.funcName
    }

    for field in REQUEST_FIELDS:
      value = getattr(record, field, None)
      if value is not None:
        log_record[field] = value

    if record.exc_info:
      log_record["exception"] = self.formatException(record.exc_info)

    return json.dumps(log_record)


json_formatter = JsonFormatter()

def configure_logging():
  env = os.getenv("APP_ENV", "development")
  log_dir = os.getenv("LOG_DIR", LOG_DIR)

  app_log_file = os.path.join(log_dir, "app.log")
  test_log_file = os.path.join(log_dir, "test.log")

  os.makedirs(log_dir, exist_ok=True)

  # Root logger
  logger = logging.getLogger()
  if env == "production":
    logger.setLevel(logging.INFO)
  else:
    logger.setLevel(logging.DEBUG)

  # Clear previous handler
  if logger.hasHandlers():
    logger.handlers.clear()

  # --- Console (stdout) logger ---
  console_handler = logging.StreamHandler(sys.stdout)
  console_handler.setFormatter(json_formatter)
  console_handler.setLevel(logging.ERROR)
  logger.addHandler(console_handler)

  # File logging for testing stage test.log, others app.log
  if env == "testing":
    file_handler = RotatingFileHandler(test_log_file, maxBytes=1*1024*1024, backupCount=1, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
  else:
    file_handler = RotatingFileHandler(app_log_file, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
  file_handler.setFormatter(json_formatter)
  logger.addHandler(file_handler)


def get_logger(name):
  """
  Returns a logger object with specific name.
  Before call this function configure_logging() must be called.
  """
  return logging.getLogger(name)
