# tests/test_logger.py

import json
import logging

from app.logger import json_formatter


def make_record(**extra):
  record = logging.LogRecord("app.main", logging.ERROR, __file__, 10, "Database error", None, None)
  for key, value in extra.items():
    setattr(record, key, value)
  return record


def test_json_formatter_includes_request_fields():
  line = json.loads(json_formatter.format(make_record(method="POST", path="/api/products", client="1.2.3.4")))
  assert line["level"] == "ERROR"
  assert line["logger"] == "app.main"
  assert line["message"] == "Database error"
  assert line["method"] == "POST"
  assert line["path"] == "/api/products"
  assert line["client"] == "1.2.3.4"


def test_json_formatter_without_request_fields():
  line = json.loads(json_formatter.format(make_record()))
  assert "path" not in line
  assert "method" not in line


def test_rejection_log_carries_path(client, caplog):
  with caplog.at_level("INFO"):
    client.post("/api/products", json={"name": "Pen123", "price": "1"})
  rejected = [r for r in caplog.records if "Product rejected" in r.getMessage()]
  assert rejected[0].path == "/api/products"
  assert rejected[0].method == "POST"
