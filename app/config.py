# app/config.py

import os

# Get environment variable
ENV = os.getenv("APP_ENV", "development") # production, development, testing

# Database (file-backed SQLite)
PRODUCTS_DB_FILE = os.getenv("PRODUCTS_DB_FILE", "db/products.db")
DATABASE_URL = f"sqlite:///{PRODUCTS_DB_FILE}"

# Rate limiter: max requests per client address inside a rolling window
RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", "100"))
RATE_LIMIT_WINDOW_SECONDS = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# Servers
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "5000"))
UI_PORT = int(os.getenv("UI_PORT", "8501"))
API_URL = os.getenv("API_URL", f"http://127.0.0.1:{API_PORT}")

# Logs
LOG_DIR = os.getenv("LOG_DIR", "logs")
