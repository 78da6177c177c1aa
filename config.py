# config.py
"""
Simple configuration values for the client form app.
Place this file in the project root (next to client_registry.py).

You can override these values with environment variables:
  - APP_TITLE
  - HOST
  - PORT
  - LOG_LEVEL
  - PHONE_LENGTH
"""

import os

APP_TITLE = os.environ.get("APP_TITLE", "Clientes")

# Bind address for start_server()
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Exact number of digits a phone number must have
PHONE_LENGTH = int(os.environ.get("PHONE_LENGTH", "10"))
