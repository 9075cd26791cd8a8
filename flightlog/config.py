from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "flightlog")
ENV = os.getenv("APP_ENV", "dev")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Empty -> stdout only
LOG_FILE = os.getenv("LOG_FILE", "")

# Airport lookup service
AIRPORT_SERVICE_URL: str = os.getenv("AIRPORT_SERVICE_URL", "http://localhost:3000/api")
AIRPORT_SERVICE_TIMEOUT: float = float(os.getenv("AIRPORT_SERVICE_TIMEOUT", "10"))
AIRPORT_SERVICE_API_KEY: str | None = os.getenv("AIRPORT_SERVICE_API_KEY")
