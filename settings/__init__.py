"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("REVENUE_CACHE_DB_PATH", "revenue_cache.duckdb")

# Logging
LOG_DIR = Path("logs")

# API
API_BASE_URL = os.getenv("PMS_API_BASE_URL", "https://api.hostaway.com/v1")
API_TIMEOUT = 60
MAX_CONCURRENT = 10

# Cache
CACHE_MAX_AGE = 24 * 60 * 60
FETCH_THROTTLE = 5.0

# Revenue
MONTHLY_REVENUE_MONTHS = 24
NOV_BACKFILL_RATIO = 0.8
