"""Configuration for DAX Daily."""

import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent.parent
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = Path(os.getenv("DAXDAILY_DATA_DIR", BASE_DIR / "data"))
DB_PATH = DATA_DIR / "daxdaily.db"
CONTENT_FILE = Path(os.getenv("DAXDAILY_CONTENT_FILE", PACKAGE_DIR / "content" / "data" / "days.json"))

# Submissions
SUBMISSIONS_PER_HOUR = int(os.getenv("SUBMISSIONS_PER_HOUR", "60"))  # per learner per day
MAX_SUBMISSION_CHARS = int(os.getenv("MAX_SUBMISSION_CHARS", "20000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
