"""Constants and environment-driven settings for the madaris client."""

import os
from pathlib import Path

API_BASE_URL = os.environ.get("MADARIS_API_URL", "https://evaaz-poll-hqzi.vercel.app").rstrip("/")
LOGIN_PATH = "/api/auth/login"
SCHOOLS_PATH = "/api/school/allschools"

REQUEST_TIMEOUT = int(os.environ.get("MADARIS_TIMEOUT", "30"))

DATA_DIR = Path(os.environ.get("MADARIS_HOME", Path.home() / ".madaris"))
STORAGE_FILENAME = "storage.json"

# Durable storage keys; always written and removed as a pair
USER_KEY = "user"
TOKEN_KEY = "userToken"

# The login endpoint returns only a token, so the identity is built locally
DEFAULT_USER_ID = "user-id"
DEFAULT_USER_NAME = "مدير النظام"

# Artificial delays (seconds) used to surface loading states
LOAD_DELAY_SEC = 0.0
SEARCH_DELAY_SEC = 0.0
