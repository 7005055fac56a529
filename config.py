"""Settings loaded from environment variables (and an optional .env file)."""

import os

from dotenv import find_dotenv, load_dotenv

# .env is looked up from the working directory, where gunicorn and app.py run
load_dotenv(find_dotenv(usecwd=True))

# App
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# /work
DEFAULT_N = int(os.getenv("WORK_DEFAULT_N", "10000"))
# 0 disables the upper bound
MAX_N = int(os.getenv("WORK_MAX_N", "10000000"))

if MAX_N < 0:
    raise RuntimeError("WORK_MAX_N must be >= 0")

# gunicorn
WEB_CONCURRENCY = int(os.getenv("WEB_CONCURRENCY", "1"))
WEB_TIMEOUT = int(os.getenv("WEB_TIMEOUT", "90"))
WEB_GRACEFUL_TIMEOUT = int(os.getenv("WEB_GRACEFUL_TIMEOUT", "30"))
