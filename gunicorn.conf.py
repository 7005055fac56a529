"""gunicorn settings, taken from config so .env applies to the master too."""

import config

wsgi_app = "app:app"
bind = f"{config.APP_HOST}:{config.APP_PORT}"

# /work is CPU-bound and stateless
worker_class = "sync"
workers = config.WEB_CONCURRENCY
timeout = config.WEB_TIMEOUT
graceful_timeout = config.WEB_GRACEFUL_TIMEOUT

accesslog = "-"
errorlog = "-"
loglevel = config.LOG_LEVEL.lower()
