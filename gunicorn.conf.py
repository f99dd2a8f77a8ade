"""
Gunicorn configuration for the Outcome HTTP API.

Run with: gunicorn -c gunicorn.conf.py outcome_http.main:app
Env vars that override defaults:
  PORT     TCP port to bind
  WORKERS  number of worker processes (default: 2)
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Mapping is CPU-only and stateless; scale with workers, not threads.
workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 60

# stdout only; application logs share the stream (see outcome_http.core.logging).
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
accesslog = "-"
errorlog = "-"
# Same env var as Settings.TRACE_ID_HEADER; a value set only in .env is not seen here.
trace_id_header = os.environ.get("TRACE_ID_HEADER", "X-Request-Id").lower()
access_log_format = f"%(h)s \"%(r)s\" %(s)s %(b)sB %(D)sµs %({{{trace_id_header}}}o)s"

graceful_timeout = 30
