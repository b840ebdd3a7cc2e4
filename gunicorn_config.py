"""Gunicorn configuration for production.

Run with: gunicorn -c gunicorn_config.py "booking_platform:create_app()"
"""
import multiprocessing
import os

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    workers = min(max(multiprocessing.cpu_count(), 2), 8)

worker_class = "sync"
timeout = 60
keepalive = 5
graceful_timeout = 30

# Each worker builds its own app (and port registry); a wiring error makes
# the worker exit at boot instead of serving requests.
preload_app = False

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

# Process naming
proc_name = "booking-platform"

daemon = False
