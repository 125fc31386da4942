"""Gunicorn configuration for production deployment."""

import multiprocessing
import os

from gateway.config import get_settings

settings = get_settings()

bind = f"{settings.host}:{settings.port}"
backlog = 2048

workers = int(os.getenv("WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
max_requests = 10000
max_requests_jitter = 1000
timeout = 60
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = settings.log_level.lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

proc_name = "provider-gateway"

daemon = False

graceful_timeout = 30
