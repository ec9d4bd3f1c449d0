"""
Gunicorn configuration.

Run with: gunicorn config.wsgi -c gunicorn.conf.py
"""
import os

bind = f"0.0.0.0:{os.getenv('PORT', '3001')}"
workers = int(os.getenv('WEB_CONCURRENCY', '2'))
threads = int(os.getenv('GUNICORN_THREADS', '4'))
accesslog = '-'

# Seconds given to in-flight requests after SIGTERM
graceful_timeout = int(os.getenv('GRACEFUL_TIMEOUT', '30'))


def worker_exit(server, worker):
    """Release database connections before the worker process goes away."""
    from django.db import connections
    connections.close_all()
    server.log.info("Worker %s closed database connections", worker.pid)
