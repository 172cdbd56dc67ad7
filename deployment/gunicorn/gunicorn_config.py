import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/site-backend/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", 3))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 60
keepalive = 5

# Logging
accesslog = "/var/log/site-backend/access.log"
errorlog = "/var/log/site-backend/error.log"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "site-backend"

# Server mechanics
daemon = False
pidfile = "/var/run/site-backend/gunicorn.pid"
umask = 0o007


def when_ready(server):
    """Called just after the server is started."""
    server.log.info("Site backend ready, spawning workers")


def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal (usually a timeout)."""
    worker.log.warning("Worker aborted, request exceeded the timeout")
