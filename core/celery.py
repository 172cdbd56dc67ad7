"""
Celery configuration for the contact & analytics backend.

Background work that must never block an API response runs here:
- Operator notification e-mails for new contact submissions
- Confirmation / response e-mails to submitters
"""
import os
from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

# Create Celery app
app = Celery('core')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()

# Celery configuration
app.conf.update(
    # Task result expiry
    result_expires=3600,  # 1 hour

    # Task time limits
    task_time_limit=120,  # 2 minutes hard limit
    task_soft_time_limit=90,

    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # Prefetch multiplier (1 = fair distribution)
    worker_prefetch_multiplier=1,

    # Serialization
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],

    enable_utc=True,
)
