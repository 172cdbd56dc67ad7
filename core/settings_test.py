"""
Settings used by the pytest suite.

Loads the regular settings with a throwaway secret, SQLite, in-memory
e-mail and eager Celery tasks.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'True')

from core.settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ADMIN_TOKEN = 'test-admin-token'

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
DISABLE_EMAIL = False

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
