"""
Django settings for the Todo Sorter service.

All deployment-specific values come from environment variables:
- DJANGO_SECRET_KEY, DJANGO_DEBUG, DJANGO_ALLOWED_HOSTS
- LOG_LEVEL: root level for the console logger (default INFO)
- PORT: default port for `manage.py runserver` (default 3001)
- REQUEST_LOG_BODY_LIMIT: max characters of a POST body written to the log
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-only-insecure-key')

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', '*').split(',') if h.strip()]

PORT = os.getenv('PORT', '3001')

SERVICE_NAME = 'todo-sorter'
SERVICE_VERSION = '1.0.0'


# =============================================================================
# Application
# =============================================================================

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'ninja',
    'apps.core',
    'apps.sorting',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'apps.core.middleware.RequestLoggingMiddleware',
    'apps.core.middleware.MethodNotFoundMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

ASGI_APPLICATION = 'config.asgi.application'

# Stateless service: no tasks are persisted
DATABASES = {}

# Matches the 10mb JSON body limit of the sort endpoint
DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024

APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'


# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

REQUEST_LOG_BODY_LIMIT = int(os.getenv('REQUEST_LOG_BODY_LIMIT', '200'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'timestamped': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'timestamped',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'WARNING'),
            'propagate': False,
        },
    },
}
