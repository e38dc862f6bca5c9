"""
Django settings for the appdocs project.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-appdocs-development-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() == 'true'

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'applications',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'appdocs',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Application documents
# Template identifiers map to paths below a base location. Paths carry their
# own leading separator.
APPLICATION_DOCUMENT_TEMPLATES = {
    'PendingApplication': '/documents/pending_application.html',
    'ActivatedApplication': '/documents/activated_application.html',
    'InReviewApplication': '/documents/in_review_application.html',
}

APPLICATION_DOCUMENT_TEMPLATE_ROOT = str(BASE_DIR / 'applications' / 'templates')

# Seconds
APPLICATION_DOCUMENT_FETCH_TIMEOUT = 30.0

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'applications': {
            'handlers': ['console'],
            'level': os.environ.get('APPDOCS_LOG_LEVEL', 'INFO'),
            'propagate': True,
        },
    },
}
