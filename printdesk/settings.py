"""
Django settings for the printdesk project.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'printdesk-insecure-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'receipts',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Receipt printing
RECEIPT_RENDERERS = {
    'pdf': 'receipts.printing.renderers.PdfReceiptRenderer',
    'paper': 'receipts.printing.renderers.PaperReceiptRenderer',
    'html': 'receipts.printing.renderers.HtmlReceiptRenderer',
    'json': 'receipts.printing.renderers.JsonReceiptRenderer',
}
RECEIPT_DEFAULT_FORMAT = os.environ.get('RECEIPT_DEFAULT_FORMAT', 'paper')
RECEIPT_STRICT_REGISTRATION = False

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

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
        'receipts': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
