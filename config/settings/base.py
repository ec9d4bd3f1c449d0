"""
Base settings shared by every environment.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-change-me')

DEBUG = False

APP_ENV = os.getenv('APP_ENV', 'development')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'corsheaders',
    'rest_framework',
    'apps.core',
    'apps.access',
    'apps.products',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

WSGI_APPLICATION = 'config.wsgi.application'

# Routes are exposed without trailing slashes
APPEND_SLASH = False

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'apps.access.authentication.AccessCodeCookieAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'EXCEPTION_HANDLER': 'apps.core.exception_handler.envelope_exception_handler',
    'UNAUTHENTICATED_USER': None,
}

# Access code gate
ACCESS_CODE_HASH = os.getenv('ACCESS_CODE_HASH')
ACCESS_CODE_BCRYPT_ROUNDS = int(os.getenv('ACCESS_CODE_BCRYPT_ROUNDS', '10'))
ACCESS_CODE_COOKIE_NAME = os.getenv('ACCESS_CODE_COOKIE_NAME', 'auth_session')

# Frontend/backend origins, used for CORS and cookie cross-site decisions
FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:3000').rstrip('/')
BACKEND_URL = os.getenv('BACKEND_URL', 'http://localhost:3001').rstrip('/')

CORS_ALLOWED_ORIGINS = [FRONTEND_URL] + [
    origin.strip().rstrip('/')
    for origin in os.getenv('CORS_ALLOWED_ORIGINS', '').split(',')
    if origin.strip() and origin.strip().rstrip('/') != FRONTEND_URL
]
CORS_ALLOW_CREDENTIALS = True

# AWS S3 (product images)
AWS_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
AWS_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
AWS_S3_REGION_NAME = os.getenv('AWS_S3_REGION_NAME', 'us-east-1')
AWS_STORAGE_BUCKET_NAME = os.getenv('AWS_STORAGE_BUCKET_NAME', '')

IMAGE_URL_EXPIRES_IN = int(os.getenv('IMAGE_URL_EXPIRES_IN', '3600'))
IMAGE_URL_MAX_WORKERS = int(os.getenv('IMAGE_URL_MAX_WORKERS', '8'))
PLACEHOLDER_IMAGE_KEY = os.getenv('PLACEHOLDER_IMAGE_KEY', 'placeholder.webp')

# Logging
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
