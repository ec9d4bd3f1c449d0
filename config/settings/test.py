"""
Test settings.
"""
import bcrypt
from .base import *

DEBUG = False

APP_ENV = 'test'

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

TEST_ACCESS_CODE = 'test-access-code'

# Low cost factor keeps the suite fast
ACCESS_CODE_HASH = bcrypt.hashpw(TEST_ACCESS_CODE.encode(), bcrypt.gensalt(rounds=4)).decode()

FRONTEND_URL = 'http://localhost:3000'
BACKEND_URL = 'http://localhost:3001'

AWS_ACCESS_KEY_ID = 'testing'
AWS_SECRET_ACCESS_KEY = 'testing'
AWS_S3_REGION_NAME = 'us-east-1'
AWS_STORAGE_BUCKET_NAME = 'test-bucket'
