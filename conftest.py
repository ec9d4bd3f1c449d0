"""Shared test fixtures."""
from unittest import mock

import pytest
from django.conf import settings
from rest_framework.test import APIClient

from apps.access.cookies import get_cookie_policy
from apps.products import s3_service


def fake_presigned_url(operation, Params, ExpiresIn):
    return f"https://{Params['Bucket']}.s3.amazonaws.com/{Params['Key']}?X-Amz-Expires={ExpiresIn}"


@pytest.fixture(autouse=True)
def s3_client():
    """Replace the shared S3 client so no test talks to AWS."""
    client = mock.Mock()
    client.generate_presigned_url.side_effect = fake_presigned_url
    with mock.patch.object(s3_service, 'get_s3_client', return_value=client):
        yield client


@pytest.fixture(autouse=True)
def fresh_cookie_policy():
    get_cookie_policy.cache_clear()
    yield
    get_cookie_policy.cache_clear()


@pytest.fixture
def access_code():
    return settings.TEST_ACCESS_CODE


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, access_code):
    api_client.cookies[settings.ACCESS_CODE_COOKIE_NAME] = access_code
    return api_client


@pytest.fixture
def make_product(db):
    from apps.products.models import Product

    counter = {'value': 0}

    def _make_product(**fields):
        counter['value'] += 1
        defaults = {
            'ean': f"84100000{counter['value']:05d}",
            'name': f"Product {counter['value']}",
            'brand': 'Acme',
        }
        defaults.update(fields)
        return Product.objects.create(**defaults)

    return _make_product
