"""
S3 service for presigned product image URLs.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache

import boto3
from django.conf import settings

logger = logging.getLogger(__name__)

_client_lock = threading.Lock()


@lru_cache(maxsize=1)
def _build_s3_client():
    return boto3.client(
        's3',
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_S3_REGION_NAME
    )


def get_s3_client():
    """
    Get configured S3 client.

    Built once per process and shared across threads; boto3 clients are
    thread-safe, client creation is not.

    Returns:
        boto3.client: Configured S3 client
    """
    with _client_lock:
        return _build_s3_client()


def image_key_for(image_filename):
    """S3 key to display for a product, falling back to the placeholder image."""
    return image_filename or settings.PLACEHOLDER_IMAGE_KEY


def get_presigned_image_url(image_filename, expires_in=None):
    """
    Generate a time-limited, read-only URL for an image in the bucket.

    Args:
        image_filename: S3 object key
        expires_in: Lifetime in seconds (default: IMAGE_URL_EXPIRES_IN)

    Returns:
        str: Presigned URL, or None when there is no image, no bucket is
        configured or S3 refuses to sign
    """
    bucket_name = settings.AWS_STORAGE_BUCKET_NAME
    if not image_filename or not bucket_name:
        return None

    if expires_in is None:
        expires_in = settings.IMAGE_URL_EXPIRES_IN

    try:
        return get_s3_client().generate_presigned_url(
            'get_object',
            Params={'Bucket': bucket_name, 'Key': image_filename},
            ExpiresIn=expires_in
        )
    except Exception as e:
        # An image that can't be signed must not fail the product response
        logger.error(f"Error generating presigned URL for {image_filename}: {str(e)}", exc_info=True)
        return None


def resolve_image_urls(image_filenames, expires_in=None):
    """
    Presign several images concurrently.

    Returns:
        list: URLs (or None) in the same order as ``image_filenames``
    """
    image_filenames = list(image_filenames)
    if not image_filenames:
        return []

    max_workers = min(settings.IMAGE_URL_MAX_WORKERS, len(image_filenames))
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='presign') as executor:
        return list(executor.map(lambda name: get_presigned_image_url(name, expires_in), image_filenames))
