"""
Services for Product write operations.
All database write operations should be placed here.
Services can call selectors for read operations.
"""
import logging

from django.db import IntegrityError, transaction

from apps.core.exceptions import ConflictError
from apps.products.models import Product
from apps.products.selectors import get_product_by_id

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = (
    'ean', 'name', 'original_name', 'brand', 'page', 'url', 'description',
    'category', 'type', 'variety', 'image_filename', 'available', 'comments',
)


def create_product(**fields):
    """
    Create a new product.

    Args:
        **fields: Product fields; ean, name and brand are expected to be validated

    Returns:
        Product instance

    Raises:
        ConflictError: if a product with the same EAN exists
    """
    data = {key: value for key, value in fields.items() if key in WRITABLE_FIELDS}
    try:
        with transaction.atomic():
            product = Product.objects.create(**data)
    except IntegrityError as exc:
        raise ConflictError() from exc

    logger.info("Created product %s (EAN %s)", product.id, product.ean)
    return product


def update_product(product_id, **fields):
    """
    Merge the given fields into an existing product.

    Returns:
        Product instance or None if not found

    Raises:
        ConflictError: if the new EAN belongs to another product
    """
    product = get_product_by_id(product_id)
    if not product:
        return None

    changed = [key for key in fields if key in WRITABLE_FIELDS]
    if not changed:
        return product

    for key in changed:
        setattr(product, key, fields[key])

    try:
        with transaction.atomic():
            product.save(update_fields=changed)
    except IntegrityError as exc:
        raise ConflictError() from exc

    logger.info("Updated product %s fields: %s", product.id, ', '.join(changed))
    return product


def delete_product(product_id):
    """
    Delete a product by ID.

    Returns:
        bool: True if deleted, False if not found
    """
    product = get_product_by_id(product_id)
    if not product:
        return False

    product.delete()
    logger.info("Deleted product %s", product_id)
    return True


def toggle_product_availability(product_id):
    """Flip the availability flag. Concurrent toggles are last-write-wins."""
    product = get_product_by_id(product_id)
    if not product:
        return None

    product.available = not product.available
    product.save(update_fields=['available'])
    return product


def set_product_comments(product_id, comments=None):
    """Replace a product's comments; empty comments are stored as NULL."""
    product = get_product_by_id(product_id)
    if not product:
        return None

    product.comments = comments or None
    product.save(update_fields=['comments'])
    return product
