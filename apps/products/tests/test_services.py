import pytest

from apps.core.exceptions import ConflictError
from apps.products.models import Product
from apps.products.selectors import get_product_by_id
from apps.products.services import (
    create_product,
    delete_product,
    set_product_comments,
    toggle_product_availability,
    update_product,
)

pytestmark = pytest.mark.django_db

FIELDS = {
    'ean': '8410000000017',
    'name': 'Tinto Reserva',
    'original_name': 'Vino Tinto Reserva',
    'brand': 'Bodegas Sol',
    'page': '12',
    'url': 'https://example.com/tinto',
    'description': 'Aged 24 months',
    'category': 'Wine',
    'type': 'Red',
    'variety': 'Tempranillo',
    'image_filename': 'tinto.webp',
    'available': True,
    'comments': 'Best seller',
}


def test_created_product_reads_back_unchanged():
    product = create_product(**FIELDS)

    stored = get_product_by_id(product.id)
    for field, value in FIELDS.items():
        assert getattr(stored, field) == value


def test_available_defaults_to_true():
    product = create_product(ean='1', name='Item', brand='Acme')

    assert get_product_by_id(product.id).available is True


def test_duplicate_ean_is_a_conflict():
    create_product(ean='1', name='First', brand='Acme')

    with pytest.raises(ConflictError):
        create_product(ean='1', name='Second', brand='Acme')

    assert Product.objects.filter(ean='1').count() == 1


def test_update_merges_only_given_fields(make_product):
    product = make_product(ean='1', name='Old name', brand='Acme', category='Wine')

    updated = update_product(product.id, name='New name')

    stored = get_product_by_id(product.id)
    assert updated.name == stored.name == 'New name'
    assert stored.brand == 'Acme'
    assert stored.category == 'Wine'


def test_update_to_existing_ean_is_a_conflict(make_product):
    make_product(ean='1')
    other = make_product(ean='2')

    with pytest.raises(ConflictError):
        update_product(other.id, ean='1')

    assert get_product_by_id(other.id).ean == '2'


def test_update_missing_product_returns_none():
    assert update_product(12345, name='Nobody') is None


def test_delete_product(make_product):
    product = make_product()

    assert delete_product(product.id) is True
    assert get_product_by_id(product.id) is None
    assert delete_product(product.id) is False


def test_toggle_availability_is_its_own_inverse(make_product):
    product = make_product(available=True)

    assert toggle_product_availability(product.id).available is False
    assert get_product_by_id(product.id).available is False
    assert toggle_product_availability(product.id).available is True
    assert get_product_by_id(product.id).available is True


def test_toggle_missing_product_returns_none():
    assert toggle_product_availability(12345) is None


@pytest.mark.parametrize('comments', ['', None])
def test_empty_comments_are_stored_as_null(make_product, comments):
    product = make_product(comments='Old comment')

    set_product_comments(product.id, comments)

    assert get_product_by_id(product.id).comments is None


def test_set_comments(make_product):
    product = make_product()

    set_product_comments(product.id, 'Restock on Monday')

    assert get_product_by_id(product.id).comments == 'Restock on Monday'


def test_set_comments_missing_product_returns_none():
    assert set_product_comments(12345, 'Anything') is None
