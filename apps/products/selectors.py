"""
Selectors for Product read operations.
All database read queries should be placed here.
"""
from django.db.models import Q
from apps.products.models import Product

ALL = 'all'


def parse_availability(value):
    """
    Parse the tri-state ``available`` query value.

    Returns:
        None when absent or 'all', otherwise True only for 'true'
    """
    if value is None or value == '' or value == ALL:
        return None
    return str(value).lower() == 'true'


def get_product_by_id(product_id):
    """Get a single product by ID."""
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        return None


def list_products(filters=None, page=None, page_size=None):
    """
    List products with optional filtering and pagination.

    Args:
        filters: dict with keys: brand, category, available, search
        page: page number (1-indexed)
        page_size: number of items per page

    Returns:
        tuple: (list of products, total_count)
    """
    queryset = Product.objects.all()

    if filters:
        brand = filters.get('brand')
        if brand and brand != ALL:
            queryset = queryset.filter(brand=brand)

        category = filters.get('category')
        if category and category != ALL:
            queryset = queryset.filter(category=category)

        if filters.get('available') is not None:
            queryset = queryset.filter(available=filters['available'])

        search = filters.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search)
                | Q(original_name__icontains=search)
                | Q(brand__icontains=search)
                | Q(ean__icontains=search)
            )

    queryset = queryset.order_by('brand', 'name')
    total_count = queryset.count()

    if page and page_size:
        start = (page - 1) * page_size
        end = start + page_size
        queryset = queryset[start:end]

    return list(queryset), total_count


def list_brands():
    """Distinct brand values, sorted. Empty brands are kept."""
    return list(
        Product.objects.order_by('brand').values_list('brand', flat=True).distinct()
    )


def list_categories():
    """Distinct non-empty category values, sorted."""
    return list(
        Product.objects.exclude(category__isnull=True)
        .exclude(category='')
        .order_by('category')
        .values_list('category', flat=True)
        .distinct()
    )
