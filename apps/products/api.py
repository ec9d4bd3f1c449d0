"""
API views for Product endpoints.
These views handle request/response only and delegate to services/selectors.
"""
import math

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from apps.core.exceptions import NotFoundError, ValidationError
from apps.products.s3_service import get_presigned_image_url, image_key_for, resolve_image_urls
from apps.products.serializers import (
    REQUIRED_FIELDS,
    ProductCommentsSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from apps.products.selectors import (
    get_product_by_id,
    list_brands,
    list_categories,
    list_products,
    parse_availability,
)
from apps.products.services import (
    create_product,
    delete_product,
    set_product_comments,
    toggle_product_availability,
    update_product,
)


def serialize_product(product):
    """Serialize one product with its presigned image URL."""
    image_url = get_presigned_image_url(image_key_for(product.image_filename))
    return ProductSerializer(product, context={'image_urls': {product.id: image_url}}).data


def serialize_products(products):
    """Serialize products, presigning all their images concurrently."""
    urls = resolve_image_urls(image_key_for(product.image_filename) for product in products)
    image_urls = {product.id: url for product, url in zip(products, urls)}
    return ProductSerializer(products, many=True, context={'image_urls': image_urls}).data


MAX_PAGE_SIZE = 1000
# Keeps (page - 1) * limit well inside a signed 64-bit OFFSET
MAX_PAGE = 10 ** 9


def parse_positive_int(value, name, maximum):
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = 0
    if number < 1 or number > maximum:
        raise ValidationError(f"'{name}' must be an integer between 1 and {maximum}")
    return number


def validate_product_data(data, partial=False):
    serializer = ProductWriteSerializer(data=data, partial=partial)
    if not serializer.is_valid():
        if any(field in serializer.errors for field in REQUIRED_FIELDS):
            message = 'EAN, name and brand are required fields'
        else:
            message = 'Invalid product data'
        raise ValidationError(message, errors=serializer.errors)
    return serializer.validated_data


class ProductListCreateAPIView(APIView):
    """List products or create a new product."""

    def get(self, request):
        """List products with filtering and optional pagination."""
        params = request.query_params
        filters = {
            'brand': params.get('brand'),
            'category': params.get('category'),
            'search': params.get('search'),
            'available': parse_availability(params.get('available')),
        }

        page = params.get('page')
        limit = params.get('limit')
        paginate = page is not None and limit is not None
        if paginate:
            page = parse_positive_int(page, 'page', MAX_PAGE)
            limit = parse_positive_int(limit, 'limit', MAX_PAGE_SIZE)
            products, total_count = list_products(filters=filters, page=page, page_size=limit)
        else:
            products, total_count = list_products(filters=filters)

        data = serialize_products(products)
        body = {'success': True, 'data': data, 'count': len(data)}
        if paginate:
            body['pagination'] = {
                'page': page,
                'limit': limit,
                'total': total_count,
                'totalPages': math.ceil(total_count / limit),
            }
        return Response(body)

    def post(self, request):
        """Create a new product."""
        validated_data = validate_product_data(request.data)
        product = create_product(**validated_data)
        return Response({
            'success': True,
            'message': 'Product created successfully',
            'data': serialize_product(product),
        }, status=status.HTTP_201_CREATED)


class ProductDetailAPIView(APIView):
    """Retrieve, update or delete a product."""

    def get(self, request, product_id):
        product = get_product_by_id(product_id)
        if not product:
            raise NotFoundError()
        return Response({'success': True, 'data': serialize_product(product)})

    def put(self, request, product_id):
        """Merge the provided fields into the product."""
        validated_data = validate_product_data(request.data, partial=True)
        product = update_product(product_id, **validated_data)
        if not product:
            raise NotFoundError()
        return Response({
            'success': True,
            'message': 'Product updated successfully',
            'data': serialize_product(product),
        })

    def delete(self, request, product_id):
        if not delete_product(product_id):
            raise NotFoundError()
        return Response({'success': True, 'message': 'Product deleted successfully'})


class ProductToggleAvailabilityAPIView(APIView):

    def patch(self, request, product_id):
        product = toggle_product_availability(product_id)
        if not product:
            raise NotFoundError()
        state = 'available' if product.available else 'unavailable'
        return Response({
            'success': True,
            'message': f'Product marked as {state}',
            'data': serialize_product(product),
        })


class ProductCommentsAPIView(APIView):

    def patch(self, request, product_id):
        serializer = ProductCommentsSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError('Invalid comments', errors=serializer.errors)

        product = set_product_comments(product_id, serializer.validated_data.get('comments'))
        if not product:
            raise NotFoundError()
        return Response({
            'success': True,
            'message': 'Comments updated successfully',
            'data': serialize_product(product),
        })


class BrandListAPIView(APIView):

    def get(self, request):
        return Response({'success': True, 'data': list_brands()})


class CategoryListAPIView(APIView):

    def get(self, request):
        return Response({'success': True, 'data': list_categories()})
