"""
Serializers for Product model.
"""
from rest_framework import serializers
from apps.products.models import Product

PRODUCT_FIELDS = [
    'id', 'ean', 'name', 'original_name', 'brand', 'page', 'url', 'description',
    'category', 'type', 'variety', 'image_filename', 'available', 'comments',
]

REQUIRED_FIELDS = ('ean', 'name', 'brand')


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for Product responses.

    ``image_url`` is looked up in the ``image_urls`` context mapping
    (product id -> presigned URL), which callers fill in beforehand.
    """
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = PRODUCT_FIELDS + ['image_url']
        read_only_fields = PRODUCT_FIELDS

    def get_image_url(self, obj):
        return self.context.get('image_urls', {}).get(obj.id)


TEXT_FIELDS = [
    'ean', 'name', 'original_name', 'brand', 'page', 'url', 'description',
    'category', 'type', 'variety', 'image_filename', 'comments',
]


class ProductWriteSerializer(serializers.ModelSerializer):
    """Serializer for creating/updating products. Text is stored as submitted."""

    class Meta:
        model = Product
        fields = [field for field in PRODUCT_FIELDS if field != 'id']
        extra_kwargs = {field: {'trim_whitespace': False} for field in TEXT_FIELDS}
        # Duplicates are reported by the service layer as a conflict
        extra_kwargs['ean'].update({'validators': [], 'allow_blank': False})
        extra_kwargs['name'].update({'required': True, 'allow_blank': False, 'allow_null': False})
        extra_kwargs['brand'].update({'required': True, 'allow_blank': False, 'allow_null': False})


class ProductCommentsSerializer(serializers.Serializer):
    comments = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
