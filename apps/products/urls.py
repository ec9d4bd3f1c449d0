"""
URL routing for Product endpoints.
"""
from django.urls import path
from apps.products.api import (
    ProductListCreateAPIView,
    ProductDetailAPIView,
    ProductToggleAvailabilityAPIView,
    ProductCommentsAPIView,
    BrandListAPIView,
    CategoryListAPIView,
)

app_name = 'products'

urlpatterns = [
    path('products', ProductListCreateAPIView.as_view(), name='list-create'),
    path('products/<int:product_id>', ProductDetailAPIView.as_view(), name='detail'),
    path(
        'products/<int:product_id>/toggle-availability',
        ProductToggleAvailabilityAPIView.as_view(),
        name='toggle-availability',
    ),
    path('products/<int:product_id>/comments', ProductCommentsAPIView.as_view(), name='comments'),
    path('brands', BrandListAPIView.as_view(), name='brands'),
    path('categories', CategoryListAPIView.as_view(), name='categories'),
]
