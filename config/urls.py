"""
URL configuration for the product catalog API.
"""
from django.urls import path, include, re_path
from apps.core.views import health_check, route_not_found

urlpatterns = [
    path('health', health_check, name='health'),
    # API endpoints
    path('api/auth/', include('apps.access.urls')),
    path('api/', include('apps.products.urls')),
    # Anything else gets the uniform not-found envelope
    re_path(r'^.*$', route_not_found),
]

handler404 = 'apps.core.views.route_not_found'
handler500 = 'apps.core.views.server_error'
