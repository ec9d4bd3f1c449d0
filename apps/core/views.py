"""
Public views that live outside the API apps.
"""
from django.http import JsonResponse
from django.utils import timezone
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe."""
    return Response({
        'status': 'OK',
        'message': 'Products API is running',
        'timestamp': timezone.now().isoformat(),
    })


def route_not_found(request, exception=None):
    return JsonResponse({'success': False, 'message': 'Route not found'}, status=404)


def server_error(request):
    return JsonResponse({'success': False, 'message': 'Internal server error'}, status=500)
