"""
API views for access code login, logout and session check.
These routes are public; the rest of the API sits behind the access gate.
"""
import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from apps.access.cookies import clear_session_cookie, read_session_cookie, set_session_cookie
from apps.access.serializers import LoginSerializer
from apps.access.verifier import get_access_code_verifier
from apps.core.exceptions import AuthError, ConfigError, ValidationError

logger = logging.getLogger(__name__)


class PublicAPIView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]


class LoginAPIView(PublicAPIView):
    """Exchange the access code for a session cookie."""

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError('Access code is required', errors=serializer.errors)

        access_code = serializer.validated_data['access_code']
        if not get_access_code_verifier().verify(access_code):
            logger.warning("Rejected login attempt from %s", request.META.get('REMOTE_ADDR'))
            raise AuthError('Incorrect access code')

        response = Response({'success': True, 'message': 'Authentication successful'})
        return set_session_cookie(response, access_code)


class LogoutAPIView(PublicAPIView):

    def post(self, request):
        response = Response({'success': True, 'message': 'Logged out successfully'})
        return clear_session_cookie(response)


class AuthCheckAPIView(PublicAPIView):
    """Report whether the request carries a valid session cookie."""

    def get(self, request):
        token = read_session_cookie(request)
        authenticated = False
        if token:
            try:
                authenticated = get_access_code_verifier().verify(token)
            except ConfigError:
                authenticated = False
        return Response({'success': authenticated, 'authenticated': authenticated})
