"""
Access gate for the catalog API.

Every API view uses ``AccessCodeCookieAuthentication`` by default; the
session cookie must carry an access code matching ``ACCESS_CODE_HASH``.
"""
from rest_framework.authentication import BaseAuthentication

from apps.access.cookies import read_session_cookie
from apps.access.verifier import get_access_code_verifier
from apps.core.exceptions import AuthError


class AccessGrant:
    """Stands in for ``request.user`` once the access code checks out."""
    is_authenticated = True
    is_anonymous = False

    def __str__(self):
        return 'access-code'


class AccessCodeCookieAuthentication(BaseAuthentication):

    def authenticate(self, request):
        token = read_session_cookie(request)
        if not token:
            return None

        if not get_access_code_verifier().verify(token):
            raise AuthError('Invalid session. Please log in again.')

        return AccessGrant(), None

    def authenticate_header(self, request):
        # Makes DRF answer unauthenticated requests with 401 rather than 403
        return 'Cookie realm="api"'
