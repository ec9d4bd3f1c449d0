"""
Session cookie issuing and reading.

The session token is the access code itself and is re-verified on every
request, so the cookie is the whole session. Its attributes depend on
whether the frontend is served from another host than the API.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from django.conf import settings

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = 24 * 60 * 60
EXPIRED = 'Thu, 01 Jan 1970 00:00:00 GMT'

POLICY_SETTINGS = {'FRONTEND_URL', 'BACKEND_URL', 'APP_ENV', 'ACCESS_CODE_COOKIE_NAME'}


def _hostname(url):
    return urlparse(url).hostname or url


@dataclass(frozen=True)
class CookiePolicy:
    name: str
    secure: bool
    samesite: str
    cross_site: bool
    httponly: bool = True
    max_age: int = SESSION_MAX_AGE
    path: str = '/'

    @classmethod
    def from_settings(cls):
        frontend_host = _hostname(settings.FRONTEND_URL)
        backend_host = _hostname(settings.BACKEND_URL)
        cross_site = frontend_host != backend_host
        production = settings.APP_ENV == 'production'
        # SameSite=None is rejected by browsers unless the cookie is Secure
        return cls(
            name=settings.ACCESS_CODE_COOKIE_NAME,
            secure=cross_site or production,
            samesite='None' if cross_site else 'Lax',
            cross_site=cross_site,
        )


@lru_cache(maxsize=1)
def get_cookie_policy():
    policy = CookiePolicy.from_settings()
    logger.info(
        "Session cookie policy: samesite=%s secure=%s cross_site=%s",
        policy.samesite, policy.secure, policy.cross_site,
    )
    return policy


def reset_cookie_policy(setting=None, **kwargs):
    if setting is None or setting in POLICY_SETTINGS:
        get_cookie_policy.cache_clear()


def set_session_cookie(response, token):
    policy = get_cookie_policy()
    response.set_cookie(
        policy.name,
        token,
        max_age=policy.max_age,
        path=policy.path,
        secure=policy.secure,
        httponly=policy.httponly,
        samesite=policy.samesite,
    )
    return response


def clear_session_cookie(response):
    """Expire the session cookie with the same attributes it was set with."""
    policy = get_cookie_policy()
    response.set_cookie(
        policy.name,
        '',
        max_age=0,
        expires=EXPIRED,
        path=policy.path,
        secure=policy.secure,
        httponly=policy.httponly,
        samesite=policy.samesite,
    )
    return response


def read_session_cookie(request):
    return request.COOKIES.get(get_cookie_policy().name) or None
