"""
Shared access code verification.

The access code is never stored in plain text; only a bcrypt hash is
configured (``ACCESS_CODE_HASH``). Everything that needs to check a
submitted code goes through ``AccessCodeVerifier`` so the hash scheme can
change in one place.
"""
import logging

import bcrypt
from django.conf import settings

from apps.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def hash_access_code(access_code, rounds=None):
    """
    Hash an access code for the ``ACCESS_CODE_HASH`` setting.

    Args:
        access_code: Plain text access code
        rounds: bcrypt cost factor (default: ACCESS_CODE_BCRYPT_ROUNDS)

    Returns:
        str: bcrypt hash
    """
    if rounds is None:
        rounds = settings.ACCESS_CODE_BCRYPT_ROUNDS
    return bcrypt.hashpw(access_code.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


class AccessCodeVerifier:
    """Compare candidate access codes against a stored bcrypt hash."""

    def __init__(self, stored_hash):
        self.stored_hash = stored_hash

    def verify(self, candidate):
        """
        Check a candidate access code.

        Returns:
            bool: True if the candidate matches the stored hash

        Raises:
            ConfigError: if no usable hash is configured
        """
        if not self.stored_hash:
            logger.critical("ACCESS_CODE_HASH is not configured")
            raise ConfigError()
        if not candidate:
            return False

        try:
            return bcrypt.checkpw(candidate.encode('utf-8'), self.stored_hash.encode('utf-8'))
        except ValueError as exc:
            logger.critical("ACCESS_CODE_HASH is not a valid bcrypt hash")
            raise ConfigError() from exc


def get_access_code_verifier():
    return AccessCodeVerifier(settings.ACCESS_CODE_HASH)
