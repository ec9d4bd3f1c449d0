import pytest

from apps.access.verifier import AccessCodeVerifier, get_access_code_verifier, hash_access_code
from apps.core.exceptions import ConfigError


@pytest.fixture
def verifier():
    return AccessCodeVerifier(hash_access_code('open-sesame', rounds=4))


def test_verify_accepts_matching_code(verifier):
    assert verifier.verify('open-sesame') is True


def test_verify_rejects_wrong_code(verifier):
    assert verifier.verify('open-sesame ') is False
    assert verifier.verify('OPEN-SESAME') is False


def test_verify_rejects_empty_code(verifier):
    assert verifier.verify('') is False
    assert verifier.verify(None) is False


@pytest.mark.parametrize('stored_hash', [None, ''])
def test_missing_hash_fails_closed(stored_hash):
    with pytest.raises(ConfigError):
        AccessCodeVerifier(stored_hash).verify('anything')


def test_malformed_hash_fails_closed():
    with pytest.raises(ConfigError):
        AccessCodeVerifier('not-a-bcrypt-hash').verify('anything')


def test_hash_uses_configured_cost_factor(settings):
    settings.ACCESS_CODE_BCRYPT_ROUNDS = 10
    assert hash_access_code('open-sesame').startswith('$2b$10$')


def test_get_access_code_verifier_reads_settings(settings, access_code):
    assert get_access_code_verifier().verify(access_code) is True

    settings.ACCESS_CODE_HASH = hash_access_code('rotated', rounds=4)
    assert get_access_code_verifier().verify(access_code) is False
