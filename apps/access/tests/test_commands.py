from io import StringIO

import bcrypt
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def test_make_access_code_hash_prints_env_line():
    out = StringIO()

    call_command('make_access_code_hash', code='letmein', rounds=4, stdout=out)

    env_line = [line for line in out.getvalue().splitlines() if line.startswith('ACCESS_CODE_HASH=')]
    assert len(env_line) == 1
    access_hash = env_line[0].split('=', 1)[1]
    assert access_hash.startswith('$2b$04$')
    assert bcrypt.checkpw(b'letmein', access_hash.encode())


def test_make_access_code_hash_rejects_bad_rounds():
    with pytest.raises(CommandError):
        call_command('make_access_code_hash', code='letmein', rounds=2, stdout=StringIO())
