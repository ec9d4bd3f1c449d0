"""
Generate the bcrypt hash for the ACCESS_CODE_HASH setting.

    python manage.py make_access_code_hash
    python manage.py make_access_code_hash --code s3cret --rounds 12
"""
from getpass import getpass

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.access.verifier import hash_access_code


class Command(BaseCommand):
    help = 'Hash an access code for the ACCESS_CODE_HASH environment variable'

    def add_arguments(self, parser):
        parser.add_argument('--code', help='Access code to hash (prompted for when omitted)')
        parser.add_argument(
            '--rounds',
            type=int,
            default=settings.ACCESS_CODE_BCRYPT_ROUNDS,
            help='bcrypt cost factor',
        )

    def handle(self, *args, **options):
        access_code = options['code'] or getpass('Access code: ')
        if not access_code:
            raise CommandError('Access code must not be empty')
        if not 4 <= options['rounds'] <= 31:
            raise CommandError('Rounds must be between 4 and 31')

        access_hash = hash_access_code(access_code, rounds=options['rounds'])

        self.stdout.write(self.style.SUCCESS('Hash generated:'))
        self.stdout.write(access_hash)
        self.stdout.write('')
        self.stdout.write('Add this to your .env file:')
        self.stdout.write(f'ACCESS_CODE_HASH={access_hash}')
