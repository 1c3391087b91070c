"""
Management command to create or update the admin dashboard user.
Usage: python manage.py seed_admin [--username NAME] [--password SECRET]

Defaults come from the ADMIN_USERNAME / ADMIN_PASSWORD environment variables.
Running it again resets the password, so it is safe to use for recovery.
"""
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError


class Command(BaseCommand):
    help = 'Create or update the admin user from ADMIN_USERNAME / ADMIN_PASSWORD'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=None, help='Defaults to ADMIN_USERNAME')
        parser.add_argument('--password', default=None, help='Defaults to ADMIN_PASSWORD')

    def handle(self, *args, **options):
        username = options['username'] or settings.ADMIN_USERNAME
        password = options['password'] or settings.ADMIN_PASSWORD
        if not username or not password:
            raise CommandError('ADMIN_USERNAME and ADMIN_PASSWORD must be set (or pass --username/--password).')

        User = get_user_model()
        user, created = User.objects.get_or_create(username=username)
        user.set_password(password)
        user.is_staff = True
        user.is_superuser = True
        user.is_active = True
        user.save()

        action = 'Created' if created else 'Updated'
        self.stdout.write(self.style.SUCCESS(f'{action} admin user "{username}"'))
