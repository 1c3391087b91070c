"""
Management command to delete analytics events past the retention window.
Usage: python manage.py prune_analytics [--dry-run]

The window comes from AnalyticsSettings.retention_days (default 365).
Schedule it daily (cron, platform job runner).
"""
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from site_analytics.models import AnalyticsEvent, AnalyticsSettings


class Command(BaseCommand):
    help = 'Delete analytics events older than the configured retention period'

    def add_arguments(self, parser):
        parser.add_argument('--dry-run', action='store_true', help='Only report how many events would be deleted')

    def handle(self, *args, **options):
        retention_days = AnalyticsSettings.load().retention_days
        cutoff = timezone.now() - timedelta(days=retention_days)
        expired = AnalyticsEvent.objects.filter(timestamp__lt=cutoff)

        if options['dry_run']:
            self.stdout.write(f'{expired.count()} events older than {retention_days} days would be deleted')
            return

        deleted, _ = expired.delete()
        self.stdout.write(self.style.SUCCESS(f'Deleted {deleted} events older than {retention_days} days'))
