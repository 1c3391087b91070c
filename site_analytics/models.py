"""
Analytics configuration and raw event storage.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from portfolio_backend.singletons import SingletonModel


class AnalyticsSettings(SingletonModel):
    enabled = models.BooleanField(default=True)
    track_page_views = models.BooleanField(default=True)
    track_project_clicks = models.BooleanField(default=True)
    track_contact_form = models.BooleanField(default=True)
    track_downloads = models.BooleanField(default=True)
    custom_events = models.JSONField(default=list, blank=True)
    retention_days = models.PositiveIntegerField(
        default=365, validators=[MinValueValidator(1), MaxValueValidator(3650)]
    )
    exclude_admin_views = models.BooleanField(default=True)
    heatmap_enabled = models.BooleanField(default=False)
    notification_email = models.EmailField(max_length=254, blank=True, null=True)
    weekly_reports = models.BooleanField(default=False)
    monthly_reports = models.BooleanField(default=True)

    class Meta:
        db_table = 'analytics_settings'
        verbose_name_plural = 'analytics settings'

    def __str__(self):
        return 'Analytics settings'

    def tracks(self, event_type):
        """Whether events of `event_type` should be stored. Custom events always are."""
        if not self.enabled:
            return False
        toggles = {
            AnalyticsEvent.PAGE_VIEW: self.track_page_views,
            AnalyticsEvent.PROJECT_CLICK: self.track_project_clicks,
            AnalyticsEvent.CONTACT_FORM: self.track_contact_form,
            AnalyticsEvent.DOWNLOAD: self.track_downloads,
        }
        return toggles.get(event_type, True)


class AnalyticsEvent(models.Model):
    """
    One tracked interaction. Append-only; old rows are removed by
    `manage.py prune_analytics`.
    """
    PAGE_VIEW = 'page_view'
    PROJECT_CLICK = 'project_click'
    CONTACT_FORM = 'contact_form'
    DOWNLOAD = 'download'
    CUSTOM = 'custom'
    EVENT_TYPE_CHOICES = [
        (PAGE_VIEW, 'Page view'),
        (PROJECT_CLICK, 'Project click'),
        (CONTACT_FORM, 'Contact form'),
        (DOWNLOAD, 'Download'),
        (CUSTOM, 'Custom'),
    ]

    event_type = models.CharField(max_length=20, choices=EVENT_TYPE_CHOICES, db_index=True)
    event_name = models.CharField(max_length=100, blank=True, null=True)
    page = models.CharField(max_length=500, blank=True, null=True)
    project_id = models.CharField(max_length=64, blank=True, null=True)
    user_agent = models.TextField(blank=True, null=True)
    ip_address = models.CharField(max_length=64, blank=True, null=True, help_text='SHA-256 of the client IP')
    country = models.CharField(max_length=64, blank=True, null=True)
    referrer = models.TextField(blank=True, null=True)
    session_id = models.CharField(max_length=100, blank=True, null=True)
    metadata = models.JSONField(blank=True, null=True)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'analytics_events'
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.event_type} @ {self.timestamp:%Y-%m-%d %H:%M}"
