from django.contrib import admin

from portfolio_backend.admin import SingletonAdmin
from .models import AnalyticsEvent, AnalyticsSettings


@admin.register(AnalyticsSettings)
class AnalyticsSettingsAdmin(SingletonAdmin):
    list_display = ('enabled', 'retention_days', 'exclude_admin_views', 'updated_at')
    readonly_fields = ('updated_at',)


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):
    list_display = ('event_type', 'event_name', 'page', 'project_id', 'country', 'timestamp')
    list_filter = ('event_type', 'country')
    search_fields = ('page', 'event_name', 'project_id')
    date_hierarchy = 'timestamp'
    readonly_fields = [field.name for field in AnalyticsEvent._meta.fields]

    def has_add_permission(self, request):
        return False
