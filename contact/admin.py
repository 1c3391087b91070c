from django.contrib import admin

from portfolio_backend.admin import SingletonAdmin
from .models import ContactSettings


@admin.register(ContactSettings)
class ContactSettingsAdmin(SingletonAdmin):
    list_display = ('admin_email', 'auto_reply_enabled', 'updated_at')
    readonly_fields = ('updated_at',)
