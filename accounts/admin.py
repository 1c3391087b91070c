from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'is_staff', 'is_active', 'last_login', 'created_at')
    list_filter = ('is_staff', 'is_active')
    search_fields = ('username',)
    readonly_fields = ('created_at', 'updated_at', 'last_login')
