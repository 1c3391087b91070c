from django.contrib import admin

from portfolio_backend.admin import SingletonAdmin
from .models import (
    Project, Experience, Skill, Tool, SoftSkill,
    HeroContent, AboutContent, FooterContent, NavigationSettings, SeoSettings,
)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'featured', 'order', 'created_at')
    list_filter = ('featured',)
    list_editable = ('order',)
    search_fields = ('title', 'description')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ('title', 'company', 'type', 'start_date', 'end_date', 'order')
    list_filter = ('type', 'featured')
    list_editable = ('order',)
    search_fields = ('title', 'company')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'level', 'type', 'order')
    list_filter = ('type', 'category', 'level')
    list_editable = ('order',)
    search_fields = ('name',)


@admin.register(Tool, SoftSkill)
class CategorizedSkillAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'level', 'order')
    list_filter = ('category', 'level')
    list_editable = ('order',)
    search_fields = ('name', 'category')


admin.site.register([HeroContent, AboutContent, FooterContent, NavigationSettings, SeoSettings], SingletonAdmin)
