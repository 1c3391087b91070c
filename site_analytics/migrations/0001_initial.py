# Initial migration for analytics settings and events

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AnalyticsSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('enabled', models.BooleanField(default=True)),
                ('track_page_views', models.BooleanField(default=True)),
                ('track_project_clicks', models.BooleanField(default=True)),
                ('track_contact_form', models.BooleanField(default=True)),
                ('track_downloads', models.BooleanField(default=True)),
                ('custom_events', models.JSONField(blank=True, default=list)),
                ('retention_days', models.PositiveIntegerField(default=365, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(3650)])),
                ('exclude_admin_views', models.BooleanField(default=True)),
                ('heatmap_enabled', models.BooleanField(default=False)),
                ('notification_email', models.EmailField(blank=True, max_length=254, null=True)),
                ('weekly_reports', models.BooleanField(default=False)),
                ('monthly_reports', models.BooleanField(default=True)),
            ],
            options={
                'db_table': 'analytics_settings',
                'verbose_name_plural': 'analytics settings',
            },
        ),
        migrations.CreateModel(
            name='AnalyticsEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event_type', models.CharField(choices=[('page_view', 'Page view'), ('project_click', 'Project click'), ('contact_form', 'Contact form'), ('download', 'Download'), ('custom', 'Custom')], db_index=True, max_length=20)),
                ('event_name', models.CharField(blank=True, max_length=100, null=True)),
                ('page', models.CharField(blank=True, max_length=500, null=True)),
                ('project_id', models.CharField(blank=True, max_length=64, null=True)),
                ('user_agent', models.TextField(blank=True, null=True)),
                ('ip_address', models.CharField(blank=True, help_text='SHA-256 of the client IP', max_length=64, null=True)),
                ('country', models.CharField(blank=True, max_length=64, null=True)),
                ('referrer', models.TextField(blank=True, null=True)),
                ('session_id', models.CharField(blank=True, max_length=100, null=True)),
                ('metadata', models.JSONField(blank=True, null=True)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'analytics_events',
                'ordering': ['-timestamp'],
            },
        ),
    ]
