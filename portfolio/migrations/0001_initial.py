# Initial migration for portfolio content

import uuid

from django.db import migrations, models

import portfolio.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(max_length=1000)),
                ('image', models.CharField(blank=True, max_length=500, null=True)),
                ('technologies', models.JSONField(default=list)),
                ('github_url', models.URLField(blank=True, max_length=500, null=True)),
                ('live_url', models.URLField(blank=True, max_length=500, null=True)),
                ('featured', models.BooleanField(default=False)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['order', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Experience',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('company', models.CharField(max_length=200)),
                ('location', models.CharField(max_length=100)),
                ('start_date', models.CharField(help_text='YYYY-MM', max_length=7)),
                ('end_date', models.CharField(blank=True, help_text='YYYY-MM, empty while ongoing', max_length=7, null=True)),
                ('description', models.JSONField(default=list)),
                ('technologies', models.JSONField(default=list)),
                ('type', models.CharField(choices=[('work', 'Work'), ('education', 'Education')], default='work', max_length=20)),
                ('featured', models.BooleanField(default=False)),
            ],
            options={
                'db_table': 'experiences',
                'ordering': ['order', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Skill',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=100)),
                ('category', models.CharField(choices=[('language', 'Language'), ('framework', 'Framework'), ('tool', 'Tool'), ('other', 'Other')], max_length=20)),
                ('level', models.CharField(choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('advanced', 'Advanced'), ('expert', 'Expert')], max_length=20)),
                ('icon', models.CharField(max_length=10)),
                ('description', models.TextField(blank=True, max_length=500, null=True)),
                ('type', models.CharField(choices=[('main', 'Main'), ('workflow', 'Workflow'), ('soft', 'Soft')], default='main', max_length=20)),
            ],
            options={
                'db_table': 'skills',
                'ordering': ['order', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Tool',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=100)),
                ('category', models.CharField(max_length=50)),
                ('level', models.CharField(choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('advanced', 'Advanced'), ('expert', 'Expert')], max_length=20)),
                ('icon', models.CharField(max_length=10)),
                ('description', models.TextField(blank=True, max_length=500, null=True)),
            ],
            options={
                'db_table': 'tools',
                'ordering': ['order', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SoftSkill',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=100)),
                ('category', models.CharField(max_length=50)),
                ('level', models.CharField(choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('advanced', 'Advanced'), ('expert', 'Expert')], max_length=20)),
                ('icon', models.CharField(max_length=10)),
                ('description', models.TextField(blank=True, max_length=500, null=True)),
            ],
            options={
                'db_table': 'soft_skills',
                'ordering': ['order', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='HeroContent',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('greeting', models.CharField(default="Hi, I'm", max_length=100)),
                ('name', models.CharField(default='Your Name', max_length=100)),
                ('title', models.CharField(default='Full-Stack Developer', max_length=200)),
                ('description', models.TextField(default='I build fast, accessible web applications from database to user interface.', max_length=1000)),
                ('location', models.CharField(default='Remote', max_length=100)),
                ('email', models.EmailField(default='hello@example.com', max_length=254)),
                ('profile_image', models.CharField(blank=True, max_length=500, null=True)),
                ('cta_button_1', models.CharField(default='View my work', max_length=50)),
                ('cta_button_2', models.CharField(default='Get in touch', max_length=50)),
                ('scroll_text', models.CharField(default='Scroll down', max_length=50)),
            ],
            options={
                'db_table': 'hero_content',
                'verbose_name': 'hero section',
            },
        ),
        migrations.CreateModel(
            name='AboutContent',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('section_title', models.CharField(default='About me', max_length=100)),
                ('section_subtitle', models.CharField(default='A short introduction', max_length=200)),
                ('journey_title', models.CharField(default='My journey', max_length=100)),
                ('journey_text_1', models.TextField(default='I started programming out of curiosity and turned it into a career.', max_length=2000)),
                ('journey_text_2', models.TextField(default='Today I focus on building reliable products with modern tooling.', max_length=2000)),
                ('skills_title', models.CharField(default='Skills & technologies', max_length=100)),
            ],
            options={
                'db_table': 'about_content',
                'verbose_name': 'about section',
            },
        ),
        migrations.CreateModel(
            name='FooterContent',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(default='Your Name', max_length=100)),
                ('description', models.TextField(default='Developer portfolio.', max_length=500)),
                ('email', models.EmailField(default='hello@example.com', max_length=254)),
                ('github_url', models.URLField(blank=True, max_length=500, null=True)),
                ('linkedin_url', models.URLField(blank=True, max_length=500, null=True)),
                ('copyright_text', models.CharField(default=portfolio.models.default_copyright_text, max_length=200)),
                ('quick_links', models.JSONField(default=portfolio.models.default_quick_links)),
            ],
            options={
                'db_table': 'footer_content',
                'verbose_name': 'footer',
            },
        ),
        migrations.CreateModel(
            name='NavigationSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('brand_name', models.CharField(default='Portfolio', max_length=100)),
                ('logo', models.CharField(blank=True, max_length=500, null=True)),
                ('show_logo', models.BooleanField(default=False)),
                ('menu_items', models.JSONField(default=portfolio.models.default_menu_items)),
                ('cta_button', models.CharField(blank=True, default='Contact me', max_length=50, null=True)),
                ('cta_button_link', models.CharField(blank=True, default='#contact', max_length=500, null=True)),
                ('cta_button_enabled', models.BooleanField(default=True)),
                ('mobile_menu_enabled', models.BooleanField(default=True)),
                ('theme_toggle', models.BooleanField(default=True)),
            ],
            options={
                'db_table': 'navigation_settings',
                'verbose_name_plural': 'navigation settings',
            },
        ),
        migrations.CreateModel(
            name='SeoSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(default='Portfolio', max_length=100)),
                ('description', models.CharField(default='Personal portfolio: projects, experience and contact.', max_length=300)),
                ('keywords', models.JSONField(default=portfolio.models.default_keywords)),
                ('og_title', models.CharField(blank=True, max_length=100, null=True)),
                ('og_description', models.CharField(blank=True, max_length=300, null=True)),
                ('og_image', models.CharField(blank=True, max_length=500, null=True)),
                ('google_analytics_id', models.CharField(blank=True, max_length=50, null=True)),
                ('structured_data', models.TextField(blank=True, help_text='JSON-LD document', null=True)),
                ('robots_meta', models.CharField(default='index,follow', max_length=100)),
                ('canonical_url', models.URLField(blank=True, max_length=500, null=True)),
            ],
            options={
                'db_table': 'seo_settings',
                'verbose_name_plural': 'SEO settings',
            },
        ),
    ]
