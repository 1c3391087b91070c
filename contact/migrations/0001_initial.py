# Initial migration for contact settings

from django.db import migrations, models

import contact.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('success_message', models.CharField(default='Thank you for your message! I will get back to you soon.', max_length=500)),
                ('error_message', models.CharField(default='Something went wrong while sending your message. Please try again later.', max_length=500)),
                ('email_subject', models.CharField(default='Portfolio contact: {{subject}}', max_length=200)),
                ('email_template', models.TextField(default=contact.models.DEFAULT_EMAIL_TEMPLATE)),
                ('auto_reply_enabled', models.BooleanField(default=False)),
                ('auto_reply_subject', models.CharField(blank=True, default='Thanks for your message', max_length=200, null=True)),
                ('auto_reply_template', models.TextField(blank=True, default=contact.models.DEFAULT_AUTO_REPLY_TEMPLATE, null=True)),
                ('admin_email', models.EmailField(default=contact.models.default_admin_email, max_length=254)),
                ('cc_emails', models.JSONField(blank=True, default=list)),
            ],
            options={
                'db_table': 'contact_settings',
                'verbose_name_plural': 'contact settings',
            },
        ),
    ]
