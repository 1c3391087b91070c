"""
Contact form configuration.
"""
from django.conf import settings
from django.db import models

from portfolio_backend.singletons import SingletonModel

DEFAULT_EMAIL_TEMPLATE = """<h2>New message from your portfolio</h2>
<p><strong>Name:</strong> {{name}}</p>
<p><strong>Email:</strong> {{email}}</p>
<p><strong>Subject:</strong> {{subject}}</p>
<p><strong>Message:</strong></p>
<p>{{message}}</p>"""

DEFAULT_AUTO_REPLY_TEMPLATE = """<p>Hi {{name}},</p>
<p>Thanks for reaching out about "{{subject}}". I received your message and will get back to you soon.</p>"""


def default_admin_email():
    return settings.CONTACT_EMAIL


class ContactSettings(SingletonModel):
    """
    Messages and e-mail templates used by the contact form.

    Templates may reference {{name}}, {{email}}, {{subject}} and {{message}};
    values are HTML-escaped before substitution.
    """
    success_message = models.CharField(
        max_length=500,
        default='Thank you for your message! I will get back to you soon.',
    )
    error_message = models.CharField(
        max_length=500,
        default='Something went wrong while sending your message. Please try again later.',
    )
    email_subject = models.CharField(max_length=200, default='Portfolio contact: {{subject}}')
    email_template = models.TextField(default=DEFAULT_EMAIL_TEMPLATE)
    auto_reply_enabled = models.BooleanField(default=False)
    auto_reply_subject = models.CharField(max_length=200, blank=True, null=True, default='Thanks for your message')
    auto_reply_template = models.TextField(blank=True, null=True, default=DEFAULT_AUTO_REPLY_TEMPLATE)
    admin_email = models.EmailField(max_length=254, default=default_admin_email)
    cc_emails = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = 'contact_settings'
        verbose_name_plural = 'contact settings'

    def __str__(self):
        return 'Contact settings'
