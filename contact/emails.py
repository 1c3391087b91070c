"""
Rendering and delivery of contact form e-mails.
"""
import logging
import re

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils.html import escape, strip_tags

logger = logging.getLogger(__name__)

SMTP_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
PLACEHOLDER_PATTERN = re.compile(r'\{\{(name|email|subject|message)\}\}')


class EmailConfigurationError(Exception):
    """SMTP delivery is selected but the server or credentials are missing."""


def check_email_configuration():
    """Raise EmailConfigurationError when the SMTP backend cannot possibly work."""
    if settings.EMAIL_BACKEND != SMTP_BACKEND:
        return
    missing = [
        name for name, value in (
            ('SMTP_HOST', settings.EMAIL_HOST),
            ('SMTP_USER', settings.EMAIL_HOST_USER),
            ('SMTP_PASS', settings.EMAIL_HOST_PASSWORD),
        ) if not value
    ]
    if missing:
        raise EmailConfigurationError(f"SMTP is not configured, missing: {', '.join(missing)}")


def render_template(template, values, html=True):
    """
    Substitute {{name}}, {{email}}, {{subject}} and {{message}}.

    All placeholders are replaced in a single pass, so a submitted value that
    itself looks like a placeholder is never expanded.
    HTML bodies get escaped values with newlines turned into <br>.
    Subject lines get raw values with line breaks removed, so a submission
    cannot inject extra headers.
    """
    def substitute(match):
        value = str(values.get(match.group(1), ''))
        if html:
            return escape(value).replace('\n', '<br>')
        return ' '.join(value.splitlines())

    rendered = PLACEHOLDER_PATTERN.sub(substitute, template or '')
    if not html:
        rendered = ' '.join(rendered.splitlines()).strip()
    return rendered


def _send_html(subject, html_body, to, cc=None, reply_to=None):
    message = EmailMultiAlternatives(
        subject=subject,
        body=strip_tags(html_body),
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=to,
        cc=cc or [],
        reply_to=reply_to or [],
    )
    message.attach_alternative(html_body, 'text/html')
    message.send(fail_silently=False)


def send_contact_notification(contact_settings, submission):
    """Send the submission to the site owner, with Reply-To set to the sender."""
    check_email_configuration()
    _send_html(
        subject=render_template(contact_settings.email_subject, submission, html=False),
        html_body=render_template(contact_settings.email_template, submission),
        to=[contact_settings.admin_email],
        cc=[address for address in contact_settings.cc_emails or [] if address],
        reply_to=[submission['email']],
    )
    logger.info(f"Contact message from {submission['email']} sent to {contact_settings.admin_email}")


def send_auto_reply(contact_settings, submission):
    """
    Confirm receipt to the sender.

    Best effort: a failure is logged and swallowed, the notification to the
    owner has already gone out.
    """
    if not contact_settings.auto_reply_enabled or not contact_settings.auto_reply_template:
        return False
    try:
        _send_html(
            subject=render_template(contact_settings.auto_reply_subject or 'Thanks for your message', submission, html=False),
            html_body=render_template(contact_settings.auto_reply_template, submission),
            to=[submission['email']],
        )
    except Exception as e:
        logger.warning(f"Auto-reply to {submission['email']} failed: {str(e)}")
        return False
    return True
