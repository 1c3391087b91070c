"""
Tests for the contact form pipeline.
"""
import pytest
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core import mail
from django.test import override_settings
from rest_framework.test import APIClient

from accounts.tokens import generate_token
from contact.emails import render_template
from contact.models import ContactSettings
from contact.validators import looks_like_spam
from portfolio_backend.settings import CONSOLE_EMAIL_BACKEND, SMTP_EMAIL_BACKEND, _default_email_backend


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def authenticated_client(api_client):
    user = get_user_model().objects.create_user(username='admin', password='testpass123')
    api_client.cookies[settings.AUTH_COOKIE_NAME] = generate_token({'id': user.pk, 'username': user.username})
    return api_client, user


@pytest.fixture
def submission():
    return {
        'name': "Zoë O'Neil",
        'email': 'zoe@example.org',
        'subject': 'Project inquiry',
        'message': 'I would like to talk about a <b>new</b> project with you.',
    }


@pytest.mark.django_db
class TestContactSubmission:

    def test_sends_notification(self, api_client, submission):
        ContactSettings.upsert({'admin_email': 'owner@example.com', 'cc_emails': ['team@example.com']})
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 200
        assert response.data['success'] is True
        assert response.data['remaining'] == settings.CONTACT_RATE_LIMIT - 1
        assert len(mail.outbox) == 1
        sent = mail.outbox[0]
        assert sent.to == ['owner@example.com']
        assert sent.cc == ['team@example.com']
        assert sent.reply_to == ['zoe@example.org']
        assert sent.subject == 'Portfolio contact: Project inquiry'
        html = sent.alternatives[0][0]
        assert '&lt;b&gt;new&lt;/b&gt;' in html
        assert '<b>new</b>' not in html

    def test_uses_defaults_without_stored_settings(self, api_client, submission):
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 200
        assert response.data['message'] == ContactSettings.load().success_message
        assert mail.outbox[0].to == [settings.CONTACT_EMAIL]

    def test_auto_reply(self, api_client, submission):
        ContactSettings.upsert({'auto_reply_enabled': True, 'auto_reply_subject': 'Got it, {{name}}'})
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 200
        assert len(mail.outbox) == 2
        assert mail.outbox[1].to == ['zoe@example.org']
        assert mail.outbox[1].subject == "Got it, Zoë O'Neil"

    @pytest.mark.parametrize('field, value', [
        ('name', 'A'),
        ('name', 'R2-D2'),
        ('email', 'not-an-email'),
        ('subject', 'Hey'),
        ('subject', 'Price <list>'),
        ('message', 'Too short'),
    ])
    def test_validation_errors(self, api_client, submission, field, value):
        submission[field] = value
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 400
        assert field in response.data['details']
        assert not mail.outbox

    @pytest.mark.parametrize('message', [
        'Please visit http://spam.example.com for details today.',
        'Hello there <script>alert(1)</script> friend of mine.',
        'Congratulations, you have been selected for something.',
    ])
    def test_spam_rejected_before_sending(self, api_client, submission, message):
        submission['message'] = message
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 400
        assert 'spam' in response.data['error']
        assert not mail.outbox

    def test_rate_limit(self, api_client, submission):
        for _ in range(5):
            assert api_client.post('/api/contact', submission, format='json').status_code == 200
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 429
        assert response.data['remaining'] == 0
        assert response.data['resetTime'].endswith('Z')
        assert len(mail.outbox) == 5

    def test_rate_limit_is_per_forwarded_ip(self, api_client, submission):
        for _ in range(5):
            api_client.post('/api/contact', submission, format='json', HTTP_X_FORWARDED_FOR='10.0.0.1, 10.0.0.2')
        blocked = api_client.post('/api/contact', submission, format='json', HTTP_X_FORWARDED_FOR='10.0.0.1')
        other = api_client.post('/api/contact', submission, format='json', HTTP_X_FORWARDED_FOR='10.0.0.9')
        assert blocked.status_code == 429
        assert other.status_code == 200

    @override_settings(
        EMAIL_BACKEND='django.core.mail.backends.smtp.EmailBackend',
        EMAIL_HOST='', EMAIL_HOST_USER='', EMAIL_HOST_PASSWORD='',
    )
    def test_missing_smtp_configuration(self, api_client, submission):
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 500
        assert response.data == {'error': ContactSettings.load().error_message}

    @override_settings(
        EMAIL_BACKEND=_default_email_backend('', debug=False),
        EMAIL_HOST='', EMAIL_HOST_USER='', EMAIL_HOST_PASSWORD='',
    )
    def test_default_backend_without_smtp_env_fails(self, api_client, submission):
        response = api_client.post('/api/contact', submission, format='json')
        assert response.status_code == 500
        assert response.data == {'error': ContactSettings.load().error_message}
        assert not mail.outbox


@pytest.mark.django_db
class TestContactSettings:

    def test_get_defaults(self, api_client):
        response = api_client.get('/api/contact-settings')
        assert response.status_code == 200
        assert response.data['autoReplyEnabled'] is False
        assert '{{message}}' in response.data['emailTemplate']

    def test_update_requires_auth(self, api_client):
        response = api_client.put('/api/contact-settings', {'adminEmail': 'x@example.com'}, format='json')
        assert response.status_code == 401
        assert not ContactSettings.objects.exists()

    def test_update_rejects_bad_cc(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/contact-settings', {'ccEmails': ['nope']}, format='json')
        assert response.status_code == 400
        assert 'ccEmails' in response.data['details']

    def test_update(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/contact-settings', {
            'successMessage': 'Merci!', 'ccEmails': ['a@example.com'],
        }, format='json')
        assert response.status_code == 200
        assert response.data['successMessage'] == 'Merci!'
        assert response.data['ccEmails'] == ['a@example.com']


class TestTemplating:

    def test_html_values_are_escaped(self):
        rendered = render_template('<p>{{name}}</p>', {'name': '<i>x</i>'})
        assert rendered == '<p>&lt;i&gt;x&lt;/i&gt;</p>'

    def test_subject_strips_newlines(self):
        rendered = render_template('Re: {{subject}}', {'subject': 'Hi\nBcc: evil@example.com'}, html=False)
        assert '\n' not in rendered

    def test_spam_heuristic(self):
        assert looks_like_spam('Bob', 'Hello there', 'Click here to claim')
        assert looks_like_spam('Bob', 'Hello there', '<img onerror=alert(1)>')
        assert not looks_like_spam('Bob', 'Hello there', 'I enjoyed your talk about caching.')

    def test_values_are_not_expanded_twice(self):
        rendered = render_template(
            '{{email}}: {{message}}', {'email': '{{message}}@x.io', 'message': 'Hello'}, html=False,
        )
        assert rendered == '{{message}}@x.io: Hello'

    @pytest.mark.parametrize('smtp_host, debug, expected', [
        ('', False, SMTP_EMAIL_BACKEND),
        ('smtp.example.com', False, SMTP_EMAIL_BACKEND),
        ('smtp.example.com', True, SMTP_EMAIL_BACKEND),
        ('', True, CONSOLE_EMAIL_BACKEND),
    ])
    def test_console_mail_only_in_debug(self, smtp_host, debug, expected):
        assert _default_email_backend(smtp_host, debug) == expected
