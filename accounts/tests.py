"""
Tests for accounts app authentication.
"""
import pytest
from datetime import timedelta
from io import StringIO

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.tokens import check_credentials, generate_token, verify_token


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_model():
    return get_user_model()


@pytest.fixture
def create_user(user_model):
    def _create_user(username="admin", password="testpass123"):
        return user_model.objects.create_user(username=username, password=password)
    return _create_user


@pytest.fixture
def authenticated_client(api_client, create_user):
    user = create_user()
    api_client.cookies[settings.AUTH_COOKIE_NAME] = generate_token({'id': user.pk, 'username': user.username})
    return api_client, user


@pytest.mark.django_db
class TestAuthentication:

    def test_login_success_sets_cookie(self, api_client, create_user):
        create_user()
        response = api_client.post('/api/auth/login', {
            'username': 'admin',
            'password': 'testpass123'
        }, format='json')
        assert response.status_code == 200
        assert response.data['success'] is True
        assert response.data['user']['username'] == 'admin'
        cookie = response.cookies[settings.AUTH_COOKIE_NAME]
        assert cookie['httponly']
        assert cookie['samesite'] == 'Lax'
        assert int(cookie['max-age']) == 7 * 24 * 60 * 60
        assert verify_token(cookie.value)['username'] == 'admin'

    def test_login_invalid_credentials(self, api_client, create_user):
        create_user()
        response = api_client.post('/api/auth/login', {
            'username': 'admin',
            'password': 'wrongpassword'
        }, format='json')
        assert response.status_code == 401
        assert response.data == {'error': 'Invalid credentials'}

    def test_login_missing_fields(self, api_client):
        response = api_client.post('/api/auth/login', {'username': 'admin'}, format='json')
        assert response.status_code == 400
        assert response.data['error'] == 'Validation failed'
        assert 'password' in response.data['details']

    def test_login_rate_limited(self, api_client, create_user):
        create_user()
        for _ in range(settings.LOGIN_RATE_LIMIT):
            response = api_client.post('/api/auth/login', {
                'username': 'admin', 'password': 'nope'
            }, format='json')
            assert response.status_code == 401
        response = api_client.post('/api/auth/login', {
            'username': 'admin', 'password': 'testpass123'
        }, format='json')
        assert response.status_code == 429
        assert response.data['remaining'] == 0
        assert 'Retry-After' in response

    def test_me_endpoint_authenticated(self, authenticated_client):
        client, user = authenticated_client
        response = client.get('/api/auth/me')
        assert response.status_code == 200
        assert response.data['user']['username'] == user.username
        assert 'createdAt' in response.data['user']

    def test_me_endpoint_with_bearer_header(self, api_client, create_user):
        user = create_user()
        token = generate_token({'id': user.pk, 'username': user.username})
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = api_client.get('/api/auth/me')
        assert response.status_code == 200

    def test_me_endpoint_unauthenticated(self, api_client):
        response = api_client.get('/api/auth/me')
        assert response.status_code == 401
        assert response.data == {'error': 'Unauthorized'}

    def test_me_endpoint_tampered_cookie(self, api_client, create_user):
        user = create_user()
        token = generate_token({'id': user.pk, 'username': user.username})
        header, payload, signature = token.split('.')
        api_client.cookies[settings.AUTH_COOKIE_NAME] = f'{header}.{payload}.{signature[::-1]}'
        response = api_client.get('/api/auth/me')
        assert response.status_code == 401

    def test_logout_clears_cookie(self, authenticated_client):
        client, user = authenticated_client
        response = client.post('/api/auth/logout')
        assert response.status_code == 200
        assert response.cookies[settings.AUTH_COOKIE_NAME].value == ''


@pytest.mark.django_db
class TestTokens:

    def test_check_credentials(self, create_user):
        user = create_user()
        assert check_credentials('admin', 'testpass123') == {'id': user.pk, 'username': 'admin'}
        assert check_credentials('admin', 'wrong') is None
        assert check_credentials('ghost', 'testpass123') is None

    def test_verify_token_roundtrip(self):
        payload = verify_token(generate_token({'id': 7, 'username': 'admin'}))
        assert payload['user_id'] == 7
        assert payload['username'] == 'admin'

    def test_verify_token_rejects_garbage(self):
        assert verify_token(None) is None
        assert verify_token('') is None
        assert verify_token('not.a.token') is None

    def test_verify_token_rejects_expired(self):
        token = AccessToken()
        token['user_id'] = 1
        token.set_exp(lifetime=-timedelta(seconds=1))
        assert verify_token(str(token)) is None


@pytest.mark.django_db
class TestAdminTokenMiddleware:

    def test_protected_prefix_requires_cookie(self, api_client):
        response = api_client.get('/api/admin/anything')
        assert response.status_code == 401
        assert response.json() == {'error': 'Authentication required'}

    def test_protected_prefix_with_valid_cookie(self, authenticated_client):
        client, user = authenticated_client
        response = client.get('/api/admin/anything')
        assert response.status_code == 404


@pytest.mark.django_db
class TestSeedAdmin:

    def test_creates_and_updates_admin(self, user_model):
        out = StringIO()
        call_command('seed_admin', '--username', 'owner', '--password', 'first-secret', stdout=out)
        user = user_model.objects.get(username='owner')
        assert user.is_staff and user.is_superuser
        assert user.check_password('first-secret')
        assert 'Created' in out.getvalue()

        call_command('seed_admin', '--username', 'owner', '--password', 'second-secret', stdout=out)
        user.refresh_from_db()
        assert user.check_password('second-secret')
        assert user_model.objects.filter(username='owner').count() == 1
