"""
Tests for project-level helpers: rate limiter, key casing, request utils.
"""
import pytest
from django.test import RequestFactory
from rest_framework.test import APIClient

from portfolio_backend.camel import camel_to_snake, snake_to_camel
from portfolio_backend.rate_limit import RateLimiter
from portfolio_backend.utils import get_client_ip, safe_json_list


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestRateLimiter:

    def test_counts_down_then_denies(self):
        clock = FakeClock()
        limiter = RateLimiter('test', limit=3, window_seconds=60, clock=clock)
        results = [limiter.hit('1.2.3.4') for _ in range(4)]
        assert [r.allowed for r in results] == [True, True, True, False]
        assert [r.remaining for r in results] == [2, 1, 0, 0]
        assert results[3].reset_time == clock.now + 60

    def test_window_expiry_resets(self):
        clock = FakeClock()
        limiter = RateLimiter('test', limit=1, window_seconds=60, clock=clock)
        assert limiter.hit('ip').allowed
        assert not limiter.hit('ip').allowed
        clock.now += 60
        result = limiter.hit('ip')
        assert result.allowed
        assert result.remaining == 0

    def test_identifiers_and_namespaces_are_independent(self):
        clock = FakeClock()
        contact = RateLimiter('contact', limit=1, window_seconds=60, clock=clock)
        login = RateLimiter('login', limit=1, window_seconds=60, clock=clock)
        assert contact.hit('ip').allowed
        assert contact.hit('other-ip').allowed
        assert login.hit('ip').allowed
        assert not contact.hit('ip').allowed

    def test_rejection_response(self):
        clock = FakeClock()
        limiter = RateLimiter('test', limit=1, window_seconds=90, clock=clock)
        limiter.hit('ip')
        denied = limiter.hit('ip')
        clock.now += 30
        response = limiter.rejection(denied, 'Slow down')
        assert response.status_code == 429
        assert response.data['error'] == 'Slow down'
        assert response.data['remaining'] == 0
        assert response['Retry-After'] == '60'


class TestCamelCase:

    @pytest.mark.parametrize('snake, camel', [
        ('title', 'title'),
        ('github_url', 'githubUrl'),
        ('cta_button_1', 'ctaButton1'),
        ('journey_text_2', 'journeyText2'),
        ('google_analytics_id', 'googleAnalyticsId'),
    ])
    def test_conversion(self, snake, camel):
        assert snake_to_camel(snake) == camel
        assert camel_to_snake(camel) == snake


class TestRequestUtils:

    def test_client_ip_prefers_first_forwarded_hop(self):
        request = RequestFactory().get('/', HTTP_X_FORWARDED_FOR='198.51.100.1, 10.0.0.1', REMOTE_ADDR='127.0.0.1')
        assert get_client_ip(request) == '198.51.100.1'

    def test_client_ip_falls_back(self):
        factory = RequestFactory()
        assert get_client_ip(factory.get('/', HTTP_X_REAL_IP='198.51.100.2')) == '198.51.100.2'
        assert get_client_ip(factory.get('/', REMOTE_ADDR='198.51.100.3')) == '198.51.100.3'

    @pytest.mark.parametrize('stored, expected', [
        (['a', 'b'], ['a', 'b']),
        ('["a", "b"]', ['a', 'b']),
        ('not json', []),
        ('{"a": 1}', []),
        (None, []),
    ])
    def test_safe_json_list(self, stored, expected):
        assert safe_json_list(stored) == expected


@pytest.mark.django_db
class TestProjectRoutes:

    def test_health_check(self):
        response = APIClient().get('/api/health')
        assert response.status_code == 200
        assert response.json()['status'] == 'ok'

    def test_unknown_route_returns_json(self):
        response = APIClient().get('/api/does-not-exist')
        assert response.status_code == 404
        assert response.json() == {'error': 'Not found'}
