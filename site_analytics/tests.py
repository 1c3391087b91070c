"""
Tests for analytics ingestion, stats and retention.
"""
import hashlib
from datetime import timedelta
from io import StringIO

import pytest
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.tokens import generate_token
from portfolio.models import Project
from site_analytics.models import AnalyticsEvent, AnalyticsSettings
from site_analytics.stats import parse_period


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def authenticated_client(api_client):
    user = get_user_model().objects.create_user(username='admin', password='testpass123')
    api_client.cookies[settings.AUTH_COOKIE_NAME] = generate_token({'id': user.pk, 'username': user.username})
    return api_client, user


@pytest.fixture
def create_event():
    def _create_event(event_type=AnalyticsEvent.PAGE_VIEW, days_ago=0, **kwargs):
        return AnalyticsEvent.objects.create(
            event_type=event_type,
            timestamp=timezone.now() - timedelta(days=days_ago),
            **kwargs
        )
    return _create_event


@pytest.mark.django_db
class TestTrackEvent:

    def test_records_page_view(self, api_client):
        response = api_client.post('/api/analytics/track', {
            'eventType': 'page_view', 'page': '/projects', 'sessionId': 'abc',
        }, format='json', REMOTE_ADDR='203.0.113.7', HTTP_USER_AGENT='pytest', HTTP_CF_IPCOUNTRY='DE')
        assert response.status_code == 200
        assert response.data == {'success': True}
        event = AnalyticsEvent.objects.get()
        assert event.page == '/projects'
        assert event.session_id == 'abc'
        assert event.user_agent == 'pytest'
        assert event.country == 'DE'
        assert event.ip_address == hashlib.sha256(b'203.0.113.7').hexdigest()

    def test_invalid_payload_is_not_an_error(self, api_client):
        response = api_client.post('/api/analytics/track', {'eventType': 'mouse_wiggle'}, format='json')
        assert response.status_code == 200
        assert response.data['success'] is False
        assert not AnalyticsEvent.objects.exists()

    def test_disabled_analytics(self, api_client):
        AnalyticsSettings.upsert({'enabled': False})
        response = api_client.post('/api/analytics/track', {'eventType': 'page_view'}, format='json')
        assert response.data['success'] is False
        assert not AnalyticsEvent.objects.exists()

    def test_event_type_toggle(self, api_client):
        AnalyticsSettings.upsert({'track_project_clicks': False})
        response = api_client.post('/api/analytics/track', {'eventType': 'project_click'}, format='json')
        assert response.data['success'] is False

    def test_custom_events_always_tracked(self, api_client):
        AnalyticsSettings.upsert({
            'track_page_views': False, 'track_project_clicks': False,
            'track_contact_form': False, 'track_downloads': False,
        })
        response = api_client.post('/api/analytics/track', {
            'eventType': 'custom', 'eventName': 'cv_opened', 'metadata': {'source': 'hero'},
        }, format='json')
        assert response.data['success'] is True
        assert AnalyticsEvent.objects.get().metadata == {'source': 'hero'}

    def test_admin_views_excluded(self, authenticated_client):
        client, user = authenticated_client
        response = client.post('/api/analytics/track', {'eventType': 'page_view'}, format='json')
        assert response.data['success'] is False
        assert not AnalyticsEvent.objects.exists()

    def test_admin_views_tracked_when_not_excluded(self, authenticated_client):
        client, user = authenticated_client
        AnalyticsSettings.upsert({'exclude_admin_views': False})
        response = client.post('/api/analytics/track', {'eventType': 'page_view'}, format='json')
        assert response.data['success'] is True


@pytest.mark.django_db
class TestStats:

    def test_requires_auth(self, api_client):
        response = api_client.get('/api/analytics/stats')
        assert response.status_code == 401

    def test_empty_period(self, authenticated_client):
        client, user = authenticated_client
        response = client.get('/api/analytics/stats')
        assert response.status_code == 200
        assert response.data['period'] == 30
        assert response.data['overview'] == {
            'totalViews': 0, 'totalProjectClicks': 0, 'totalContactForms': 0, 'totalProjects': 0,
        }
        for key in ('dailyViews', 'topPages', 'topProjects', 'technologies', 'topCountries'):
            assert response.data[key] == []

    def test_aggregates(self, authenticated_client, create_event):
        client, user = authenticated_client
        project = Project.objects.create(title='CMS', description='d', technologies=['Python', 'Django'])
        Project.objects.create(title='CLI', description='d', technologies=['Python'])

        create_event(page='/', country='DE')
        create_event(page='/', country='DE', days_ago=1)
        create_event(page='/about', country='FR', days_ago=1)
        create_event(page='/old', days_ago=45)
        create_event(AnalyticsEvent.PROJECT_CLICK, project_id=str(project.pk))
        create_event(AnalyticsEvent.PROJECT_CLICK, project_id=str(project.pk))
        create_event(AnalyticsEvent.PROJECT_CLICK, project_id='legacy-id')
        create_event(AnalyticsEvent.CONTACT_FORM)

        data = client.get('/api/analytics/stats?period=30').data

        assert data['overview'] == {
            'totalViews': 3, 'totalProjectClicks': 3, 'totalContactForms': 1, 'totalProjects': 2,
        }
        assert sum(day['views'] for day in data['dailyViews']) == 3
        assert len(data['dailyViews']) == 2
        assert data['topPages'][0] == {'page': '/', 'views': 2}
        assert data['topProjects'][0] == {'projectId': str(project.pk), 'title': 'CMS', 'clicks': 2}
        assert data['topProjects'][1]['title'] == 'Unknown project'
        assert data['technologies'][0] == {'name': 'Python', 'count': 2, 'percentage': 100}
        assert {'name': 'Django', 'count': 1, 'percentage': 50} in data['technologies']
        assert data['topCountries'] == [{'country': 'DE', 'visits': 2}, {'country': 'FR', 'visits': 1}]

    def test_countries_count_every_event_type(self, authenticated_client, create_event):
        client, user = authenticated_client
        create_event(AnalyticsEvent.PROJECT_CLICK, country='DE')
        create_event(AnalyticsEvent.CONTACT_FORM, country='DE')
        create_event(AnalyticsEvent.PAGE_VIEW, country='FR')
        data = client.get('/api/analytics/stats').data
        assert data['topCountries'] == [{'country': 'DE', 'visits': 2}, {'country': 'FR', 'visits': 1}]

    def test_longer_period_includes_older_events(self, authenticated_client, create_event):
        client, user = authenticated_client
        create_event(page='/old', days_ago=45)
        data = client.get('/api/analytics/stats?period=90').data
        assert data['period'] == 90
        assert data['overview']['totalViews'] == 1

    @pytest.mark.parametrize('raw, expected', [
        (None, 30), ('abc', 30), ('0', 30), ('-5', 30), ('7', 7), ('999999', 3650),
    ])
    def test_parse_period(self, raw, expected):
        assert parse_period(raw) == expected


@pytest.mark.django_db
class TestAnalyticsSettings:

    def test_defaults(self, api_client):
        response = api_client.get('/api/analytics-settings')
        assert response.status_code == 200
        assert response.data['enabled'] is True
        assert response.data['retentionDays'] == 365
        assert response.data['monthlyReports'] is True
        assert response.data['weeklyReports'] is False

    def test_custom_events_keep_camel_case(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/analytics-settings', {
            'customEvents': [{'name': 'cv', 'selector': '#download-cv', 'eventType': 'click'}],
        }, format='json')
        assert response.status_code == 200
        assert response.data['customEvents'][0]['eventType'] == 'click'
        assert AnalyticsSettings.load().custom_events[0]['eventType'] == 'click'

    def test_rejects_unknown_trigger(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/analytics-settings', {
            'customEvents': [{'name': 'cv', 'selector': '#cv', 'eventType': 'hover'}],
        }, format='json')
        assert response.status_code == 400

    def test_rejects_custom_event_without_selector(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/analytics-settings', {
            'customEvents': [{'name': 'cv', 'eventType': 'click'}],
        }, format='json')
        assert response.status_code == 400
        assert 'customEvents' in response.data['details']
        assert not AnalyticsSettings.objects.exists()
        assert client.get('/api/analytics-settings').status_code == 200

    def test_rejects_retention_out_of_range(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/analytics-settings', {'retentionDays': 0}, format='json')
        assert response.status_code == 400
        assert 'retentionDays' in response.data['details']


@pytest.mark.django_db
class TestPruneAnalytics:

    def test_prunes_past_retention(self, create_event):
        AnalyticsSettings.upsert({'retention_days': 30})
        create_event(days_ago=1)
        create_event(days_ago=31)
        out = StringIO()
        call_command('prune_analytics', stdout=out)
        assert AnalyticsEvent.objects.count() == 1
        assert 'Deleted 1' in out.getvalue()

    def test_dry_run(self, create_event):
        create_event(days_ago=400)
        out = StringIO()
        call_command('prune_analytics', '--dry-run', stdout=out)
        assert AnalyticsEvent.objects.count() == 1
        assert '1 events' in out.getvalue()
