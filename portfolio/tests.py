"""
Tests for portfolio content: collections, page sections and uploads.
"""
import uuid

import pytest
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from accounts.tokens import generate_token
from portfolio.models import (
    Project, Experience, Skill, Tool, HeroContent, FooterContent, NavigationSettings, SeoSettings,
)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_user():
    def _create_user(username="admin", password="testpass123"):
        return get_user_model().objects.create_user(username=username, password=password)
    return _create_user


@pytest.fixture
def authenticated_client(api_client, create_user):
    user = create_user()
    api_client.cookies[settings.AUTH_COOKIE_NAME] = generate_token({'id': user.pk, 'username': user.username})
    return api_client, user


@pytest.fixture
def project_payload():
    return {
        'title': 'Portfolio CMS',
        'description': 'A small content management system for a personal site.',
        'technologies': ['Python', 'Django', 'PostgreSQL'],
        'githubUrl': 'https://github.com/example/portfolio',
        'liveUrl': '',
        'order': 0,
    }


@pytest.fixture
def experience_payload():
    return {
        'title': 'Backend Engineer',
        'company': 'Acme',
        'location': 'Berlin',
        'startDate': '2021-03',
        'endDate': '',
        'description': ['Built the billing API', 'Ran the on-call rotation'],
        'type': 'work',
    }


@pytest.mark.django_db
class TestProjects:

    def test_create_first_project_assigns_order_one(self, authenticated_client, project_payload):
        client, user = authenticated_client
        response = client.post('/api/projects', project_payload, format='json')
        assert response.status_code == 201
        assert response.data['success'] is True
        project = response.data['project']
        assert project['order'] == 1
        assert project['technologies'] == ['Python', 'Django', 'PostgreSQL']
        assert project['liveUrl'] is None
        assert project['githubUrl'] == 'https://github.com/example/portfolio'

    def test_next_order_follows_highest(self, authenticated_client, project_payload):
        client, user = authenticated_client
        Project.objects.create(title='A', description='d', technologies=['x'], order=7)
        response = client.post('/api/projects', project_payload, format='json')
        assert response.data['project']['order'] == 8

    def test_explicit_order_is_kept(self, authenticated_client, project_payload):
        client, user = authenticated_client
        project_payload['order'] = 3
        response = client.post('/api/projects', project_payload, format='json')
        assert response.data['project']['order'] == 3

    def test_technologies_roundtrip(self, authenticated_client, project_payload):
        client, user = authenticated_client
        created = client.post('/api/projects', project_payload, format='json').data['project']
        response = client.get(f"/api/projects/{created['id']}")
        assert response.status_code == 200
        assert response.data['project']['technologies'] == project_payload['technologies']

    def test_create_requires_technologies(self, authenticated_client, project_payload):
        client, user = authenticated_client
        project_payload['technologies'] = []
        response = client.post('/api/projects', project_payload, format='json')
        assert response.status_code == 400
        assert response.data['error'] == 'Validation failed'
        assert 'technologies' in response.data['details']

    def test_create_rejects_bad_url(self, authenticated_client, project_payload):
        client, user = authenticated_client
        project_payload['githubUrl'] = 'not a url'
        response = client.post('/api/projects', project_payload, format='json')
        assert response.status_code == 400
        assert 'githubUrl' in response.data['details']

    def test_create_requires_auth(self, api_client, project_payload):
        response = api_client.post('/api/projects', project_payload, format='json')
        assert response.status_code == 401
        assert response.data == {'error': 'Unauthorized'}
        assert not Project.objects.exists()

    def test_list_is_public_ordered_and_uncached(self, api_client):
        Project.objects.create(title='Second', description='d', technologies=['x'], order=2)
        Project.objects.create(title='First', description='d', technologies=['x'], order=1)
        response = api_client.get('/api/projects')
        assert response.status_code == 200
        assert [p['title'] for p in response.data['projects']] == ['First', 'Second']
        assert 'no-store' in response['Cache-Control']
        assert response['Pragma'] == 'no-cache'

    def test_list_featured_filter(self, api_client):
        Project.objects.create(title='Plain', description='d', technologies=['x'])
        Project.objects.create(title='Star', description='d', technologies=['x'], featured=True)
        response = api_client.get('/api/projects?featured=true')
        assert [p['title'] for p in response.data['projects']] == ['Star']

    def test_malformed_stored_technologies_read_as_empty(self, api_client):
        project = Project.objects.create(title='Legacy', description='d', technologies='not json')
        response = api_client.get(f'/api/projects/{project.pk}')
        assert response.data['project']['technologies'] == []

    def test_update_merges_fields(self, authenticated_client):
        client, user = authenticated_client
        project = Project.objects.create(title='Old', description='Keep me', technologies=['x'], order=4)
        response = client.put(f'/api/projects/{project.pk}', {'title': 'New'}, format='json')
        assert response.status_code == 200
        project.refresh_from_db()
        assert project.title == 'New'
        assert project.description == 'Keep me'
        assert project.order == 4

    def test_get_unknown_project(self, api_client):
        response = api_client.get(f'/api/projects/{uuid.uuid4()}')
        assert response.status_code == 404
        assert response.data == {'error': 'Project not found'}

    def test_delete_project(self, authenticated_client):
        client, user = authenticated_client
        project = Project.objects.create(title='Gone', description='d', technologies=['x'])
        response = client.delete(f'/api/projects/{project.pk}')
        assert response.status_code == 200
        assert response.data['success'] is True
        assert not Project.objects.filter(pk=project.pk).exists()


@pytest.mark.django_db
class TestExperiences:

    def test_create_experience(self, authenticated_client, experience_payload):
        client, user = authenticated_client
        response = client.post('/api/experiences', experience_payload, format='json')
        assert response.status_code == 201
        experience = response.data['experience']
        assert experience['endDate'] is None
        assert experience['technologies'] == []
        assert experience['order'] == 1

    def test_next_order_is_scoped_by_type(self, authenticated_client, experience_payload):
        client, user = authenticated_client
        Experience.objects.create(
            title='Uni', company='TU', location='Berlin', start_date='2015-10',
            description=['Studied'], type='education', order=9,
        )
        response = client.post('/api/experiences', experience_payload, format='json')
        assert response.data['experience']['order'] == 1

    def test_rejects_bad_month(self, authenticated_client, experience_payload):
        client, user = authenticated_client
        experience_payload['startDate'] = '03/2021'
        response = client.post('/api/experiences', experience_payload, format='json')
        assert response.status_code == 400
        assert 'startDate' in response.data['details']

    def test_rejects_empty_description_entry(self, authenticated_client, experience_payload):
        client, user = authenticated_client
        experience_payload['description'] = ['']
        response = client.post('/api/experiences', experience_payload, format='json')
        assert response.status_code == 400

    def test_type_filter(self, api_client):
        Experience.objects.create(title='Job', company='A', location='X', start_date='2020-01', description=['a'])
        Experience.objects.create(
            title='School', company='B', location='Y', start_date='2010-01', description=['b'], type='education',
        )
        response = api_client.get('/api/experiences?type=education')
        assert [e['title'] for e in response.data['experiences']] == ['School']

    def test_list_filters_do_not_hide_single_items(self, authenticated_client):
        client, user = authenticated_client
        job = Experience.objects.create(title='Job', company='A', location='X', start_date='2020-01', description=['a'])
        response = client.get(f'/api/experiences/{job.pk}?type=education')
        assert response.status_code == 200
        assert response.data['experience']['title'] == 'Job'
        response = client.put(f'/api/experiences/{job.pk}?type=education', {'title': 'Lead'}, format='json')
        assert response.status_code == 200
        job.refresh_from_db()
        assert job.title == 'Lead'

    def test_delete_unknown_experience(self, authenticated_client):
        client, user = authenticated_client
        response = client.delete(f'/api/experiences/{uuid.uuid4()}')
        assert response.status_code == 404
        assert response.data == {'error': 'Experience not found'}

    def test_reorder(self, authenticated_client):
        client, user = authenticated_client
        first = Experience.objects.create(title='A', company='A', location='X', start_date='2020-01', description=['a'], order=1)
        second = Experience.objects.create(title='B', company='B', location='X', start_date='2021-01', description=['b'], order=2)
        response = client.put('/api/experiences/reorder', {
            'experiences': [{'id': str(first.pk), 'order': 2}, {'id': str(second.pk), 'order': 1}],
        }, format='json')
        assert response.status_code == 200
        first.refresh_from_db()
        second.refresh_from_db()
        assert (first.order, second.order) == (2, 1)

    def test_reorder_unknown_id_rolls_back(self, authenticated_client):
        client, user = authenticated_client
        first = Experience.objects.create(title='A', company='A', location='X', start_date='2020-01', description=['a'], order=1)
        response = client.put('/api/experiences/reorder', {
            'experiences': [{'id': str(first.pk), 'order': 5}, {'id': str(uuid.uuid4()), 'order': 6}],
        }, format='json')
        assert response.status_code == 404
        first.refresh_from_db()
        assert first.order == 1


@pytest.mark.django_db
class TestSkillsAndTools:

    def test_skill_filters(self, api_client):
        Skill.objects.create(name='Python', category='language', level='expert', icon='P')
        Skill.objects.create(name='Git', category='tool', level='advanced', icon='G', type='workflow')
        response = api_client.get('/api/skills?type=workflow')
        assert [s['name'] for s in response.data['skills']] == ['Git']
        response = api_client.get('/api/skills?category=language')
        assert [s['name'] for s in response.data['skills']] == ['Python']

    def test_skill_rejects_unknown_level(self, authenticated_client):
        client, user = authenticated_client
        response = client.post('/api/skills', {
            'name': 'Rust', 'category': 'language', 'level': 'wizard', 'icon': 'R',
        }, format='json')
        assert response.status_code == 400
        assert 'level' in response.data['details']

    def test_tool_next_order_is_scoped_by_category(self, authenticated_client):
        client, user = authenticated_client
        Tool.objects.create(name='Vim', category='editor', level='expert', icon='V', order=4)
        Tool.objects.create(name='Docker', category='devops', level='advanced', icon='D', order=2)
        response = client.post('/api/tools', {
            'name': 'Emacs', 'category': 'editor', 'level': 'beginner', 'icon': 'E',
        }, format='json')
        assert response.status_code == 201
        assert response.data['tool']['order'] == 5

    def test_soft_skills_envelope(self, authenticated_client):
        client, user = authenticated_client
        response = client.post('/api/soft-skills', {
            'name': 'Mentoring', 'category': 'team', 'level': 'advanced', 'icon': 'M',
        }, format='json')
        assert response.status_code == 201
        assert response.data['softSkill']['name'] == 'Mentoring'
        response = client.get('/api/soft-skills')
        assert len(response.data['softSkills']) == 1


@pytest.mark.django_db
class TestPageSections:

    def test_hero_defaults_before_any_write(self, api_client):
        response = api_client.get('/api/hero')
        assert response.status_code == 200
        assert response.data['greeting'] == HeroContent._meta.get_field('greeting').default
        assert 'ctaButton1' in response.data
        assert not HeroContent.objects.exists()

    def test_partial_update_keeps_other_fields(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/hero', {'name': 'Ada', 'ctaButton1': 'See projects'}, format='json')
        assert response.status_code == 200
        assert response.data['name'] == 'Ada'
        assert response.data['ctaButton1'] == 'See projects'
        assert response.data['greeting'] == HeroContent._meta.get_field('greeting').default

        client.put('/api/hero', {'title': 'Engineer'}, format='json')
        hero = client.get('/api/hero').data
        assert hero['name'] == 'Ada'
        assert hero['title'] == 'Engineer'
        assert HeroContent.objects.count() == 1

    def test_unauthenticated_put_leaves_row_unchanged(self, api_client):
        HeroContent.upsert({'name': 'Original'})
        response = api_client.put('/api/hero', {'name': 'Hacked'}, format='json')
        assert response.status_code == 401
        assert HeroContent.load().name == 'Original'

    def test_about_uses_journey_fields(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/about', {'journeyText1': 'It began with BASIC.'}, format='json')
        assert response.status_code == 200
        assert response.data['journeyText1'] == 'It began with BASIC.'

    def test_footer_defaults_include_current_year(self, api_client):
        from django.utils import timezone
        response = api_client.get('/api/footer')
        assert str(timezone.now().year) in response.data['copyrightText']
        assert isinstance(response.data['quickLinks'], list)

    def test_footer_quick_links_validated(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/footer', {'quickLinks': [{'name': 'Blog'}]}, format='json')
        assert response.status_code == 400
        assert not FooterContent.objects.exists()

    def test_footer_quick_link_without_href_rejected(self, authenticated_client):
        client, user = authenticated_client
        FooterContent.upsert({'quick_links': [{'name': 'Home', 'href': '#home'}]})
        response = client.put('/api/footer', {'quickLinks': [{'name': 'Blog'}]}, format='json')
        assert response.status_code == 400
        assert 'quickLinks' in response.data['details']
        assert FooterContent.load().quick_links == [{'name': 'Home', 'href': '#home'}]
        assert client.get('/api/footer').status_code == 200

    def test_menu_item_without_name_rejected(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/navigation-settings', {'menuItems': [{'href': '#about'}]}, format='json')
        assert response.status_code == 400
        assert 'menuItems' in response.data['details']
        assert not NavigationSettings.objects.exists()

    def test_menu_item_defaults_applied_on_partial_update(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/navigation-settings', {'menuItems': [{'name': 'Blog', 'href': '/blog'}]}, format='json')
        assert response.status_code == 200
        assert NavigationSettings.load().menu_items == [{'name': 'Blog', 'href': '/blog', 'external': False, 'order': 0}]

    def test_malformed_stored_menu_items_are_skipped(self, api_client):
        NavigationSettings.upsert({'menu_items': [{'href': '#x'}, 'About', {'name': 'Blog', 'href': '/blog'}]})
        response = api_client.get('/api/navigation-settings')
        assert response.status_code == 200
        assert [item['name'] for item in response.data['menuItems']] == ['Blog']

    def test_navigation_menu_items(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/navigation-settings', {
            'brandName': 'Ada.dev',
            'menuItems': [{'name': 'Blog', 'href': 'https://blog.example.com', 'external': True, 'order': 1}],
        }, format='json')
        assert response.status_code == 200
        assert response.data['menuItems'][0]['external'] is True
        assert response.data['themeToggle'] is True

    def test_seo_rejects_invalid_structured_data(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/seo-settings', {'structuredData': '{not json'}, format='json')
        assert response.status_code == 400
        assert 'structuredData' in response.data['details']

    def test_seo_rejects_bad_analytics_id(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/seo-settings', {'googleAnalyticsId': 'GTM-1234'}, format='json')
        assert response.status_code == 400

    def test_seo_update(self, authenticated_client):
        client, user = authenticated_client
        response = client.put('/api/seo-settings', {
            'keywords': ['django', 'portfolio'],
            'googleAnalyticsId': 'G-ABC123',
            'structuredData': '{"@type": "Person"}',
        }, format='json')
        assert response.status_code == 200
        assert response.data['robotsMeta'] == 'index,follow'
        assert SeoSettings.load().keywords == ['django', 'portfolio']


@pytest.mark.django_db
class TestUpload:

    @pytest.fixture(autouse=True)
    def media_root(self, settings, tmp_path):
        settings.MEDIA_ROOT = tmp_path

    def test_upload_requires_cookie(self, api_client):
        image = SimpleUploadedFile('shot.png', b'\x89PNG\r\n', content_type='image/png')
        response = api_client.post('/api/upload', {'file': image}, format='multipart')
        assert response.status_code == 401

    def test_upload_image(self, authenticated_client, tmp_path):
        client, user = authenticated_client
        image = SimpleUploadedFile('shot.png', b'\x89PNG\r\n', content_type='image/png')
        response = client.post('/api/upload', {'file': image}, format='multipart')
        assert response.status_code == 200
        assert response.data['url'].startswith('/media/uploads/')
        assert response.data['url'].endswith('.png')
        assert any((tmp_path / 'uploads').iterdir())

    def test_upload_rejects_non_image(self, authenticated_client):
        client, user = authenticated_client
        script = SimpleUploadedFile('run.sh', b'echo hi', content_type='text/plain')
        response = client.post('/api/upload', {'file': script}, format='multipart')
        assert response.status_code == 400
        assert response.data == {'error': 'Invalid file type'}

    def test_upload_rejects_large_file(self, authenticated_client, settings):
        client, user = authenticated_client
        settings.UPLOAD_MAX_BYTES = 4
        image = SimpleUploadedFile('big.png', b'0123456789', content_type='image/png')
        response = client.post('/api/upload', {'file': image}, format='multipart')
        assert response.status_code == 400
        assert response.data == {'error': 'File too large'}
