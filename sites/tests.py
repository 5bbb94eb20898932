"""
Tests for sites app - Site, APIKey and plugin site endpoints.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_client(api_client, django_user_model):
    user = django_user_model.objects.create_user(
        username='admin',
        password='testpass123',
        is_staff=True,
    )
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def create_site():
    def _create_site(name="Test Site", url="https://example.com", **kwargs):
        from sites.models import Site
        return Site.objects.create(name=name, url=url, **kwargs)
    return _create_site


@pytest.fixture
def create_api_key(create_site):
    def _create_api_key(site=None, name="Test Key"):
        from sites.models import APIKey
        if site is None:
            site = create_site()
        full_key, key_prefix, key_hash = APIKey.generate_key()
        api_key = APIKey.objects.create(
            site=site,
            name=name,
            key_hash=key_hash,
            key_prefix=key_prefix
        )
        return api_key, full_key
    return _create_api_key


@pytest.fixture
def api_key_client(api_client, create_api_key):
    api_key, full_key = create_api_key()
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {full_key}')
    return api_client, api_key


@pytest.mark.django_db
class TestAPIKeyVerification:

    def test_verify_api_key_success(self, api_key_client):
        client, api_key = api_key_client

        response = client.post('/api/v1/auth/verify')
        assert response.status_code == 200
        assert response.data['authenticated'] is True
        assert response.data['site_id'] == api_key.site.id

    def test_verify_marks_key_used(self, api_key_client):
        client, api_key = api_key_client

        client.post('/api/v1/auth/verify')
        api_key.refresh_from_db()
        assert api_key.usage_count == 1
        assert api_key.last_used_at is not None

    def test_verify_with_x_api_key_header(self, api_client, create_api_key):
        api_key, full_key = create_api_key()
        api_client.credentials(HTTP_X_API_KEY=full_key)

        response = api_client.post('/api/v1/auth/verify')
        assert response.status_code == 200

    def test_verify_api_key_invalid(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer sk_seo_invalid_key')

        response = api_client.post('/api/v1/auth/verify')
        assert response.status_code == 401

    def test_verify_revoked_key(self, api_client, create_api_key):
        api_key, full_key = create_api_key()
        api_key.revoke()
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {full_key}')

        response = api_client.post('/api/v1/auth/verify')
        assert response.status_code == 401

    def test_verify_without_key(self, api_client):
        response = api_client.post('/api/v1/auth/verify')
        assert response.status_code == 401


@pytest.mark.django_db
class TestContentTypesSync:

    def test_site_has_wordpress_defaults(self, create_site):
        site = create_site()
        assert site.post_types == ['post', 'page', 'attachment']
        assert site.archive_post_types == []
        assert 'category' in site.taxonomies

    def test_sync_content_types(self, api_key_client):
        client, api_key = api_key_client

        response = client.post('/api/v1/site/content-types/', {
            'post_types': ['post', 'page', 'book'],
            'archive_post_types': ['book'],
        }, format='json')
        assert response.status_code == 200

        site = api_key.site
        site.refresh_from_db()
        assert site.post_types == ['post', 'page', 'book']
        assert site.archive_post_types == ['book']
        assert 'category' in site.taxonomies
        assert site.last_synced_at is not None

    def test_sync_content_types_deduplicates(self, api_key_client):
        client, api_key = api_key_client

        response = client.post('/api/v1/site/content-types/', {
            'taxonomies': ['genre', ' genre ', 'category'],
        }, format='json')
        assert response.status_code == 200
        assert response.data['taxonomies'] == ['genre', 'category']

    def test_sync_content_types_rejects_non_list(self, api_key_client):
        client, api_key = api_key_client

        response = client.post('/api/v1/site/content-types/', {
            'post_types': 'post',
        }, format='json')
        assert response.status_code == 400
        assert response.data['error']['code'] == 'VALIDATION_ERROR'


@pytest.mark.django_db
class TestAPIKeyManagement:

    def test_create_api_key(self, staff_client, create_site):
        from sites.models import APIKey
        site = create_site()

        response = staff_client.post('/api/v1/api-keys/', {
            'name': 'Production', 'site_id': site.id,
        }, format='json')
        assert response.status_code == 201
        full_key = response.data['key']['key']
        assert full_key.startswith('sk_seo_')
        assert APIKey.objects.get(site=site).verify_key(full_key)

    def test_create_api_key_requires_site(self, staff_client):
        response = staff_client.post('/api/v1/api-keys/', {'name': 'Orphan'}, format='json')
        assert response.status_code == 400

    def test_revoke_api_key(self, staff_client, create_api_key):
        api_key, full_key = create_api_key()

        response = staff_client.delete(f'/api/v1/api-keys/{api_key.id}/')
        assert response.status_code == 200
        api_key.refresh_from_db()
        assert api_key.is_active is False
        assert api_key.revoked_at is not None

    def test_plugin_key_cannot_manage_keys(self, api_key_client):
        client, api_key = api_key_client

        response = client.get('/api/v1/api-keys/')
        assert response.status_code == 403

    def test_list_sites(self, staff_client, create_site):
        site = create_site()

        response = staff_client.get('/api/v1/sites/')
        assert response.status_code == 200
        assert response.data['results'][0]['url'] == site.url
