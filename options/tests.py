"""
Tests for options app - options store, defaults and the options helper.
"""
import json

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def site():
    from sites.models import Site
    return Site.objects.create(
        name="Test Site",
        url="https://example.com",
        post_types=['post', 'page', 'book'],
        archive_post_types=['book'],
        taxonomies=['category', 'post_format'],
    )


@pytest.fixture
def api_key_client(site):
    from sites.models import APIKey
    full_key, key_prefix, key_hash = APIKey.generate_key()
    APIKey.objects.create(site=site, name="Test Key", key_hash=key_hash, key_prefix=key_prefix)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {full_key}')
    return client


@pytest.mark.django_db
class TestDefaults:

    def test_static_defaults(self, site):
        from options.defaults import get_titles_defaults
        defaults = get_titles_defaults(site)

        assert defaults['separator'] == 'sc-dash'
        assert defaults['noindex-archive-wpseo'] is True
        assert defaults['metadesc-author-wpseo'] == ''

    def test_dynamic_defaults_follow_registered_types(self, site):
        from options.defaults import get_titles_defaults
        defaults = get_titles_defaults(site)

        assert defaults['title-book'] == '%%title%% %%page%% %%sep%% %%sitename%%'
        assert defaults['display-metabox-pt-book'] is True
        assert defaults['metadesc-ptarchive-book'] == ''
        assert defaults['noindex-tax-category'] is False
        assert 'title-movie' not in defaults
        assert 'title-ptarchive-post' not in defaults

    def test_post_format_overrides(self, site):
        from options.defaults import get_titles_defaults
        defaults = get_titles_defaults(site)

        assert defaults['noindex-tax-post_format'] is True
        assert defaults['display-metabox-tax-post_format'] is False


@pytest.mark.django_db
class TestOptionsHelper:

    def test_get_falls_back_to_default(self, site):
        from options.helpers import OptionsHelper
        options = OptionsHelper(site)

        assert options.get('title-author-wpseo') == '%%name%%, Author at %%sitename%% %%page%%'
        assert options.get('not-an-option') is None
        assert options.get('not-an-option', 'fallback') == 'fallback'

    def test_get_default_unregistered_key(self, site):
        from options.helpers import OptionsHelper

        assert OptionsHelper(site).get_default('not-an-option') is None

    def test_set_then_get(self, site):
        from options.helpers import OptionsHelper
        from options.models import Option
        options = OptionsHelper(site)

        options.set('title-author-wpseo', 'Written by %%name%%')
        options.set('noindex-author-wpseo', True)

        assert options.get('title-author-wpseo') == 'Written by %%name%%'
        assert options.get('noindex-author-wpseo') is True
        stored = json.loads(Option.objects.get(site=site, name='wpseo_titles').value)
        assert stored == {'title-author-wpseo': 'Written by %%name%%', 'noindex-author-wpseo': True}

    def test_get_all_overlays_stored_values(self, site):
        from options.helpers import OptionsHelper
        options = OptionsHelper(site)
        options.set('separator', 'sc-pipe')

        values = options.get_all()
        assert values['separator'] == 'sc-pipe'
        assert values['title-book'] == '%%title%% %%page%% %%sep%% %%sitename%%'

    def test_corrupt_group_reads_as_defaults(self, site):
        from options.helpers import OptionsHelper
        from options.models import Option
        Option.objects.create(site=site, name='wpseo_titles', value='a:1:{s:9:"separator";}')
        options = OptionsHelper(site)

        assert options.get('separator') == 'sc-dash'
        options.set('separator', 'sc-gt')
        assert options.get('separator') == 'sc-gt'

    def test_options_are_per_site(self, site):
        from options.helpers import OptionsHelper
        from sites.models import Site
        other = Site.objects.create(name="Other", url="https://other.example.com")

        OptionsHelper(site).set('company_name', 'Acme')
        assert OptionsHelper(other).get('company_name') == ''

    def test_decode_option_value(self):
        from options.helpers import decode_option_value

        assert decode_option_value('{"a": 1}') == {'a': 1}
        assert decode_option_value('') is None
        assert decode_option_value(None) is None
        assert decode_option_value('a:0:{}') is None


@pytest.mark.django_db
class TestOptionEndpoints:

    def test_push_option_object(self, api_key_client, site):
        from options.models import Option

        response = api_key_client.put('/api/v1/options/aioseo_options/', {
            'value': {'searchAppearance': {'global': {'separator': '&raquo;'}}},
        }, format='json')
        assert response.status_code == 201
        stored = Option.objects.get(site=site, name='aioseo_options')
        assert json.loads(stored.value)['searchAppearance']['global']['separator'] == '&raquo;'

    def test_push_option_string_is_stored_verbatim(self, api_key_client, site):
        from options.models import Option
        raw = '{"searchAppearance": {}}'

        api_key_client.put('/api/v1/options/aioseo_options/', {'value': raw}, format='json')
        response = api_key_client.put('/api/v1/options/aioseo_options/', {'value': raw}, format='json')
        assert response.status_code == 200
        assert Option.objects.get(site=site, name='aioseo_options').value == raw

    def test_push_titles_group_rejected(self, api_key_client):
        response = api_key_client.put('/api/v1/options/wpseo_titles/', {'value': {}}, format='json')
        assert response.status_code == 400
        assert response.data['error']['code'] == 'VALIDATION_ERROR'

    def test_get_option(self, api_key_client, site):
        from options.models import Option
        Option.objects.create(site=site, name='aioseo_options', value='{}')

        response = api_key_client.get('/api/v1/options/aioseo_options/')
        assert response.status_code == 200
        assert response.data['value'] == '{}'

    def test_get_missing_option(self, api_key_client):
        response = api_key_client.get('/api/v1/options/aioseo_options/')
        assert response.status_code == 404
        assert response.data['error']['code'] == 'OPTION_NOT_FOUND'

    def test_titles(self, api_key_client, site):
        from options.helpers import OptionsHelper
        OptionsHelper(site).set('title-search-wpseo', 'Results for %%searchphrase%%')

        response = api_key_client.get('/api/v1/titles/')
        assert response.status_code == 200
        assert response.data['titles']['title-search-wpseo'] == 'Results for %%searchphrase%%'
        assert response.data['titles']['separator'] == 'sc-dash'

    def test_requires_api_key(self):
        response = APIClient().get('/api/v1/titles/')
        assert response.status_code == 401
