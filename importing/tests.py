"""
Tests for importing app - AIOSEO settings importers.
"""
import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework.test import APIClient

from importing.flatten import flatten_settings, get_setting


ARCHIVE_SETTINGS = {
    'author': {
        'show': True,
        'title': 'Author Title',
        'metaDescription': 'Author Desc',
        'advanced': {
            'showDateInGooglePreview': True,
        },
    },
    'date': {
        'show': True,
        'title': 'Date Title',
        'metaDescription': 'Date Desc',
        'advanced': {
            'showDateInGooglePreview': True,
        },
    },
    'search': {
        'show': True,
        'title': 'Search Title',
        'metaDescription': 'Search Desc',
        'advanced': {
            'showDateInGooglePreview': True,
        },
    },
}

FLATTENED_ARCHIVE_SETTINGS = {
    '/author/show': True,
    '/author/title': 'Author Title',
    '/author/metaDescription': 'Author Desc',
    '/author/advanced/showDateInGooglePreview': True,
    '/date/show': True,
    '/date/title': 'Date Title',
    '/date/metaDescription': 'Date Desc',
    '/date/advanced/showDateInGooglePreview': True,
    '/search/show': True,
    '/search/title': 'Search Title',
    '/search/metaDescription': 'Search Desc',
    '/search/advanced/showDateInGooglePreview': True,
}

OTHER_SEARCH_APPEARANCE = {
    'postypes': {
        'post': {
            'title': 'title1',
            'metaDescription': 'desc1',
        },
    },
    'taxonomies': {
        'category': {
            'title': 'title1',
            'metaDescription': 'desc1',
        },
    },
}


@pytest.fixture
def site():
    from sites.models import Site
    return Site.objects.create(
        name="Test Site",
        url="https://example.com",
        post_types=['post', 'page', 'book'],
        archive_post_types=['book'],
        taxonomies=['category', 'genre'],
    )


@pytest.fixture
def store_option(site):
    def _store_option(name, value):
        from options.models import Option
        if not isinstance(value, str):
            value = json.dumps(value)
        option, _ = Option.objects.update_or_create(site=site, name=name, defaults={'value': value})
        return option
    return _store_option


@pytest.fixture
def options(site):
    from options.helpers import OptionsHelper
    return OptionsHelper(site)


@pytest.fixture
def default_archive_action(site):
    from importing.actions import AioseoDefaultArchiveSettingsImportingAction
    return AioseoDefaultArchiveSettingsImportingAction(site)


@pytest.fixture
def api_key_client(site):
    from sites.models import APIKey
    full_key, key_prefix, key_hash = APIKey.generate_key()
    APIKey.objects.create(site=site, name="Test Key", key_hash=key_hash, key_prefix=key_prefix)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {full_key}')
    return client


class TestFlattenSettings:

    def test_nested_paths(self):
        assert flatten_settings({'a': {'b': {'c': 1}}}) == {'/a/b/c': 1}

    def test_archive_settings(self):
        flattened = flatten_settings(ARCHIVE_SETTINGS)

        assert flattened == FLATTENED_ARCHIVE_SETTINGS
        assert list(flattened) == list(FLATTENED_ARCHIVE_SETTINGS)

    def test_flat_mapping_keeps_values(self):
        flat = {'separator': '-', 'siteTitle': 'Home', 'enabled': False}
        flattened = flatten_settings(flat)

        assert flattened == {'/separator': '-', '/siteTitle': 'Home', '/enabled': False}
        # Flattening the same tree again gives the same map.
        assert flatten_settings({key.lstrip('/'): value for key, value in flattened.items()}) == flattened

    def test_lists_are_leaves(self):
        settings = {'keywords': ['seo', 'wordpress'], 'schema': {'types': []}}

        assert flatten_settings(settings) == {'/keywords': ['seo', 'wordpress'], '/schema/types': []}

    def test_key_prefix(self):
        assert flatten_settings({'title': 'x'}, '/author') == {'/author/title': 'x'}

    def test_deep_tree(self):
        tree = 1
        for _ in range(5000):
            tree = {'a': tree}

        assert flatten_settings(tree) == {'/a' * 5000: 1}

    @pytest.mark.parametrize('malformed', ['not_array', None, 42, ['a', 'b']])
    def test_non_mapping_flattens_to_empty(self, malformed):
        assert flatten_settings(malformed) == {}

    def test_get_setting(self):
        settings = {'searchAppearance': {'archives': {'author': {}}}}

        assert get_setting(settings, ('searchAppearance', 'archives')) == {'author': {}}
        assert get_setting(settings, ('searchAppearance', 'global')) is None
        assert get_setting({'searchAppearance': 'oops'}, ('searchAppearance', 'archives')) is None
        assert get_setting(None, ('searchAppearance',)) is None


class TestReplacevarHandler:

    def test_transform(self):
        from importing.services.replacevar_handler import AioseoReplacevarHandler
        handler = AioseoReplacevarHandler()

        assert handler.transform('#post_title #separator_sa #site_title') == '%%title%% %%sep%% %%sitename%%'

    def test_longest_tag_wins(self):
        from importing.services.replacevar_handler import AioseoReplacevarHandler
        handler = AioseoReplacevarHandler()

        assert handler.transform('#post_excerpt_only / #post_excerpt') == '%%excerpt_only%% / %%excerpt%%'

    def test_unknown_tags_and_non_strings(self):
        from importing.services.replacevar_handler import AioseoReplacevarHandler
        handler = AioseoReplacevarHandler()

        assert handler.transform('#custom_field-price') == '#custom_field-price'
        assert handler.transform(True) is True
        assert handler.transform(None) is None

    def test_whole_tags_only(self):
        from importing.services.replacevar_handler import AioseoReplacevarHandler
        handler = AioseoReplacevarHandler()

        assert handler.transform('#post_title_plural and #author_name_full') == '#post_title_plural and #author_name_full'
        assert handler.transform('#post_title, #author_name.') == '%%title%%, %%name%%.'

    def test_compose_map_is_per_handler(self):
        from importing.services.replacevar_handler import AioseoReplacevarHandler
        edited = AioseoReplacevarHandler()
        edited.compose_map('#taxonomy_title', 'term_title')

        assert edited.transform('#taxonomy_title') == '%%term_title%%'
        assert AioseoReplacevarHandler().transform('#taxonomy_title') == '%%category_title%%'


@pytest.mark.django_db
class TestQuery:

    def test_source_option_name(self, default_archive_action):
        assert default_archive_action.get_source_option_name() == 'aioseo_options'

    def test_full_settings(self, default_archive_action, store_option):
        store_option('aioseo_options', {
            'searchAppearance': dict(OTHER_SEARCH_APPEARANCE, archives=ARCHIVE_SETTINGS),
        })

        assert default_archive_action.query() == FLATTENED_ARCHIVE_SETTINGS

    def test_missing_settings(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': OTHER_SEARCH_APPEARANCE})

        assert default_archive_action.query() == {}

    def test_malformed_settings(self, default_archive_action, store_option):
        store_option('aioseo_options', {
            'searchAppearance': dict(OTHER_SEARCH_APPEARANCE, archives='not_array'),
        })

        assert default_archive_action.query() == {}

    @pytest.mark.parametrize('raw', ['', 'not json', 'a:1:{s:16:"searchAppearance";a:0:{}}', '[]', '"text"'])
    def test_undecodable_blob(self, default_archive_action, store_option, raw):
        store_option('aioseo_options', raw)

        assert default_archive_action.query() == {}

    def test_deeply_nested_blob(self, default_archive_action, store_option):
        store_option('aioseo_options', '{"a":' * 5000 + '1' + '}' * 5000)

        assert default_archive_action.query() == {}
        assert default_archive_action.get_total_unindexed() == 0

    def test_absent_option(self, default_archive_action):
        assert default_archive_action.query() == {}

    def test_limit(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        assert list(default_archive_action.query(3)) == ['/author/show', '/author/title', '/author/metaDescription']

    def test_zero_limit(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        assert default_archive_action.query(0) == {}


@pytest.mark.django_db
class TestMap:

    @pytest.mark.parametrize('setting, setting_value, yoast_key, expected', [
        ('/author/title', 'Author Title', 'title-author-wpseo', 'Author Title'),
        ('/author/metaDescription', 'Author Desc', 'metadesc-author-wpseo', 'Author Desc'),
        ('/author/advanced/robotsMeta/noindex', True, 'noindex-author-wpseo', True),
        ('/date/metaDescription', 'Date Title', 'metadesc-archive-wpseo', 'Date Title'),
        ('/date/advanced/robotsMeta/noindex', False, 'noindex-archive-wpseo', False),
        ('/search/title', '#search_term results', 'title-search-wpseo', '%%searchphrase%% results'),
    ])
    def test_map_writes_default_destinations(self, default_archive_action, options, setting, setting_value, yoast_key, expected):
        default_archive_action.build_mapping()
        default_archive_action.map(setting_value, setting)

        assert options.get(yoast_key) == expected

    @pytest.mark.parametrize('setting', ['/date/show', '/randomSetting'])
    def test_unmapped_settings_are_noops(self, default_archive_action, site, setting):
        from options.models import Option
        default_archive_action.build_mapping()
        default_archive_action.map('randomValue', setting)

        assert not Option.objects.filter(site=site, name='wpseo_titles').exists()

    def test_customized_destination_is_never_overwritten(self, default_archive_action, options):
        options.set('title-author-wpseo', 'My own author title')
        default_archive_action.build_mapping()

        default_archive_action.map('Author Title', '/author/title')

        assert options.get('title-author-wpseo') == 'My own author title'

    def test_number_is_not_boolean_default(self, default_archive_action, options):
        options.set('noindex-author-wpseo', 0)
        default_archive_action.build_mapping()

        default_archive_action.map(True, '/author/advanced/robotsMeta/noindex')

        assert options.get('noindex-author-wpseo') == 0
        assert options.get('noindex-author-wpseo') is not False

    def test_default_destination_written_once(self, default_archive_action, options):
        default_archive_action.build_mapping()

        default_archive_action.map('First #author_name', '/author/title')
        default_archive_action.map('Second', '/author/title')

        assert options.get('title-author-wpseo') == 'First %%name%%'

    def test_unregistered_destination_is_skipped(self, default_archive_action, options):
        default_archive_action.aioseo_options_to_yoast_map = {
            '/movie/title': {'yoast_name': 'title-movie', 'transform_method': 'simple_import'},
        }

        default_archive_action.map('Movies', '/movie/title')

        assert options.get('title-movie') is None

    def test_unknown_transform_raises(self, default_archive_action):
        with pytest.raises(ValueError):
            default_archive_action.transform_setting('x', {'transform_method': 'delete_everything'})


@pytest.mark.django_db
class TestRobotsTransformer:

    MAPPING = {'option_name': 'aioseo_options', 'type': 'archives', 'subtype': 'author'}

    def _settings(self, author_default, global_robots):
        return {
            'searchAppearance': {
                'advanced': {'globalRobotsMeta': global_robots},
                'archives': {
                    'author': {'advanced': {'robotsMeta': {'default': author_default, 'noindex': False}}},
                },
            },
        }

    def test_own_value_when_not_deferring(self, options, store_option):
        from importing.services.robots import AioseoRobotsTransformer
        store_option('aioseo_options', self._settings(False, {'default': False, 'noindex': True}))

        assert AioseoRobotsTransformer(options).transform_robot_setting('noindex', False, self.MAPPING) is False

    def test_defers_to_global_noindex(self, options, store_option):
        from importing.services.robots import AioseoRobotsTransformer
        store_option('aioseo_options', self._settings(True, {'default': False, 'noindex': True}))

        assert AioseoRobotsTransformer(options).transform_robot_setting('noindex', False, self.MAPPING) is True

    def test_global_defaults_never_noindex(self, options, store_option):
        from importing.services.robots import AioseoRobotsTransformer
        store_option('aioseo_options', self._settings(True, {'default': True, 'noindex': True}))

        assert AioseoRobotsTransformer(options).transform_robot_setting('noindex', True, self.MAPPING) is False

    def test_missing_robots_block_keeps_value(self, options):
        from importing.services.robots import AioseoRobotsTransformer

        assert AioseoRobotsTransformer(options).transform_robot_setting('noindex', True, self.MAPPING) is True


@pytest.mark.django_db
class TestIndex:

    def test_chunks_follow_cursor(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        default_archive_action.set_limit(5)
        keys = list(FLATTENED_ARCHIVE_SETTINGS)

        assert default_archive_action.index() == keys[:5]
        assert default_archive_action.index() == keys[5:10]
        assert default_archive_action.index() == keys[10:]
        assert default_archive_action.get_completed() is False

        assert default_archive_action.index() == []
        assert default_archive_action.get_completed() is True

    def test_index_imports_mapped_settings(self, default_archive_action, options, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        options.set('title-search-wpseo', 'Kept')

        default_archive_action.index()

        assert options.get('title-author-wpseo') == 'Author Title'
        assert options.get('metadesc-archive-wpseo') == 'Date Desc'
        assert options.get('title-search-wpseo') == 'Kept'

    def test_reset_allows_reimport(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        default_archive_action.index()
        assert default_archive_action.get_total_unindexed() == 0

        default_archive_action.reset()

        assert default_archive_action.get_total_unindexed() == len(FLATTENED_ARCHIVE_SETTINGS)
        assert default_archive_action.get_limited_unindexed_count(2) == 2

    def test_cursor_advances_when_mapping_fails(self, default_archive_action, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        calls = []

        def failing_map(setting_value, setting):
            calls.append(setting)
            if len(calls) == 3:
                raise RuntimeError('boom')

        default_archive_action.map = failing_map
        with pytest.raises(RuntimeError):
            default_archive_action.index()

        assert default_archive_action.import_cursor.get_cursor('aioseo_default_archive_settings') == '/author/title'


@pytest.mark.django_db
class TestGeneralSettings:

    @pytest.fixture
    def action(self, site):
        from importing.actions import AioseoGeneralSettingsImportingAction
        return AioseoGeneralSettingsImportingAction(site)

    def test_import(self, action, options, store_option):
        store_option('aioseo_options', {'searchAppearance': {'global': {
            'separator': '&raquo;',
            'siteTitle': '#site_title #separator_sa #tagline',
            'metaDescription': 'Welcome to #site_title',
            'schema': {
                'siteRepresents': 'person',
                'person': 3,
                'organizationName': 'Acme',
                'organizationLogo': ' https://example.com/logo.png ',
                'personLogo': 'not a url',
            },
        }}})

        action.index()

        assert options.get('separator') == 'sc-raquo'
        assert options.get('title-home-wpseo') == '%%sitename%% %%sep%% %%sitedesc%%'
        assert options.get('metadesc-home-wpseo') == 'Welcome to %%sitename%%'
        assert options.get('company_or_person') == 'person'
        assert options.get('company_or_person_user_id') == 3
        assert options.get('company_name') == 'Acme'
        assert options.get('company_logo') == 'https://example.com/logo.png'
        assert options.get('person_logo') == ''

    @pytest.mark.parametrize('separator, expected', [
        ('&#124;', 'sc-pipe'),
        ('-', 'sc-dash'),
        (' &mdash; ', 'sc-mdash'),
        ('&hearts;', 'sc-dash'),
        (None, 'sc-dash'),
    ])
    def test_transform_separator(self, action, separator, expected):
        assert action.transform_separator(separator) == expected

    def test_transform_site_represents(self, action):
        assert action.transform_site_represents('organization') == 'company'
        assert action.transform_site_represents('person') == 'person'
        assert action.transform_site_represents('robot') == 'company'


@pytest.mark.django_db
class TestDynamicImporters:

    def test_posttype_defaults(self, site, options, store_option):
        from importing.actions import AioseoPosttypeDefaultsSettingsImportingAction
        store_option('aioseo_options_dynamic', {'searchAppearance': {'postTypes': {
            'book': {
                'title': '#post_title - Books',
                'metaDescription': '#post_excerpt',
                'advanced': {'showMetaBox': False, 'robotsMeta': {'default': False, 'noindex': True}},
            },
            'movie': {'title': 'Movies'},
        }}})

        AioseoPosttypeDefaultsSettingsImportingAction(site).index()

        assert options.get('title-book') == '%%title%% - Books'
        assert options.get('metadesc-book') == '%%excerpt%%'
        assert options.get('display-metabox-pt-book') is False
        assert options.get('noindex-book') is True
        assert options.get('title-movie') is None

    def test_taxonomy_settings(self, site, options, store_option):
        from importing.actions import AioseoTaxonomySettingsImportingAction
        store_option('aioseo_options_dynamic', {'searchAppearance': {'taxonomies': {
            'genre': {
                'title': '#taxonomy_title Archives',
                'metaDescription': '#taxonomy_description',
                'advanced': {'showMetaBox': 0},
            },
        }}})

        AioseoTaxonomySettingsImportingAction(site).index()

        assert options.get('title-tax-genre') == '%%term_title%% Archives'
        assert options.get('metadesc-tax-genre') == '%%term_description%%'
        assert options.get('display-metabox-tax-genre') is False

    def test_custom_archives(self, site, options, store_option):
        from importing.actions import AioseoCustomArchiveSettingsImportingAction
        store_option('aioseo_options_dynamic', {'searchAppearance': {'archives': {
            'book': {
                'title': '#archive_title #separator_sa #site_title',
                'advanced': {'robotsMeta': {'default': True, 'noindex': False}},
            },
        }}})
        store_option('aioseo_options', {'searchAppearance': {'advanced': {
            'globalRobotsMeta': {'default': False, 'noindex': True},
        }}})

        AioseoCustomArchiveSettingsImportingAction(site).index()

        assert options.get('title-ptarchive-book') == '%%pt_plural%% %%sep%% %%sitename%%'
        assert options.get('noindex-ptarchive-book') is True


@pytest.mark.django_db
class TestImportableDetector:

    def test_detects_importers_with_data(self, site, store_option):
        from importing.services.importable_detector import detect_importers
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        assert detect_importers(site) == {'aioseo': ['default_archive_settings']}

    def test_filters(self, site, store_option):
        from importing.services.importable_detector import detect_importers
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        assert detect_importers(site, 'aioseo', 'general_settings') == {}
        assert detect_importers(site, 'rankmath') == {}

    def test_nothing_left_after_import(self, site, store_option, default_archive_action):
        from importing.services.importable_detector import detect_importers
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        default_archive_action.index()

        assert detect_importers(site) == {}


@pytest.mark.django_db
class TestImportingEndpoints:

    def test_overview(self, api_key_client, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        response = api_key_client.get('/api/v1/importing/')
        assert response.status_code == 200
        assert response.data['importers'] == {'aioseo': ['default_archive_settings']}
        assert len(response.data['config']['actions']) == 5
        assert response.data['config']['actions'][0]['endpoint'].endswith(
            '/api/v1/importing/aioseo/general_settings/'
        )

    def test_run_until_complete(self, api_key_client, site, store_option):
        from options.helpers import OptionsHelper
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})

        response = api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/')
        assert response.status_code == 200
        assert response.data['objects'] == list(FLATTENED_ARCHIVE_SETTINGS)
        assert response.data['next_url'].endswith('/api/v1/importing/aioseo/default_archive_settings/')

        response = api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/')
        assert response.data['objects'] == []
        assert response.data['next_url'] is None
        assert response.data['completed'] is True

        assert OptionsHelper(site).get('title-author-wpseo') == 'Author Title'

    def test_reset(self, api_key_client, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/')

        response = api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/reset/')
        assert response.status_code == 200

        response = api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/')
        assert len(response.data['objects']) == len(FLATTENED_ARCHIVE_SETTINGS)

    def test_cursor_kept_when_mapping_fails(self, api_key_client, site, store_option, monkeypatch):
        from importing.actions import AioseoDefaultArchiveSettingsImportingAction
        from importing.services.import_cursor import ImportCursorHelper
        from options.helpers import OptionsHelper
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        original_map = AioseoDefaultArchiveSettingsImportingAction.map
        calls = []

        def failing_map(self, setting_value, setting):
            calls.append(setting)
            if len(calls) == 3:
                raise RuntimeError('boom')
            original_map(self, setting_value, setting)

        monkeypatch.setattr(AioseoDefaultArchiveSettingsImportingAction, 'map', failing_map)
        with pytest.raises(RuntimeError):
            api_key_client.post('/api/v1/importing/aioseo/default_archive_settings/')

        assert ImportCursorHelper(site).get_cursor('aioseo_default_archive_settings') == '/author/title'
        assert OptionsHelper(site).get('title-author-wpseo') == 'Author Title'

    def test_unknown_importer(self, api_key_client):
        response = api_key_client.post('/api/v1/importing/aioseo/post_settings/')
        assert response.status_code == 404
        assert response.data['error']['code'] == 'UNKNOWN_IMPORTER'

    def test_requires_api_key(self):
        response = APIClient().post('/api/v1/importing/aioseo/general_settings/')
        assert response.status_code == 401


@pytest.mark.django_db
class TestImportCommand:

    def test_imports_everything(self, site, options, store_option):
        store_option('aioseo_options', {'searchAppearance': {
            'global': {'separator': '&#124;'},
            'archives': ARCHIVE_SETTINGS,
        }})
        out = StringIO()

        call_command('import_aioseo', '--site', str(site.id), '--limit', '4', stdout=out)

        assert options.get('separator') == 'sc-pipe'
        assert options.get('title-author-wpseo') == 'Author Title'
        assert 'default_archive_settings: 12 settings processed' in out.getvalue()

    def test_single_type_with_reset(self, site, options, store_option):
        store_option('aioseo_options', {'searchAppearance': {'archives': ARCHIVE_SETTINGS}})
        call_command('import_aioseo', '--site', str(site.id), stdout=StringIO())
        out = StringIO()

        call_command(
            'import_aioseo', '--site', str(site.id),
            '--type', 'default_archive_settings', '--reset',
            stdout=out,
        )

        assert 'default_archive_settings: 12 settings processed' in out.getvalue()
        assert 'general_settings' not in out.getvalue()

    def test_rejects_zero_limit(self, site):
        with pytest.raises(CommandError):
            call_command('import_aioseo', '--site', str(site.id), '--limit', '0', stdout=StringIO())

    def test_unknown_site(self):
        with pytest.raises(CommandError):
            call_command('import_aioseo', '--site', '999', stdout=StringIO())
