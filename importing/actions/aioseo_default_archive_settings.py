"""
Imports AIOSEO's author, date and search archive settings.
"""
from .base import AioseoSettingsImportingAction


class AioseoDefaultArchiveSettingsImportingAction(AioseoSettingsImportingAction):
    importer_type = 'default_archive_settings'
    settings_tab = 'archives'

    replace_vars_edited_map = {
        '#archive_date': 'date',
    }

    def build_mapping(self):
        self.aioseo_options_to_yoast_map = {
            '/author/title': {
                'yoast_name': 'title-author-wpseo',
                'transform_method': 'simple_import',
            },
            '/author/metaDescription': {
                'yoast_name': 'metadesc-author-wpseo',
                'transform_method': 'simple_import',
            },
            '/date/title': {
                'yoast_name': 'title-archive-wpseo',
                'transform_method': 'simple_import',
            },
            '/date/metaDescription': {
                'yoast_name': 'metadesc-archive-wpseo',
                'transform_method': 'simple_import',
            },
            '/search/title': {
                'yoast_name': 'title-search-wpseo',
                'transform_method': 'simple_import',
            },
            '/author/advanced/robotsMeta/noindex': {
                'yoast_name': 'noindex-author-wpseo',
                'transform_method': 'import_noindex',
                'type': 'archives',
                'subtype': 'author',
                'option_name': self.get_source_option_name(),
            },
            '/date/advanced/robotsMeta/noindex': {
                'yoast_name': 'noindex-archive-wpseo',
                'transform_method': 'import_noindex',
                'type': 'archives',
                'subtype': 'date',
                'option_name': self.get_source_option_name(),
            },
        }
