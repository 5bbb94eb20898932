"""
Imports AIOSEO's per post type defaults.
"""
from .base import AioseoSettingsImportingAction


class AioseoPosttypeDefaultsSettingsImportingAction(AioseoSettingsImportingAction):
    importer_type = 'posttype_default_settings'
    source_option_name = 'aioseo_options_dynamic'
    settings_tab = 'postTypes'

    def build_mapping(self):
        self.aioseo_options_to_yoast_map = {}
        for post_type in self.site.post_types or []:
            self.aioseo_options_to_yoast_map.update({
                f'/{post_type}/title': {
                    'yoast_name': f'title-{post_type}',
                    'transform_method': 'simple_import',
                },
                f'/{post_type}/metaDescription': {
                    'yoast_name': f'metadesc-{post_type}',
                    'transform_method': 'simple_import',
                },
                f'/{post_type}/advanced/showMetaBox': {
                    'yoast_name': f'display-metabox-pt-{post_type}',
                    'transform_method': 'simple_boolean_import',
                },
                f'/{post_type}/advanced/robotsMeta/noindex': {
                    'yoast_name': f'noindex-{post_type}',
                    'transform_method': 'import_noindex',
                    'type': 'postTypes',
                    'subtype': post_type,
                    'option_name': self.get_source_option_name(),
                },
            })
