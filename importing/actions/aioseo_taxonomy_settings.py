"""
Imports AIOSEO's taxonomy settings.
"""
from .base import AioseoSettingsImportingAction


class AioseoTaxonomySettingsImportingAction(AioseoSettingsImportingAction):
    importer_type = 'taxonomy_settings'
    source_option_name = 'aioseo_options_dynamic'
    settings_tab = 'taxonomies'

    replace_vars_edited_map = {
        '#taxonomy_title': 'term_title',
        '#taxonomy_description': 'term_description',
    }

    def build_mapping(self):
        self.aioseo_options_to_yoast_map = {}
        for taxonomy in self.site.taxonomies or []:
            self.aioseo_options_to_yoast_map.update({
                f'/{taxonomy}/title': {
                    'yoast_name': f'title-tax-{taxonomy}',
                    'transform_method': 'simple_import',
                },
                f'/{taxonomy}/metaDescription': {
                    'yoast_name': f'metadesc-tax-{taxonomy}',
                    'transform_method': 'simple_import',
                },
                f'/{taxonomy}/advanced/showMetaBox': {
                    'yoast_name': f'display-metabox-tax-{taxonomy}',
                    'transform_method': 'simple_boolean_import',
                },
                f'/{taxonomy}/advanced/robotsMeta/noindex': {
                    'yoast_name': f'noindex-tax-{taxonomy}',
                    'transform_method': 'import_noindex',
                    'type': 'taxonomies',
                    'subtype': taxonomy,
                    'option_name': self.get_source_option_name(),
                },
            })
