"""
Imports AIOSEO's post type archive settings.
"""
from .base import AioseoSettingsImportingAction


class AioseoCustomArchiveSettingsImportingAction(AioseoSettingsImportingAction):
    importer_type = 'custom_archive_settings'
    source_option_name = 'aioseo_options_dynamic'
    settings_tab = 'archives'

    replace_vars_edited_map = {
        '#archive_title': 'pt_plural',
    }

    def build_mapping(self):
        self.aioseo_options_to_yoast_map = {}
        for post_type in self.site.archive_post_types or []:
            self.aioseo_options_to_yoast_map.update({
                f'/{post_type}/title': {
                    'yoast_name': f'title-ptarchive-{post_type}',
                    'transform_method': 'simple_import',
                },
                f'/{post_type}/metaDescription': {
                    'yoast_name': f'metadesc-ptarchive-{post_type}',
                    'transform_method': 'simple_import',
                },
                f'/{post_type}/advanced/robotsMeta/noindex': {
                    'yoast_name': f'noindex-ptarchive-{post_type}',
                    'transform_method': 'import_noindex',
                    'type': 'archives',
                    'subtype': post_type,
                    'option_name': self.get_source_option_name(),
                },
            })
