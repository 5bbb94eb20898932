"""
Imports AIOSEO's global search appearance settings.
"""
from .base import AioseoSettingsImportingAction

SEPARATORS = {
    '&#45;': 'sc-dash',
    '-': 'sc-dash',
    '&ndash;': 'sc-ndash',
    '–': 'sc-ndash',
    '&mdash;': 'sc-mdash',
    '—': 'sc-mdash',
    '&raquo;': 'sc-raquo',
    '»': 'sc-raquo',
    '&laquo;': 'sc-laquo',
    '«': 'sc-laquo',
    '&gt;': 'sc-gt',
    '>': 'sc-gt',
    '&bull;': 'sc-bull',
    '•': 'sc-bull',
    '&#124;': 'sc-pipe',
    '|': 'sc-pipe',
    '&#42;': 'sc-star',
    '*': 'sc-star',
    '&#126;': 'sc-tilde',
    '~': 'sc-tilde',
    '&middot;': 'sc-middot',
    '·': 'sc-middot',
}

SITE_REPRESENTS = {
    'person': 'person',
    'organization': 'company',
}


class AioseoGeneralSettingsImportingAction(AioseoSettingsImportingAction):
    importer_type = 'general_settings'
    settings_tab = 'global'

    replace_vars_edited_map = {
        '#site_title': 'sitename',
        '#separator_sa': 'sep',
    }

    transform_methods = AioseoSettingsImportingAction.transform_methods + (
        'transform_separator',
        'transform_site_represents',
        'import_logo',
    )

    def build_mapping(self):
        self.aioseo_options_to_yoast_map = {
            '/separator': {
                'yoast_name': 'separator',
                'transform_method': 'transform_separator',
            },
            '/siteTitle': {
                'yoast_name': 'title-home-wpseo',
                'transform_method': 'simple_import',
            },
            '/metaDescription': {
                'yoast_name': 'metadesc-home-wpseo',
                'transform_method': 'simple_import',
            },
            '/schema/siteRepresents': {
                'yoast_name': 'company_or_person',
                'transform_method': 'transform_site_represents',
            },
            '/schema/person': {
                'yoast_name': 'company_or_person_user_id',
                'transform_method': 'simple_import',
            },
            '/schema/organizationName': {
                'yoast_name': 'company_name',
                'transform_method': 'simple_import',
            },
            '/schema/organizationLogo': {
                'yoast_name': 'company_logo',
                'transform_method': 'import_logo',
            },
            '/schema/personLogo': {
                'yoast_name': 'person_logo',
                'transform_method': 'import_logo',
            },
            '/schema/websiteName': {
                'yoast_name': 'website_name',
                'transform_method': 'simple_import',
            },
        }

    def transform_separator(self, separator, setting_mapping=None):
        if not isinstance(separator, str):
            return 'sc-dash'
        return SEPARATORS.get(separator.strip(), 'sc-dash')

    def transform_site_represents(self, site_represents, setting_mapping=None):
        if not isinstance(site_represents, str):
            return 'company'
        return SITE_REPRESENTS.get(site_represents, 'company')

    def import_logo(self, logo, setting_mapping=None):
        """Logo URLs are kept as-is; anything that is not an http(s) URL is dropped."""
        if isinstance(logo, str) and logo.strip().startswith(('http://', 'https://')):
            return logo.strip()
        return ''
