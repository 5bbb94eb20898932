"""
Registered defaults for the plugin's own option groups.

A key with a registered default is a valid import destination; an option
still equal to its default is treated as "unset".
"""

TITLES_OPTION = 'wpseo_titles'

# =============================================================================
# STATIC DEFAULTS
# =============================================================================

TITLES_DEFAULTS = {
    # General
    'separator': 'sc-dash',
    'title-home-wpseo': '%%sitename%% %%page%% %%sep%% %%sitedesc%%',
    'metadesc-home-wpseo': '',
    'website_name': '',
    'alternate_website_name': '',
    'company_or_person': 'company',
    'company_or_person_user_id': False,
    'company_name': '',
    'company_logo': '',
    'company_logo_id': 0,
    'person_logo': '',
    'person_logo_id': 0,

    # Author archives
    'title-author-wpseo': '%%name%%, Author at %%sitename%% %%page%%',
    'metadesc-author-wpseo': '',
    'noindex-author-wpseo': False,
    'noindex-author-noposts-wpseo': True,
    'disable-author': False,

    # Date archives
    'title-archive-wpseo': '%%date%% %%page%% %%sep%% %%sitename%%',
    'metadesc-archive-wpseo': '',
    'noindex-archive-wpseo': True,
    'disable-date': False,

    # Special pages
    'title-search-wpseo': '%%text_search%% %%searchphrase%% %%page%% %%sep%% %%sitename%%',
    'title-404-wpseo': '%%text_404%% %%sep%% %%sitename%%',

    # Breadcrumbs
    'breadcrumbs-sep': '&raquo;',
    'breadcrumbs-home': 'Home',
    'breadcrumbs-prefix': '',
    'breadcrumbs-searchprefix': 'You searched for',
    'breadcrumbs-404crumb': 'Error 404: Page not found',
}

# =============================================================================
# DYNAMIC DEFAULTS (one set per registered content type)
# =============================================================================

POST_TYPE_DEFAULTS = {
    'title-{}': '%%title%% %%page%% %%sep%% %%sitename%%',
    'metadesc-{}': '',
    'noindex-{}': False,
    'display-metabox-pt-{}': True,
}

POST_TYPE_ARCHIVE_DEFAULTS = {
    'title-ptarchive-{}': '%%pt_plural%% Archive %%page%% %%sep%% %%sitename%%',
    'metadesc-ptarchive-{}': '',
    'noindex-ptarchive-{}': False,
}

TAXONOMY_DEFAULTS = {
    'title-tax-{}': '%%term_title%% Archives %%page%% %%sep%% %%sitename%%',
    'metadesc-tax-{}': '',
    'noindex-tax-{}': False,
    'display-metabox-tax-{}': True,
}

# Post format archives are thin by nature.
TAXONOMY_OVERRIDES = {
    'post_format': {
        'noindex-tax-{}': True,
        'display-metabox-tax-{}': False,
    },
}


def _expand(templates, name, overrides=None):
    values = dict(templates)
    values.update(overrides or {})
    return {pattern.format(name): value for pattern, value in values.items()}


def get_titles_defaults(site):
    """Return every registered ``wpseo_titles`` default for *site*."""
    defaults = dict(TITLES_DEFAULTS)

    for post_type in site.post_types or []:
        defaults.update(_expand(POST_TYPE_DEFAULTS, post_type))

    for post_type in site.archive_post_types or []:
        defaults.update(_expand(POST_TYPE_ARCHIVE_DEFAULTS, post_type))

    for taxonomy in site.taxonomies or []:
        defaults.update(_expand(TAXONOMY_DEFAULTS, taxonomy, TAXONOMY_OVERRIDES.get(taxonomy)))

    return defaults
