"""
Registry of importing actions.
"""
from .aioseo_custom_archive_settings import AioseoCustomArchiveSettingsImportingAction
from .aioseo_default_archive_settings import AioseoDefaultArchiveSettingsImportingAction
from .aioseo_general_settings import AioseoGeneralSettingsImportingAction
from .aioseo_posttype_defaults_settings import AioseoPosttypeDefaultsSettingsImportingAction
from .aioseo_taxonomy_settings import AioseoTaxonomySettingsImportingAction

IMPORTING_ACTIONS = [
    AioseoGeneralSettingsImportingAction,
    AioseoDefaultArchiveSettingsImportingAction,
    AioseoCustomArchiveSettingsImportingAction,
    AioseoPosttypeDefaultsSettingsImportingAction,
    AioseoTaxonomySettingsImportingAction,
]


def get_importing_actions(site, plugin=None, importer_type=None):
    """Instantiate every action for *site* matching *plugin* / *importer_type*."""
    actions = [action_class(site) for action_class in IMPORTING_ACTIONS]
    return [action for action in actions if action.is_compatible_with(plugin, importer_type)]


def get_importing_action(site, plugin, importer_type):
    """The single action for *plugin* and *importer_type*, or None."""
    actions = get_importing_actions(site, plugin, importer_type)
    return actions[0] if actions else None
