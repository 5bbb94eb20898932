"""
Base class for the AIOSEO settings importers.

Every importer runs the same three steps over one subtree of an AIOSEO
option row:

1. query: decode the row, pick the subtree, flatten it to ``{'/a/b': value}``
   and cut the chunk that has not been imported yet;
2. build_mapping: the table from flattened path to destination option key
   and transform;
3. map: write each mapped value, but only over destinations that still hold
   their default.
"""
import logging

from django.conf import settings

from options.helpers import OptionsHelper, decode_option_value
from importing.flatten import flatten_settings, get_setting
from importing.services.import_cursor import ImportCursorHelper
from importing.services.replacevar_handler import AioseoReplacevarHandler
from importing.services.robots import AioseoRobotsTransformer

logger = logging.getLogger(__name__)


class AioseoSettingsImportingAction:
    plugin = 'aioseo'
    importer_type = None

    # The wp_options row holding the settings, and the key under
    # ``searchAppearance`` this importer reads.
    source_option_name = 'aioseo_options'
    settings_tab = None

    # Importer specific smart tag translations, on top of the defaults.
    replace_vars_edited_map = {}

    transform_methods = (
        'simple_import',
        'simple_boolean_import',
        'import_noindex',
    )

    def __init__(self, site, options=None, replacevar_handler=None, robots_transformer=None, import_cursor=None):
        self.site = site
        self.options = options or OptionsHelper(site)
        self.replacevar_handler = replacevar_handler or AioseoReplacevarHandler()
        self.robots_transformer = robots_transformer or AioseoRobotsTransformer(self.options)
        self.import_cursor = import_cursor or ImportCursorHelper(site)
        self.limit = None
        self.aioseo_options_to_yoast_map = {}

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def get_plugin(self):
        return self.plugin

    def get_type(self):
        return self.importer_type

    def get_source_option_name(self):
        return self.source_option_name

    def get_cursor_id(self):
        return f'{self.plugin}_{self.importer_type}'

    def is_compatible_with(self, plugin=None, importer_type=None):
        """True when *plugin* and *importer_type* (each optional) match this importer."""
        if plugin and plugin != self.plugin:
            return False
        if importer_type and importer_type != self.importer_type:
            return False
        return True

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    def get_limit(self):
        if self.limit is not None:
            return self.limit
        return settings.IMPORTING_LIMIT

    def set_limit(self, limit):
        self.limit = limit

    def get_completed(self):
        return self.import_cursor.get_completed(self.get_cursor_id())

    def set_completed(self, completed):
        self.import_cursor.set_completed(self.get_cursor_id(), completed)

    def reset(self):
        self.import_cursor.reset(self.get_cursor_id())

    def get_total_unindexed(self):
        return len(self.query())

    def get_limited_unindexed_count(self, limit):
        return len(self.query(limit))

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def index(self):
        """
        Import the next chunk of settings.

        Returns the flattened paths processed. An empty list means the
        importer found nothing left and is now marked completed.
        """
        aioseo_settings = self.query(self.get_limit())
        self.set_completed(not aioseo_settings)

        self.build_mapping()
        for aioseo_var, yoast_var in self.replace_vars_edited_map.items():
            self.replacevar_handler.compose_map(aioseo_var, yoast_var)

        created_settings = []
        last_imported_setting = ''
        try:
            for setting, setting_value in aioseo_settings.items():
                self.map(setting_value, setting)
                last_imported_setting = setting
                created_settings.append(setting)
        finally:
            # The cursor also advances when mapping raises part way.
            if last_imported_setting:
                self.import_cursor.set_cursor(self.get_cursor_id(), last_imported_setting)

        logger.info(
            "Imported %d %s settings for site %s",
            len(created_settings), self.get_cursor_id(), self.site.id,
        )
        return created_settings

    def query(self, limit=None):
        """
        Flattened, not yet imported settings of this importer's subtree.
        Absent or malformed data gives {}.
        """
        aioseo_settings = decode_option_value(self.options.get_raw(self.get_source_option_name()))
        if not aioseo_settings:
            return {}

        aioseo_settings = get_setting(aioseo_settings, ('searchAppearance', self.settings_tab))
        if not isinstance(aioseo_settings, dict):
            return {}

        flattened_settings = self.flatten_settings(aioseo_settings)
        return self.get_unimported_chunk(flattened_settings, limit)

    def flatten_settings(self, settings, key_prefix=''):
        return flatten_settings(settings, key_prefix)

    def get_unimported_chunk(self, importable_data, limit=None):
        """The part of *importable_data* after the cursor, at most *limit* entries."""
        items = list(importable_data.items())

        last_imported = self.import_cursor.get_cursor(self.get_cursor_id())
        if last_imported:
            keys = [key for key, _ in items]
            if last_imported in keys:
                items = items[keys.index(last_imported) + 1:]

        if limit is not None:
            items = items[:limit]

        return dict(items)

    def build_mapping(self):
        raise NotImplementedError

    def map(self, setting_value, setting):
        """Import one flattened setting into its destination option, if any."""
        setting_mapping = self.aioseo_options_to_yoast_map.get(setting)
        if setting_mapping is None:
            return

        yoast_key = setting_mapping['yoast_name']
        default = self.options.get_default(yoast_key)
        if default is None:
            logger.debug("No option registered for %s, skipping %s", yoast_key, setting)
            return

        current = self.options.get(yoast_key)
        # A stored 0 is not the default False.
        if current != default or type(current) is not type(default):
            logger.debug("%s already customized, skipping %s", yoast_key, setting)
            return

        transformed_data = self.transform_setting(setting_value, setting_mapping)
        self.options.set(yoast_key, transformed_data)

    def transform_setting(self, setting_value, setting_mapping):
        method = setting_mapping['transform_method']
        if method not in self.transform_methods:
            raise ValueError(f'Unknown transform method {method}')
        return getattr(self, method)(setting_value, setting_mapping)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def simple_import(self, setting_value, setting_mapping=None):
        return self.replacevar_handler.transform(setting_value)

    def simple_boolean_import(self, setting_value, setting_mapping=None):
        return bool(setting_value)

    def import_noindex(self, noindex, setting_mapping):
        return self.robots_transformer.transform_robot_setting('noindex', noindex, setting_mapping)
