"""
Robots meta handling for AIOSEO imports.

AIOSEO lets each archive, post type and taxonomy either carry its own
robots settings or defer to the global ones.
"""
import logging

from options.helpers import decode_option_value
from importing.flatten import get_setting

logger = logging.getLogger(__name__)

AIOSEO_GLOBAL_OPTION = 'aioseo_options'


class AioseoRobotsProvider:
    """Reads AIOSEO's global robots settings."""

    def __init__(self, options):
        self.options = options

    def get_global_robot_settings(self, setting_name):
        aioseo_settings = decode_option_value(self.options.get_raw(AIOSEO_GLOBAL_OPTION))
        global_robots = get_setting(aioseo_settings, ('searchAppearance', 'advanced', 'globalRobotsMeta'))
        if not isinstance(global_robots, dict):
            return False

        # Global defaults mean "let search engines decide": nothing is noindexed.
        if global_robots.get('default', True):
            return False

        return bool(global_robots.get(setting_name, False))


class AioseoRobotsTransformer:
    """Resolves a robots setting, following AIOSEO's "use default" switch."""

    def __init__(self, options, robots_provider=None):
        self.options = options
        self.robots_provider = robots_provider or AioseoRobotsProvider(options)

    def transform_robot_setting(self, setting_name, setting_value, mapping):
        """
        *mapping* carries ``option_name``, ``type`` and ``subtype`` locating
        the robotsMeta block, e.g. aioseo_options / archives / author.
        """
        aioseo_settings = decode_option_value(self.options.get_raw(mapping['option_name']))
        defers_to_defaults = get_setting(aioseo_settings, (
            'searchAppearance', mapping['type'], mapping['subtype'], 'advanced', 'robotsMeta', 'default',
        ))

        if defers_to_defaults is None:
            return setting_value

        if defers_to_defaults:
            logger.debug(
                "%s for %s/%s defers to global robots settings",
                setting_name, mapping['type'], mapping['subtype'],
            )
            return self.robots_provider.get_global_robot_settings(setting_name)

        return setting_value
