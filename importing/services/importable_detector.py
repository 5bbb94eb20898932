"""
Finds the importers that still have settings to import for a site.
"""
import logging

from importing.actions import get_importing_actions

logger = logging.getLogger(__name__)


def detect_importers(site, plugin=None, importer_type=None):
    """
    Returns ``{plugin: [type, ...]}`` for every matching importer with at
    least one unimported setting.
    """
    detectors = {}
    for action in get_importing_actions(site, plugin, importer_type):
        if action.get_limited_unindexed_count(1) > 0:
            detectors.setdefault(action.get_plugin(), []).append(action.get_type())

    logger.debug("Importable data for site %s: %s", site.id, detectors)
    return detectors
