"""
Options helper: the get / get_default / set contract importers write through.
"""
import json
import logging

from django.db import transaction

from .defaults import TITLES_OPTION, get_titles_defaults
from .models import Option

logger = logging.getLogger(__name__)


def decode_option_value(raw):
    """
    Decode a raw option value pushed from WordPress.

    Returns the decoded JSON value, or None when the value is empty or not
    JSON (e.g. PHP-serialized rows).
    """
    if raw is None:
        return None
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        logger.debug("Option value is not JSON, treating as empty")
        return None


class OptionsHelper:
    """
    Read and write the ``wpseo_titles`` option group of one site.

    Values not stored yet resolve to their registered default.
    """

    def __init__(self, site):
        self.site = site
        self._defaults = None

    def get_defaults(self):
        if self._defaults is None:
            self._defaults = get_titles_defaults(self.site)
        return self._defaults

    def get_default(self, key):
        """Registered default for *key*, or None if *key* is not an option."""
        return self.get_defaults().get(key)

    def get_raw(self, name):
        """Raw value of the option row *name*, or None if there is none."""
        return Option.objects.filter(site=self.site, name=name).values_list('value', flat=True).first()

    def _stored(self):
        values = decode_option_value(self.get_raw(TITLES_OPTION))
        return values if isinstance(values, dict) else {}

    def get(self, key, default=None):
        stored = self._stored()
        if key in stored:
            return stored[key]
        defaults = self.get_defaults()
        if key in defaults:
            return defaults[key]
        return default

    def get_all(self):
        """Defaults overlaid with every stored value."""
        values = dict(self.get_defaults())
        values.update(self._stored())
        return values

    @transaction.atomic
    def set(self, key, value):
        option, _ = Option.objects.select_for_update().get_or_create(
            site=self.site,
            name=TITLES_OPTION,
        )
        values = decode_option_value(option.value)
        if not isinstance(values, dict):
            values = {}
        values[key] = value
        option.value = json.dumps(values)
        option.save(update_fields=['value', 'updated_at'])
        logger.debug("Set %s[%s] for site %s", TITLES_OPTION, key, self.site.id)
        return True
