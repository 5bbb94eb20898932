"""
Serializers for raw option rows.
"""
import json

from rest_framework import serializers

from .defaults import TITLES_OPTION
from .models import Option


class OptionSerializer(serializers.ModelSerializer):
    """Read view of an option row."""

    class Meta:
        model = Option
        fields = ('name', 'value', 'updated_at')
        read_only_fields = fields


class OptionPushSerializer(serializers.Serializer):
    """
    Raw option pushed from WordPress.

    ``value`` is either the stored string (as in wp_options) or an already
    decoded object, which is stored as JSON.
    """
    value = serializers.JSONField()

    def validate_value(self, value):
        if isinstance(value, str):
            return value
        return json.dumps(value)


def validate_option_name(name):
    """Return an error message for names the plugin may not push, else None."""
    if not name or len(name) > 191:
        return 'Option name must be between 1 and 191 characters'
    if name == TITLES_OPTION:
        return f'{TITLES_OPTION} is written by importers only'
    return None
