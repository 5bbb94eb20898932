"""
Serializers for Site and APIKey models.
"""
from rest_framework import serializers
from .models import Site, APIKey


class SiteSerializer(serializers.ModelSerializer):
    """Serializer for Site model."""
    api_key_count = serializers.SerializerMethodField()

    class Meta:
        model = Site
        fields = (
            'id', 'name', 'url', 'wp_site_id', 'is_active',
            'post_types', 'archive_post_types', 'taxonomies',
            'last_synced_at', 'created_at', 'updated_at', 'api_key_count',
        )
        read_only_fields = ('id', 'created_at', 'updated_at', 'last_synced_at')

    def get_api_key_count(self, obj):
        """Get count of active API keys for this site."""
        return obj.api_keys.filter(is_active=True).count()


def _names(value, field):
    if not isinstance(value, list):
        raise serializers.ValidationError(f"{field} must be a list of names")
    names = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise serializers.ValidationError(f"{field} must only contain non-empty strings")
        name = item.strip()
        if name not in names:
            names.append(name)
    return names


class ContentTypesSyncSerializer(serializers.Serializer):
    """Registered post types and taxonomies reported by the plugin."""
    post_types = serializers.JSONField(required=False)
    archive_post_types = serializers.JSONField(required=False)
    taxonomies = serializers.JSONField(required=False)

    def validate_post_types(self, value):
        return _names(value, 'post_types')

    def validate_archive_post_types(self, value):
        return _names(value, 'archive_post_types')

    def validate_taxonomies(self, value):
        return _names(value, 'taxonomies')


class APIKeySerializer(serializers.ModelSerializer):
    """Serializer for APIKey model (safe - doesn't expose full key)."""

    class Meta:
        model = APIKey
        fields = (
            'id', 'site', 'name', 'key_prefix', 'is_active',
            'created_at', 'last_used_at', 'usage_count'
        )
        read_only_fields = ('id', 'site', 'key_prefix', 'created_at', 'last_used_at', 'usage_count')


class APIKeyCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating APIKey (includes full key in response)."""
    key = serializers.CharField(read_only=True, help_text="Full API key (shown only once)")

    class Meta:
        model = APIKey
        fields = ('id', 'name', 'key', 'key_prefix', 'created_at', 'is_active')
        read_only_fields = ('id', 'key', 'key_prefix', 'created_at', 'is_active')
