"""
Custom permissions for plugin-facing endpoints.
"""
import logging
from rest_framework import permissions

logger = logging.getLogger(__name__)


class IsAPIKeyAuthenticated(permissions.BasePermission):
    """
    Permission to allow API key authenticated requests.
    """
    def has_permission(self, request, view):
        if isinstance(getattr(request, 'auth', None), dict):
            return request.auth.get('auth_type') == 'site_key'
        logger.debug("No API key auth on request to %s", request.path)
        return False
