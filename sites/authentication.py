"""
Custom authentication for API key-based requests from the WordPress plugin.
"""
import logging

from django.contrib.auth.models import AnonymousUser
from django.utils import timezone
from rest_framework import authentication, exceptions

logger = logging.getLogger(__name__)


class SiteUser(AnonymousUser):
    """
    Request user for plugin calls. There is no Django account behind a site
    key, but DRF's IsAuthenticated must still pass.
    """

    def __init__(self, site):
        self.site = site

    @property
    def is_authenticated(self):
        return True

    def __str__(self):
        return f"site:{self.site.id}"


class APIKeyAuthentication(authentication.BaseAuthentication):
    """
    Authenticate WordPress plugin requests using site API keys.

    API keys can be provided in:
    - Authorization header: "Bearer sk_seo_xxx"
    - X-API-Key header: "sk_seo_xxx"
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        api_key = self._extract_api_key(request)

        if not api_key:
            return None

        if not api_key.startswith('sk_seo_'):
            logger.debug("API key has invalid prefix: %s...", api_key[:10])
            return None

        return self._authenticate_site_key(api_key)

    def authenticate_header(self, request):
        return self.keyword

    def _extract_api_key(self, request):
        """Extract API key from request headers."""
        api_key = None

        auth_header = request.META.get('HTTP_AUTHORIZATION', '')
        if auth_header.startswith('Bearer '):
            api_key = auth_header.split('Bearer ')[1].strip()

        # Fall back to X-API-Key header
        if not api_key:
            api_key = request.META.get('HTTP_X_API_KEY', '').strip()

        return api_key if api_key else None

    def _authenticate_site_key(self, api_key):
        from sites.models import APIKey

        key_hash = APIKey.hash_key(api_key)
        try:
            api_key_obj = APIKey.objects.select_related('site').get(
                key_hash=key_hash,
                is_active=True
            )
        except APIKey.DoesNotExist:
            logger.warning("Site API key not found in database")
            raise exceptions.AuthenticationFailed('Invalid API key')

        if api_key_obj.expires_at and api_key_obj.expires_at < timezone.now():
            raise exceptions.AuthenticationFailed('API key has expired')

        if not api_key_obj.site.is_active:
            raise exceptions.AuthenticationFailed('Site is inactive')

        api_key_obj.mark_used()

        return (SiteUser(api_key_obj.site), {
            'api_key': api_key_obj,
            'site': api_key_obj.site,
            'auth_type': 'site_key'
        })
