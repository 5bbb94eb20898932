"""
API URL routing for seo_migrator.
All API endpoints are prefixed with /api/v1/
"""
from django.urls import path, include
from django.views.decorators.csrf import csrf_exempt


def _lazy(module, attr):
    """Lazy view import to avoid AppRegistryNotReady."""
    @csrf_exempt
    def view(*args, **kwargs):
        import importlib
        mod = importlib.import_module(module)
        return getattr(mod, attr)(*args, **kwargs)
    return view


urlpatterns = [
    # Health check (no auth) - GET /api/v1/health/
    path('health/', _lazy('seo_migrator.views', 'health_check')),
    # WordPress plugin: POST /api/v1/auth/verify with Bearer <api_key>
    path('auth/verify', _lazy('sites.views', 'verify_api_key')),
    # Registered post types / taxonomies pushed by the plugin
    path('site/content-types/', _lazy('sites.views', 'sync_content_types')),
    # Site and API key management (staff only)
    path('sites/', include('sites.urls')),
    path('api-keys/', include('sites.api_key_urls')),
    # Raw option rows and the imported titles group
    path('', include('options.urls')),
    # Settings importers
    path('importing/', include('importing.urls')),
]
