"""
Views for Site management and the plugin's site-level endpoints.
"""
import logging

from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from .authentication import APIKeyAuthentication
from .models import Site
from .permissions import IsAPIKeyAuthenticated
from .serializers import SiteSerializer, ContentTypesSyncSerializer

logger = logging.getLogger(__name__)


class SiteViewSet(viewsets.ModelViewSet):
    """
    ViewSet for managing connected sites (staff only).

    list: GET /api/v1/sites/ - List all sites
    create: POST /api/v1/sites/ - Create a new site
    retrieve: GET /api/v1/sites/{id}/ - Get site details
    update: PUT /api/v1/sites/{id}/ - Update site
    destroy: DELETE /api/v1/sites/{id}/ - Delete site
    """
    queryset = Site.objects.all()
    serializer_class = SiteSerializer
    permission_classes = [IsAdminUser]


@api_view(['POST'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def verify_api_key(request):
    """
    Verify API key endpoint for WordPress plugin Test Connection.

    POST /api/v1/auth/verify
    Headers: Authorization: Bearer <api_key>   (api_key must be sk_seo_...)

    Returns: { "authenticated": true, "valid": true, "site_id": ..., "site_name": "...", "site_url": "..." }
    """
    site = request.auth['site']

    return Response({
        'authenticated': True,
        'valid': True,
        'site_id': site.id,
        'site_name': site.name,
        'site_url': site.url,
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def sync_content_types(request):
    """
    Store the post types and taxonomies registered on the WordPress site.

    POST /api/v1/site/content-types/
    Body: { "post_types": [...], "archive_post_types": [...], "taxonomies": [...] }
    Omitted lists are left unchanged.
    """
    site = request.auth['site']
    serializer = ContentTypesSyncSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'error': {'code': 'VALIDATION_ERROR', 'message': serializer.errors, 'status': 400}},
            status=status.HTTP_400_BAD_REQUEST,
        )

    update_fields = ['last_synced_at', 'updated_at']
    for field, value in serializer.validated_data.items():
        setattr(site, field, value)
        update_fields.append(field)
    site.last_synced_at = timezone.now()
    site.save(update_fields=update_fields)

    logger.info(
        "Synced content types for site %s: %d post types, %d archives, %d taxonomies",
        site.id, len(site.post_types), len(site.archive_post_types), len(site.taxonomies),
    )

    return Response({
        'site_id': site.id,
        'post_types': site.post_types,
        'archive_post_types': site.archive_post_types,
        'taxonomies': site.taxonomies,
    }, status=status.HTTP_200_OK)
