"""
API Key management views.
Handles create, list and revoke for site-specific API keys.
"""
import logging

from rest_framework import viewsets, mixins, status
from rest_framework.response import Response
from rest_framework.permissions import IsAdminUser
from django.shortcuts import get_object_or_404

from .models import Site, APIKey
from .serializers import APIKeySerializer, APIKeyCreateSerializer

logger = logging.getLogger(__name__)


class APIKeyViewSet(mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    mixins.CreateModelMixin,
                    mixins.DestroyModelMixin,
                    viewsets.GenericViewSet):
    """
    ViewSet for managing API keys (staff only).

    list: GET /api/v1/api-keys/ - List API keys (optional ?site_id= for one site)
    create: POST /api/v1/api-keys/ - Create a new API key
    retrieve: GET /api/v1/api-keys/{id}/ - Get API key details
    destroy: DELETE /api/v1/api-keys/{id}/ - Revoke API key
    """
    permission_classes = [IsAdminUser]

    def get_queryset(self):
        qs = APIKey.objects.select_related('site')
        site_id = self.request.query_params.get('site_id')
        if site_id:
            qs = qs.filter(site_id=site_id)
        return qs

    def get_serializer_class(self):
        """Use different serializer for create vs list/retrieve."""
        if self.action == 'create':
            return APIKeyCreateSerializer
        return APIKeySerializer

    def create(self, request, *args, **kwargs):
        """
        Create a new API key for a specific site.

        POST /api/v1/api-keys/
        Body: { "name": "Production Site Key", "site_id": 1 }
        """
        site_id = request.data.get('site_id')
        if not site_id:
            return Response(
                {'error': {'code': 'VALIDATION_ERROR', 'message': 'site_id is required', 'status': 400}},
                status=status.HTTP_400_BAD_REQUEST
            )

        site = get_object_or_404(Site, id=site_id)

        full_key, key_prefix, key_hash = APIKey.generate_key()
        api_key = APIKey.objects.create(
            site=site,
            name=request.data.get('name', 'Unnamed Key'),
            key_hash=key_hash,
            key_prefix=key_prefix,
        )
        logger.info("Created API key %s for site %s", api_key.id, site.id)

        response_data = APIKeyCreateSerializer(api_key).data
        # The full key is only ever shown here
        response_data['key'] = full_key

        return Response({
            'message': 'API key created successfully',
            'key': response_data
        }, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        """
        Revoke an API key.

        DELETE /api/v1/api-keys/{id}/
        """
        api_key = self.get_object()
        api_key.revoke()
        logger.info("Revoked API key %s for site %s", api_key.id, api_key.site_id)
        return Response(
            {'message': 'API key revoked successfully'},
            status=status.HTTP_200_OK
        )
