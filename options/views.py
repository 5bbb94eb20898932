"""
API endpoints for raw option rows and the imported titles group.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.response import Response

from sites.authentication import APIKeyAuthentication
from sites.permissions import IsAPIKeyAuthenticated
from .helpers import OptionsHelper
from .models import Option
from .serializers import OptionSerializer, OptionPushSerializer, validate_option_name

logger = logging.getLogger(__name__)


@api_view(['GET', 'PUT'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def option_detail(request, name):
    """
    GET /api/v1/options/<name>/: Read a raw option row.
    PUT /api/v1/options/<name>/: Store a raw option row pushed by WordPress.
    Body: { "value": "<serialized option>" }
    """
    site = request.auth['site']

    if request.method == 'GET':
        option = Option.objects.filter(site=site, name=name).first()
        if option is None:
            return Response(
                {'error': {'code': 'OPTION_NOT_FOUND', 'message': f'Option {name} not found', 'status': 404}},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OptionSerializer(option).data)

    error = validate_option_name(name)
    if error:
        return Response(
            {'error': {'code': 'VALIDATION_ERROR', 'message': error, 'status': 400}},
            status=status.HTTP_400_BAD_REQUEST,
        )

    serializer = OptionPushSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'error': {'code': 'VALIDATION_ERROR', 'message': serializer.errors, 'status': 400}},
            status=status.HTTP_400_BAD_REQUEST,
        )

    option, created = Option.objects.update_or_create(
        site=site,
        name=name,
        defaults={'value': serializer.validated_data['value']},
    )
    logger.info("Stored option %s for site %s (%d bytes)", name, site.id, len(option.value))

    return Response(
        OptionSerializer(option).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


@api_view(['GET'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def titles(request):
    """
    GET /api/v1/titles/

    The site's search appearance options, defaults included. The plugin
    hands this object to its snippet preview scripts.
    """
    site = request.auth['site']
    return Response({'site_id': site.id, 'titles': OptionsHelper(site).get_all()})
