"""
API endpoints for running settings importers.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.response import Response

from sites.authentication import APIKeyAuthentication
from sites.permissions import IsAPIKeyAuthenticated
from .actions import get_importing_action, get_importing_actions
from .services.importable_detector import detect_importers

logger = logging.getLogger(__name__)


def _unknown_importer(plugin, importer_type):
    return Response(
        {'error': {
            'code': 'UNKNOWN_IMPORTER',
            'message': f'No importer for {plugin}/{importer_type}',
            'status': 404,
        }},
        status=status.HTTP_404_NOT_FOUND,
    )


@api_view(['GET'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def importing_overview(request):
    """
    GET /api/v1/importing/

    Returns: { "importers": {"aioseo": ["general_settings", ...]}, "config": {...} }
    "importers" lists the importers with data left to import; "config" is
    handed as-is to the plugin's import screen scripts.
    """
    site = request.auth['site']

    actions = []
    for action in get_importing_actions(site):
        actions.append({
            'plugin': action.get_plugin(),
            'type': action.get_type(),
            'completed': action.get_completed(),
            'endpoint': request.build_absolute_uri(
                f'{request.path}{action.get_plugin()}/{action.get_type()}/'
            ),
        })

    return Response({
        'importers': detect_importers(site),
        'config': {
            'limit': settings.IMPORTING_LIMIT,
            'actions': actions,
        },
    })


@api_view(['POST'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def run_importer(request, plugin, importer_type):
    """
    POST /api/v1/importing/<plugin>/<type>/

    Imports one chunk of settings.
    Returns: { "objects": [<flattened paths>], "next_url": <url or null>, "completed": bool }
    The plugin keeps POSTing to next_url until it is null.
    """
    site = request.auth['site']
    action = get_importing_action(site, plugin, importer_type)
    if action is None:
        return _unknown_importer(plugin, importer_type)

    objects = action.index()

    next_url = request.build_absolute_uri(request.path) if objects else None

    return Response({
        'objects': objects,
        'next_url': next_url,
        'completed': action.get_completed(),
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@authentication_classes([APIKeyAuthentication])
@permission_classes([IsAPIKeyAuthenticated])
def reset_importer(request, plugin, importer_type):
    """
    POST /api/v1/importing/<plugin>/<type>/reset/

    Forgets the importer's progress so its settings can be imported again.
    Options already customized are still never overwritten.
    """
    site = request.auth['site']
    action = get_importing_action(site, plugin, importer_type)
    if action is None:
        return _unknown_importer(plugin, importer_type)

    action.reset()
    logger.info("Reset importer %s for site %s", action.get_cursor_id(), site.id)

    return Response({'message': 'Importer reset', 'plugin': plugin, 'type': importer_type})
