# spotify_proxy/views/recommendations.py
'''
This module exposes the recommendations endpoint.
- Delegates to the resolver, which falls back to synthesized results when /recommendations is unavailable.
- Upstream errors are returned with their status, body and the URL that was called.
'''

import logging

import requests
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from ..errors import SpotifyProxyError, UpstreamError
from ..services import recommendations as svc

logger = logging.getLogger(__name__)

@require_GET
def recommendations(request):
    try:
        data = svc.resolve_recommendations(request.GET)
    except UpstreamError as e:
        return JsonResponse(e.as_payload(), status=e.status)
    except (SpotifyProxyError, requests.RequestException, ValueError) as e:
        logger.error("[reco] Handler error: %s", e)
        return JsonResponse({"error": str(e)}, status=500)
    return JsonResponse(data, safe=False)
