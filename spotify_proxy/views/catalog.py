# spotify_proxy/views/catalog.py
'''
This module handles the pass-through catalog endpoints.
- Tracks, artists and albums by id, and search, are forwarded with the app token.
- Upstream status is kept; the body is labelled JSON only when Spotify says so, text/plain otherwise.
- Available genre seeds are re-served as JSON.
'''

import logging

import requests
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from ..clients.spotify import is_json
from ..errors import SpotifyProxyError
from ..services import catalog as svc

logger = logging.getLogger(__name__)

def _passthrough(path, params=None):
    try:
        r = svc.forward(path, params=params)
    except (SpotifyProxyError, requests.RequestException) as e:
        logger.error("Forward to %s failed: %s", path, e)
        return JsonResponse({"error": str(e)}, status=500)

    content_type = "application/json" if is_json(r) else "text/plain"
    return HttpResponse(r.content, status=r.status_code, content_type=content_type)

@require_GET
def get_track(_request, track_id):
    return _passthrough(svc.resource_path("tracks", track_id))

@require_GET
def get_artist(_request, artist_id):
    return _passthrough(svc.resource_path("artists", artist_id))

@require_GET
def get_album(_request, album_id):
    return _passthrough(svc.resource_path("albums", album_id))

@require_GET
def search(request):
    return _passthrough("search", params=svc.search_params(request.GET))

@require_GET
def available_genre_seeds(_request):
    try:
        r = svc.forward("recommendations/available-genre-seeds")
        data = r.json()
    except (SpotifyProxyError, requests.RequestException, ValueError) as e:
        logger.error("Genre seed lookup failed: %s", e)
        return JsonResponse({"error": str(e)}, status=500)
    return JsonResponse(data, status=r.status_code, safe=False)
