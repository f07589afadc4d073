# spotify_proxy/views/root.py
'''
This module provides the health check view for the proxy.
- Returns a JSON response indicating the service is operational, with the build tag and server time.
'''

from datetime import datetime, timezone

from django.http import JsonResponse
from django.views.decorators.http import require_GET

# bump when redeploying
VERSION = "reco-fallback-2026-10-18"

@require_GET
def health(_request):
    return JsonResponse({
        "ok": True,
        "version": VERSION,
        "time": datetime.now(timezone.utc).isoformat(),
    })
