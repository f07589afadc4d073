# spotify_proxy/services/catalog.py
'''
Pass-through lookups against the catalog with the app token.
 - forward: GET any catalog path and hand back the raw upstream response.
 - search_params: query string for /search, forwarding market/limit only when given.
'''

from __future__ import annotations

from typing import Dict
from urllib.parse import quote

from ..clients.spotify import sp_get
from .token import get_app_token

DEFAULT_SEARCH_TYPES = "track,artist,album"

def forward(path: str, *, params=None):
    """
    Upstream response as-is; status and body are not interpreted here.
    Token errors propagate to the caller.
    """
    token = get_app_token()
    return sp_get(token, path, params=params)

def resource_path(kind: str, resource_id: str) -> str:
    return f"{kind}/{quote(resource_id, safe='')}"

def search_params(query) -> Dict[str, str]:
    params = {
        "q": query.get("q") or "",
        "type": query.get("type") or DEFAULT_SEARCH_TYPES,
    }
    for key in ("market", "limit"):
        if query.get(key):
            params[key] = query.get(key)
    return params
