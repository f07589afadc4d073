# spotify_proxy/clients/spotify.py
'''
Client layer for Spotify API interactions.
 - Provides functions to perform GET and POST requests with the necessary authentication headers.
 - Centralizes requests to the Spotify API, making it easier to manage and modify.
 - Every call carries an explicit timeout (SPOTIFY_HTTP_TIMEOUT).
'''

from urllib.parse import urlencode

import requests
from django.conf import settings

DEFAULT_TIMEOUT = 10

def _base() -> str:
    return getattr(settings, "SPOTIFY_API_BASE", "https://api.spotify.com/v1").rstrip("/")

def _timeout(timeout):
    if timeout is not None:
        return timeout
    return getattr(settings, "SPOTIFY_HTTP_TIMEOUT", DEFAULT_TIMEOUT)

def to_url(path_or_url: str) -> str:
    return path_or_url if path_or_url.startswith("http") else f"{_base()}/{path_or_url.lstrip('/')}"

def build_url(path_or_url: str, params=None) -> str:
    """
    Absolute upstream URL with the query string already encoded.
    Used when the exact URL has to be reported back (logs, error payloads).
    """
    url = to_url(path_or_url)
    if params:
        url += ("&" if "?" in url else "?") + urlencode(params)
    return url

def token_url() -> str:
    accounts = getattr(settings, "SPOTIFY_ACCOUNTS_BASE", "https://accounts.spotify.com")
    return f"{accounts.rstrip('/')}/api/token"

def sp_get(access_token: str, path_or_url: str, *, params=None, headers=None, timeout=None):
    h = {"Authorization": f"Bearer {access_token}"}
    if headers:
        h.update(headers)
    return requests.get(
        to_url(path_or_url),
        headers=h,
        params=params or {},
        timeout=_timeout(timeout),
    )

def sp_post_form(url: str, *, data: dict, headers: dict, timeout=None):
    return requests.post(url, data=data, headers=headers, timeout=_timeout(timeout))

def is_json(response) -> bool:
    return "application/json" in (response.headers.get("Content-Type") or "")
