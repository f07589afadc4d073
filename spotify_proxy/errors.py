# spotify_proxy/errors.py
"""
Exception taxonomy for the proxy.
 - ConfigError / UpstreamAuthError: the app token could not be obtained (fatal, 500).
 - UpstreamError: a Spotify endpoint answered with an unexpected status (surfaced verbatim).
 - PartialFetchFailure: one fallback sub-call failed (logged and skipped).
"""

from __future__ import annotations

from typing import Any


class SpotifyProxyError(Exception):
    """Base class for every error raised by the proxy services."""


class ConfigError(SpotifyProxyError):
    """Client credentials are missing from configuration."""


class UpstreamAuthError(SpotifyProxyError):
    """The accounts service rejected the client-credentials exchange."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Spotify token error: {body}")


class UpstreamError(SpotifyProxyError):
    """A catalog endpoint returned a non-2xx status we don't recover from."""

    def __init__(self, status: int, upstream: Any, url: str):
        self.status = status
        self.upstream = upstream
        self.url = url
        super().__init__(f"Upstream Spotify error {status} for {url}")

    def as_payload(self) -> dict:
        return {
            "error": "Upstream Spotify error",
            "status": self.status,
            "upstream": self.upstream,
            "url": self.url,
        }


class PartialFetchFailure(SpotifyProxyError):
    """A single fallback lookup failed; it only reduces the result count."""
