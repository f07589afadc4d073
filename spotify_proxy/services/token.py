# spotify_proxy/services/token.py
"""
App-token layer (client-credentials flow).
- Exchanges the app's client id/secret for a bearer token.
- Keeps one Credential per process and reuses it until 30s before expiry.
- The client secret never leaves this module.
"""

from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from django.conf import settings

from ..clients.spotify import sp_post_form, token_url
from ..errors import ConfigError, UpstreamAuthError

logger = logging.getLogger(__name__)

SAFETY_MARGIN = 30


@dataclass(frozen=True)
class Credential:
    token: str
    expires_at: int  # epoch seconds

    def usable(self, now: float) -> bool:
        return self.expires_at > now + SAFETY_MARGIN


class TokenProvider:
    """
    Owns the cached Credential. `post` and `clock` are injectable so tests can
    simulate the accounts service and the passage of time.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        post: Callable = sp_post_form,
        clock: Callable[[], float] = time.time,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._post = post
        self._clock = clock
        self.credential: Optional[Credential] = None

    def _credentials(self) -> Tuple[str, str]:
        cid = self._client_id or getattr(settings, "SPOTIFY_CLIENT_ID", None)
        secret = self._client_secret or getattr(settings, "SPOTIFY_CLIENT_SECRET", None)
        if not cid or not secret:
            raise ConfigError("Missing SPOTIFY_CLIENT_ID or SPOTIFY_CLIENT_SECRET")
        return cid, secret

    def get_token(self) -> str:
        cred = self.credential
        if cred is not None and cred.usable(self._clock()):
            return cred.token
        return self.refresh()

    def refresh(self) -> str:
        """
        POST grant_type=client_credentials to the accounts service.
        Raises ConfigError before any I/O when credentials are absent,
        UpstreamAuthError (with the raw body) on a non-200 answer.
        """
        cid, secret = self._credentials()
        auth_header = base64.b64encode(f"{cid}:{secret}".encode()).decode()
        headers = {
            "Authorization": f"Basic {auth_header}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

        r = self._post(token_url(), data={"grant_type": "client_credentials"}, headers=headers)
        if not r.ok:
            logger.error("Token exchange failed (%s): %s", r.status_code, r.text)
            raise UpstreamAuthError(r.status_code, r.text)

        try:
            token_data = r.json()
            token = token_data["access_token"]
            expires_in = int(token_data.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Unreadable token response (%s): %s", e, r.text)
            raise UpstreamAuthError(r.status_code, r.text) from e

        self.credential = Credential(token=token, expires_at=int(self._clock()) + expires_in)
        logger.info("Fetched new app token (expires in %ss)", expires_in)
        return self.credential.token


_provider: Optional[TokenProvider] = None

def get_provider() -> TokenProvider:
    """Process-wide provider, created on first use."""
    global _provider
    if _provider is None:
        _provider = TokenProvider()
    return _provider

def get_app_token() -> str:
    return get_provider().get_token()
