# spotify_proxy/services/recommendations.py
'''
This module turns a recommendations query into a list of tracks.
 - normalize_seeds / clamp_limit / resolve_market / tuning_params: shape the upstream request.
 - RecommendationResolver.resolve: calls /recommendations and, when the app's credential tier
   has no access to it (404/403), synthesizes an equivalent result from artist top tracks,
   genre searches and the seed tracks themselves.
'''

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import requests
from django.conf import settings

from ..clients.spotify import build_url, sp_get
from ..errors import PartialFetchFailure, UpstreamError
from .token import TokenProvider, get_provider

logger = logging.getLogger(__name__)

MAX_SEEDS = 5
DEFAULT_GENRES = ("pop", "rock", "hip-hop")
DEFAULT_LIMIT = 20
MIN_LIMIT, MAX_LIMIT = 1, 100
SEARCH_PAGE_MAX = 50
FALLBACK_STATUSES = (403, 404)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

TUNABLE_PARAMS = (
    "target_acousticness",
    "target_danceability",
    "target_energy",
    "target_instrumentalness",
    "target_liveness",
    "target_loudness",
    "target_speechiness",
    "target_tempo",
    "target_valence",
    "min_acousticness",
    "max_acousticness",
    "min_danceability",
    "max_danceability",
    "min_energy",
    "max_energy",
    "min_instrumentalness",
    "max_instrumentalness",
    "min_liveness",
    "max_liveness",
    "min_loudness",
    "max_loudness",
    "min_popularity",
    "max_popularity",
    "min_speechiness",
    "max_speechiness",
    "min_tempo",
    "max_tempo",
    "min_valence",
    "max_valence",
)

# ---- Request shaping ---------------------------------------------------------

@dataclass(frozen=True)
class SeedSet:
    artists: Tuple[str, ...] = ()
    tracks: Tuple[str, ...] = ()
    genres: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.artists) + len(self.tracks) + len(self.genres)

    def as_params(self) -> Dict[str, str]:
        params = {}
        if self.artists:
            params["seed_artists"] = ",".join(self.artists)
        if self.tracks:
            params["seed_tracks"] = ",".join(self.tracks)
        if self.genres:
            params["seed_genres"] = ",".join(self.genres)
        return params


def split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [s.strip() for s in str(value).split(",") if s.strip()]


def normalize_seeds(query) -> SeedSet:
    """
    Parse seed_artists/seed_tracks/seed_genres and keep at most 5 seeds in total,
    artists first, then tracks, then genres. No seeds at all -> DEFAULT_GENRES.
    """
    artists = split_csv(query.get("seed_artists"))
    tracks = split_csv(query.get("seed_tracks"))
    genres = split_csv(query.get("seed_genres"))

    if not (artists or tracks or genres):
        genres = list(DEFAULT_GENRES)

    remaining = MAX_SEEDS
    a = artists[:remaining]
    remaining -= len(a)
    t = tracks[:remaining]
    remaining -= len(t)
    g = genres[:remaining]
    return SeedSet(tuple(a), tuple(t), tuple(g))


def clamp_limit(raw) -> int:
    """
    Leading integer of the raw value ("3.5" -> 3, "10abc" -> 10), clamped to [1, 100].
    No leading integer, or 0, means DEFAULT_LIMIT.
    """
    m = _LEADING_INT.match(raw) if isinstance(raw, str) else None
    limit = int(m.group(1)) if m else 0
    if limit == 0:
        return DEFAULT_LIMIT
    return min(max(limit, MIN_LIMIT), MAX_LIMIT)


def resolve_market(raw) -> str:
    market = str(raw).strip() if raw is not None else ""
    return market or getattr(settings, "SPOTIFY_DEFAULT_MARKET", "US")


def tuning_params(query) -> Dict[str, str]:
    params = {}
    for key in TUNABLE_PARAMS:
        value = query.get(key)
        if value is not None and str(value).strip() != "":
            params[key] = str(value)
    return params


@dataclass(frozen=True)
class RecommendationRequest:
    seeds: SeedSet
    limit: int
    market: str
    tuning: Dict[str, str]

    @classmethod
    def from_query(cls, query) -> "RecommendationRequest":
        return cls(
            seeds=normalize_seeds(query),
            limit=clamp_limit(query.get("limit")),
            market=resolve_market(query.get("market")),
            tuning=tuning_params(query),
        )

    def as_params(self) -> Dict[str, str]:
        params = self.seeds.as_params()
        params["limit"] = str(self.limit)
        params["market"] = self.market
        params.update(self.tuning)
        return params

# ---- Resolution --------------------------------------------------------------

def _parse_body(r) -> Any:
    text = r.text
    if not text:
        return "(empty body)"
    try:
        return r.json()
    except ValueError:
        return text


class RecommendationResolver:
    """
    One instance per process is fine; no per-request state lives on it.
    `fetch` has the signature of clients.spotify.sp_get.
    """

    def __init__(self, provider: Optional[TokenProvider] = None, *, fetch: Callable = sp_get):
        self.provider = provider or get_provider()
        self.fetch = fetch

    def resolve(self, query) -> Dict[str, Any]:
        req = RecommendationRequest.from_query(query)
        token = self.provider.get_token()

        url = build_url("recommendations", req.as_params())
        logger.info("[reco] Upstream URL: %s", url)
        r = self.fetch(token, url, headers={"Accept": "application/json"})

        if r.ok:
            return r.json()

        if r.status_code in FALLBACK_STATUSES:
            logger.warning(
                "[reco] /recommendations answered %s, building fallback for %s",
                r.status_code, req.seeds,
            )
            return {"tracks": self.fallback(req)}

        upstream = _parse_body(r)
        logger.error("[reco] Upstream error %s %s", r.status_code, upstream)
        raise UpstreamError(r.status_code, upstream, url)

    # -- fallback pipeline --

    def fallback(self, req: RecommendationRequest) -> List[Dict[str, Any]]:
        """
        Artist top tracks, then genre searches, then the seed tracks themselves.
        Tracks are de-duplicated by id in discovery order; each stage stops
        issuing calls once `limit` tracks are collected.
        """
        found: Dict[str, Dict[str, Any]] = {}
        market = req.market
        per_genre = min(SEARCH_PAGE_MAX, req.limit)

        stages = (
            (req.seeds.artists, lambda artist_id: self._lookup(
                f"artists/{artist_id}/top-tracks", {"market": market},
                lambda data: data.get("tracks") or [],
            )),
            (req.seeds.genres, lambda genre: self._lookup(
                "search", {"q": f'genre:"{genre}"', "type": "track", "market": market, "limit": per_genre},
                lambda data: (data.get("tracks") or {}).get("items") or [],
            )),
            (req.seeds.tracks, lambda track_id: self._lookup(
                f"tracks/{track_id}", {"market": market},
                lambda data: [data],
            )),
        )

        for seeds, lookup in stages:
            for seed in seeds:
                if len(found) >= req.limit:
                    break
                try:
                    tracks = lookup(seed)
                except PartialFetchFailure as e:
                    logger.warning("[reco] fallback lookup skipped: %s", e)
                    continue
                _merge(found, tracks)

        logger.info("[reco] fallback collected %d track(s), limit %d", len(found), req.limit)
        return list(found.values())[:req.limit]

    def _lookup(self, path: str, params: Dict[str, Any], extract: Callable) -> Iterable[Dict[str, Any]]:
        token = self.provider.get_token()
        try:
            r = self.fetch(token, path, params=params)
        except requests.RequestException as e:
            raise PartialFetchFailure(f"{path}: {e}") from e
        if not r.ok:
            raise PartialFetchFailure(f"{path}: status {r.status_code}")
        try:
            return extract(r.json())
        except (ValueError, AttributeError) as e:
            raise PartialFetchFailure(f"{path}: unreadable body ({e})") from e


def _merge(found: Dict[str, Dict[str, Any]], tracks: Iterable[Dict[str, Any]]) -> None:
    for t in tracks:
        if not isinstance(t, dict) or not isinstance(t.get("id"), str) or not t["id"]:
            continue
        found.setdefault(t["id"], t)


def resolve_recommendations(query) -> Dict[str, Any]:
    return RecommendationResolver().resolve(query)
