import pytest

from spotify_proxy.services.recommendations import (
    DEFAULT_GENRES,
    TUNABLE_PARAMS,
    RecommendationRequest,
    SeedSet,
    clamp_limit,
    normalize_seeds,
    resolve_market,
    split_csv,
    tuning_params,
)


def test_split_csv_trims_and_drops_empty():
    assert split_csv(" a, ,b,,c ") == ["a", "b", "c"]
    assert split_csv(None) == []
    assert split_csv("") == []


@pytest.mark.parametrize("query", [
    {"seed_artists": "A1,A2,A3,A4,A5,A6"},
    {"seed_artists": "A1,A2", "seed_tracks": "T1,T2,T3,T4", "seed_genres": "g1"},
    {"seed_tracks": "T1,T2,T3", "seed_genres": "g1,g2,g3,g4"},
    {"seed_genres": "g1,g2,g3,g4,g5,g6,g7"},
    {"seed_artists": "A1", "seed_genres": "g1"},
])
def test_seed_total_never_exceeds_five(query):
    assert len(normalize_seeds(query)) <= 5


def test_truncation_priority_is_artists_tracks_genres():
    seeds = normalize_seeds({
        "seed_artists": "A1,A2",
        "seed_tracks": "T1,T2,T3,T4",
        "seed_genres": "jazz",
    })
    assert seeds == SeedSet(("A1", "A2"), ("T1", "T2", "T3"), ())


def test_six_artists_keeps_first_five():
    seeds = normalize_seeds({"seed_artists": "A1,A2,A3,A4,A5,A6"})
    assert seeds.artists == ("A1", "A2", "A3", "A4", "A5")
    assert seeds.tracks == ()
    assert seeds.genres == ()


@pytest.mark.parametrize("query", [{}, {"seed_artists": " , ", "seed_genres": ""}])
def test_no_seeds_uses_default_genres(query):
    assert normalize_seeds(query) == SeedSet(genres=DEFAULT_GENRES)
    assert DEFAULT_GENRES == ("pop", "rock", "hip-hop")


@pytest.mark.parametrize("raw,expected", [
    (None, 20),
    ("", 20),
    ("abc", 20),
    ("0", 20),
    ("-7", 1),
    ("1", 1),
    ("55", 55),
    ("100", 100),
    ("101", 100),
    ("99999", 100),
    ("3.5", 3),
    ("10abc", 10),
    ("1e3", 1),
    (" 7 ", 7),
    ("-0", 20),
])
def test_limit_is_clamped(raw, expected):
    assert clamp_limit(raw) == expected


def test_market_defaults_to_us():
    assert resolve_market(None) == "US"
    assert resolve_market("  ") == "US"
    assert resolve_market("SE") == "SE"


def test_tuning_keeps_only_allow_listed_non_blank_values():
    query = {
        "target_energy": "0.8",
        "min_tempo": "90",
        "max_valence": "  ",
        "target_mood": "happy",
    }
    assert tuning_params(query) == {"target_energy": "0.8", "min_tempo": "90"}


def test_allow_list_has_29_keys():
    assert len(TUNABLE_PARAMS) == 29
    assert len(set(TUNABLE_PARAMS)) == 29


def test_request_params():
    req = RecommendationRequest.from_query({
        "seed_artists": "A1",
        "seed_genres": "jazz,blues",
        "limit": "7",
        "target_valence": "0.2",
    })
    assert req.as_params() == {
        "seed_artists": "A1",
        "seed_genres": "jazz,blues",
        "limit": "7",
        "market": "US",
        "target_valence": "0.2",
    }
