# spotify_proxy/urls.py
from django.urls import path
from .views import catalog, recommendations, root

urlpatterns = [
    # Health
    path("health", root.health),

    # Recommendations (with fallback)
    path("recommendations", recommendations.recommendations),
    path("available-genre-seeds", catalog.available_genre_seeds),

    # Simple forwards
    path("search", catalog.search),
    path("tracks/<str:track_id>", catalog.get_track),
    path("artists/<str:artist_id>", catalog.get_artist),
    path("albums/<str:album_id>", catalog.get_album),
]
