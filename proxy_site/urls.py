# proxy_site/urls.py
from django.urls import include, path
from spotify_proxy.views import root

urlpatterns = [
    path("health", root.health),
    path("api/spotify/", include("spotify_proxy.urls")),
]
