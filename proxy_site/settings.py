# proxy_site/settings.py
"""
Django settings for the Spotify proxy.
Everything comes from the environment (a local .env file is loaded if present).
There is no database: the only state is the in-memory app token.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Spotify (never exposed to clients)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
SPOTIFY_ACCOUNTS_BASE = os.getenv("SPOTIFY_ACCOUNTS_BASE", "https://accounts.spotify.com")
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")
SPOTIFY_HTTP_TIMEOUT = float(os.getenv("SPOTIFY_HTTP_TIMEOUT", "10"))
SPOTIFY_DEFAULT_MARKET = os.getenv("SPOTIFY_DEFAULT_MARKET", "US")

# Django
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-not-secret")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if h.strip()]

INSTALLED_APPS = [
    "spotify_proxy",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
    "spotify_proxy.middleware.RequestLogMiddleware",
]

ROOT_URLCONF = "proxy_site.urls"
WSGI_APPLICATION = "proxy_site.wsgi.application"
APPEND_SLASH = False

DATABASES = {}
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
}
