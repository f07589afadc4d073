# spotify_proxy/middleware.py
import logging

logger = logging.getLogger(__name__)

class RequestLogMiddleware:
    """Logs method, path and response status of every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        logger.info("%s %s - %s", request.method, request.path, response.status_code)
        return response
