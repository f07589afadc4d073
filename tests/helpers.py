import json

import requests


def make_response(status=200, payload=None, text=None, content_type="application/json"):
    """A real requests.Response with a canned body."""
    r = requests.Response()
    r.status_code = status
    if payload is not None:
        r._content = json.dumps(payload).encode()
    else:
        r._content = (text or "").encode()
    r.headers["Content-Type"] = content_type
    r.encoding = "utf-8"
    return r


def tracks(*ids):
    return [{"id": i, "name": f"Track {i}"} for i in ids]


class StubProvider:
    def __init__(self, token="app-token", error=None):
        self.token = token
        self.error = error
        self.calls = 0

    def get_token(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.token


class FakeCatalog:
    """
    Stands in for clients.spotify.sp_get. `routes` maps a catalog path
    (without base URL or query) to a response, an exception to raise, or a
    callable taking the params and returning a response.
    """

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def __call__(self, token, path_or_url, *, params=None, headers=None, timeout=None):
        path = path_or_url.split("?")[0]
        if "/v1/" in path:
            path = path.split("/v1/", 1)[1]
        self.calls.append((path, params, path_or_url))
        route = self.routes.get(path)
        if route is None:
            return make_response(404, {"error": {"status": 404, "message": "Not found"}})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(params)
        return route

    def paths(self):
        return [c[0] for c in self.calls]


