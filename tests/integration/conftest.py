"""Stub forge for integration tests: real Scanner and httpx.Client, mocked transport only."""

import json
import threading

import httpx
import pytest

from github_release_scanner.scanner import Scanner

BASE_URL = "https://forge.test"


class StubForge:
    """Serves /users/{account}/repos and /repos/{account}/{repo}/releases from dicts.

    Listings are paged by the request's per_page/page. A path listed in
    ``errors`` answers with the given (status, body) instead.
    """

    def __init__(self):
        self.repos: dict[str, list[dict]] = {}
        self.releases: dict[tuple[str, str], list[dict]] = {}
        self.errors: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []
        self._lock = threading.Lock()

    def add_account(self, account, repos):
        self.repos[account] = [
            {"full_name": f"{account}/{name}", "name": name, "private": False} for name in repos
        ]

    def add_releases(self, account, repo, names):
        self.releases[(account, repo)] = [{"name": name, "draft": False} for name in names]

    def fail(self, path, status, body):
        self.errors[path] = (status, body)

    def paths(self, prefix=""):
        return [r.url.path for r in self.requests if r.url.path.startswith(prefix)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)

        path = request.url.path
        if path in self.errors:
            status, body = self.errors[path]
            content = body if isinstance(body, bytes) else json.dumps(body).encode()
            return httpx.Response(status, content=content)

        parts = path.strip("/").split("/")
        if len(parts) == 3 and parts[0] == "users" and parts[2] == "repos":
            if parts[1] not in self.repos:
                return _json(404, {"message": "Not Found"})
            records = self.repos[parts[1]]
        elif len(parts) == 4 and parts[0] == "repos" and parts[3] == "releases":
            if (parts[1], parts[2]) not in self.releases and parts[1] not in self.repos:
                return _json(404, {"message": "Not Found"})
            records = self.releases.get((parts[1], parts[2]), [])
        else:
            return _json(404, {"message": "Not Found"})

        per_page = int(request.url.params["per_page"])
        page = int(request.url.params["page"])
        start = (page - 1) * per_page
        return _json(200, records[start : start + per_page])


def _json(status_code, body):
    return httpx.Response(status_code, content=json.dumps(body).encode())


@pytest.fixture
def forge():
    return StubForge()


@pytest.fixture
def make_scanner(forge):
    """Build Scanners wired to the stub forge; their clients are closed afterwards."""
    clients = []

    def _make(per_page=100):
        http = httpx.Client(transport=httpx.MockTransport(forge.handler))
        clients.append(http)
        return Scanner(base_url=BASE_URL, per_page=per_page, http_client=http)

    yield _make
    for http in clients:
        http.close()
