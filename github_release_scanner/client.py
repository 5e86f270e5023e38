"""GitHub REST catalog client using httpx.

Issues one paginated GET per call and classifies the answer: decoded records
on 200, typed exceptions from .errors otherwise. No retries, no caching.
"""

import logging
from urllib.parse import quote

import httpx

from .errors import (
    AccountNotFoundError,
    DecodeError,
    ForgeError,
    InvalidArgumentError,
    TransportError,
)
from .models import DEFAULT_PER_PAGE, GITHUB_API, MAX_WORKERS, Release, Repository
from .settings import effective_per_page

logger = logging.getLogger(__name__)

USER_AGENT = "github-release-scanner"


class CatalogClient:
    """Thin client for the account repository and release listings.

    Safe to share across threads; the underlying httpx.Client pools
    connections and holds no per-request state.
    """

    def __init__(
        self,
        base_url: str = GITHUB_API,
        per_page: int = DEFAULT_PER_PAGE,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.per_page = effective_per_page(per_page)
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout,
            limits=httpx.Limits(max_connections=MAX_WORKERS),
        )

    def repositories_page(self, account: str, page: int) -> list[Repository]:
        """GET /users/{account}/repos for one page."""
        _check_page(page)
        _check_account(account)
        url = f"{self.base_url}/users/{_segment(account)}/repos"
        response = self._get(url, page)

        if response.status_code == 404:
            raise AccountNotFoundError(account)
        if response.status_code != 200:
            raise ForgeError(
                f"could not get repositories for the account {account}",
                response.status_code,
                _api_error_message(response),
                url,
            )
        return [Repository.from_json(obj, url) for obj in _json_array(response, url)]

    def releases_page(self, account: str, repository: str, page: int) -> list[Release]:
        """GET /repos/{account}/{repository}/releases for one page.

        A 404 here is an ordinary ForgeError: the repository was just listed,
        so a missing one means it vanished mid-scan.
        """
        _check_page(page)
        _check_account(account)
        _check_repository(repository)
        url = f"{self.base_url}/repos/{_segment(account)}/{_segment(repository)}/releases"
        response = self._get(url, page)

        if response.status_code != 200:
            raise ForgeError(
                f"could not get releases for the repository {repository}",
                response.status_code,
                _api_error_message(response),
                url,
            )
        return [Release.from_json(obj, url) for obj in _json_array(response, url)]

    def _get(self, url: str, page: int) -> httpx.Response:
        params = {"per_page": self.per_page, "page": page}
        logger.debug("GET %s page=%d per_page=%d", url, page, self.per_page)
        try:
            # The stream context closes the response whichever way we leave it
            with self._client.stream("GET", url, params=params, headers=self._headers) as response:
                response.read()
        except httpx.InvalidURL as exc:
            raise InvalidArgumentError(f"invalid request url {url}: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(url, exc) from exc
        return response

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _json_array(response: httpx.Response, url: str) -> list:
    try:
        body = response.json()
    except ValueError as exc:
        raise DecodeError(url, str(exc)) from exc
    if not isinstance(body, list):
        raise DecodeError(url, f"expected a JSON array, got {type(body).__name__}")
    return body


def _api_error_message(response: httpx.Response) -> str:
    """The forge's {"message": ...} text, or the HTTP status line."""
    status_line = f"{response.status_code} {response.reason_phrase}".strip()
    try:
        body = response.json()
    except ValueError:
        return status_line
    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        return message
    return status_line


def _check_page(page: int):
    if page < 1:
        raise InvalidArgumentError("page could not be less than 1")


def _check_account(account: str):
    if not account:
        raise InvalidArgumentError("user name could not be empty")
    if _has_control_chars(account):
        raise InvalidArgumentError(f"user name {account!r} contains control characters")


def _check_repository(repository: str):
    if not repository:
        raise InvalidArgumentError("repository name could not be empty")
    if _has_control_chars(repository):
        raise InvalidArgumentError(f"repository name {repository!r} contains control characters")


def _has_control_chars(name: str) -> bool:
    return any(ch < " " or ch == "\x7f" for ch in name)


def _segment(name: str) -> str:
    """Percent-encode one path segment, so '/', '?' and '#' stay inside it."""
    return quote(name, safe="")
