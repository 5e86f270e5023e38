"""Walk paginated catalog listings until a short page ends them."""

from collections.abc import Callable
from typing import TypeVar

from .client import CatalogClient
from .models import Release, Repository

T = TypeVar("T")


def collect_pages(fetch_page: Callable[[int], list[T]], per_page: int) -> list[T]:
    """Concatenate pages 1, 2, ... stopping at the first chunk shorter than per_page.

    The forge honours per_page exactly, so a short (or empty) page is the only
    end-of-listing signal; Link headers are not consulted.
    """
    collected: list[T] = []
    page = 1
    while True:
        chunk = fetch_page(page)
        collected.extend(chunk)
        if len(chunk) < per_page:
            break
        page += 1
    return collected


def list_repositories(client: CatalogClient, account: str) -> list[Repository]:
    """Every repository owned by account, in forge order."""
    return collect_pages(lambda page: client.repositories_page(account, page), client.per_page)


def list_releases(client: CatalogClient, account: str, repository: str) -> list[Release]:
    """Every release of account/repository, in forge order across pages."""
    return collect_pages(
        lambda page: client.releases_page(account, repository, page), client.per_page
    )
