"""Scan every repository of an account together with its releases.

Releases are fetched per repository on a bounded thread pool. The first
failing fetch cancels the rest of the scan and nothing partial is returned.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import httpx

from .client import CatalogClient
from .errors import AccountScanFailedError, InvalidArgumentError, ScanError
from .listing import list_releases, list_repositories
from .models import MAX_WORKERS, Release, Repository, ResultItem, ScanResult
from .settings import get_settings

logger = logging.getLogger(__name__)


def worker_count(jobs: int) -> int:
    return min(jobs, MAX_WORKERS)


def sort_result_items(items: list[ResultItem]) -> ScanResult:
    """Order by repository full name; sorted() is stable for equal names."""
    return sorted(items, key=lambda item: item.repository.full_name)


def scan_account(client: CatalogClient, account: str) -> ScanResult:
    """List the account's repositories and fetch every repository's releases.

    Raises AccountScanFailedError wrapping the first failure, whether it came
    from the repository listing or from any release fetch.
    """
    if not account:
        raise InvalidArgumentError("user name could not be empty")

    logger.info("Scanning account %s", account)
    try:
        repositories = list_repositories(client, account)
    except ScanError as exc:
        raise AccountScanFailedError(account, exc) from exc

    jobs = len(repositories)
    if jobs == 0:
        logger.info("Account %s has no repositories", account)
        return []

    cancelled = threading.Event()

    def scan_one(repository: Repository) -> ResultItem | None:
        if cancelled.is_set():
            return None
        try:
            releases = list_releases(client, account, repository.name)
        except BaseException:
            # Signal before the failure is reported so queued jobs stand down
            cancelled.set()
            raise
        return ResultItem(repository=repository, releases=tuple(releases))

    workers = worker_count(jobs)
    logger.debug("Scanning %d repositories of %s with %d workers", jobs, account, workers)

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="release-scan")
    items: list[ResultItem] = []
    try:
        futures = [executor.submit(scan_one, repository) for repository in repositories]
        for future in as_completed(futures):
            try:
                item = future.result()
            except ScanError as exc:
                logger.warning("Scan of %s aborted: %s", account, exc)
                raise AccountScanFailedError(account, exc) from exc
            # None only comes from a job that saw the cancel signal, and the
            # failure that raised it is still to be drained
            if item is not None:
                items.append(item)
    finally:
        cancelled.set()
        executor.shutdown(wait=True, cancel_futures=True)

    logger.info(
        "Scanned %d repositories of %s (%d releases)",
        len(items),
        account,
        sum(len(item.releases) for item in items),
    )
    return sort_result_items(items)


class Scanner:
    """Entry point tying configuration, the catalog client and the scan together.

    Unset arguments fall back to get_settings().
    """

    def __init__(
        self,
        base_url: str | None = None,
        per_page: int | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = get_settings()
        self.client = CatalogClient(
            base_url=base_url or settings.base_url,
            per_page=per_page if per_page is not None else settings.per_page,
            timeout=timeout if timeout is not None else settings.timeout,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self.client.base_url

    @property
    def per_page(self) -> int:
        return self.client.per_page

    def scan(self, account: str) -> ScanResult:
        return scan_account(self.client, account)

    def list_repositories(self, account: str) -> list[Repository]:
        return list_repositories(self.client, account)

    def list_releases(self, account: str, repository: str) -> list[Release]:
        return list_releases(self.client, account, repository)

    def repositories_page(self, account: str, page: int) -> list[Repository]:
        return self.client.repositories_page(account, page)

    def releases_page(self, account: str, repository: str, page: int) -> list[Release]:
        return self.client.releases_page(account, repository, page)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def get_default_scanner() -> Scanner:
    """Scanner against the public GitHub API with default settings."""
    return Scanner()
