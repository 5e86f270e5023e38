"""Scan a GitHub account's repositories and their releases.

Release listings are fetched in parallel on a bounded thread pool; the first
failure aborts the scan and the result is sorted by repository full name.
"""

from .cli import main
from .client import CatalogClient
from .errors import (
    AccountNotFoundError,
    AccountScanFailedError,
    DecodeError,
    ForgeError,
    InvalidArgumentError,
    ScanError,
    TransportError,
)
from .models import Release, Repository, ResultItem, ScanResult
from .scanner import Scanner, get_default_scanner, scan_account

__all__ = [
    "main",
    "CatalogClient",
    "Scanner",
    "get_default_scanner",
    "scan_account",
    "Release",
    "Repository",
    "ResultItem",
    "ScanResult",
    "ScanError",
    "InvalidArgumentError",
    "AccountNotFoundError",
    "ForgeError",
    "TransportError",
    "DecodeError",
    "AccountScanFailedError",
]
