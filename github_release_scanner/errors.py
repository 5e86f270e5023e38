"""Exception hierarchy for release scanning.

Inner layers raise these; the CLI turns them into a message and exit status.
"""


class ScanError(Exception):
    """Base exception for every scanning failure."""


class InvalidArgumentError(ScanError, ValueError):
    """An empty account or repository name, or a page below 1."""


class AccountNotFoundError(ScanError):
    """The repository list endpoint answered 404 for the account."""

    def __init__(self, account: str):
        self.account = account
        super().__init__(f"account {account} does not exist")


class ForgeError(ScanError):
    """Any other non-200 answer from the forge."""

    def __init__(self, context: str, status_code: int, message: str, url: str = ""):
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"{context}: {message}")


class TransportError(ScanError):
    """The request never produced a complete response (connect, DNS, body read)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        super().__init__(f"request to {url} failed: {cause}")


class DecodeError(ScanError):
    """A 200 response whose body is not the expected JSON shape."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"could not decode response from {url}: {detail}")


class AccountScanFailedError(ScanError):
    """Wraps the failure that aborted a scan of one account."""

    def __init__(self, account: str, cause: Exception):
        self.account = account
        self.cause = cause
        super().__init__(f"could not scan repository for the account {account}: {cause}")
