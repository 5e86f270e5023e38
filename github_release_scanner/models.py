"""Data models and constants for release scanning."""

from dataclasses import dataclass

from .errors import DecodeError

GITHUB_API = "https://api.github.com"
DEFAULT_PER_PAGE = 100  # GitHub REST API maximum page size
MAX_WORKERS = 100  # Upper bound on concurrent release fetches per scan


@dataclass(frozen=True)
class Repository:
    """A repository owned by the scanned account."""

    name: str
    full_name: str

    @classmethod
    def from_json(cls, obj, url: str = "") -> "Repository":
        if not isinstance(obj, dict):
            raise DecodeError(url, f"expected a repository object, got {type(obj).__name__}")
        name = obj.get("name")
        full_name = obj.get("full_name")
        if not isinstance(name, str) or not name:
            raise DecodeError(url, "repository without a name")
        if not isinstance(full_name, str) or not full_name:
            raise DecodeError(url, f"repository {name} without a full_name")
        return cls(name=name, full_name=full_name)


@dataclass(frozen=True)
class Release:
    """A published release of one repository."""

    name: str

    @classmethod
    def from_json(cls, obj, url: str = "") -> "Release":
        if not isinstance(obj, dict):
            raise DecodeError(url, f"expected a release object, got {type(obj).__name__}")
        # Unnamed releases come back as null
        name = obj.get("name")
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise DecodeError(url, f"release name must be a string, got {type(name).__name__}")
        return cls(name=name)


@dataclass(frozen=True)
class ResultItem:
    """One repository paired with every release the forge returned for it."""

    repository: Repository
    releases: tuple[Release, ...] = ()


ScanResult = list[ResultItem]
