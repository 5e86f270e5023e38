"""CLI for scanning an account's repositories and releases."""

import argparse
import logging
import sys

from .errors import ScanError
from .models import ScanResult
from .scanner import Scanner


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def render(items: ScanResult) -> str:
    """Flat listing: full name, one release name per line, blank separator."""
    lines = []
    for item in items:
        lines.append(item.repository.full_name)
        lines.extend(release.name for release in item.releases)
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-release-scanner",
        description="List every repository of a GitHub account with its releases",
    )
    parser.add_argument(
        "account",
        nargs="?",
        help="User or organisation whose repositories are scanned",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API root (default: https://api.github.com)",
    )
    parser.add_argument(
        "--per-page",
        type=int,
        default=None,
        help="Records requested per page, 1-100 (default: 100; larger values are clamped)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each request to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if not args.account:
        print("account is not specified", file=sys.stderr)
        return 1

    with Scanner(base_url=args.base_url, per_page=args.per_page) as scanner:
        try:
            items = scanner.scan(args.account)
        except ScanError as e:
            print(str(e), file=sys.stderr)
            return 1

    sys.stdout.write(render(items))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
