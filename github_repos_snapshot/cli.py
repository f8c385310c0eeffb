"""CLI for building the repository snapshot."""

import argparse
import sys
from pathlib import Path

import httpx

from .client import GitHubClient, RemoteError
from .credentials import get_token
from .models import REPO_DELAY_SEC

DEFAULT_OUTPUT = Path(__file__).parent.parent / "public" / "repos-data.json"

# Exit codes
EXIT_NO_TOKEN = 1
EXIT_RUN_FAILED = 2


def _log(msg: str):
    sys.stderr.write(f"{msg}\n")
    sys.stderr.flush()


def run(output_path: Path = DEFAULT_OUTPUT, delay: float = REPO_DELAY_SEC) -> int:
    """Fetch and write the snapshot; return the process exit code."""
    token = get_token()
    if not token:
        _log("Error: GitHub token is required.")
        return EXIT_NO_TOKEN

    from .fetch_snapshot import fetch_snapshot

    with GitHubClient(token) as client:
        try:
            stats = fetch_snapshot(client, output_path, delay=delay)
        except (RemoteError, httpx.HTTPError) as e:
            _log(f"Error: {e}")
            return EXIT_RUN_FAILED
    print(
        f"\nDone: {stats['processed']} processed, {stats['errors']} errors, "
        f"{stats['duplicates']} duplicates, {stats['rate_limit_hits']} rate limit waits"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Snapshot your GitHub repositories into a JSON file for the dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Output JSON file (default: public/repos-data.json)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=REPO_DELAY_SEC,
        help=f"Seconds to pause between repositories (default: {REPO_DELAY_SEC})",
    )

    args = parser.parse_args(argv)
    return run(args.output, delay=args.delay)


if __name__ == "__main__":
    sys.exit(main())
