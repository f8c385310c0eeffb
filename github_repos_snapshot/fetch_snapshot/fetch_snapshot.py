"""Build the full snapshot: list, enrich each repository, write the file."""

import sys
import time
from pathlib import Path

from ..client import GitHubClient
from ..fetch_repo_details import fetch_repo_details
from ..list_repos import list_repos
from ..models import REPO_DELAY_SEC, RepoRecord
from ..snapshot import write_snapshot


def _log(msg: str):
    sys.stderr.write(f"[snapshot] {msg}\n")
    sys.stderr.flush()


def fetch_snapshot(client: GitHubClient, output_path: Path, delay: float = REPO_DELAY_SEC) -> dict:
    """Enrich every repository in listing order and write the snapshot.

    A repository whose enrichment raises is logged and left out; the run
    carries on. The file is written once, after the last repository.
    Returns dict with counts: total, processed, errors, duplicates,
    rate_limit_hits.
    """
    _log("Fetching repositories...")
    repos = list_repos(client)
    _log(f"Found {len(repos)} repositories")

    stats = {"total": len(repos), "processed": 0, "errors": 0, "duplicates": 0}
    records: list[RepoRecord] = []
    seen: set[str] = set()

    for i, summary in enumerate(repos, start=1):
        _log(f"Processing {i}/{len(repos)}: {summary.full_name}")
        # Repos updated mid-listing can shift onto the next page and repeat
        if summary.full_name in seen:
            _log(f"Skipping duplicate {summary.full_name}")
            stats["duplicates"] += 1
            continue
        seen.add(summary.full_name)

        try:
            records.append(fetch_repo_details(client, summary))
        except Exception as e:
            _log(f"Error processing {summary.full_name}: {e}")
            stats["errors"] += 1
            continue
        stats["processed"] += 1

        if delay > 0:
            time.sleep(delay)

    stats["rate_limit_hits"] = client.rate_limit_hits
    path = write_snapshot(records, output_path)
    _log(f"Data saved to {path}")
    _log(f"Total repositories processed: {len(records)}")
    return stats
