"""Enrich one repository summary with its readme, languages and main files."""

import sys
from concurrent.futures import ThreadPoolExecutor

import httpx

from ..client import GitHubClient, RemoteError
from ..fetch_main_files import decode_content, fetch_main_files
from ..models import ReadmeRecord, RepoRecord, RepoSummary

# readme, languages, main files
FAN_OUT = 3


def _log(msg: str):
    sys.stderr.write(f"[details] {msg}\n")
    sys.stderr.flush()


def fetch_readme(client: GitHubClient, summary: RepoSummary) -> ReadmeRecord | None:
    """Return the decoded readme, or None if the repository has none."""
    try:
        resp = client.get(f"repos/{summary.full_name}/readme")
        if not isinstance(resp.body, dict):
            return None
        content = decode_content(resp.body)
        if content is None:
            return None
        return ReadmeRecord(content=content, encoding=resp.body.get("encoding"))
    except (RemoteError, httpx.HTTPError, UnicodeDecodeError, TypeError, ValueError) as e:
        _log(f"Failed to fetch README for {summary.full_name}: {e}")
        return None


def fetch_languages(client: GitHubClient, summary: RepoSummary) -> dict[str, int]:
    """Return the language -> bytes breakdown, or {} on any failure."""
    try:
        resp = client.get(f"repos/{summary.full_name}/languages")
        if not isinstance(resp.body, dict):
            return {}
        return {str(lang): int(count) for lang, count in resp.body.items()}
    except (RemoteError, httpx.HTTPError, TypeError, ValueError) as e:
        _log(f"Failed to fetch languages for {summary.full_name}: {e}")
        return {}


def fetch_repo_details(client: GitHubClient, summary: RepoSummary) -> RepoRecord:
    """Run the three sub-fetches side by side and assemble the record.

    Each sub-fetch handles its own errors, so one failing never cancels the
    others; the record is built only once all three have finished.
    """
    with ThreadPoolExecutor(max_workers=FAN_OUT) as executor:
        readme = executor.submit(fetch_readme, client, summary)
        languages = executor.submit(fetch_languages, client, summary)
        main_files = executor.submit(fetch_main_files, client, summary)

    return RepoRecord(
        summary=summary,
        readme=readme.result(),
        languages=languages.result(),
        main_files=main_files.result(),
    )
