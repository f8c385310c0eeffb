"""Fetch the selected main files of a repository."""

import base64
import binascii
import sys
from urllib.parse import quote

import httpx

from ..client import GitHubClient, RemoteError
from ..models import MAX_FILE_SIZE, MAX_MAIN_FILES, FileRecord, RepoSummary
from .select_files import fetch_tree, select_main_files


def _log(msg: str):
    sys.stderr.write(f"[files] {msg}\n")
    sys.stderr.flush()


def decode_content(data: dict) -> str | None:
    """Decode a contents/readme payload to text.

    base64 payloads (GitHub wraps them at 60 columns) are decoded as strict
    UTF-8; any other encoding hands back ``content`` untouched.
    """
    content = data.get("content")
    if data.get("encoding") == "base64":
        return base64.b64decode(content or "").decode("utf-8")
    return content


def fetch_file(client: GitHubClient, full_name: str, path: str) -> str | None:
    """Return the text of one file, or None if it can't be fetched or decoded."""
    try:
        resp = client.get(f"repos/{full_name}/contents/{quote(path, safe='/')}")
        if not isinstance(resp.body, dict):
            _log(f"Failed to fetch content for {path}: HTTP {resp.status}")
            return None
        return decode_content(resp.body)
    except (RemoteError, httpx.HTTPError, binascii.Error, UnicodeDecodeError, TypeError, ValueError) as e:
        _log(f"Failed to fetch content for {path}: {e}")
        return None


def fetch_main_files(
    client: GitHubClient,
    summary: RepoSummary,
    max_files: int = MAX_MAIN_FILES,
    max_size: int = MAX_FILE_SIZE,
) -> list[FileRecord]:
    """Select the repository's main files and fetch them one at a time, in order."""
    tree = fetch_tree(client, summary.full_name, summary.default_branch)
    files = []
    for entry in select_main_files(tree, max_files=max_files, max_size=max_size):
        content = fetch_file(client, summary.full_name, entry.path)
        if content is None:
            continue
        files.append(FileRecord(path=entry.path, size=entry.size, content=content))
    return files
