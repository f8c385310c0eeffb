"""Walk a repository tree and pick the files most worth showing."""

import posixpath
import sys

import httpx

from ..client import GitHubClient, RemoteError
from ..models import MAIN_FILE_EXTENSIONS, MAX_FILE_SIZE, MAX_MAIN_FILES, TreeEntry

MANIFEST_PREFIXES = ("package.json", "requirements.txt", "pom.xml")
ENTRYPOINT_PREFIXES = ("main.", "index.")


def _log(msg: str):
    sys.stderr.write(f"[files] {msg}\n")
    sys.stderr.flush()


def fetch_tree(client: GitHubClient, full_name: str, branch: str) -> list[TreeEntry]:
    """Return the blobs of the recursive tree for ``branch``, in server order.

    Any failure yields an empty list so the repository is still recorded.
    """
    try:
        resp = client.get(f"repos/{full_name}/git/trees/{branch}", params={"recursive": 1})
        if resp.body is None:
            return []
        return [
            TreeEntry.from_api(item)
            for item in resp.body.get("tree", [])
            if item.get("type") == "blob"
        ]
    except (RemoteError, httpx.HTTPError, ValueError, KeyError, AttributeError) as e:
        _log(f"Failed to fetch tree for {full_name}: {e}")
        return []


def file_priority(path: str) -> int:
    """Score a path by its basename; higher scores are kept first.

    Matching is by prefix, so ``package.json.backup`` scores like a manifest.
    """
    name = posixpath.basename(path).lower()
    if name in ("readme.md", "readme"):
        return 100
    if name.startswith(MANIFEST_PREFIXES):
        return 90
    if name.startswith(ENTRYPOINT_PREFIXES):
        return 80
    if name.startswith("app."):
        return 70
    return 50


def is_eligible(entry: TreeEntry, max_size: int = MAX_FILE_SIZE) -> bool:
    if entry.type != "blob":
        return False
    ext = posixpath.splitext(entry.path)[1].lower()
    return ext in MAIN_FILE_EXTENSIONS and entry.size < max_size


def select_main_files(
    entries: list[TreeEntry],
    max_files: int = MAX_MAIN_FILES,
    max_size: int = MAX_FILE_SIZE,
) -> list[TreeEntry]:
    """Keep the top ``max_files`` eligible blobs by descending priority.

    sorted() is stable, so equal priorities keep their tree order.
    """
    eligible = [e for e in entries if is_eligible(e, max_size)]
    ranked = sorted(eligible, key=lambda e: file_priority(e.path), reverse=True)
    return ranked[:max_files]
