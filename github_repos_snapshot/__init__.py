"""Snapshot a user's GitHub repositories into one JSON file.

Lists every repository, enriches each with its readme, language breakdown
and a handful of prioritized source files, and writes the result for the
dashboard viewer.
"""

from .cli import main, run
from .client import GitHubClient, RemoteError
from .models import RepoRecord, RepoSummary

__all__ = ["main", "run", "GitHubClient", "RemoteError", "RepoRecord", "RepoSummary"]
