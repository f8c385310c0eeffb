"""List every repository of the authenticated user, most recently updated first."""

from ..client import GitHubClient
from ..models import RepoSummary

PER_PAGE = 100


def list_repos(client: GitHubClient) -> list[RepoSummary]:
    """Walk /user/repos page by page until GitHub returns an empty page.

    The updated/desc sort is part of the contract: the viewer shows the
    snapshot in the order it was written.
    """
    repos: list[RepoSummary] = []
    page = 1
    while True:
        resp = client.get(
            "user/repos",
            params={"per_page": PER_PAGE, "page": page, "sort": "updated", "direction": "desc"},
        )
        batch = resp.body
        if not isinstance(batch, list) or not batch:
            break
        repos.extend(RepoSummary.from_api(item) for item in batch)
        page += 1
    return repos
