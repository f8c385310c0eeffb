from .list_repos import PER_PAGE, list_repos

__all__ = ["PER_PAGE", "list_repos"]
