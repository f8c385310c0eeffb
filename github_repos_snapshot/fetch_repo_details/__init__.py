from .fetch_repo_details import fetch_languages, fetch_readme, fetch_repo_details

__all__ = ["fetch_languages", "fetch_readme", "fetch_repo_details"]
