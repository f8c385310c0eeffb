"""Obtain the GitHub token from the environment or an interactive prompt."""

from collections.abc import Callable

from .settings import get_settings

TOKEN_PROMPT = "Please enter your GitHub Personal Access Token: "


def get_token(prompt: Callable[[str], str] | None = None) -> str | None:
    """Return GITHUB_TOKEN if set, else ask for one on the terminal.

    An empty answer (or EOF on stdin) means there is no token.
    """
    token = get_settings().github_token
    if token and token.strip():
        return token.strip()
    try:
        token = (prompt or input)(TOKEN_PROMPT)
    except EOFError:
        token = ""
    return token.strip() or None
