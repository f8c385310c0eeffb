"""GitHub REST API client using httpx, with a rate-limit governor."""

import logging
import math
import sys
import time

import httpx

from .models import ApiResponse
from .settings import get_settings

logging.getLogger("httpx").setLevel(logging.ERROR)
logging.getLogger("httpcore").setLevel(logging.ERROR)

API_BASE = "https://api.github.com"
ACCEPT = "application/vnd.github.v3+json"
USER_AGENT = "GitHub-Repos-Dashboard"
REQUEST_TIMEOUT = 30.0

# Added to the reset wait to absorb clock skew between us and GitHub
RATE_LIMIT_PADDING_SEC = 1.0


class RemoteError(Exception):
    """Non-2xx, non-404 response from GitHub."""

    def __init__(self, status: int, status_text: str = ""):
        self.status = status
        self.status_text = status_text
        super().__init__(f"API request failed: {status} {status_text}".rstrip())


def _log(msg: str):
    sys.stderr.write(f"[github] {msg}\n")
    sys.stderr.flush()


def _header_int(resp: httpx.Response, name: str) -> int:
    val = resp.headers.get(name)
    if val is None:
        return 0
    try:
        return int(val)
    except ValueError:
        return 0


def rate_limit_wait(resp: httpx.Response, now: float | None = None) -> float | None:
    """Seconds to wait before retrying, or None if the response isn't throttled.

    A response counts as throttled when it is a 403 with no requests
    remaining; missing or malformed headers read as 0.
    """
    if resp.status_code != 403 or _header_int(resp, "x-ratelimit-remaining") != 0:
        return None
    reset = _header_int(resp, "x-ratelimit-reset")
    now = time.time() if now is None else now
    return max(0.0, reset - now + RATE_LIMIT_PADDING_SEC)


class GitHubClient:
    """Thin client for the GitHub REST endpoints the snapshot needs.

    Every request carries the token, the v3 accept header and a fixed
    user agent. Throttled responses are waited out and retried without
    limit; 404s are returned to the caller; other failures raise
    RemoteError.
    """

    def __init__(self, token: str, api_base: str | None = None, user_agent: str = USER_AGENT):
        self.api_base = (api_base or get_settings().github_api_url or API_BASE).rstrip("/")
        self._client = httpx.Client(
            headers={
                "Authorization": f"token {token}",
                "Accept": ACCEPT,
                "User-Agent": user_agent,
            },
            timeout=REQUEST_TIMEOUT,
        )
        self.rate_limit_hits = 0

    def _url(self, endpoint: str) -> str:
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self.api_base}{ep}"

    def request(self, endpoint: str, params: dict | None = None, method: str = "GET") -> httpx.Response:
        """Make one logical request, waiting out rate limits as needed."""
        url = self._url(endpoint)
        while True:
            resp = self._client.request(method, url, params=params)

            wait = rate_limit_wait(resp)
            if wait is not None:
                self.rate_limit_hits += 1
                _log(f"Rate limit exceeded. Waiting {math.ceil(wait)} seconds...")
                time.sleep(wait)
                continue

            if 200 <= resp.status_code < 300 or resp.status_code == 404:
                return resp

            raise RemoteError(resp.status_code, resp.reason_phrase)

    def get(self, endpoint: str, params: dict | None = None) -> ApiResponse:
        """GET an endpoint and decode its JSON body (None on 404)."""
        resp = self.request(endpoint, params=params)
        if resp.status_code == 404:
            return ApiResponse(status=404, body=None)
        return ApiResponse(status=resp.status_code, body=resp.json() if resp.content else None)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
