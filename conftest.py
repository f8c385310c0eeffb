"""Shared fixtures: a GitHubClient whose HTTP layer is a route table of mocks."""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from github_repos_snapshot.client import GitHubClient

API = "https://api.github.com"


def _mock_response(status_code=200, json_body=None, headers=None, reason="OK"):
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    resp.content = json.dumps(json_body).encode() if json_body is not None else b""
    resp.json.return_value = json_body
    resp.text = json.dumps(json_body) if json_body is not None else ""
    resp.headers = headers or {}
    resp.reason_phrase = reason
    return resp


def _not_found():
    return _mock_response(404, {"message": "Not Found"}, reason="Not Found")


@pytest.fixture
def mock_response():
    return _mock_response


@pytest.fixture(autouse=True)
def no_sleep():
    """Patch out time.sleep so rate-limit and politeness waits are instant."""
    with patch("github_repos_snapshot.client.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def client():
    c = GitHubClient("test-token", api_base=API)
    c._client.request = MagicMock()
    yield c
    c.close()


class Routes:
    """Answer requests from a table of ``path -> response``.

    A value may be a response, a list of responses served in turn, or a
    callable taking the query params. Unknown paths get a 404.
    """

    def __init__(self, client, table):
        self.table = dict(table)
        self.calls: list[tuple[str, dict | None]] = []
        client._client.request.side_effect = self._handle

    def _handle(self, method, url, params=None):
        path = url[len(API):]
        self.calls.append((path, params))
        answer = self.table.get(path)
        if answer is None:
            return _not_found()
        if callable(answer) and not isinstance(answer, MagicMock):
            return answer(params)
        if isinstance(answer, list):
            return answer.pop(0) if len(answer) > 1 else answer[0]
        return answer

    def paths(self):
        return [p for p, _ in self.calls]


@pytest.fixture
def routes(client):
    def _install(table):
        return Routes(client, table)

    return _install

