"""Pytest shared fixtures: an in-memory Okta org served through requests.get."""
import json
import pathlib
import re
import sys
from urllib.parse import parse_qs, urlencode, urlsplit

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from okta_rbac.core.okta import OktaClient
from okta_rbac.core.role_manager import OktaRoleManager

ORG_URL = "https://dev-000000.okta.com"
API_TOKEN = "test-api-token"

_SEARCH_RE = re.compile(r'^profile\.(login|name) eq "((?:[^"\\]|\\.)*)"$')


class StubResponse:
    """Just enough of requests.Response for the Okta client."""

    def __init__(self, payload, status_code: int = 200, url: str = "", links=None, headers=None):
        self._payload = payload
        self.status_code = status_code
        self.url = url
        self.links = links or {}
        self.headers = headers or {}
        self.text = json.dumps(payload)

    def json(self):
        return self._payload


def make_user(user_id: str, login: str, status: str = "ACTIVE") -> dict:
    return {"id": user_id, "status": status, "profile": {"login": login, "email": login}}


def make_group(group_id: str, name: str) -> dict:
    return {"id": group_id, "type": "OKTA_GROUP", "profile": {"name": name, "description": ""}}


class FakeOkta:
    """In-memory Okta org answering the endpoints used by the role manager."""

    def __init__(self, base_url: str = ORG_URL):
        self.base_url = base_url
        self.users: list[dict] = []
        self.groups: list[dict] = []
        self.members: dict[str, list[str]] = {}
        self.requests: list[dict] = []
        self.failures: dict[str, StubResponse] = {}

    def add_user(self, user_id: str, login: str, status: str = "ACTIVE") -> dict:
        user = make_user(user_id, login, status)
        self.users.append(user)
        return user

    def add_group(self, group_id: str, name: str, members=()) -> dict:
        group = make_group(group_id, name)
        self.groups.append(group)
        self.members[group_id] = list(members)
        return group

    def fail(self, path: str, status_code: int, payload: dict, headers=None) -> None:
        """Make every request to path answer with an error."""
        self.failures[path] = StubResponse(payload, status_code, url=f"{self.base_url}{path}", headers=headers)

    def get(self, url, params=None, headers=None, timeout=None, **kwargs):
        parts = urlsplit(url)
        if f"{parts.scheme}://{parts.netloc}" != self.base_url:
            raise RuntimeError(f"Unexpected network access in tests: {url}")
        query = {k: v[0] for k, v in parse_qs(parts.query).items()}
        query.update({k: str(v) for k, v in (params or {}).items()})
        self.requests.append({"path": parts.path, "query": query, "headers": dict(headers or {}), "timeout": timeout})

        if parts.path in self.failures:
            return self.failures[parts.path]

        items = self._route(parts.path, query)
        if items is None:
            return StubResponse(
                {"errorCode": "E0000007", "errorSummary": f"Not found: Resource not found: {parts.path}"},
                404,
                url=url,
            )
        return self._paginate(parts.path, query, items)

    def _route(self, path: str, query: dict):
        segments = path.strip("/").split("/")[2:]  # drop api/v1
        if segments == ["users"]:
            return self._search(self.users, "login", query.get("search", ""))
        if segments == ["groups"]:
            return self._search(self.groups, "name", query.get("search", ""))
        if len(segments) == 3 and segments[0] == "users" and segments[2] == "groups":
            user_id = segments[1]
            if not any(u["id"] == user_id for u in self.users):
                return None
            return [g for g in self.groups if user_id in self.members.get(g["id"], [])]
        if len(segments) == 3 and segments[0] == "groups" and segments[2] == "users":
            group_id = segments[1]
            if group_id not in self.members:
                return None
            by_id = {u["id"]: u for u in self.users}
            return [by_id[uid] for uid in self.members[group_id]]
        return None

    @staticmethod
    def _search(records: list[dict], field: str, expr: str) -> list[dict]:
        match = _SEARCH_RE.match(expr)
        if not match or match.group(1) != field:
            return list(records)
        value = re.sub(r"\\(.)", r"\1", match.group(2))
        return [r for r in records if r["profile"].get(field) == value]

    def _paginate(self, path: str, query: dict, items: list) -> StubResponse:
        limit = int(query.get("limit", len(items) or 1))
        start = int(query.get("after", 0))
        page = items[start:start + limit]
        url = f"{self.base_url}{path}?{urlencode(query)}"
        links = {}
        if start + limit < len(items):
            nxt = dict(query, after=str(start + limit))
            links["next"] = {"url": f"{self.base_url}{path}?{urlencode(nxt)}", "rel": "next"}
        return StubResponse(page, 200, url=url, links=links)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from reaching a real Okta org.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _stub_get(url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP GET in unit test: {url}")

    monkeypatch.setattr(requests, "get", _stub_get)


@pytest.fixture()
def fake_okta(monkeypatch):
    """Empty in-memory Okta org wired into requests.get."""
    org = FakeOkta()
    monkeypatch.setattr(requests, "get", org.get)
    return org


@pytest.fixture()
def hierarchy(fake_okta):
    """Current role inheritance tree:

              Everyone     Admin
            /          \\  /
    alice@test.com    bob@test.com
    """
    fake_okta.add_user("00u-alice", "alice@test.com")
    fake_okta.add_user("00u-bob", "bob@test.com")
    fake_okta.add_group("00g-everyone", "Everyone", members=["00u-alice", "00u-bob"])
    fake_okta.add_group("00g-admin", "Admin", members=["00u-bob"])
    return fake_okta


@pytest.fixture()
def okta_client():
    return OktaClient(ORG_URL, API_TOKEN)


@pytest.fixture()
def role_manager(okta_client):
    return OktaRoleManager(okta_client)


# ─────────────────────────────────────────────────────────────────────────────
# Pytest Configuration
# ─────────────────────────────────────────────────────────────────────────────
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (requires a live Okta org)"
    )
