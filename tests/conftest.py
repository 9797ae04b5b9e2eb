import json
from types import SimpleNamespace

import pytest
import requests

from todoist_api import Todoist

API_URL = "https://api.todoist.com/api/v1/"


def make_response(payload=None, status=200):
    """Build a real requests.Response carrying *payload* as JSON."""
    response = requests.Response()
    response.status_code = status
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    return response


@pytest.fixture
def session(mocker):
    return mocker.Mock(spec=requests.Session)


@pytest.fixture
def todoist(session):
    return Todoist("test-api-key", session=session)


@pytest.fixture
def respond(session):
    """Make the mocked transport answer the next request with *payload*."""

    def _respond(payload=None, status=200):
        session.request.return_value = make_response(payload, status)

    return _respond


@pytest.fixture
def sent(session):
    """Return the single request the client sent as (method, url, headers, body)."""

    def _sent():
        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        data = kwargs.get("data")
        return SimpleNamespace(
            method=args[0],
            url=args[1],
            headers=kwargs.get("headers"),
            data=data,
            body=None if data is None else json.loads(data),
            timeout=kwargs.get("timeout"),
        )

    return _sent


@pytest.fixture
def project_payload():
    return {
        "id": "123",
        "can_assign_tasks": True,
        "child_order": 1,
        "color": "blue",
        "creator_uid": "user123",
        "created_at": "2024-01-01T00:00:00Z",
        "is_archived": False,
        "is_deleted": False,
        "is_favorite": True,
        "is_frozen": False,
        "name": "Test Project",
        "updated_at": "2024-01-01T00:00:00Z",
        "view_style": "list",
        "default_order": 0,
        "description": "Test description",
        "public_key": "key123",
        "role": "owner",
        "parent_id": None,
        "inbox_project": False,
        "is_collapsed": False,
        "is_shared": False,
    }


@pytest.fixture
def section_payload():
    return {
        "id": "section789",
        "name": "Specific Section",
        "user_id": "user456",
        "project_id": "project123",
        "section_order": 2,
        "is_collapsed": True,
        "added_at": "2024-01-15T00:00:00Z",
        "updated_at": "2024-01-20T00:00:00Z",
        "archived_at": None,
        "is_archived": False,
        "is_deleted": False,
    }


@pytest.fixture
def task_payload():
    return {
        "id": "task123",
        "content": "Buy groceries",
        "description": "",
        "project_id": "project123",
        "section_id": None,
        "parent_id": None,
        "order": 1,
        "priority": 1,
        "labels": [],
        "assignee_id": None,
        "assigner_id": None,
        "comment_count": 0,
        "is_completed": False,
        "created_at": "2024-01-01T00:00:00Z",
        "creator_id": "user123",
        "url": "https://todoist.com/showTask?id=task123",
    }
