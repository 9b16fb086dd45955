"""Pytest configuration and shared fixtures for gitlab-client-core tests."""

import pytest

from gitlab_client_core.testing import MockGitLab


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear GitLab and test-related environment variables before each test.

    This prevents a developer's real GitLab settings from leaking into
    credential and settings tests.
    """
    import os

    test_prefixes = ("GITLAB_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def gitlab():
    """Route-table fake of the GitLab API."""
    return MockGitLab()


@pytest.fixture
async def client(gitlab):
    async with gitlab.client() as client:
        yield client


def make_user(user_id=1, username="alice"):
    return {
        "id": user_id,
        "username": username,
        "name": username.title(),
        "state": "active",
        "avatar_url": None,
        "web_url": f"https://gitlab.example.com/{username}",
    }


def make_project(project_id=7, path="group/app", default_branch="main"):
    namespace, _, name = path.rpartition("/")
    return {
        "id": project_id,
        "name": name,
        "path": name,
        "path_with_namespace": path,
        "name_with_namespace": path.replace("/", " / "),
        "description": None,
        "default_branch": default_branch,
        "visibility": "private",
        "web_url": f"https://gitlab.example.com/{path}",
        "created_at": "2024-01-01T00:00:00Z",
        "last_activity_at": "2024-06-01T00:00:00Z",
        "namespace": {"id": 3, "name": namespace, "path": namespace, "kind": "group", "full_path": namespace},
    }


def make_issue(iid, project_id=7, title=None):
    return {
        "id": 1000 + iid,
        "iid": iid,
        "project_id": project_id,
        "title": title or f"Issue {iid}",
        "description": None,
        "state": "opened",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "labels": ["bug"],
        "author": make_user(),
        "web_url": f"https://gitlab.example.com/group/app/-/issues/{iid}",
    }


def make_pipeline(pipeline_id, status="success"):
    return {
        "id": pipeline_id,
        "iid": pipeline_id,
        "project_id": 7,
        "status": status,
        "ref": "main",
        "sha": "a" * 40,
        "source": "push",
        "web_url": f"https://gitlab.example.com/group/app/-/pipelines/{pipeline_id}",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:10:00Z",
    }


def make_commit(sha="a" * 40, title="Initial commit"):
    return {
        "id": sha,
        "short_id": sha[:8],
        "title": title,
        "message": title,
        "author_name": "Alice",
        "author_email": "alice@example.com",
        "authored_date": "2024-01-01T00:00:00Z",
        "committer_name": "Alice",
        "committer_email": "alice@example.com",
        "committed_date": "2024-01-01T00:00:00Z",
        "created_at": "2024-01-01T00:00:00Z",
        "parent_ids": [],
        "web_url": f"https://gitlab.example.com/group/app/-/commit/{sha}",
    }


def make_merge_request(iid=5, project_id=7):
    return {
        "id": 2000 + iid,
        "iid": iid,
        "project_id": project_id,
        "title": "Add login",
        "description": "",
        "state": "opened",
        "author": make_user(),
        "source_branch": "feature/login",
        "target_branch": "main",
        "web_url": f"https://gitlab.example.com/group/app/-/merge_requests/{iid}",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
    }
