"""Tests for merge request endpoints."""

import pytest

from gitlab_client_core.errors.exceptions import ClientError, ConflictError, ValidationError
from gitlab_client_core.models import DiffPosition, MergeRequestApprovals
from gitlab_client_core.testing import error_response, json_response

from conftest import make_commit, make_merge_request, make_user

MR = "/projects/group/app/merge_requests/5"


def approvals_body(approved=True, approvers=()):
    return {
        "id": 2005,
        "iid": 5,
        "project_id": 7,
        "approved": approved,
        "approvals_required": 1,
        "approvals_left": 0 if approved else 1,
        "approved_by": [{"user": make_user(i, name)} for i, name in approvers],
    }


def discussion_body(body):
    note = {"id": 1, "body": body, "author": make_user(), "created_at": "2024-01-03T00:00:00Z"}
    return {"id": "d" * 40, "individual_note": False, "notes": [note]}


class TestLifecycle:
    """Test listing, creating, and updating merge requests."""

    @pytest.mark.unit
    async def test_list_merge_requests(self, gitlab, client):
        gitlab.add("GET", "/projects/group/app/merge_requests", json_response([make_merge_request()], total=8))

        page = await client.merge_requests.list_merge_requests("group/app", state="opened", target_branch="main")

        assert page.count == 8
        assert page.items[0].source_branch == "feature/login"
        params = gitlab.requests[0].url.params
        assert (params["state"], params["target_branch"]) == ("opened", "main")

    @pytest.mark.unit
    async def test_create_merge_request(self, gitlab, client):
        gitlab.add("POST", "/projects/group/app/merge_requests", json_response(make_merge_request(), 201))

        mr = await client.merge_requests.create_merge_request("group/app", "Add login", "feature/login", "main")

        assert mr.iid == 5
        assert gitlab.body(gitlab.requests[0]) == {
            "title": "Add login",
            "source_branch": "feature/login",
            "target_branch": "main",
        }

    @pytest.mark.unit
    async def test_update_merge_request(self, gitlab, client):
        gitlab.add("PUT", MR, json_response({**make_merge_request(), "title": "Draft: Add login", "draft": True}))

        mr = await client.merge_requests.update_merge_request(
            "group/app", 5, title="Draft: Add login", reviewer_ids=[2], labels=["backend", "auth"]
        )

        assert mr.draft is True
        assert gitlab.body(gitlab.requests[0]) == {
            "title": "Draft: Add login",
            "reviewer_ids": [2],
            "labels": "backend,auth",
        }

    @pytest.mark.unit
    async def test_invalid_merge_request_lists_every_field(self, gitlab, client):
        broken = {**make_merge_request(), "iid": "five", "source_branch": None}
        gitlab.add("GET", "/projects/7/merge_requests", json_response([broken]))

        with pytest.raises(ValidationError) as exc_info:
            await client.merge_requests.list_merge_requests(7)

        assert {error.path for error in exc_info.value.errors} == {"0.iid", "0.source_branch"}
        assert "2 invalid fields" in str(exc_info.value)


class TestApprovals:
    """Test approving and unapproving."""

    @pytest.mark.unit
    async def test_approve_returns_approval_state(self, gitlab, client):
        gitlab.add("POST", f"{MR}/approve", json_response(approvals_body(approvers=[(2, "bob")]), 201))

        approvals = await client.merge_requests.approve_merge_request("group/app", 5)

        assert isinstance(approvals, MergeRequestApprovals)
        assert approvals.approved is True
        assert approvals.approved_by[0].user.username == "bob"
        assert gitlab.requests[0].content == b""

    @pytest.mark.unit
    async def test_approve_with_stale_sha_conflicts(self, gitlab, client):
        gitlab.add("POST", f"{MR}/approve", error_response(409, "SHA does not match HEAD of source branch"))

        with pytest.raises(ConflictError) as exc_info:
            await client.merge_requests.approve_merge_request("group/app", 5, sha="b" * 40)

        assert gitlab.body(gitlab.requests[0]) == {"sha": "b" * 40}
        assert "merge request !5 in project 'group/app'" in str(exc_info.value)

    @pytest.mark.unit
    async def test_unapprove(self, gitlab, client):
        gitlab.add("POST", f"{MR}/unapprove", json_response(approvals_body(approved=False), 201))

        approvals = await client.merge_requests.unapprove_merge_request("group/app", 5)

        assert approvals.approvals_left == 1
        assert approvals.approved_by == []


class TestMerging:
    """Test merge, auto-merge, and rebase."""

    @pytest.mark.unit
    async def test_merge(self, gitlab, client):
        gitlab.add("PUT", f"{MR}/merge", json_response({**make_merge_request(), "state": "merged"}))

        mr = await client.merge_requests.merge_merge_request("group/app", 5, squash=True)

        assert mr.state == "merged"
        assert gitlab.body(gitlab.requests[0]) == {"squash": True}

    @pytest.mark.unit
    async def test_merge_not_mergeable(self, gitlab, client):
        gitlab.add("PUT", f"{MR}/merge", error_response(405, "405 Method Not Allowed"))

        with pytest.raises(ClientError) as exc_info:
            await client.merge_requests.merge_merge_request("group/app", 5)

        assert exc_info.value.status_code == 405

    @pytest.mark.unit
    async def test_set_auto_merge(self, gitlab, client):
        gitlab.add("PUT", f"{MR}/merge", json_response({**make_merge_request(), "merge_when_pipeline_succeeds": True}))

        mr = await client.merge_requests.set_auto_merge("group/app", 5, should_remove_source_branch=True)

        assert mr.merge_when_pipeline_succeeds is True
        assert gitlab.body(gitlab.requests[0]) == {
            "should_remove_source_branch": True,
            "merge_when_pipeline_succeeds": True,
        }

    @pytest.mark.unit
    async def test_cancel_auto_merge(self, gitlab, client):
        gitlab.add(
            "POST",
            f"{MR}/cancel_merge_when_pipeline_succeeds",
            json_response({**make_merge_request(), "merge_when_pipeline_succeeds": False}, 201),
        )

        mr = await client.merge_requests.cancel_auto_merge("group/app", 5)

        assert mr.merge_when_pipeline_succeeds is False

    @pytest.mark.unit
    async def test_rebase(self, gitlab, client):
        gitlab.add("PUT", f"{MR}/rebase", json_response({"rebase_in_progress": True}, 202))

        status = await client.merge_requests.rebase_merge_request("group/app", 5, skip_ci=True)

        assert status.rebase_in_progress is True
        assert gitlab.body(gitlab.requests[0]) == {"skip_ci": True}


class TestDiffsAndCommits:
    """Test changes and commits of a merge request."""

    @pytest.mark.unit
    async def test_get_changes(self, gitlab, client):
        change = {
            "old_path": "app.py",
            "new_path": "app.py",
            "new_file": False,
            "renamed_file": False,
            "deleted_file": False,
            "diff": "@@ -1 +1 @@\n-old\n+new\n",
        }
        gitlab.add("GET", f"{MR}/changes", json_response({**make_merge_request(), "changes": [change], "changes_count": "1"}))

        result = await client.merge_requests.get_merge_request_changes("group/app", 5)

        assert result.changes[0].diff.endswith("+new\n")
        assert result.changes_count == "1"

    @pytest.mark.unit
    async def test_get_commits(self, gitlab, client):
        gitlab.add("GET", f"{MR}/commits", json_response([make_commit("b" * 40), make_commit("c" * 40)], total=2))

        page = await client.merge_requests.get_merge_request_commits("group/app", 5)

        assert [commit.short_id for commit in page.items] == ["bbbbbbbb", "cccccccc"]


class TestNotesAndDiscussions:
    """Test notes and discussion threads on merge requests."""

    @pytest.mark.unit
    async def test_create_and_update_note(self, gitlab, client):
        note = {"id": 9, "body": "LGTM", "author": make_user(), "created_at": "2024-01-03T00:00:00Z"}
        gitlab.add("POST", f"{MR}/notes", json_response(note, 201))
        gitlab.add("PUT", f"{MR}/notes/9", json_response({**note, "body": "LGTM!"}))

        created = await client.merge_requests.create_merge_request_note("group/app", 5, "LGTM", internal=True)
        updated = await client.merge_requests.update_merge_request_note("group/app", 5, created.id, "LGTM!")

        assert updated.body == "LGTM!"
        assert gitlab.body(gitlab.requests[0]) == {"body": "LGTM", "internal": True}
        assert gitlab.body(gitlab.requests[1]) == {"body": "LGTM!"}

    @pytest.mark.unit
    async def test_list_notes(self, gitlab, client):
        note = {"id": 9, "body": "LGTM", "author": make_user(), "created_at": "2024-01-03T00:00:00Z"}
        gitlab.add("GET", f"{MR}/notes", json_response([note], total=1))

        page = await client.merge_requests.list_merge_request_notes("group/app", 5, sort="desc")

        assert page.items[0].system is False

    @pytest.mark.unit
    async def test_discussion_without_position(self, gitlab, client):
        gitlab.add("POST", f"{MR}/discussions", json_response(discussion_body("Question"), 201))

        discussion = await client.merge_requests.create_merge_request_discussion("group/app", 5, "Question")

        assert discussion.notes[0].body == "Question"
        assert gitlab.body(gitlab.requests[0]) == {"body": "Question"}

    @pytest.mark.unit
    async def test_discussion_on_diff_line(self, gitlab, client):
        gitlab.add("POST", f"{MR}/discussions", json_response(discussion_body("Typo here"), 201))
        position = DiffPosition(
            base_sha="a" * 40,
            start_sha="b" * 40,
            head_sha="c" * 40,
            position_type="text",
            new_path="app.py",
            new_line=12,
        )

        await client.merge_requests.create_merge_request_discussion("group/app", 5, "Typo here", position=position)

        assert gitlab.body(gitlab.requests[0]) == {
            "body": "Typo here",
            "position": {
                "base_sha": "a" * 40,
                "start_sha": "b" * 40,
                "head_sha": "c" * 40,
                "position_type": "text",
                "new_path": "app.py",
                "new_line": 12,
            },
        }

    @pytest.mark.unit
    async def test_list_discussions(self, gitlab, client):
        gitlab.add("GET", f"{MR}/discussions", json_response([discussion_body("One")], total=1))

        page = await client.merge_requests.list_merge_request_discussions("group/app", 5)

        assert page.count == 1
        assert page.items[0].individual_note is False
