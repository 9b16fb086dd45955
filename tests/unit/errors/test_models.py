"""Tests for GitLab error payload parsing."""

import pytest
from httpx import Response

from gitlab_client_core.errors.models import ErrorBody


@pytest.mark.unit
def test_parse_string_message():
    response = Response(status_code=404, json={"message": "404 Project Not Found"})

    body = ErrorBody.from_response(response)

    assert body is not None
    assert body.message == "404 Project Not Found"
    assert body.extensions is None
    assert body.to_detail() == "404 Project Not Found"


@pytest.mark.unit
def test_parse_list_message():
    response = Response(status_code=400, json={"message": ["branch is missing", "ref is missing"]})

    body = ErrorBody.from_response(response)

    assert body.to_detail() == "branch is missing; ref is missing"


@pytest.mark.unit
def test_parse_field_error_message():
    """Test flattening of GitLab's per-field validation messages."""
    response = Response(
        status_code=400,
        json={"message": {"name": ["has already been taken"], "path": ["is too short", "is invalid"]}},
    )

    body = ErrorBody.from_response(response)

    assert body.to_detail() == "name: has already been taken; path: is too short, is invalid"


@pytest.mark.unit
def test_parse_oauth_style_error():
    response = Response(
        status_code=401,
        json={"error": "invalid_token", "error_description": "Token was revoked. You have to re-authorize."},
    )

    body = ErrorBody.from_response(response)

    assert body.error == "invalid_token"
    assert body.to_detail() == "invalid_token: Token was revoked. You have to re-authorize."


@pytest.mark.unit
def test_parse_error_only():
    response = Response(status_code=403, json={"error": "insufficient_scope", "scope": "api"})

    body = ErrorBody.from_response(response)

    assert body.to_detail() == "insufficient_scope"
    assert body.extensions == {"scope": "api"}


@pytest.mark.unit
def test_parse_non_json_response():
    """Test that non-JSON responses return None."""
    response = Response(status_code=500, text="Internal Server Error")

    assert ErrorBody.from_response(response) is None


@pytest.mark.unit
def test_parse_empty_response():
    assert ErrorBody.from_response(Response(status_code=500)) is None


@pytest.mark.unit
def test_parse_json_without_known_fields():
    """Test that arbitrary JSON objects are not mistaken for error bodies."""
    response = Response(status_code=500, json={"id": 1, "name": "app"})

    assert ErrorBody.from_response(response) is None


@pytest.mark.unit
def test_parse_json_array():
    response = Response(status_code=400, json=["not", "an", "object"])

    assert ErrorBody.from_response(response) is None


@pytest.mark.unit
def test_empty_message_has_no_detail():
    response = Response(status_code=400, json={"message": ""})

    body = ErrorBody.from_response(response)

    assert body is not None
    assert body.to_detail() is None
