"""Tests for page envelopes and the X-Total header."""

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError

from gitlab_client_core.errors.exceptions import ValidationError
from gitlab_client_core.models import Page, Pipeline
from gitlab_client_core.pagination import build_page, total_count

from conftest import make_pipeline


@pytest.mark.unit
@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        ({"X-Total": "17"}, 17),
        ({"x-total": " 3 "}, 3),
        ({"X-Total": "0"}, 0),
        ({}, 0),
        ({"X-Total": ""}, 0),
        ({"X-Total": "many"}, 0),
        ({"X-Total": "-4"}, 0),
    ],
)
def test_total_count(headers, expected):
    assert total_count(httpx.Headers(headers)) == expected


@pytest.mark.unit
def test_total_count_custom_default():
    assert total_count(httpx.Headers({}), default=5) == 5


@pytest.mark.unit
def test_count_is_server_total_not_page_length():
    raw = [make_pipeline(i) for i in range(1, 6)]

    page = build_page(Pipeline, raw, 17)

    assert page.count == 17
    assert len(page.items) == 5
    assert [p.id for p in page.items] == [1, 2, 3, 4, 5]


@pytest.mark.unit
def test_empty_page():
    page = build_page(Pipeline, [], 0)

    assert page.count == 0
    assert page.items == []


@pytest.mark.unit
def test_invalid_item_fails_the_whole_page():
    raw = [make_pipeline(1), {**make_pipeline(2), "status": "bogus"}]

    with pytest.raises(ValidationError) as exc_info:
        build_page(Pipeline, raw, 2, "pipelines of project 'group/app'")

    assert exc_info.value.errors[0].path == "1.status"


@pytest.mark.unit
def test_page_count_cannot_be_negative():
    with pytest.raises(PydanticValidationError):
        Page[Pipeline](count=-1, items=[])
