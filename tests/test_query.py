from datetime import date, datetime, timezone
from typing import Annotated, Dict, List, Optional

import httpx
import pytest
from pydantic import BaseModel

from backlog_sdk.core.errors import InvalidURLError, OptionsEncodeError
from backlog_sdk.core.query import Query, add_options, append_query, encode_options
from backlog_sdk.models import Order, Sort
from backlog_sdk.options import (
    GetIssuesOptions,
    GetProjectsOptions,
    GetUserActivitiesOptions,
    GetWikisOptions,
)


def test_none_options_encode_to_nothing():
    assert encode_options(None) == []
    assert add_options("api/v2/issues", None) == "api/v2/issues"


def test_defaults_encode_to_nothing():
    assert encode_options(GetIssuesOptions()) == []
    assert add_options("api/v2/issues", GetIssuesOptions()) == "api/v2/issues"


def test_sequences_repeat_in_order():
    opts = GetUserActivitiesOptions(activity_type_ids=[3, 1, 2], count=5)
    assert encode_options(opts) == [
        ("activityTypeId[]", "3"),
        ("activityTypeId[]", "1"),
        ("activityTypeId[]", "2"),
        ("count", "5"),
    ]


def test_present_zero_values_are_sent():
    opts = GetIssuesOptions(attachment=False, offset=0)
    assert encode_options(opts) == [("attachment", "false"), ("offset", "0")]


def test_enums_use_wire_text():
    opts = GetIssuesOptions(sort=Sort.DUE_DATE, order=Order.DESC)
    assert encode_options(opts) == [("sort", "dueDate"), ("order", "desc")]


def test_unknown_sort_is_omitted():
    assert Sort("bogus") is Sort.NONE
    assert encode_options(GetIssuesOptions(sort=Sort("bogus"))) == []


def test_dates_render_as_days():
    opts = GetIssuesOptions(created_since=date(2024, 1, 31), created_until="2024-02-29")
    assert encode_options(opts) == [
        ("createdSince", "2024-01-31"),
        ("createdUntil", "2024-02-29"),
    ]


def test_not_omitempty_flags_sent_when_set():
    assert encode_options(GetProjectsOptions(archived=False, all=True)) == [
        ("archived", "false"),
        ("all", "true"),
    ]


def test_required_wiki_project():
    opts = GetWikisOptions(project_id_or_key="SRE", keyword="deploy")
    assert encode_options(opts) == [("projectIdOrKey", "SRE"), ("keyword", "deploy")]


def test_add_options_keeps_existing_query():
    url = add_options("api/v2/issues?a=1", GetIssuesOptions(count=5))
    assert httpx.URL(url).params.multi_items() == [("a", "1"), ("count", "5")]


def test_brackets_survive_url_encoding():
    url = add_options(
        "api/v2/issues", GetIssuesOptions(project_ids=[1, 2], status_ids=[4])
    )
    parsed = httpx.URL(url)
    assert parsed.path == "api/v2/issues"
    assert parsed.params.get_list("projectId[]") == ["1", "2"]
    assert parsed.params.get_list("statusId[]") == ["4"]


def test_append_query():
    url = append_query("api/v2/issues", [("customField_1", "x y")])
    assert httpx.URL(url).params.multi_items() == [("customField_1", "x y")]
    assert append_query("api/v2/issues", []) == "api/v2/issues"


def test_append_query_invalid_url():
    with pytest.raises(InvalidURLError):
        append_query("api/v2/issues\n", [("a", "b")])


def test_untagged_field_uses_its_name():
    class Opts(BaseModel):
        plain: Optional[int] = None
        label: str = ""

    assert encode_options(Opts()) == [("label", "")]
    assert encode_options(Opts(plain=7, label="x")) == [("plain", "7"), ("label", "x")]


def test_omitempty_skips_zero_on_required_fields():
    class Opts(BaseModel):
        n: Annotated[int, Query("n")] = 0
        tags: Annotated[List[str], Query("tag[]")] = []
        kept: Annotated[List[str], Query("kept[]", omitempty=False)] = []

    assert encode_options(Opts()) == []
    assert encode_options(Opts(n=2, tags=["a"])) == [("n", "2"), ("tag[]", "a")]


def test_datetime_values_render_rfc3339():
    class Opts(BaseModel):
        since: Annotated[Optional[datetime], Query("since")] = None

    opts = Opts(since=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc))
    assert encode_options(opts) == [("since", "2024-05-01T09:30:00Z")]


def test_malformed_tag():
    class Opts(BaseModel):
        x: Annotated[Optional[int], Query("")] = None

    with pytest.raises(OptionsEncodeError):
        encode_options(Opts(x=1))


def test_unsupported_value():
    class Opts(BaseModel):
        mapping: Annotated[Optional[Dict[str, int]], Query("m")] = None

    with pytest.raises(OptionsEncodeError):
        encode_options(Opts(mapping={"a": 1}))


def test_non_model_options():
    with pytest.raises(OptionsEncodeError):
        encode_options({"count": 1})
