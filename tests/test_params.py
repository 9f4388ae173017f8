"""Tests for query parameter encoding."""

from datetime import datetime, timedelta, timezone

import pytest

from allnewsapi.exceptions import InvalidDateTypeError
from allnewsapi.models import SearchOptions
from allnewsapi.params import encode_params, format_date, format_rfc3339


def test_empty_options_only_send_api_key():
    """Options at their empty values produce only the API key."""
    assert encode_params("k", SearchOptions()) == [("apikey", "k")]
    assert encode_params("k", None) == [("apikey", "k")]


def test_explicitly_empty_fields_are_omitted():
    options = SearchOptions(
        query="",
        lang=[],
        country=[],
        region=[],
        category=[],
        attributes=[],
        publisher=[],
        max_results=0,
        page=0,
        sort_by="",
        format="",
    )
    assert encode_params("k", options) == [("apikey", "k")]


def test_list_fields_joined_in_caller_order():
    options = SearchOptions(
        lang=["en", "fr"],
        country=["us", "gb", "us"],
        region=["europe"],
        category=["technology", "business"],
        attributes=["title", "description"],
        publisher=["BBC News", "Reuters"],
    )
    params = dict(encode_params("k", options))
    assert params["lang"] == "en,fr"
    assert params["country"] == "us,gb,us"
    assert params["region"] == "europe"
    assert params["category"] == "technology,business"
    assert params["attributes"] == "title,description"
    assert params["publisher"] == "BBC News,Reuters"


def test_list_values_keep_their_whitespace():
    params = dict(encode_params("k", SearchOptions(publisher=[" a", "b "])))
    assert params["publisher"] == " a,b "


def test_max_and_page_only_when_positive():
    params = dict(encode_params("k", SearchOptions(max_results=0, page=0)))
    assert "max" not in params
    assert "page" not in params

    params = dict(encode_params("k", SearchOptions(max_results=5, page=-1)))
    assert params["max"] == "5"
    assert "page" not in params

    params = dict(encode_params("k", SearchOptions(page=3)))
    assert params["page"] == "3"


@pytest.mark.parametrize(
    "content, expected",
    [(None, None), (True, "true"), (False, "false")],
)
def test_content_flag_is_tri_state(content, expected):
    params = dict(encode_params("k", SearchOptions(content=content)))
    assert params.get("content") == expected


def test_string_dates_pass_through_unchanged():
    options = SearchOptions(start_date="2024-01-01", end_date="last week")
    params = dict(encode_params("k", options))
    assert params["startDate"] == "2024-01-01"
    assert params["endDate"] == "last week"


def test_datetime_dates_are_rfc3339():
    options = SearchOptions(
        start_date=datetime(2024, 3, 1, 12, 30, 15, 999, tzinfo=timezone.utc),
        end_date=datetime(2024, 3, 2, 8, 0, 0, tzinfo=timezone(timedelta(hours=-5))),
    )
    params = dict(encode_params("k", options))
    assert params["startDate"] == "2024-03-01T12:30:15Z"
    assert params["endDate"] == "2024-03-02T08:00:00-05:00"


def test_naive_datetime_is_treated_as_utc():
    assert format_rfc3339(datetime(2023, 12, 31, 23, 59, 59)) == "2023-12-31T23:59:59Z"


@pytest.mark.parametrize("value", [20240101, 1.5, b"2024-01-01", ["2024-01-01"], True])
def test_other_date_types_are_rejected(value):
    with pytest.raises(InvalidDateTypeError, match="startDate must be string or datetime"):
        encode_params("k", SearchOptions(start_date=value))


def test_invalid_end_date_names_the_field():
    with pytest.raises(InvalidDateTypeError, match="endDate"):
        format_date("endDate", object())


def test_invalid_date_type_is_a_type_error():
    with pytest.raises(TypeError):
        format_date("startDate", 1)


def test_parameters_are_emitted_in_fixed_order():
    options = SearchOptions(
        format="json",
        sort_by="relevance",
        page=2,
        max_results=10,
        publisher=["p"],
        attributes=["title"],
        category=["c"],
        region=["r"],
        country=["us"],
        lang=["en"],
        content=True,
        end_date="2024-02-01",
        start_date="2024-01-01",
        query="bitcoin",
    )
    keys = [key for key, _ in encode_params("k", options)]
    assert keys == [
        "apikey",
        "q",
        "startDate",
        "endDate",
        "content",
        "lang",
        "country",
        "region",
        "category",
        "attributes",
        "publisher",
        "max",
        "page",
        "sortby",
        "format",
    ]
