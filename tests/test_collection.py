"""Tests for link filtering, sorting, and collection statistics."""

import time

import pytest

from kakaolink.collection import LinkCollection, filter_links, sort_links
from kakaolink.models.link import ExtractedLink, SortDirection, SortField
from kakaolink.models.view import ViewState


def _link(link_id: str, url: str, user: str, date: str, domain: str, message: str = "") -> ExtractedLink:
    return ExtractedLink(id=link_id, url=url, message=message or f"msg {url}", user=user, date=date, domain=domain)


# -- filter_links tests --


def test_filter_empty_returns_everything_in_order(sample_links):
    result = filter_links(sample_links, "", "")
    assert result == sample_links
    assert result is not sample_links


def test_filter_search_is_case_insensitive(sample_links):
    result = filter_links(sample_links, search="B.ORG")
    assert [link.id for link in result] == ["1-0"]


def test_filter_search_matches_message(sample_links):
    result = filter_links(sample_links, search="look at")
    assert [link.id for link in result] == ["1-0"]


def test_filter_search_matches_domain():
    links = [_link("0-0", "https://t.co/abc", "Alice", "d", "Unknown")]
    assert filter_links(links, search="unknown") == links


def test_filter_search_does_not_match_user(sample_links):
    assert filter_links(sample_links, search="carl") == []


def test_filter_user_is_exact_and_case_sensitive(sample_links):
    assert [link.id for link in filter_links(sample_links, user="Bob")] == ["1-0"]
    assert filter_links(sample_links, user="bob") == []
    assert filter_links(sample_links, user="Bo") == []


def test_filter_combines_search_and_user(sample_links):
    assert [link.id for link in filter_links(sample_links, search="a.com", user="Carl")] == ["2-0"]
    assert filter_links(sample_links, search="b.org", user="Carl") == []


def test_filter_result_is_subset(sample_links):
    for search in ("", "a", "com", "zzz"):
        for user in ("", "Alice", "Nobody"):
            result = filter_links(sample_links, search, user)
            assert all(link in sample_links for link in result)


def test_filter_does_not_mutate_input(sample_links):
    before = list(sample_links)
    filter_links(sample_links, search="a.com")
    assert sample_links == before


# -- sort_links tests --


def test_sort_by_date_ascending(sample_links):
    result = sort_links(sample_links, SortField.DATE, SortDirection.ASC)
    assert [link.id for link in result] == ["1-0", "0-0", "2-0"]


def test_sort_by_date_descending(sample_links):
    result = sort_links(sample_links, SortField.DATE, SortDirection.DESC)
    assert [link.id for link in result] == ["2-0", "0-0", "1-0"]


def test_sort_by_date_compares_timestamps_not_strings():
    """'2024-01-09 9:00' sorts before '2024-01-09 10:00' even though it is larger as a string."""
    links = [
        _link("0-0", "https://a.com", "A", "2024-01-09 9:00", "a.com"),
        _link("1-0", "https://b.com", "B", "2024-01-09 10:00", "b.com"),
    ]
    result = sort_links(links, SortField.DATE, SortDirection.ASC)
    assert [link.id for link in result] == ["0-0", "1-0"]


def test_sort_by_date_falls_back_to_string_comparison():
    links = [
        _link("0-0", "https://a.com", "A", "sometime", "a.com"),
        _link("1-0", "https://b.com", "B", "later", "b.com"),
    ]
    result = sort_links(links, SortField.DATE, SortDirection.ASC)
    assert [link.date for link in result] == ["later", "sometime"]


@pytest.mark.parametrize(
    ("field", "expected"),
    [
        (SortField.USER, ["0-0", "1-0", "2-0"]),
        (SortField.DOMAIN, ["0-0", "2-0", "1-0"]),
        (SortField.URL, ["2-0", "0-0", "1-0"]),
    ],
)
def test_sort_by_string_fields(sample_links, field, expected):
    result = sort_links(sample_links, field, SortDirection.ASC)
    assert [link.id for link in result] == expected


def test_sort_accepts_plain_strings(sample_links):
    result = sort_links(sample_links, "user", "desc")
    assert [link.user for link in result] == ["Carl", "Bob", "Alice"]


def test_sort_descending_reverses_ascending(sample_links):
    for field in SortField:
        ascending = sort_links(sample_links, field, SortDirection.ASC)
        descending = sort_links(sample_links, field, SortDirection.DESC)
        if field is SortField.DOMAIN:
            continue  # Two links share a.com, tie order is unspecified
        assert descending == list(reversed(ascending))


def test_sort_does_not_mutate_input(sample_links):
    before = list(sample_links)
    sort_links(sample_links, SortField.URL, SortDirection.ASC)
    assert sample_links == before


def test_sort_empty():
    assert sort_links([], SortField.DATE, SortDirection.ASC) == []


def test_sort_by_date_large_collection():
    """Ten thousand links sharing a few hundred distinct dates."""
    links = [
        _link(f"{i}-0", f"https://a.com/{i}", "Alice", f"2024-01-{i % 28 + 1:02d} {i % 24:02d}:00", "a.com")
        for i in range(10_000)
    ]
    started = time.perf_counter()
    result = sort_links(links, SortField.DATE, SortDirection.DESC)
    elapsed = time.perf_counter() - started

    assert elapsed < 5
    assert len(result) == len(links)
    assert result[0].date == "2024-01-28 23:00"
    assert result[-1].date == "2024-01-01 00:00"


# -- LinkCollection tests --


def test_collection_rejects_duplicate_ids(sample_links):
    with pytest.raises(ValueError, match="unique"):
        LinkCollection([sample_links[0], sample_links[0]])


def test_collection_view_defaults_to_newest_first(sample_links):
    collection = LinkCollection(sample_links)
    assert [link.id for link in collection.view()] == ["2-0", "0-0", "1-0"]


def test_collection_view_applies_filter_then_sort(sample_links):
    collection = LinkCollection(sample_links)
    state = ViewState(search="a.com", sort_field=SortField.URL, sort_direction=SortDirection.ASC)
    assert [link.url for link in collection.view(state)] == ["http://a.com/z", "https://a.com/x"]


def test_collection_users_are_sorted_and_distinct(sample_links):
    collection = LinkCollection(sample_links + [_link("3-0", "https://c.com", "Alice", "d", "c.com")])
    assert collection.users() == ["Alice", "Bob", "Carl"]


def test_collection_stats(sample_links):
    collection = LinkCollection(sample_links)
    stats = collection.stats(ViewState(user="Alice"))
    assert stats.total_links == 3
    assert stats.unique_users == 3
    assert stats.unique_domains == 2
    assert stats.filtered_results == 1


def test_collection_stats_empty():
    stats = LinkCollection().stats()
    assert stats.model_dump() == {
        "total_links": 0,
        "unique_users": 0,
        "unique_domains": 0,
        "filtered_results": 0,
    }


def test_collection_len_and_iter(sample_links):
    collection = LinkCollection(sample_links)
    assert len(collection) == 3
    assert list(collection) == sample_links
