"""
Tests for the pagination engine — pure functions over canned bodies.

Test plan:
- Explicit data key: items in order, missing/non-list key → empty page
- Scan (no key): zero arrays → empty, one array → that array, several →
  first in iteration order with a warning
- links.next: absent links, null next, empty string → None
- data_key_for_path: every endpoint shape, query strings ignored
"""

import logging

import pytest

from hiero_enterprise.mirror.pagination import (
    PAGE_DATA_KEYS,
    QueryKind,
    convert_page,
    data_key_for_path,
    extract_next_link,
)


def identity(item: object) -> object:
    return item


class TestExplicitDataKey:
    def test_items_in_order(self) -> None:
        raw = {"nfts": [{"s": 3}, {"s": 1}, {"s": 2}], "links": {"next": None}}
        page = convert_page(raw, lambda item: item["s"], "nfts")
        assert page.data == [3, 1, 2]
        assert len(page) == 3

    def test_other_arrays_ignored(self) -> None:
        raw = {"warnings": ["a"], "tokens": [1, 2], "links": {}}
        assert convert_page(raw, identity, "tokens").data == [1, 2]

    def test_missing_key_is_empty(self) -> None:
        assert convert_page({"links": {"next": None}}, identity, "messages").data == []

    def test_non_list_value_is_empty(self) -> None:
        assert convert_page({"transactions": {"x": 1}}, identity, "transactions").data == []

    def test_every_query_kind_has_a_key(self) -> None:
        assert set(PAGE_DATA_KEYS) == set(QueryKind)


class TestScan:
    def test_one_array(self) -> None:
        raw = {"messages": [1, 2, 3], "links": {"next": "/api/v1/topics/0.0.1/messages?limit=3"}}
        page = convert_page(raw, identity)
        assert page.data == [1, 2, 3]

    def test_zero_arrays(self) -> None:
        page = convert_page({"links": {"next": None}, "timestamp": "1"}, identity)
        assert page.data == []
        assert page.links.next is None

    def test_links_never_chosen(self) -> None:
        assert convert_page({"links": [1, 2]}, identity).data == []

    def test_several_arrays_take_first_and_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        raw = {"first": [1], "second": [2, 2], "links": {}}
        with caplog.at_level(logging.WARNING, logger="hiero_enterprise.mirror.pagination"):
            page = convert_page(raw, identity)
        assert page.data == [1]
        assert "first" in caplog.text
        assert "second" in caplog.text

    def test_converter_applied(self) -> None:
        page = convert_page({"nfts": [1, 2]}, lambda n: n * 10)
        assert page.data == [10, 20]


class TestNextLink:
    def test_present(self) -> None:
        link = "/api/v1/accounts/0.0.2/nfts?limit=25&serialnumber=lt:10"
        page = convert_page({"nfts": [], "links": {"next": link}}, identity, "nfts")
        assert page.links.next == link
        assert page.has_next is True

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"links": None},
            {"links": "bogus"},
            {"links": {}},
            {"links": {"next": None}},
            {"links": {"next": ""}},
        ],
    )
    def test_absent(self, raw: dict) -> None:
        assert extract_next_link(raw) is None
        assert convert_page(raw, identity, "nfts").has_next is False


class TestDataKeyForPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/api/v1/accounts/0.0.2/nfts?limit=25&serialnumber=lt:10", "nfts"),
            ("/api/v1/tokens/0.0.5/nfts?limit=25", "nfts"),
            ("/api/v1/topics/0.0.6/messages?sequencenumber=gt:25", "messages"),
            ("/api/v1/transactions?account.id=0.0.2&timestamp=lt:1700000000.0", "transactions"),
            ("/api/v1/tokens?account.id=0.0.2&token.id=gt:0.0.5", "tokens"),
            ("/api/v1/tokens/", "tokens"),
        ],
    )
    def test_known_paths(self, path: str, expected: str) -> None:
        assert data_key_for_path(path) == expected

    @pytest.mark.parametrize(
        "path",
        ["/api/v1/network/nodes?limit=25", "/api/v1/accounts/0.0.2", "/api/v1/schedules"],
    )
    def test_unknown_paths(self, path: str) -> None:
        assert data_key_for_path(path) is None
