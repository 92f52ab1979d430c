# Tests for display sorting, search and drag-reorder
# Created: 2026-10-18

import pytest

from servicedash.client.sorting import SortOption, filter_links, move_link, sort_links
from servicedash.documents import Link


@pytest.fixture
def links():
    def make(id, name, description, created_at, updated_at):
        return Link(
            id=id,
            name=name,
            url=f"http://{id}",
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )

    return [
        make("a", "beta", "Media", 1, 9),
        make("b", "Alpha", "", 3, 3),
        make("c", "gamma", "router", 2, 5),
    ]


def _ids(links):
    return [link.id for link in links]


class TestSortLinks:
    def test_custom_follows_order(self, links):
        assert _ids(sort_links(links, SortOption.CUSTOM, ["c", "a", "b"])) == ["c", "a", "b"]

    def test_custom_unknown_ids_go_last_in_stored_order(self, links):
        assert _ids(sort_links(links, "custom", ["c"])) == ["c", "a", "b"]

    def test_custom_ignores_stale_and_duplicate_ids(self, links):
        assert _ids(sort_links(links, "custom", ["gone", "b", "a", "b"])) == ["b", "a", "c"]

    def test_custom_without_order(self, links):
        assert _ids(sort_links(links, "custom", None)) == ["a", "b", "c"]

    def test_name_is_case_insensitive(self, links):
        assert _ids(sort_links(links, SortOption.NAME)) == ["b", "a", "c"]

    def test_created_newest_first(self, links):
        assert _ids(sort_links(links, "created")) == ["b", "c", "a"]

    def test_updated_most_recent_first(self, links):
        assert _ids(sort_links(links, "updated")) == ["a", "c", "b"]

    def test_unknown_option(self, links):
        with pytest.raises(ValueError):
            sort_links(links, "random")

    def test_input_untouched(self, links):
        sort_links(links, "name")
        assert _ids(links) == ["a", "b", "c"]


class TestFilterLinks:
    def test_matches_name_or_description(self, links):
        assert _ids(filter_links(links, "ROUTER")) == ["c"]
        assert _ids(filter_links(links, "alp")) == ["b"]

    def test_blank_query_keeps_everything(self, links):
        assert _ids(filter_links(links, "  ")) == ["a", "b", "c"]

    def test_no_match(self, links):
        assert filter_links(links, "printer") == []


class TestMoveLink:
    def test_move_down(self, links):
        assert _ids(move_link(links, "a", "c")) == ["b", "c", "a"]

    def test_move_up(self, links):
        assert _ids(move_link(links, "c", "a")) == ["c", "a", "b"]

    def test_drop_on_itself(self, links):
        assert _ids(move_link(links, "b", "b")) == ["a", "b", "c"]

    def test_unknown_id(self, links):
        assert _ids(move_link(links, "zzz", "a")) == ["a", "b", "c"]
