"""Tests for the multi-field substring filter."""

from usersearch.filtering import filter_users, items_match
from usersearch.models import User


def _ids(results):
    return [user.id for user in results]


def test_empty_query_returns_nothing(users):
    assert filter_users("", users) == []


def test_item_substring_matches_both_records(users):
    """Item "pen" matches exactly and "pencil" contains it; name "Penn" too."""

    assert _ids(filter_users("pen", users[:2])) == [1, 2]
    assert _ids(filter_users("pen", users)) == [1, 2, 13]


def test_name_and_address_are_case_insensitive(users):
    assert _ids(filter_users("ALICE", users)) == [1]
    assert _ids(filter_users("oak", users)) == [2]
    assert _ids(filter_users("pine ROAD", users)) == [13]


def test_id_and_pincode_substrings(users):
    assert _ids(filter_users("3", users)) == [13]
    assert _ids(filter_users("4040", users)) == ["4"]


def test_results_keep_source_order(users):
    reordered = list(reversed(users))
    assert _ids(filter_users("1", reordered)) == [13, 1]


def test_pattern_characters_match_literally(users):
    assert _ids(filter_users("(rear)", users)) == ["4"]
    assert filter_users(".*", users) == []


def test_missing_fields_never_match():
    sparse = User.model_validate({"id": 7})
    assert filter_users("x", [sparse]) == []
    assert filter_users("7", [sparse]) == [sparse]


def test_items_match_only_checks_items(users):
    assert items_match(users[1], "PENC")
    assert not items_match(users[1], "bob")
    assert not items_match(users[1], "")
