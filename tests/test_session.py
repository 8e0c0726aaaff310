"""Tests for the session wiring selection back into the query."""

import json

import pytest

from usersearch.session import SearchSession


@pytest.mark.asyncio
async def test_selection_collapses_matches_and_shows_name(tmp_path, users):
    path = tmp_path / "Data.json"
    path.write_text(json.dumps([user.model_dump() for user in users]), encoding="utf-8")
    reported = []
    session = SearchSession(on_selection_change=reported.append, filter_delay=10, hover_delay=10)
    try:
        assert await session.load(str(path)) == len(users)
        session.controller.type_query("pen")
        session.controller.flush()
        record = session.controller.state.matches[2]
        session.controller.select(record)

        state = session.controller.state
        assert state.query == record.name
        assert state.matches == [record]
        assert session.selected_user == record
        assert reported == [record]
        assert [row.user for row in session.view().rows] == [record]
    finally:
        session.close()


@pytest.mark.asyncio
async def test_failed_load_degrades_to_no_results(tmp_path):
    session = SearchSession(filter_delay=10)
    try:
        assert await session.load(str(tmp_path / "missing.json")) == 0
        session.controller.type_query("alice")
        session.controller.flush()
        view = session.view()
        assert view.visible and view.empty
    finally:
        session.close()


def test_preselected_user_seeds_query(users):
    session = SearchSession(selected_user=users[2])
    try:
        assert session.selected_user == users[2]
        assert session.controller.state.query == "Carol Penn"
        assert session.controller.state.matches == []
    finally:
        session.close()
