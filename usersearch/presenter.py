"""Build the view model that the presentation layer draws."""
from __future__ import annotations

from typing import List

from .controller import SearchState
from .filtering import items_match
from .highlight import highlight
from .models import ResultRow, ResultsView


def items_notice(query: str) -> str:
    return f'"{query}" found in items'


def build_results_view(state: SearchState) -> ResultsView:
    query = state.query
    if not query:
        return ResultsView(query=query, visible=False)

    rows: List[ResultRow] = []
    for index, user in enumerate(state.matches):
        matched_items = items_match(user, query)
        rows.append(
            ResultRow(
                index=index,
                user=user,
                id_spans=highlight(user.id_text, query),
                name_spans=highlight(user.name, query),
                address_spans=highlight(user.address, query),
                items_match=matched_items,
                items_notice=items_notice(query) if matched_items else None,
                highlighted=index == state.highlighted_index,
            )
        )
    return ResultsView(
        query=query,
        visible=True,
        rows=rows,
    )
