"""Top-level wiring: data source, selection owner and search controller."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .controller import ScrollCallback, SearchController
from .data_source import fetch_users
from .models import ResultsView, User
from .presenter import build_results_view

logger = logging.getLogger(__name__)


class SearchSession:
    """Owns the selected user and feeds it back into the controller.

    Selecting a row reports the user here; the session records it and pushes
    the name back into the query box, the same way an embedding page would.
    """

    def __init__(
        self,
        *,
        selected_user: Optional[User] = None,
        on_selection_change: Optional[Callable[[User], None]] = None,
        on_scroll_into_view: Optional[ScrollCallback] = None,
        filter_delay: Optional[float] = None,
        hover_delay: Optional[float] = None,
    ) -> None:
        self.selected_user: Optional[User] = selected_user
        self._on_selection_change = on_selection_change
        self.controller = SearchController(
            on_select=self._handle_select,
            on_scroll_into_view=on_scroll_into_view,
            selected_user=selected_user,
            filter_delay=filter_delay,
            hover_delay=hover_delay,
        )

    async def load(self, source: str | None = None) -> int:
        users = await fetch_users(source)
        self.controller.set_users(users)
        return len(users)

    def view(self) -> ResultsView:
        return build_results_view(self.controller.state)

    def close(self) -> None:
        self.controller.close()

    def _handle_select(self, user: User) -> None:
        self.selected_user = user
        if self._on_selection_change is not None:
            self._on_selection_change(user)
        self.controller.sync_selected(user)
