"""Interaction controller for the incremental user search.

The controller owns a :class:`SearchState` and mutates it only through the
transition methods below. Typing updates the query immediately and filters
after a quiet period; hovering a row highlights it after a shorter delay.
Keyboard navigation takes precedence over hover until the pointer re-enters
the results panel or the input loses focus.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .config import settings
from .filtering import filter_users
from .models import User
from .timers import TimerGroup

logger = logging.getLogger(__name__)

FILTER_TIMER = "filter"
HOVER_TIMER = "hover"

SelectCallback = Callable[[User], None]
ScrollCallback = Callable[[int], None]


class InputModality(str, Enum):
    NONE = "none"
    KEYBOARD = "keyboard"
    MOUSE = "mouse"


@dataclass
class SearchState:
    query: str = ""
    matches: List[User] = field(default_factory=list)
    highlighted_index: int = -1
    last_input_modality: InputModality = InputModality.NONE

    @property
    def highlighted_user(self) -> Optional[User]:
        if 0 <= self.highlighted_index < len(self.matches):
            return self.matches[self.highlighted_index]
        return None


class SearchController:
    def __init__(
        self,
        users: Iterable[User] = (),
        *,
        on_select: Optional[SelectCallback] = None,
        on_scroll_into_view: Optional[ScrollCallback] = None,
        selected_user: Optional[User] = None,
        filter_delay: Optional[float] = None,
        hover_delay: Optional[float] = None,
    ) -> None:
        self._users: List[User] = list(users)
        self._on_select = on_select
        self._on_scroll_into_view = on_scroll_into_view
        self._selected_user = selected_user
        self._timers = TimerGroup()
        self._filter_timer = self._timers.timer(
            FILTER_TIMER, settings.filter_delay if filter_delay is None else filter_delay
        )
        self._hover_timer = self._timers.timer(
            HOVER_TIMER, settings.hover_delay if hover_delay is None else hover_delay
        )
        self.state = SearchState(query=selected_user.name if selected_user else "")

    @property
    def users(self) -> List[User]:
        return self._users

    @property
    def closed(self) -> bool:
        return self._timers.closed

    def set_users(self, users: Iterable[User]) -> None:
        """Install the record set; a pending filter pass will see the new users."""
        self._users = list(users)
        logger.debug("controller received %s users", len(self._users))

    # -- typing ---------------------------------------------------------

    def type_query(self, text: str) -> None:
        self.state.query = text
        if not text:
            self._filter_timer.cancel()
            self.state.matches = []
            self.state.highlighted_index = -1
            return
        self._filter_timer.schedule(self._apply_filter, text)

    def flush(self) -> bool:
        """Run a pending filter pass immediately."""
        return self._filter_timer.flush()

    def _apply_filter(self, query: str) -> None:
        self._hover_timer.cancel()
        self.state.matches = filter_users(query, self._users)
        self.state.highlighted_index = -1

    # -- keyboard -------------------------------------------------------

    def key_down(self, key: str) -> None:
        if key == "ArrowDown":
            self.arrow_down()
        elif key == "ArrowUp":
            self.arrow_up()
        elif key == "Enter":
            self.enter()

    def arrow_down(self) -> None:
        count = len(self.state.matches)
        if not count:
            return
        self._hover_timer.cancel()
        self.state.last_input_modality = InputModality.KEYBOARD
        self._move_highlight((self.state.highlighted_index + 1) % count)

    def arrow_up(self) -> None:
        count = len(self.state.matches)
        if not count:
            return
        self._hover_timer.cancel()
        self.state.last_input_modality = InputModality.KEYBOARD
        index = self.state.highlighted_index
        self._move_highlight(count - 1 if index <= 0 else index - 1)

    def enter(self) -> None:
        user = self.state.highlighted_user
        if user is not None:
            self.select(user)

    # -- pointer --------------------------------------------------------

    def pointer_enter(self, index: int) -> None:
        if self.state.last_input_modality is InputModality.KEYBOARD:
            return
        self._hover_timer.schedule(self._apply_hover, index)

    def _apply_hover(self, index: int) -> None:
        if self.state.last_input_modality is InputModality.KEYBOARD:
            return
        if not 0 <= index < len(self.state.matches):
            logger.debug("dropping hover on stale row %s", index)
            return
        self.state.last_input_modality = InputModality.MOUSE
        self._move_highlight(index)

    def pointer_leave(self) -> None:
        if self.state.last_input_modality is InputModality.KEYBOARD:
            return
        self._hover_timer.cancel()
        self.state.highlighted_index = -1

    def pointer_over_results(self) -> None:
        self.state.last_input_modality = InputModality.NONE

    def blur(self) -> None:
        self.state.last_input_modality = InputModality.NONE

    def click(self, index: int) -> None:
        if not 0 <= index < len(self.state.matches):
            logger.debug("ignoring click on missing row %s", index)
            return
        self.select(self.state.matches[index])

    # -- selection ------------------------------------------------------

    def select(self, user: User) -> None:
        logger.debug("selected user id=%s", user.id)
        if self._on_select is not None:
            self._on_select(user)
        self._hover_timer.cancel()
        self._filter_timer.cancel()
        self.state.matches = [user]
        self.state.last_input_modality = InputModality.NONE
        self.state.highlighted_index = -1

    def sync_selected(self, user: Optional[User]) -> None:
        """Show the externally selected user's name in the query box."""
        if user is None or user == self._selected_user:
            return
        self._selected_user = user
        self.state.query = user.name

    # -- teardown -------------------------------------------------------

    def close(self) -> None:
        self._timers.close()

    def _move_highlight(self, index: int) -> None:
        self.state.highlighted_index = index
        if index >= 0 and self.state.matches and self._on_scroll_into_view is not None:
            self._on_scroll_into_view(index)
