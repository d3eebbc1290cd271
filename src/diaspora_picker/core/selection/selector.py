from __future__ import annotations

"""
Tree Selector Facade.

Bundles the disclosure state, the checkbox state and the projector of one
picker instance behind a single object that GUI components, the CLI and
the shared accessor can drive. Listeners are notified after every change
of the selection object; disclosure changes do not notify.
"""

import logging
from typing import Callable, List, Mapping, Optional

from diaspora_picker.core.selection.expansion import ExpansionTracker
from diaspora_picker.core.selection.hydrate import select_everything
from diaspora_picker.core.selection.projector import flatten_selection, project
from diaspora_picker.core.selection.tracker import LevelLike, SelectionTracker
from diaspora_picker.domain.selection_models import (
    FlatSelection,
    NodeState,
    SelectedBranch,
    SelectionState,
)
from diaspora_picker.domain.taxonomy_models import Taxonomy, TreeSchema

logger = logging.getLogger(__name__)

SelectionListener = Callable[[SelectionState], None]


class TreeSelector:
    """
    Interactive model of one tri-level picker.

    Args:
        taxonomy: Tree to select from.
        state: Optional initial selection (e.g. hydrated from a profile).
    """

    def __init__(self, taxonomy: Taxonomy, state: Optional[SelectionState] = None) -> None:
        self.taxonomy = taxonomy
        self._expansion = ExpansionTracker()
        self._tracker = SelectionTracker(taxonomy.schema, state)
        self._listeners: List[SelectionListener] = []

    @property
    def schema(self) -> TreeSchema:
        return self.taxonomy.schema

    @property
    def selected(self) -> SelectionState:
        return self._tracker.state

    # -------------------------------------------------------------------------
    # Disclosure
    # -------------------------------------------------------------------------

    def toggle_expand(self, key: str) -> None:
        self._expansion.toggle_expand(key)

    def is_expanded(self, key: str) -> bool:
        return self._expansion.is_expanded(key)

    @property
    def expanded(self) -> Mapping[str, bool]:
        return self._expansion.expanded

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def set_checked(
            self,
            level: LevelLike,
            l1: str,
            l2: Optional[str] = None,
            l3: Optional[str] = None
    ) -> SelectionState:
        """Toggle one checkbox and notify listeners."""
        before = self._tracker.state
        after = self._tracker.set_checked(level, l1, l2, l3)
        self._notify(before, after)
        return after

    def status(self, l1: str, l2: Optional[str] = None, l3: Optional[str] = None) -> NodeState:
        return self._tracker.state.status(l1, l2, l3)

    def is_checked(self, l1: str, l2: Optional[str] = None, l3: Optional[str] = None) -> bool:
        return self._tracker.state.is_checked(l1, l2, l3)

    def get_selected(self) -> List[SelectedBranch]:
        """Projection of the current selection, recomputed on each call."""
        return project(self._tracker.state)

    def get_flat(self) -> FlatSelection:
        return flatten_selection(self._tracker.state)

    def load_state(self, state: SelectionState) -> None:
        """Replace the whole selection (hydration)."""
        before = self._tracker.state
        self._notify(before, self._tracker.replace(state))

    def select_all(self) -> None:
        logger.info(f"Selection[{self.schema.name}]: Select all.")
        self.load_state(select_everything(self.taxonomy))

    def clear(self) -> None:
        logger.info(f"Selection[{self.schema.name}]: Cleared.")
        self.load_state(SelectionState())

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a callback fired with the new state after each change.

        Returns:
            Callable[[], None]: Removes the listener when called.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, before: SelectionState, after: SelectionState) -> None:
        if after is before:
            return
        for listener in list(self._listeners):
            listener(after)
