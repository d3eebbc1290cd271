from __future__ import annotations

"""
Selection State Tracker.

Implements the checkbox update rule shared by the expertise and location
pickers:

- Level-1 toggle: the entry becomes {checked: not previous, branches: {}};
  previously selected branches and leaves are discarded.
- Level-2 toggle: the root is forced checked and the branch becomes
  {checked: not previous, leaves: {}}; its previous leaves are discarded.
- Level-3 toggle: the root and the branch are forced checked and the leaf
  flag is flipped.

Propagation is upward only. Unchecking a descendant never unchecks an
ancestor and checking an ancestor never checks a descendant. Missing
ancestor entries are created on the fly. Each call returns a new
SelectionState; the previous one is left untouched.
"""

import logging
from typing import Optional, Union

from diaspora_picker.domain.selection_models import (
    BranchSelection,
    RootSelection,
    SelectionState,
)
from diaspora_picker.domain.taxonomy_models import Level, TreeSchema

logger = logging.getLogger(__name__)

LevelLike = Union[Level, str, int]


def apply_toggle(
        state: SelectionState,
        level: Level,
        l1: str,
        l2: Optional[str] = None,
        l3: Optional[str] = None
) -> SelectionState:
    """
    Compute the state that results from clicking one checkbox.

    Args:
        state: Current state (not modified).
        level: Depth of the clicked checkbox.
        l1: Level-1 key.
        l2: Level-2 key (required for BRANCH and LEAF).
        l3: Level-3 key (required for LEAF).

    Returns:
        SelectionState: A new state object. When a required key is missing
        the content is unchanged but the identity is still new.
    """
    roots = dict(state.roots)
    prev_root = state.roots.get(l1)

    if level is Level.ROOT:
        was_checked = prev_root.checked if prev_root else False
        roots[l1] = RootSelection(checked=not was_checked, branches={})

    elif level is Level.BRANCH and l2:
        prev_branches = prev_root.branches if prev_root else {}
        prev_branch = prev_branches.get(l2)
        was_checked = prev_branch.checked if prev_branch else False
        roots[l1] = RootSelection(
            checked=True,
            branches={**prev_branches, l2: BranchSelection(checked=not was_checked, leaves={})},
        )

    elif level is Level.LEAF and l2 and l3:
        prev_branches = prev_root.branches if prev_root else {}
        prev_branch = prev_branches.get(l2)
        prev_leaves = prev_branch.leaves if prev_branch else {}
        roots[l1] = RootSelection(
            checked=True,
            branches={
                **prev_branches,
                l2: BranchSelection(
                    checked=True,
                    leaves={**prev_leaves, l3: not prev_leaves.get(l3, False)},
                ),
            },
        )

    else:
        logger.debug(f"Selection: Ignoring {level.name} toggle without full key path ({l1}, {l2}, {l3}).")

    return SelectionState(roots=roots)


class SelectionTracker:
    """
    Holds the current SelectionState of one picker and applies toggles.

    The schema allows levels to be addressed by their public names
    (e.g. 'domain', 'category', 'skill').
    """

    def __init__(self, schema: TreeSchema, state: Optional[SelectionState] = None) -> None:
        self.schema = schema
        self._state = state if state is not None else SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    def set_checked(
            self,
            level: LevelLike,
            l1: str,
            l2: Optional[str] = None,
            l3: Optional[str] = None
    ) -> SelectionState:
        """
        Toggle one checkbox and install the resulting state.

        Raises:
            ValueError: If the level does not belong to the schema.
        """
        resolved = self.schema.level(level)
        self._state = apply_toggle(self._state, resolved, l1, l2, l3)
        logger.debug(
            f"Selection[{self.schema.name}]: {self.schema.level_name(resolved)} "
            f"toggle at {'/'.join(k for k in (l1, l2, l3) if k)}"
        )
        return self._state

    def replace(self, state: SelectionState) -> SelectionState:
        """Install an externally built state (hydration, select all, clear)."""
        self._state = state
        return self._state
