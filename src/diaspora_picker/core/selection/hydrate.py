from __future__ import annotations

"""
Selection Hydration.

Rebuilds a SelectionState from the flat lists a profile stores, so a
picker can show what was saved earlier. Names that are not part of the
taxonomy are dropped and logged.
"""

import logging
from typing import Dict, Iterable, List

from diaspora_picker.core.selection.tracker import apply_toggle
from diaspora_picker.domain.selection_models import BranchSelection, RootSelection, SelectionState
from diaspora_picker.domain.taxonomy_models import Level, Taxonomy

logger = logging.getLogger(__name__)


def build_selection(
        taxonomy: Taxonomy,
        roots: Iterable[str],
        branches: Iterable[str] = (),
        leaves: Iterable[str] = ()
) -> SelectionState:
    """
    Rebuild a state from three flat key lists.

    Every saved root found in the taxonomy is checked. Under it, every saved
    branch that is one of its children is checked, and under that branch
    every saved leaf that belongs to it is set.

    Args:
        taxonomy: Tree the keys refer to.
        roots: Saved level-1 keys.
        branches: Saved level-2 keys (not qualified by root).
        leaves: Saved level-3 keys (not qualified by branch).

    Returns:
        SelectionState: The rebuilt state.
    """
    branch_keys = list(branches)
    leaf_keys = list(leaves)
    result: Dict[str, RootSelection] = {}

    for l1 in roots:
        root_node = taxonomy.find(l1)
        if root_node is None:
            logger.warning(f"Hydration: Unknown {taxonomy.schema.level_names[0]} '{l1}' dropped.")
            continue

        restored: Dict[str, BranchSelection] = {}
        for l2 in branch_keys:
            branch_node = root_node.child(l2)
            if branch_node is None:
                continue
            restored[l2] = BranchSelection(
                checked=True,
                leaves={l3: True for l3 in leaf_keys if branch_node.child(l3) is not None},
            )

        result[l1] = RootSelection(checked=True, branches=restored)

    _log_orphans(taxonomy, result, branch_keys, leaf_keys)
    return SelectionState(roots=result)


def build_selection_from_leaves(taxonomy: Taxonomy, leaves: Iterable[str]) -> SelectionState:
    """
    Rebuild a state from a flat list of level-3 keys.

    Each distinct known key is toggled on at every path where it occurs,
    which checks its ancestors through the usual upward rule.
    """
    state = SelectionState()
    seen = set()
    for l3 in leaves:
        if l3 in seen:
            continue
        seen.add(l3)

        paths = taxonomy.locate_leaf(l3)
        if not paths:
            logger.warning(f"Hydration: Unknown {taxonomy.schema.level_names[2]} '{l3}' dropped.")
            continue
        for l1, l2, leaf in paths:
            state = apply_toggle(state, Level.LEAF, l1, l2, leaf)
    return state


def select_everything(taxonomy: Taxonomy) -> SelectionState:
    """State with every node of the taxonomy checked."""
    return SelectionState(roots={
        root.id: RootSelection(
            checked=True,
            branches={
                branch.id: BranchSelection(
                    checked=True,
                    leaves={leaf.id: True for leaf in branch.children},
                )
                for branch in root.children
            },
        )
        for root in taxonomy.roots
    })


def _log_orphans(
        taxonomy: Taxonomy,
        restored: Dict[str, RootSelection],
        branch_keys: List[str],
        leaf_keys: List[str]
) -> None:
    """Report saved branch/leaf keys that ended up nowhere in the rebuilt state."""
    placed_branches = {l2 for root in restored.values() for l2 in root.branches}
    placed_leaves = {
        l3 for root in restored.values() for branch in root.branches.values() for l3 in branch.leaves
    }
    for l2 in branch_keys:
        if l2 not in placed_branches:
            logger.warning(f"Hydration: {taxonomy.schema.level_names[1]} '{l2}' has no selected parent.")
    for l3 in leaf_keys:
        if l3 not in placed_leaves:
            logger.warning(f"Hydration: {taxonomy.schema.level_names[2]} '{l3}' has no selected parent.")
