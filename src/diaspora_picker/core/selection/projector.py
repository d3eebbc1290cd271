from __future__ import annotations

"""
Selection Projector.

Read-only derivations of a SelectionState for consumers outside the
picker. Nothing is memoized: trees hold tens of nodes and callers invoke
the projector whenever they need a fresh view.
"""

from typing import List

from diaspora_picker.domain.selection_models import FlatSelection, SelectedBranch, SelectionState


def project(state: SelectionState) -> List[SelectedBranch]:
    """
    Flatten the nested state into one record per level-1 entry.

    An entry is skipped only if its own flag is unchecked and it has no
    level-2 entries at all. Branch keys are those whose flag is checked;
    leaf keys are collected across every level-2 entry, checked or not.

    Args:
        state: The state to project.

    Returns:
        List[SelectedBranch]: Records in insertion order of the roots.
    """
    result: List[SelectedBranch] = []
    for l1, root in state.roots.items():
        if not root.checked and not root.branches:
            continue

        branches = [l2 for l2, branch in root.branches.items() if branch.checked]
        leaves = [
            l3
            for branch in root.branches.values()
            for l3, flag in branch.leaves.items()
            if flag
        ]
        result.append(SelectedBranch(root=l1, branches=branches, leaves=leaves))
    return result


def flatten_selection(state: SelectionState) -> FlatSelection:
    """
    Split the state into three parallel lists of checked nodes.

    Each level is read independently from its own flag: roots whose flag
    is checked, (l1, l2) pairs whose branch flag is checked and
    (l1, l2, l3) triples whose leaf flag is true.
    """
    roots: List[str] = []
    branches = []
    leaves = []

    for l1, root in state.roots.items():
        if root.checked:
            roots.append(l1)
        for l2, branch in root.branches.items():
            if branch.checked:
                branches.append((l1, l2))
            for l3, flag in branch.leaves.items():
                if flag:
                    leaves.append((l1, l2, l3))

    return FlatSelection(roots=roots, branches=branches, leaves=leaves)
