from __future__ import annotations

"""
Unit tests for the Selection Projector (nested and flat views).
"""

from diaspora_picker.core.selection.projector import flatten_selection, project
from diaspora_picker.core.selection.tracker import SelectionTracker
from diaspora_picker.domain.selection_models import (
    BranchSelection,
    RootSelection,
    SelectedBranch,
    SelectionState,
)
from diaspora_picker.domain.taxonomy_models import EXPERTISE_SCHEMA, LOCATION_SCHEMA


def test_empty_state_projects_to_empty_list() -> None:
    """TC-01: Nothing touched, nothing projected."""
    assert project(SelectionState()) == []
    assert flatten_selection(SelectionState()).is_empty


def test_unchecked_root_without_branches_is_skipped() -> None:
    """TC-02: The only skip rule: unchecked and no level-2 entries."""
    state = SelectionState(roots={
        "tech": RootSelection(checked=False, branches={}),
        "science": RootSelection(checked=True, branches={}),
    })
    assert project(state) == [SelectedBranch(root="science")]


def test_unchecked_root_with_branches_still_contributes() -> None:
    """TC-03: Hand-built state with an unchecked root but a branch entry."""
    state = SelectionState(roots={
        "tech": RootSelection(
            checked=False,
            branches={"web": BranchSelection(checked=False, leaves={"frontend": True})},
        ),
    })
    assert project(state) == [SelectedBranch(root="tech", branches=[], leaves=["frontend"])]


def test_leaves_collected_across_unchecked_branches() -> None:
    """TC-04: Leaves count even when their branch flag is unchecked."""
    state = SelectionState(roots={
        "tech": RootSelection(
            checked=True,
            branches={
                "web": BranchSelection(checked=True, leaves={"frontend": True, "backend": False}),
                "ai": BranchSelection(checked=False, leaves={"ml": True}),
            },
        ),
    })
    entry = project(state)[0]
    assert entry.branches == ["web"]
    assert entry.leaves == ["frontend", "ml"]


def test_projection_matches_toggle_history() -> None:
    """TC-05: Roots with any branch entry or checked flag are projected."""
    tracker = SelectionTracker(EXPERTISE_SCHEMA)
    tracker.set_checked("skill", "tech", "web", "frontend")
    tracker.set_checked("category", "tech", "ai")
    tracker.set_checked("category", "tech", "ai")  # unchecked again
    tracker.set_checked("domain", "science")

    projected = {entry.root: entry for entry in project(tracker.state)}

    assert set(projected) == {"tech", "science"}
    assert projected["tech"].branches == ["web"]
    assert projected["tech"].leaves == ["frontend"]
    assert projected["science"].branches == []


def test_projection_to_dict_uses_schema_keys() -> None:
    """TC-06: Rendering follows the naming of each picker."""
    entry = SelectedBranch(root="Nigeria", branches=["Lagos"], leaves=["Ikeja"])
    assert entry.to_dict(LOCATION_SCHEMA) == {
        "country": "Nigeria",
        "states": ["Lagos"],
        "lgas": ["Ikeja"],
    }
    assert entry.to_dict(EXPERTISE_SCHEMA)["domain"] == "Nigeria"


def test_flatten_reads_each_level_independently() -> None:
    """TC-07: Roots, pairs and triples come from their own flags."""
    tracker = SelectionTracker(LOCATION_SCHEMA)
    tracker.set_checked("lga", "Nigeria", "Lagos", "Ikeja")
    tracker.set_checked("lga", "Nigeria", "Lagos", "Epe")
    tracker.set_checked("lga", "Nigeria", "Lagos", "Epe")  # off again
    tracker.set_checked("state", "Ghana", "Ashanti")

    flat = flatten_selection(tracker.state)

    assert flat.roots == ["Nigeria", "Ghana"]
    assert flat.branches == [("Nigeria", "Lagos"), ("Ghana", "Ashanti")]
    assert flat.leaves == [("Nigeria", "Lagos", "Ikeja")]
    assert flat.to_dict(LOCATION_SCHEMA) == {
        "countries": ["Nigeria", "Ghana"],
        "states": ["Lagos", "Ashanti"],
        "lgas": ["Ikeja"],
    }
