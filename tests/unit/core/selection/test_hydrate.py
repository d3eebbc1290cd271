from __future__ import annotations

"""
Unit tests for rebuilding selections from stored flat lists.
"""

import logging

from diaspora_picker.core.selection.hydrate import (
    build_selection,
    build_selection_from_leaves,
    select_everything,
)
from diaspora_picker.core.selection.projector import flatten_selection
from diaspora_picker.domain.selection_models import NodeState


def test_build_selection_places_keys_under_their_parents(mini_locations) -> None:
    """TC-01: Saved columns are restored as a checked nested state."""
    state = build_selection(mini_locations, ["Nigeria"], ["Lagos", "Rivers"], ["Ikeja", "Abua/Odual"])

    assert state.is_checked("Nigeria")
    assert state.is_checked("Nigeria", "Lagos", "Ikeja")
    assert state.is_checked("Nigeria", "Rivers", "Abua/Odual")
    assert state.status("Nigeria", "Lagos", "Epe") is NodeState.ABSENT


def test_build_selection_drops_unknown_and_orphans(mini_locations, caplog) -> None:
    """TC-02: Unknown roots and keys without a selected parent are logged."""
    with caplog.at_level(logging.WARNING):
        state = build_selection(mini_locations, ["Atlantis", "Ghana"], ["Lagos"], ["Kumasi"])

    assert "Atlantis" not in state
    assert state.is_checked("Ghana")
    # Lagos belongs to Nigeria, which is not selected
    assert state.status("Ghana", "Lagos") is NodeState.ABSENT
    assert "Atlantis" in caplog.text
    assert "Lagos" in caplog.text


def test_build_selection_from_leaves_covers_every_path(mini_expertise) -> None:
    """TC-03: A skill id present in two categories is restored in both."""
    state = build_selection_from_leaves(mini_expertise, ["ml", "ml", "frontend"])

    assert state.is_checked("tech", "ai", "ml")
    assert state.is_checked("science", "data", "ml")
    assert state.is_checked("tech", "web", "frontend")
    assert state.is_checked("science")


def test_build_selection_from_unknown_leaf_is_ignored(mini_expertise) -> None:
    """TC-04: Unknown skill ids leave the state empty."""
    assert len(build_selection_from_leaves(mini_expertise, ["quantum_baking"])) == 0


def test_select_everything(mini_expertise) -> None:
    """TC-05: Every node of the taxonomy ends up checked."""
    flat = flatten_selection(select_everything(mini_expertise))

    assert flat.roots == ["tech", "science"]
    assert len(flat.branches) == 3
    assert sorted(flat.leaves) == sorted(mini_expertise.paths())
