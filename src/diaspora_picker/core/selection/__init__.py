from __future__ import annotations

"""
Tri-level Selection Engine.

Checkbox state, disclosure state, projections and the shared accessor used
by both pickers (expertise and location).
"""

from .context import (
    ProviderNotFoundError,
    SelectionContext,
    SelectionProvider,
    provide,
    revoke,
    use_selected,
)
from .expansion import ExpansionTracker, expansion_key
from .hydrate import build_selection, build_selection_from_leaves, select_everything
from .projector import flatten_selection, project
from .selector import TreeSelector
from .tracker import SelectionTracker, apply_toggle

__all__ = [
    "ProviderNotFoundError",
    "SelectionContext",
    "SelectionProvider",
    "provide",
    "revoke",
    "use_selected",
    "ExpansionTracker",
    "expansion_key",
    "build_selection",
    "build_selection_from_leaves",
    "select_everything",
    "flatten_selection",
    "project",
    "TreeSelector",
    "SelectionTracker",
    "apply_toggle",
]
