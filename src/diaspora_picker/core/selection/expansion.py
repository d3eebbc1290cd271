from __future__ import annotations

"""
Expand/collapse state of a tri-level picker.

Disclosure is tracked separately from selection, keyed by a composite
string ('<l1>' or '<l1>-<l2>'). A missing key means collapsed.
"""

import logging
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)


def expansion_key(l1: str, l2: Optional[str] = None) -> str:
    """Composite disclosure key of a level-1 or level-2 node."""
    return l1 if l2 is None else f"{l1}-{l2}"


class ExpansionTracker:
    """Owns the disclosure mapping; every toggle installs a new mapping."""

    def __init__(self) -> None:
        self._expanded: Dict[str, bool] = {}

    @property
    def expanded(self) -> Mapping[str, bool]:
        return self._expanded

    def toggle_expand(self, key: str) -> None:
        """
        Flip the flag at key. Missing keys count as collapsed, so the first
        call expands. Keys are not checked against any tree.
        """
        self._expanded = {**self._expanded, key: not self._expanded.get(key, False)}
        logger.debug(f"Expansion: '{key}' -> {self._expanded[key]}")

    def is_expanded(self, key: str) -> bool:
        return self._expanded.get(key, False)

    def reset(self) -> None:
        self._expanded = {}
