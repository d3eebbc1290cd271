from __future__ import annotations

"""
Tri-level Checkbox Tree Component.

Renders a TreeSelector as rows of checkboxes with expand/collapse buttons.
Rows are rebuilt from the selector after every interaction, so what is on
screen always reflects the current selection and disclosure state. Entries
that were never touched display as unchecked.
"""

import logging
from typing import Any, List, Optional

import customtkinter as ctk

from diaspora_picker.core.selection import TreeSelector, expansion_key
from diaspora_picker.domain.selection_models import SelectionState
from diaspora_picker.domain.taxonomy_models import Level, TaxonomyNode

logger = logging.getLogger(__name__)

_INDENT = 28
_ARROW_COLLAPSED = "▸"
_ARROW_EXPANDED = "▾"


class TreeSelectorFrame(ctk.CTkScrollableFrame):
    """
    Scrollable checkbox tree bound to one selector.

    Args:
        master: Parent container.
        selector: Selection model driving the rows.
    """

    def __init__(self, master: Any, selector: TreeSelector, **kwargs: Any):
        super().__init__(master, corner_radius=8, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self.selector = selector
        self._rows: List[ctk.CTkFrame] = []

        self._unsubscribe = selector.subscribe(self._on_selection_changed)
        self.refresh()

    def destroy(self) -> None:
        self._unsubscribe()
        super().destroy()

    # -------------------------------------------------------------------------
    # RENDERING
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """Rebuild every visible row from the selector."""
        for row in self._rows:
            row.destroy()
        self._rows = []

        for root in self.selector.taxonomy.roots:
            self._add_row(root, Level.ROOT, root.id)
            if not self.selector.is_expanded(expansion_key(root.id)):
                continue
            for branch in root.children:
                self._add_row(branch, Level.BRANCH, root.id, branch.id)
                if not self.selector.is_expanded(expansion_key(root.id, branch.id)):
                    continue
                for leaf in branch.children:
                    self._add_row(leaf, Level.LEAF, root.id, branch.id, leaf.id)

    def _add_row(
            self,
            node: TaxonomyNode,
            level: Level,
            l1: str,
            l2: Optional[str] = None,
            l3: Optional[str] = None
    ) -> None:
        row = ctk.CTkFrame(self, fg_color="transparent")
        row.grid(row=len(self._rows), column=0, sticky="ew", padx=((int(level) - 1) * _INDENT, 0))
        self._rows.append(row)

        if level is not Level.LEAF:
            key = expansion_key(l1, l2)
            arrow = _ARROW_EXPANDED if self.selector.is_expanded(key) else _ARROW_COLLAPSED
            ctk.CTkButton(
                row,
                text=arrow,
                width=24,
                height=24,
                fg_color="transparent",
                text_color=("gray10", "#DCE4EE"),
                hover_color=("gray80", "gray30"),
                command=lambda k=key: self._on_expand(k)
            ).pack(side="left")
        else:
            ctk.CTkLabel(row, text="", width=24).pack(side="left")

        checkbox = ctk.CTkCheckBox(
            row,
            text=node.label,
            command=lambda: self.selector.set_checked(level, l1, l2, l3)
        )
        if self.selector.is_checked(l1, l2, l3):
            checkbox.select()
        else:
            checkbox.deselect()
        checkbox.pack(side="left", padx=(4, 0), pady=2)

    # -------------------------------------------------------------------------
    # EVENTS
    # -------------------------------------------------------------------------

    def _on_expand(self, key: str) -> None:
        self.selector.toggle_expand(key)
        self.after_idle(self.refresh)

    def _on_selection_changed(self, state: SelectionState) -> None:
        # Rebuild after the clicked checkbox has finished its own callback
        self.after_idle(self.refresh)
