from __future__ import annotations

"""
Selection Processor Panel.

Lists the checked nodes of the enclosing picker, one section per level,
each row with a 'Select' button that hands the node path to a callback
owned by the parent page. The panel never holds the selector itself: it
reads the selection through the shared accessor of its widget ancestry.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

import customtkinter as ctk

from diaspora_picker.core.selection import use_selected
from diaspora_picker.domain.taxonomy_models import TreeSchema
from diaspora_picker.utils.i18n import i18n

logger = logging.getLogger(__name__)

PickCallback = Callable[[Tuple[str, ...]], None]


class SelectionProcessorFrame(ctk.CTkScrollableFrame):
    """
    Read-only summary of a picker's selection with per-item actions.

    Args:
        master: Parent container (must sit under a selection provider).
        schema: Level naming of the picker.
        on_select_root: Called with (l1,) when a level-1 row is picked.
        on_select_branch: Called with (l1, l2).
        on_select_leaf: Called with (l1, l2, l3).
    """

    def __init__(
            self,
            master: Any,
            schema: TreeSchema,
            on_select_root: Optional[PickCallback] = None,
            on_select_branch: Optional[PickCallback] = None,
            on_select_leaf: Optional[PickCallback] = None,
            **kwargs: Any
    ):
        super().__init__(master, corner_radius=8, width=320, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self.schema = schema
        self._callbacks = (on_select_root, on_select_branch, on_select_leaf)
        self._widgets: List[Any] = []

    def refresh(self) -> None:
        """Re-read the selection from the enclosing provider and redraw."""
        for widget in self._widgets:
            widget.destroy()
        self._widgets = []

        flat = use_selected(self, self.schema.name).get_flat()
        if flat.is_empty:
            self._add_label(i18n.t("gui.processor.empty"), color="gray")
            return

        sections: Sequence[Tuple[int, str, Sequence[Tuple[str, ...]]]] = (
            (0, self.schema.column_names[0], [(l1,) for l1 in flat.roots]),
            (1, self.schema.column_names[1], flat.branches),
            (2, self.schema.column_names[2], flat.leaves),
        )
        for index, title, paths in sections:
            if not paths:
                continue
            self._add_label(
                i18n.t("gui.processor.section", name=title.capitalize(), count=len(paths)),
                bold=True
            )
            for path in paths:
                self._add_item(index, path)

    # -------------------------------------------------------------------------
    # ROW BUILDERS
    # -------------------------------------------------------------------------

    def _add_label(self, text: str, bold: bool = False, color: Optional[str] = None) -> None:
        label = ctk.CTkLabel(
            self,
            text=text,
            anchor="w",
            font=ctk.CTkFont(weight="bold" if bold else "normal"),
            text_color=color
        )
        label.grid(row=len(self._widgets), column=0, sticky="ew", pady=(8 if bold else 0, 2))
        self._widgets.append(label)

    def _add_item(self, index: int, path: Tuple[str, ...]) -> None:
        row = ctk.CTkFrame(self, fg_color="transparent")
        row.grid(row=len(self._widgets), column=0, sticky="ew")
        row.grid_columnconfigure(0, weight=1)
        self._widgets.append(row)

        ctk.CTkLabel(row, text=" / ".join(path), anchor="w").grid(row=0, column=0, sticky="ew")
        ctk.CTkButton(
            row,
            text=i18n.t("gui.processor.select"),
            width=70,
            height=24,
            command=lambda: self._pick(index, path)
        ).grid(row=0, column=1, padx=(6, 0), pady=1)

    def _pick(self, index: int, path: Tuple[str, ...]) -> None:
        callback = self._callbacks[index]
        logger.debug(f"Processor[{self.schema.name}]: Picked {'/'.join(path)}")
        if callback is not None:
            callback(path)
