from __future__ import annotations

"""
Selection Page.

One picker screen: toolbar (select all / clear), the checkbox tree and the
processor panel. The page registers its selector as the provider for its
own widget subtree, which is how the processor reads the selection.
"""

import logging
from typing import Any, Callable, Optional, Tuple

import customtkinter as ctk

from diaspora_picker.core.selection import TreeSelector, provide, revoke
from diaspora_picker.domain.selection_models import SelectionState
from diaspora_picker.interface.gui.components.selection_processor import SelectionProcessorFrame
from diaspora_picker.interface.gui.components.tree_selector import TreeSelectorFrame
from diaspora_picker.utils.i18n import i18n

logger = logging.getLogger(__name__)


class SelectionPage(ctk.CTkFrame):
    """
    Picker page bound to one TreeSelector.

    Args:
        master: Parent window.
        selector: Selection model of this page.
        title: Page heading.
        on_pick: Optional callback receiving (schema name, node path) when
                 a processor row is picked.
    """

    def __init__(
            self,
            master: Any,
            selector: TreeSelector,
            title: str,
            on_pick: Optional[Callable[[str, Tuple[str, ...]], None]] = None,
            **kwargs: Any
    ):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.selector = selector
        self.on_pick = on_pick

        provide(self, selector.schema.name, selector)

        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(1, weight=1)

        # --- Header ---
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 10))
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header,
            text=title,
            font=ctk.CTkFont(size=18, weight="bold"),
            anchor="w"
        ).grid(row=0, column=0, sticky="w")

        self.btn_select_all = ctk.CTkButton(
            header, text=i18n.t("gui.selection.select_all"), width=110, command=selector.select_all
        )
        self.btn_select_all.grid(row=0, column=1, padx=(0, 8))

        self.btn_clear = ctk.CTkButton(
            header,
            text=i18n.t("gui.selection.clear"),
            width=110,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE"),
            command=selector.clear
        )
        self.btn_clear.grid(row=0, column=2)

        # --- Body ---
        self.tree_frame = TreeSelectorFrame(self, selector)
        self.tree_frame.grid(row=1, column=0, sticky="nsew", padx=(0, 10))

        self.processor = SelectionProcessorFrame(
            self,
            selector.schema,
            on_select_root=self._on_pick,
            on_select_branch=self._on_pick,
            on_select_leaf=self._on_pick,
        )
        self.processor.grid(row=1, column=1, sticky="nsew")

        self.status_label = ctk.CTkLabel(self, text="", anchor="w", text_color="gray")
        self.status_label.grid(row=2, column=0, columnspan=2, sticky="ew", pady=(8, 0))

        self._unsubscribe = selector.subscribe(self._on_selection_changed)
        self.processor.refresh()

    def destroy(self) -> None:
        self._unsubscribe()
        revoke(self, self.selector.schema.name)
        super().destroy()

    def _on_selection_changed(self, state: SelectionState) -> None:
        self.after_idle(self.processor.refresh)

    def _on_pick(self, path: Tuple[str, ...]) -> None:
        self.status_label.configure(text=i18n.t("gui.selection.picked", path=" / ".join(path)))
        logger.info(f"Selection[{self.selector.schema.name}]: Picked {'/'.join(path)}")
        if self.on_pick is not None:
            self.on_pick(self.selector.schema.name, path)
