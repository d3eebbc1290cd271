from __future__ import annotations

"""
Sidebar Navigation Component.

Persistent left panel with branding and the buttons that switch between
the expertise picker, the location picker, the onboarding form and the
log console.
"""

from typing import Any, Callable, Dict

import customtkinter as ctk

from diaspora_picker.domain import constants as const
from diaspora_picker.utils.i18n import i18n

NAV_PAGES = ("expertise", "locations", "onboarding", "logs")

_ACTIVE_COLOR = ("gray75", "gray25")


class SidebarFrame(ctk.CTkFrame):
    """
    Application navigation sidebar.

    Args:
        master: Parent window container.
        nav_callback: Called with the page name when a button is pressed.
    """

    def __init__(self, master: Any, nav_callback: Callable[[str], None], **kwargs: Any):
        super().__init__(master, width=200, corner_radius=0, **kwargs)

        self.nav_callback = nav_callback

        self.logo_label = ctk.CTkLabel(
            self,
            text="Diaspora\nPicker",
            font=ctk.CTkFont(size=20, weight="bold")
        )
        self.logo_label.grid(row=0, column=0, padx=20, pady=(20, 10))

        self.version_label = ctk.CTkLabel(
            self,
            text=f"v{const.CURRENT_CONFIG_VERSION}",
            font=ctk.CTkFont(size=10),
            text_color="gray"
        )
        self.version_label.grid(row=1, column=0, padx=20, pady=(0, 20))

        self.nav_buttons: Dict[str, ctk.CTkButton] = {}
        for row, page in enumerate(NAV_PAGES, start=2):
            btn = ctk.CTkButton(
                self,
                text=i18n.t(f"gui.sidebar.{page}"),
                command=lambda p=page: self.nav_callback(p),
                fg_color="transparent",
                border_width=2,
                text_color=("gray10", "#DCE4EE")
            )
            btn.grid(row=row, column=0, padx=20, pady=10)
            self.nav_buttons[page] = btn

        # Push anything added later to the bottom
        self.grid_rowconfigure(len(NAV_PAGES) + 2, weight=1)

    def set_active(self, page: str) -> None:
        """Highlight the button of the visible page."""
        for name, btn in self.nav_buttons.items():
            btn.configure(fg_color=_ACTIVE_COLOR if name == page else "transparent")
