from __future__ import annotations

"""
System Diagnostics Console.

Read-only log view fed by the GUI log queue. On creation it can be primed
with the tail of the persistent log file so earlier sessions are visible.
"""

from typing import Any, Optional

import customtkinter as ctk

from diaspora_picker.infra.logging import get_recent_logs
from diaspora_picker.utils.i18n import i18n


class LogsFrame(ctk.CTkFrame):
    """
    Dedicated diagnostic console frame.

    Args:
        master: Parent UI container.
        log_path: Optional log file whose recent lines are shown first.
    """

    def __init__(self, master: Any, log_path: Optional[str] = None, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 10))
        self.textbox.grid(row=0, column=0, columnspan=2, sticky="nsew")

        self.btn_clear = ctk.CTkButton(
            self,
            text=i18n.t("gui.logs.clear"),
            fg_color="transparent",
            border_width=1,
            command=self.clear
        )
        self.btn_clear.grid(row=1, column=0, pady=10, padx=(0, 10), sticky="e")

        self.btn_copy = ctk.CTkButton(
            self,
            text=i18n.t("gui.logs.copy"),
            command=self._copy_logs
        )
        self.btn_copy.grid(row=1, column=1, pady=10, sticky="e")

        if log_path:
            history = get_recent_logs(log_path=log_path)
            if history:
                self.append_log(history.rstrip("\n"))

    def append_log(self, msg: str) -> None:
        """Append one formatted message, keeping the buffer read-only."""
        self.textbox.configure(state="normal")
        self.textbox.insert("end", msg + "\n")
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def clear(self) -> None:
        self.textbox.configure(state="normal")
        self.textbox.delete("1.0", "end")
        self.textbox.configure(state="disabled")

    def _copy_logs(self) -> None:
        self.clipboard_clear()
        self.clipboard_append(self.textbox.get("1.0", "end"))
