from __future__ import annotations

"""
Onboarding Form Component.

Collects the availability window and the backend coordinates, summarizes
what the two pickers currently hold and exposes the save / sync / load
actions. The widgets are wired to AppController by the GUI entrypoint.
"""

from typing import Any, Dict, Optional

import customtkinter as ctk

from diaspora_picker.domain.constants import AVAILABILITY_FULL_TIME, AVAILABILITY_SPECIFIC_PERIOD
from diaspora_picker.utils.i18n import i18n

_SETTING_FIELDS = ("backend_url", "api_key", "profile_id")


class OnboardingFrame(ctk.CTkFrame):
    """Availability, backend settings and submission actions."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=i18n.t("gui.onboarding.title"),
            font=ctk.CTkFont(size=18, weight="bold"),
            anchor="w"
        ).grid(row=0, column=0, sticky="ew", pady=(0, 10))

        # -----------------------------------------------------------------------------
        # SELECTION SUMMARY
        # -----------------------------------------------------------------------------
        summary = ctk.CTkFrame(self)
        summary.grid(row=1, column=0, sticky="ew", pady=(0, 10))
        summary.grid_columnconfigure(0, weight=1)

        self.lbl_skills = ctk.CTkLabel(summary, text="", anchor="w")
        self.lbl_skills.grid(row=0, column=0, sticky="ew", padx=10, pady=(8, 2))
        self.lbl_locations = ctk.CTkLabel(summary, text="", anchor="w")
        self.lbl_locations.grid(row=1, column=0, sticky="ew", padx=10, pady=(2, 8))

        # -----------------------------------------------------------------------------
        # AVAILABILITY
        # -----------------------------------------------------------------------------
        avail = ctk.CTkFrame(self)
        avail.grid(row=2, column=0, sticky="ew", pady=(0, 10))

        ctk.CTkLabel(
            avail, text=i18n.t("gui.onboarding.availability"), font=ctk.CTkFont(weight="bold")
        ).grid(row=0, column=0, columnspan=4, sticky="w", padx=10, pady=(8, 4))

        self.availability_var = ctk.StringVar(value=AVAILABILITY_FULL_TIME)
        self.rb_full_time = ctk.CTkRadioButton(
            avail,
            text=i18n.t("gui.onboarding.full_time"),
            variable=self.availability_var,
            value=AVAILABILITY_FULL_TIME,
            command=self._on_availability_changed
        )
        self.rb_full_time.grid(row=1, column=0, sticky="w", padx=10, pady=4)

        self.rb_period = ctk.CTkRadioButton(
            avail,
            text=i18n.t("gui.onboarding.specific_period"),
            variable=self.availability_var,
            value=AVAILABILITY_SPECIFIC_PERIOD,
            command=self._on_availability_changed
        )
        self.rb_period.grid(row=1, column=1, sticky="w", padx=10, pady=4)

        self.entry_start = ctk.CTkEntry(avail, placeholder_text=i18n.t("gui.onboarding.start_date"))
        self.entry_start.grid(row=2, column=0, sticky="w", padx=10, pady=(4, 10))
        self.entry_end = ctk.CTkEntry(avail, placeholder_text=i18n.t("gui.onboarding.end_date"))
        self.entry_end.grid(row=2, column=1, sticky="w", padx=10, pady=(4, 10))

        # -----------------------------------------------------------------------------
        # BACKEND SETTINGS
        # -----------------------------------------------------------------------------
        backend = ctk.CTkFrame(self)
        backend.grid(row=3, column=0, sticky="ew", pady=(0, 10))
        backend.grid_columnconfigure(1, weight=1)

        self.settings_entries: Dict[str, ctk.CTkEntry] = {}
        for row, key in enumerate(_SETTING_FIELDS):
            ctk.CTkLabel(backend, text=i18n.t(f"gui.onboarding.{key}"), anchor="w").grid(
                row=row, column=0, sticky="w", padx=10, pady=4
            )
            entry = ctk.CTkEntry(backend, show="*" if key == "api_key" else "")
            entry.grid(row=row, column=1, sticky="ew", padx=10, pady=4)
            self.settings_entries[key] = entry

        # -----------------------------------------------------------------------------
        # ACTIONS
        # -----------------------------------------------------------------------------
        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=4, column=0, sticky="ew")

        self.btn_load_profile = ctk.CTkButton(
            actions,
            text=i18n.t("gui.onboarding.load_profile"),
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_load_profile.pack(side="left")

        self.btn_reset = ctk.CTkButton(
            actions,
            text=i18n.t("gui.onboarding.reset"),
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_reset.pack(side="left", padx=(10, 0))

        self.btn_sync = ctk.CTkButton(actions, text=i18n.t("gui.onboarding.sync"))
        self.btn_sync.pack(side="right")

        self.btn_save = ctk.CTkButton(actions, text=i18n.t("gui.onboarding.save"))
        self.btn_save.pack(side="right", padx=(0, 10))

        self.status_label = ctk.CTkLabel(self, text="", anchor="w")
        self.status_label.grid(row=5, column=0, sticky="ew", pady=(10, 0))

        self._on_availability_changed()

    # -------------------------------------------------------------------------
    # VALUE ACCESSORS
    # -------------------------------------------------------------------------

    def get_availability(self) -> Dict[str, Any]:
        """Availability in the session dict shape (dates as entered)."""
        kind = self.availability_var.get()
        if kind != AVAILABILITY_SPECIFIC_PERIOD:
            return {"type": AVAILABILITY_FULL_TIME, "start_date": None, "end_date": None}
        return {
            "type": AVAILABILITY_SPECIFIC_PERIOD,
            "start_date": self.entry_start.get().strip() or None,
            "end_date": self.entry_end.get().strip() or None,
        }

    def set_availability(self, availability: Dict[str, Any]) -> None:
        availability = availability or {}
        self.availability_var.set(availability.get("type") or AVAILABILITY_FULL_TIME)
        for entry, key in ((self.entry_start, "start_date"), (self.entry_end, "end_date")):
            entry.configure(state="normal")
            entry.delete(0, "end")
            if availability.get(key):
                entry.insert(0, str(availability[key]))
        self._on_availability_changed()

    def get_settings(self) -> Dict[str, str]:
        return {key: entry.get().strip() for key, entry in self.settings_entries.items()}

    def set_settings(self, settings: Dict[str, Any]) -> None:
        for key, entry in self.settings_entries.items():
            entry.delete(0, "end")
            entry.insert(0, str(settings.get(key) or ""))

    # -------------------------------------------------------------------------
    # FEEDBACK
    # -------------------------------------------------------------------------

    def set_summary(self, skills: int, countries: int, states: int, lgas: int) -> None:
        self.lbl_skills.configure(text=i18n.t("gui.onboarding.summary_skills", count=skills))
        self.lbl_locations.configure(
            text=i18n.t("gui.onboarding.summary_locations", countries=countries, states=states, lgas=lgas)
        )

    def set_status(self, text: str, color: Optional[str] = None) -> None:
        self.status_label.configure(text=text, text_color=color or ("gray10", "#DCE4EE"))

    def set_busy(self, busy: bool) -> None:
        state = "disabled" if busy else "normal"
        for btn in (self.btn_save, self.btn_sync, self.btn_load_profile, self.btn_reset):
            btn.configure(state=state)

    def _on_availability_changed(self) -> None:
        state = "normal" if self.availability_var.get() == AVAILABILITY_SPECIFIC_PERIOD else "disabled"
        self.entry_start.configure(state=state)
        self.entry_end.configure(state=state)
