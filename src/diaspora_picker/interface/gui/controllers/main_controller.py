from __future__ import annotations

"""
Main Application Controller.

Bridges the picker pages and the onboarding form with the session model.
Keeps the persisted session in step with the selectors, validates
submissions, and runs profile sync / load in background threads whose
results are marshalled back onto the Tk loop with app.after.
"""

import logging
import threading
import tkinter.messagebox as mb
from typing import Any, Dict, List, Optional, Tuple

import customtkinter as ctk

from diaspora_picker.core.selection import TreeSelector
from diaspora_picker.core.services.onboarding import collect_skills, validate_onboarding
from diaspora_picker.core.services.session import selection_from_session, selection_to_session
from diaspora_picker.domain import config as cfg
from diaspora_picker.domain.constants import EXPERTISE_KIND, LOCATION_KIND
from diaspora_picker.domain.selection_models import FlatSelection, SelectionState
from diaspora_picker.domain.taxonomy_models import LOCATION_SCHEMA
from diaspora_picker.interface.gui import threads
from diaspora_picker.utils.i18n import i18n

logger = logging.getLogger(__name__)

_SUCCESS_COLOR = "#2FA572"
_ERROR_COLOR = "#E04F5F"


class AppController:
    """
    Central controller of the GUI.

    Args:
        app: Root CustomTkinter application instance.
        app_state: Global persistent application state (mutated in place).
        selectors: Selection models keyed by taxonomy kind.
    """

    def __init__(
            self,
            app: ctk.CTk,
            app_state: Dict[str, Any],
            selectors: Dict[str, TreeSelector]
    ):
        self.app = app
        self.app_state = app_state
        self.selectors = selectors

        self.onboarding_view: Any = None
        self.logs_view: Any = None
        self.sidebar_view: Any = None

        for selector in selectors.values():
            selector.subscribe(self.refresh_summary)

    @property
    def session(self) -> Dict[str, Any]:
        return self.app_state["last_session"]

    @property
    def settings(self) -> Dict[str, Any]:
        return self.app_state["app_settings"]

    # -------------------------------------------------------------------------
    # VIEW REGISTRATION
    # -------------------------------------------------------------------------

    def register_views(self, onboarding: Any, logs: Any, sidebar: Any) -> None:
        self.onboarding_view = onboarding
        self.logs_view = logs
        self.sidebar_view = sidebar

    # -------------------------------------------------------------------------
    # SESSION SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def sync_view_from_config(self) -> None:
        """Push the stored session into the selectors and the form."""
        for selector in self.selectors.values():
            selector.load_state(selection_from_session(selector.taxonomy, self.session))

        if self.onboarding_view:
            self.onboarding_view.set_availability(self.session.get("availability", {}))
            self.onboarding_view.set_settings(self.settings)
        self.refresh_summary()

    def sync_config_from_view(self) -> None:
        """Scrape selectors and form values into the session and settings."""
        session = self.session
        for name, selector in self.selectors.items():
            session = selection_to_session(name, selector.get_flat(), session)
        self.app_state["last_session"] = session

        if self.onboarding_view:
            self.session["availability"] = self.onboarding_view.get_availability()
            self.settings.update(self.onboarding_view.get_settings())

    def refresh_summary(self, _state: Optional[SelectionState] = None) -> None:
        """Update the onboarding summary counters from the live selectors."""
        if not self.onboarding_view:
            return
        skills = collect_skills(self._flat(EXPERTISE_KIND))
        countries, states, lgas = self._flat(LOCATION_KIND).columns()
        self.onboarding_view.set_summary(len(skills), len(countries), len(states), len(lgas))

    # -------------------------------------------------------------------------
    # ACTIONS
    # -------------------------------------------------------------------------

    def save_session(self) -> None:
        """Persist the current session and settings to the config file."""
        self.sync_config_from_view()
        cfg.save_app_state(self.app_state)
        logger.info("Controller: Session saved.")
        if self.onboarding_view:
            self.onboarding_view.set_status(i18n.t("gui.onboarding.saved"), _SUCCESS_COLOR)

    def start_sync(self) -> None:
        """Validate the session and push it to the profile store in the background."""
        self.sync_config_from_view()

        problems = self.validate_session()
        if problems:
            mb.showerror(i18n.t("gui.dialogs.validation_title"), "\n".join(problems))
            return

        self.onboarding_view.set_busy(True)
        self.onboarding_view.set_status(i18n.t("gui.onboarding.syncing"))
        logger.info("Controller: Starting profile sync.")

        threading.Thread(
            target=threads.sync_profile_task,
            args=(dict(self.session), dict(self.settings), self._on_sync_complete),
            daemon=True
        ).start()

    def validate_session(self) -> List[str]:
        """Problems that would block a sync of the current session."""
        locations = {
            name: self.session.get(f"volunteer_{name}") for name in LOCATION_SCHEMA.column_names
        }
        _, problems = validate_onboarding(
            self.session.get("skills"), locations, self.session.get("availability")
        )
        return problems

    def load_from_profile(self) -> None:
        """Fetch the hosted profile in the background and hydrate the pickers."""
        self.sync_config_from_view()
        self.onboarding_view.set_busy(True)
        self.onboarding_view.set_status(i18n.t("gui.onboarding.loading"))

        threading.Thread(
            target=threads.fetch_profile_task,
            args=(dict(self.settings), self._on_profile_loaded),
            daemon=True
        ).start()

    def reset_session(self) -> None:
        """Revert the session to defaults after confirmation."""
        if mb.askyesno(i18n.t("gui.dialogs.confirm_title"), i18n.t("gui.dialogs.confirm_reset")):
            self.app_state["last_session"] = cfg.get_default_config()
            self.sync_view_from_config()

    # -------------------------------------------------------------------------
    # THREAD CALLBACKS
    # -------------------------------------------------------------------------

    def _on_sync_complete(self, result: Tuple[bool, str, List[str]]) -> None:
        self.app.after(0, lambda: self._handle_sync_result(result))

    def _handle_sync_result(self, result: Tuple[bool, str, List[str]]) -> None:
        ok, message, problems = result
        self.onboarding_view.set_busy(False)

        if ok:
            self.settings["sync_enabled"] = True
            self.onboarding_view.set_status(i18n.t("gui.onboarding.synced"), _SUCCESS_COLOR)
            return

        self.onboarding_view.set_status(i18n.t("gui.onboarding.sync_failed"), _ERROR_COLOR)
        detail = "\n".join(problems) if problems else message
        mb.showerror(i18n.t("gui.dialogs.sync_title"), detail)

    def _on_profile_loaded(self, session: Optional[Dict[str, Any]]) -> None:
        self.app.after(0, lambda: self._apply_profile(session))

    def _apply_profile(self, session: Optional[Dict[str, Any]]) -> None:
        self.onboarding_view.set_busy(False)
        if session is None:
            self.onboarding_view.set_status(i18n.t("gui.onboarding.load_failed"), _ERROR_COLOR)
            return

        self.session.update(session)
        self.sync_view_from_config()
        self.onboarding_view.set_status(i18n.t("gui.onboarding.loaded"), _SUCCESS_COLOR)

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _flat(self, kind: str) -> FlatSelection:
        selector = self.selectors.get(kind)
        return selector.get_flat() if selector else FlatSelection()
