from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes logging and the persisted state, builds one TreeSelector per
taxonomy, assembles the pages, binds them to AppController and runs the
Tk main loop with a log-queue poller.
"""

import logging
import queue
from logging.handlers import QueueHandler
from typing import Dict

import customtkinter as ctk

from diaspora_picker.core.selection import TreeSelector
from diaspora_picker.core.services.taxonomy import load_taxonomy
from diaspora_picker.domain import config as cfg
from diaspora_picker.domain import constants as const
from diaspora_picker.infra.logging import LoggingConfig, configure_logging, get_default_gui_log_path
from diaspora_picker.interface.gui.components.logs_console import LogsFrame
from diaspora_picker.interface.gui.components.main_window import create_main_window
from diaspora_picker.interface.gui.components.onboarding import OnboardingFrame
from diaspora_picker.interface.gui.components.selection_page import SelectionPage
from diaspora_picker.interface.gui.components.sidebar import SidebarFrame
from diaspora_picker.interface.gui.controllers.main_controller import AppController
from diaspora_picker.utils.i18n import i18n

logger = logging.getLogger(__name__)

_PAGE_KINDS = {"expertise": const.EXPERTISE_KIND, "locations": const.LOCATION_KIND}


def main() -> None:
    """Initialize and launch the Graphical User Interface."""
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    log_path = get_default_gui_log_path()
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=log_path))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    gui_log_queue: queue.Queue = queue.Queue()
    gui_log_handler = QueueHandler(gui_log_queue)
    gui_log_handler.setLevel(logging.INFO)
    logging.getLogger().addHandler(gui_log_handler)

    # -----------------------------------------------------------------------------
    # PHASE 2: PERSISTENT STATE RECOVERY
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    locale = app_state["app_settings"].get("locale")
    if locale and locale != i18n.locale:
        i18n.load_locale(locale)

    selectors: Dict[str, TreeSelector] = {
        kind: TreeSelector(load_taxonomy(kind)) for kind in _PAGE_KINDS.values()
    }

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW COMPONENT HIERARCHY CONSTRUCTION
    # -----------------------------------------------------------------------------
    app = create_main_window(app_state["app_settings"])
    controller = AppController(app, app_state, selectors)

    pages: Dict[str, ctk.CTkFrame] = {
        "expertise": SelectionPage(
            app, selectors[const.EXPERTISE_KIND], i18n.t("gui.pages.expertise")
        ),
        "locations": SelectionPage(
            app, selectors[const.LOCATION_KIND], i18n.t("gui.pages.locations")
        ),
    }
    onboarding_frame = OnboardingFrame(app)
    logs_frame = LogsFrame(app, log_path=log_path)
    pages["onboarding"] = onboarding_frame
    pages["logs"] = logs_frame

    def show_frame(name: str) -> None:
        """Switch the visible page."""
        for frame in pages.values():
            frame.grid_forget()
        pages[name].grid(row=0, column=1, sticky="nsew", padx=20, pady=20)
        sidebar_frame.set_active(name)
        if name == "onboarding":
            controller.refresh_summary()

    sidebar_frame = SidebarFrame(app, nav_callback=show_frame)
    sidebar_frame.grid(row=0, column=0, sticky="nsew")

    # -----------------------------------------------------------------------------
    # PHASE 4: CONTROLLER INTEGRATION AND EVENT BINDING
    # -----------------------------------------------------------------------------
    controller.register_views(onboarding_frame, logs_frame, sidebar_frame)
    controller.sync_view_from_config()

    onboarding_frame.btn_save.configure(command=controller.save_session)
    onboarding_frame.btn_sync.configure(command=controller.start_sync)
    onboarding_frame.btn_load_profile.configure(command=controller.load_from_profile)
    onboarding_frame.btn_reset.configure(command=controller.reset_session)

    show_frame("expertise")

    # -----------------------------------------------------------------------------
    # PHASE 5: BACKGROUND POLLING
    # -----------------------------------------------------------------------------
    log_formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%H:%M:%S")

    def poll_log_queue() -> None:
        """Flush records queued by background threads into the console."""
        while True:
            try:
                record = gui_log_queue.get_nowait()
            except queue.Empty:
                break
            logs_frame.append_log(log_formatter.format(record))
        app.after(100, poll_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 6: LIFECYCLE FINALIZATION
    # -----------------------------------------------------------------------------
    def on_closing() -> None:
        """Persist session state and terminate the process."""
        controller.sync_config_from_view()
        cfg.save_app_state(app_state)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.after(100, poll_log_queue)

    app.mainloop()


if __name__ == "__main__":
    main()
