from __future__ import annotations

"""
Unit tests for the GUI controller.

Views are MagicMocks and the Tk loop is simulated by running app.after
callbacks immediately, so the controller can be driven without a display.
"""

from unittest.mock import MagicMock, patch

import pytest

from diaspora_picker.core.selection import TreeSelector
from diaspora_picker.domain.config import get_default_app_state
from diaspora_picker.interface.gui.controllers.main_controller import AppController

_CONTROLLER = "diaspora_picker.interface.gui.controllers.main_controller"


@pytest.fixture
def app() -> MagicMock:
    mock_app = MagicMock()
    mock_app.after.side_effect = lambda _delay, fn: fn()
    return mock_app


@pytest.fixture
def controller(app, mini_expertise, mini_locations, session_dict) -> AppController:
    state = get_default_app_state()
    state["last_session"] = session_dict
    selectors = {
        "expertise": TreeSelector(mini_expertise),
        "location": TreeSelector(mini_locations),
    }
    ctrl = AppController(app, state, selectors)

    onboarding = MagicMock()
    onboarding.get_availability.return_value = dict(session_dict["availability"])
    onboarding.get_settings.return_value = {"backend_url": "https://db", "api_key": "k", "profile_id": "1"}
    ctrl.register_views(onboarding, MagicMock(), MagicMock())
    return ctrl


@pytest.mark.gui
def test_sync_view_from_config_hydrates_selectors(controller) -> None:
    """The stored session is pushed into both pickers and the form."""
    controller.sync_view_from_config()

    assert controller.selectors["expertise"].is_checked("science", "data", "ml")
    assert controller.selectors["location"].is_checked("Nigeria", "Lagos", "Ikeja")
    controller.onboarding_view.set_availability.assert_called_once()
    controller.onboarding_view.set_summary.assert_called_with(2, 1, 1, 1)


@pytest.mark.gui
def test_selection_change_refreshes_summary(controller) -> None:
    """Every selection change recounts the summary."""
    controller.selectors["location"].set_checked("country", "Ghana")
    controller.onboarding_view.set_summary.assert_called_with(0, 1, 0, 0)


@pytest.mark.gui
def test_sync_config_from_view_scrapes_selectors(controller) -> None:
    """Picker selections and form values end up in the session."""
    controller.selectors["location"].set_checked("state", "Ghana", "Ashanti")
    controller.selectors["expertise"].set_checked("skill", "tech", "ai", "nlp")

    controller.sync_config_from_view()

    assert controller.session["volunteer_countries"] == ["Ghana"]
    assert controller.session["volunteer_states"] == ["Ashanti"]
    assert controller.session["skills"] == ["nlp"]
    assert controller.settings["backend_url"] == "https://db"


@pytest.mark.gui
def test_save_session_persists(controller, isolated_config) -> None:
    """Saving writes the config file and reports success."""
    controller.save_session()

    assert isolated_config.exists()
    controller.onboarding_view.set_status.assert_called_once()


@pytest.mark.gui
def test_start_sync_blocks_invalid_session(controller) -> None:
    """Validation problems are shown and no thread is started."""
    with patch(f"{_CONTROLLER}.mb") as mock_mb, patch(f"{_CONTROLLER}.threading.Thread") as mock_thread:
        controller.start_sync()

    mock_mb.showerror.assert_called_once()
    assert "Select at least one skill." in mock_mb.showerror.call_args[0][1]
    mock_thread.assert_not_called()


@pytest.mark.gui
def test_start_sync_launches_worker(controller) -> None:
    """A valid session is handed to the sync worker on a daemon thread."""
    controller.selectors["expertise"].set_checked("skill", "tech", "ai", "ml")
    controller.selectors["location"].set_checked("country", "Ghana")

    with patch(f"{_CONTROLLER}.threading.Thread") as mock_thread:
        controller.start_sync()

    kwargs = mock_thread.call_args.kwargs
    assert kwargs["daemon"] is True
    session_arg, settings_arg, _ = kwargs["args"]
    assert session_arg["skills"] == ["ml"]
    assert settings_arg["profile_id"] == "1"
    mock_thread.return_value.start.assert_called_once()
    controller.onboarding_view.set_busy.assert_called_with(True)


@pytest.mark.gui
def test_sync_results_are_applied(controller) -> None:
    """Success enables sync; failure shows the problems."""
    controller._on_sync_complete((True, "Success", []))
    assert controller.settings["sync_enabled"] is True
    controller.onboarding_view.set_busy.assert_called_with(False)

    with patch(f"{_CONTROLLER}.mb") as mock_mb:
        controller._on_sync_complete((False, "HTTP 500: boom", []))
    mock_mb.showerror.assert_called_once()
    assert mock_mb.showerror.call_args[0][1] == "HTTP 500: boom"


@pytest.mark.gui
def test_profile_load_updates_pickers(controller) -> None:
    """A loaded profile replaces the session and rehydrates the pickers."""
    loaded = dict(controller.session, skills=["stats"], volunteer_countries=["Ghana"],
                  volunteer_states=[], volunteer_lgas=[])

    controller._on_profile_loaded(loaded)

    assert controller.selectors["expertise"].is_checked("science", "data", "stats")
    assert not controller.selectors["expertise"].is_checked("tech", "ai", "ml")
    assert controller.selectors["location"].get_flat().roots == ["Ghana"]


@pytest.mark.gui
def test_failed_profile_load_keeps_session(controller, session_dict) -> None:
    """None from the worker leaves the session untouched."""
    controller._on_profile_loaded(None)
    assert controller.session["skills"] == session_dict["skills"]


@pytest.mark.gui
def test_reset_session_requires_confirmation(controller) -> None:
    """Reset only happens when the user confirms."""
    with patch(f"{_CONTROLLER}.mb") as mock_mb:
        mock_mb.askyesno.return_value = False
        controller.reset_session()
        assert controller.session["skills"] == ["ml", "frontend"]

        mock_mb.askyesno.return_value = True
        controller.reset_session()

    assert controller.session["skills"] == []
    assert controller.selectors["location"].get_selected() == []
