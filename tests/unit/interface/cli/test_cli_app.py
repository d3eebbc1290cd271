from __future__ import annotations

"""
Unit tests for the CLI application controller (in-process).

Logging bootstrap is patched out and the config file is isolated, so each
test only observes stdout/stderr and the returned exit code.
"""

import json
from unittest.mock import patch

import pytest

from diaspora_picker.core.selection import TreeSelector
from diaspora_picker.interface.cli.app import EXIT_BAD_ARGS, EXIT_FAILURE, EXIT_OK, main, render_tree


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("diaspora_picker.interface.cli.app.configure_logging"):
        yield


def test_json_projection_for_locations(isolated_config, capsys):
    """Toggles are replayed and the projection is printed as JSON."""
    code = main([
        "--use-defaults", "-k", "location",
        "-t", "lga:Nigeria/Lagos/Ikeja",
        "--json",
    ])

    assert code == EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["kind"] == "location"
    assert out["selected"] == [{"country": "Nigeria", "states": ["Lagos"], "lgas": ["Ikeja"]}]


def test_root_toggle_after_leaf_is_dropped(isolated_config, capsys):
    """A second click on the root resets it and the entry disappears."""
    code = main([
        "--use-defaults",
        "-t", "skill:information_technology/artificial_intelligence/machine_learning",
        "-t", "domain:information_technology",
        "--json",
    ])

    assert code == EXIT_OK
    assert json.loads(capsys.readouterr().out)["selected"] == []


def test_flat_json_columns(isolated_config, capsys):
    """--flat prints the three flat lists."""
    main(["--use-defaults", "-k", "location", "-t", "state:Ghana/Ashanti", "--json", "--flat"])

    out = json.loads(capsys.readouterr().out)
    assert out["selected"] == {"countries": ["Ghana"], "states": ["Ashanti"], "lgas": []}


def test_bad_toggle_spec_exits_2(isolated_config, capsys):
    """Malformed specs are argument errors."""
    assert main(["--use-defaults", "-t", "skill:only-one-key"]) == EXIT_BAD_ARGS
    assert "ERROR" in capsys.readouterr().err


def test_unknown_path_exits_2(isolated_config, capsys):
    """Paths that are not part of the taxonomy are refused before replay."""
    assert main(["--use-defaults", "-k", "location", "-t", "country:Atlantis"]) == EXIT_BAD_ARGS
    assert "Atlantis" in capsys.readouterr().err


def test_save_persists_session(isolated_config, capsys):
    """--save writes the updated location columns to the config file."""
    code = main(["-k", "location", "-t", "lga:Nigeria/Lagos/Ikeja", "--save"])

    assert code == EXIT_OK
    stored = json.loads(isolated_config.read_text(encoding="utf-8"))
    assert stored["last_session"]["volunteer_countries"] == ["Nigeria"]
    assert stored["last_session"]["volunteer_lgas"] == ["Ikeja"]


def test_saved_session_is_hydrated_next_run(isolated_config, capsys):
    """Selections saved earlier are restored before new toggles."""
    main(["-k", "location", "-t", "country:Ghana", "--save"])
    capsys.readouterr()

    main(["-k", "location", "-t", "country:Kenya", "--json", "--flat"])
    out = json.loads(capsys.readouterr().out)
    assert out["selected"]["countries"] == ["Ghana", "Kenya"]


def test_sync_without_settings_fails(isolated_config, capsys):
    """Sync with an invalid session prints the validation problems."""
    code = main(["--use-defaults", "--sync"])

    assert code == EXIT_FAILURE
    assert "Select at least one skill." in capsys.readouterr().err


def test_from_profile_unreachable(isolated_config, capsys):
    """A profile that cannot be fetched is a failure."""
    with patch("diaspora_picker.interface.cli.app.fetch_profile", return_value=None):
        assert main(["--use-defaults", "--from-profile"]) == EXIT_FAILURE


def test_dump_config(isolated_config, capsys):
    """--dump-config prints the resolved state and exits."""
    assert main(["--use-defaults", "--dump-config"]) == EXIT_OK
    assert "last_session" in json.loads(capsys.readouterr().out)


def test_list_options_json(isolated_config, capsys, mini_locations):
    """--list-options prints every leaf option and ignores toggles."""
    with patch("diaspora_picker.interface.cli.app.load_taxonomy", return_value=mini_locations):
        code = main(["--use-defaults", "-k", "location", "--list-options", "--json", "-t", "bogus"])

    assert code == EXIT_OK
    options = json.loads(capsys.readouterr().out)
    assert len(options) == 5
    assert options[0] == {"label": "Ikeja, Lagos, Nigeria", "value": "ikeja-lagos-nigeria"}


def test_list_options_text(isolated_config, capsys, mini_expertise):
    """Without --json each option is printed as value, tab, label."""
    with patch("diaspora_picker.interface.cli.app.load_taxonomy", return_value=mini_expertise):
        assert main(["--use-defaults", "--list-options"]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "technology-web-frontend\tTechnology > Web > Frontend"
    assert len(lines) == 6


def test_render_tree_respects_expansion(mini_expertise):
    """Children are shown only under expanded rows."""
    selector = TreeSelector(mini_expertise)
    selector.set_checked("skill", "tech", "web", "frontend")

    collapsed = render_tree(selector)
    assert collapsed == ["+ [x] Technology", "+ [ ] Science"]

    selector.toggle_expand("tech")
    selector.toggle_expand("tech-web")
    expanded = render_tree(selector)
    assert expanded[:4] == [
        "- [x] Technology",
        "    - [x] Web",
        "          [x] Frontend",
        "          [ ] Backend",
    ]
    assert expanded[4] == "    + [ ] AI"
