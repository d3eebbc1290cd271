from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Defaults and flag mapping of the parser.
2. LEVEL:PATH toggle interpretation per picker.
3. Rejection of malformed toggle specs.
"""

import pytest

from diaspora_picker.domain.taxonomy_models import EXPERTISE_SCHEMA, LOCATION_SCHEMA, Level
from diaspora_picker.interface.cli.args import (
    ToggleRequest,
    ToggleSpecError,
    build_parser,
    parse_toggle,
    parse_toggles,
)


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_defaults():
    """Without flags the expertise picker is used and nothing is persisted."""
    args = parse_args([])

    assert args.kind == "expertise"
    assert args.toggles == []
    assert args.expand == []
    assert args.save is False
    assert args.sync is False
    assert args.json_output is False
    assert args.list_options is False
    assert args.debug is False


def test_cli_repeatable_flags():
    """--toggle and --expand accumulate in order."""
    args = parse_args([
        "-k", "location",
        "-t", "lga:Nigeria/Lagos/Ikeja",
        "--toggle", "country:Ghana",
        "-e", "Nigeria",
        "--json", "--flat", "--save", "--sync",
    ])

    assert args.kind == "location"
    assert args.toggles == ["lga:Nigeria/Lagos/Ikeja", "country:Ghana"]
    assert args.expand == ["Nigeria"]
    assert args.json_output and args.flat and args.save and args.sync


def test_cli_rejects_unknown_kind():
    """argparse exits with status 2 on an invalid choice."""
    with pytest.raises(SystemExit) as exc:
        parse_args(["--kind", "planets"])
    assert exc.value.code == 2


def test_parse_toggle_by_name_and_number():
    """Levels are accepted by name or depth."""
    assert parse_toggle("skill:tech/ai/ml", EXPERTISE_SCHEMA) == ToggleRequest(
        Level.LEAF, ("tech", "ai", "ml")
    )
    assert parse_toggle("2:tech/ai", EXPERTISE_SCHEMA) == ToggleRequest(Level.BRANCH, ("tech", "ai"))
    assert parse_toggle(" Country : Ghana ", LOCATION_SCHEMA) == ToggleRequest(Level.ROOT, ("Ghana",))


def test_parse_toggle_keeps_separator_in_last_key():
    """LGA names containing '/' stay whole."""
    request = parse_toggle("lga:Nigeria/Rivers/Abua/Odual", LOCATION_SCHEMA)
    assert request.keys == ("Nigeria", "Rivers", "Abua/Odual")


@pytest.mark.parametrize("spec", [
    "Nigeria/Lagos",
    "planet:Mars",
    "skill:tech/ai",
    "state:Nigeria/",
    "4:a/b/c",
])
def test_parse_toggle_rejects_malformed(spec):
    """Missing level, unknown level or short paths raise ToggleSpecError."""
    schema = EXPERTISE_SCHEMA if spec.startswith("skill") else LOCATION_SCHEMA
    with pytest.raises(ToggleSpecError):
        parse_toggle(spec, schema)


def test_parse_toggles_handles_none():
    """No specs yields no requests."""
    assert parse_toggles(None, LOCATION_SCHEMA) == []
    assert len(parse_toggles(["country:Ghana", "state:Ghana/Ashanti"], LOCATION_SCHEMA)) == 2


def test_every_flag_has_translated_help():
    """Help strings come from the locale files, never raw keys."""
    for action in build_parser()._actions:
        if action.dest == "help":
            continue
        assert action.help, f"{action.dest} has no help text"
        assert not action.help.startswith("cli.args."), f"{action.dest} help is untranslated"
