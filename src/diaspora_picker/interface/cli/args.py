from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the picker and translates the raw
'--toggle LEVEL:PATH' specs into structured toggle requests.
"""

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from diaspora_picker.domain.constants import EXPERTISE_KIND, LOCATION_KIND
from diaspora_picker.domain.taxonomy_models import Level, TreeSchema
from diaspora_picker.utils.i18n import i18n

PATH_SEPARATOR = "/"


class ToggleSpecError(ValueError):
    """A '--toggle' value could not be interpreted."""


@dataclass(frozen=True)
class ToggleRequest:
    """One parsed '--toggle' value."""
    level: Level
    keys: Tuple[str, ...]


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the DiasporaPicker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="diaspora-picker",
        description=i18n.t("app.description"),
    )

    # --- Tree Selection ---
    p.add_argument(
        "-k", "--kind",
        choices=[EXPERTISE_KIND, LOCATION_KIND],
        default=EXPERTISE_KIND,
        help=i18n.t("cli.args.kind"),
    )
    p.add_argument(
        "-t", "--toggle",
        dest="toggles",
        action="append",
        default=[],
        metavar="LEVEL:PATH",
        help=i18n.t("cli.args.toggle"),
    )
    p.add_argument(
        "-e", "--expand",
        dest="expand",
        action="append",
        default=[],
        metavar="KEY",
        help=i18n.t("cli.args.expand"),
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help=i18n.t("cli.args.print_tree"),
    )
    p.add_argument(
        "--list-options",
        action="store_true",
        help=i18n.t("cli.args.list_options"),
    )

    # --- Session Sources and Targets ---
    p.add_argument(
        "--from-profile",
        action="store_true",
        help=i18n.t("cli.args.from_profile"),
    )
    p.add_argument(
        "--save",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--sync",
        action="store_true",
        help=i18n.t("cli.args.sync"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--flat",
        action="store_true",
        help=i18n.t("cli.args.flat"),
    )

    return p


# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def parse_toggle(spec: str, schema: TreeSchema) -> ToggleRequest:
    """
    Interpret one 'LEVEL:PATH' value.

    LEVEL is a level name of the schema ('skill', 'state', ...) or its
    number (1-3). PATH holds exactly as many '/'-separated keys as the
    level is deep; the last key keeps any further separators.

    Raises:
        ToggleSpecError: If the spec is malformed.
    """
    level_part, sep, path_part = spec.partition(":")
    if not sep:
        raise ToggleSpecError(f"Toggle '{spec}' must look like LEVEL:PATH.")

    level_token = level_part.strip()
    try:
        level = schema.level(int(level_token) if level_token.isdigit() else level_token)
    except ValueError as e:
        raise ToggleSpecError(f"Toggle '{spec}': {e}") from e

    # The deepest key may itself contain the separator (e.g. LGA "Abua/Odual")
    keys = tuple(k.strip() for k in path_part.split(PATH_SEPARATOR, int(level) - 1))
    if len(keys) != int(level) or not all(keys):
        raise ToggleSpecError(
            f"Toggle '{spec}': a {schema.level_name(level)} path needs {int(level)} key(s)."
        )
    return ToggleRequest(level=level, keys=keys)


def parse_toggles(specs: Optional[List[str]], schema: TreeSchema) -> List[ToggleRequest]:
    return [parse_toggle(spec, schema) for spec in specs or []]
