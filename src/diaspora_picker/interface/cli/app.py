from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the headless picker: logging bootstrap, session loading
(config file or hosted profile), toggle replay on a TreeSelector,
persistence, sync and rendering of the resulting selection.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from diaspora_picker.core.selection import TreeSelector, expansion_key
from diaspora_picker.core.services.session import (
    selection_from_session,
    selection_to_session,
    session_from_profile,
    sync_session,
)
from diaspora_picker.core.services.taxonomy import flatten_options, load_taxonomy
from diaspora_picker.domain.config import get_default_app_state, load_app_state, save_app_state
from diaspora_picker.domain.selection_models import NodeState
from diaspora_picker.domain.taxonomy_models import Taxonomy, TaxonomyError
from diaspora_picker.infra.logging import LoggingConfig, configure_logging, get_logger
from diaspora_picker.infra.network import fetch_profile
from diaspora_picker.interface.cli import args as cli_args
from diaspora_picker.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_ARGS = 2
EXIT_INTERRUPTED = 130


# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad arguments,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (CLI-specific: Console stderr)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None))
    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Resolve base state (Default vs Persistent)
    state = get_default_app_state() if args.use_defaults else load_app_state()

    if args.dump_config:
        print(json.dumps(state, ensure_ascii=False, indent=2))
        return EXIT_OK

    try:
        return _run(args, state)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED


def _run(args: Any, state: Dict[str, Any]) -> int:
    # 4. Taxonomy and toggle specs
    try:
        taxonomy = load_taxonomy(args.kind)
    except TaxonomyError as e:
        return _error(i18n.t("cli.errors.taxonomy", error=str(e)), EXIT_FAILURE)

    if args.list_options:
        _print_options(taxonomy, args.json_output)
        return EXIT_OK

    try:
        toggles = cli_args.parse_toggles(args.toggles, taxonomy.schema)
    except cli_args.ToggleSpecError as e:
        return _error(str(e), EXIT_BAD_ARGS)

    for request in toggles:
        if taxonomy.find(*request.keys) is None:
            return _error(
                i18n.t("cli.errors.unknown_path", path=cli_args.PATH_SEPARATOR.join(request.keys)),
                EXIT_BAD_ARGS,
            )

    # 5. Session source
    settings = state["app_settings"]
    session = state["last_session"]
    if args.from_profile:
        row = fetch_profile(settings.get("backend_url"), settings.get("api_key"), settings.get("profile_id"))
        if row is None:
            return _error(i18n.t("cli.errors.profile_unavailable"), EXIT_FAILURE)
        session = session_from_profile(row)

    # 6. Replay interactions
    selector = TreeSelector(taxonomy, selection_from_session(taxonomy, session))
    for request in toggles:
        selector.set_checked(request.level, *request.keys)
    for key in args.expand:
        selector.toggle_expand(key)

    session = selection_to_session(taxonomy.schema.name, selector.get_flat(), session)

    # 7. Persistence and sync
    if args.save:
        state["last_session"] = session
        save_app_state(state)
        logger.info("Session saved to configuration file.")

    exit_code = EXIT_OK
    sync_message = None
    if args.sync:
        ok, sync_message, problems = sync_session(session, settings)
        for problem in problems:
            print(f"ERROR: {problem}", file=sys.stderr)
        if not ok:
            print(f"ERROR: {i18n.t('cli.errors.sync_fail', error=sync_message)}", file=sys.stderr)
            exit_code = EXIT_FAILURE

    # 8. Output rendering phase
    if args.json_output:
        print(json.dumps(_json_view(selector, args.flat), ensure_ascii=False, indent=2))
    else:
        if args.print_tree:
            print("\n".join(render_tree(selector)))
        _print_human_summary(selector, args.flat)
        if args.sync and exit_code == EXIT_OK:
            print(i18n.t("cli.status.synced"))

    return exit_code


# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def render_tree(selector: TreeSelector) -> List[str]:
    """
    Text rendering of the picker as the GUI would show it.

    Checkboxes read '[x]' or '[ ]' (absent entries display unchecked);
    expandable rows carry '+' when collapsed and '-' when expanded, and
    children are listed only under expanded rows.
    """
    lines: List[str] = []
    for root in selector.taxonomy.roots:
        root_key = expansion_key(root.id)
        lines.append(_row(0, selector.is_expanded(root_key), selector.status(root.id), root.label))
        if not selector.is_expanded(root_key):
            continue
        for branch in root.children:
            branch_key = expansion_key(root.id, branch.id)
            lines.append(_row(
                1, selector.is_expanded(branch_key), selector.status(root.id, branch.id), branch.label
            ))
            if not selector.is_expanded(branch_key):
                continue
            for leaf in branch.children:
                lines.append(_row(2, None, selector.status(root.id, branch.id, leaf.id), leaf.label))
    return lines


def _row(depth: int, expanded: Optional[bool], status: NodeState, label: str) -> str:
    marker = " " if expanded is None else ("-" if expanded else "+")
    box = "[x]" if status is NodeState.CHECKED else "[ ]"
    return f"{'    ' * depth}{marker} {box} {label}"


def _json_view(selector: TreeSelector, flat: bool) -> Dict[str, Any]:
    schema = selector.schema
    if flat:
        selection: Any = selector.get_flat().to_dict(schema)
    else:
        selection = [entry.to_dict(schema) for entry in selector.get_selected()]
    return {"kind": schema.name, "selected": selection}


def _print_options(taxonomy: Taxonomy, as_json: bool) -> None:
    options = flatten_options(taxonomy)
    if as_json:
        print(json.dumps(options, ensure_ascii=False, indent=2))
        return
    for option in options:
        print(f"{option['value']}\t{option['label']}")


def _print_human_summary(selector: TreeSelector, flat: bool) -> None:
    schema = selector.schema
    if flat:
        for name, values in selector.get_flat().to_dict(schema).items():
            print(f"{name}: {', '.join(values) if values else '-'}")
        return

    entries = selector.get_selected()
    if not entries:
        print(i18n.t("cli.status.empty"))
        return
    for entry in entries:
        print(f"{schema.level_names[0]} {entry.root}")
        print(f"  {schema.branch_key}: {', '.join(entry.branches) if entry.branches else '-'}")
        print(f"  {schema.leaf_key}: {', '.join(entry.leaves) if entry.leaves else '-'}")


def _error(msg: str, code: int) -> int:
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
