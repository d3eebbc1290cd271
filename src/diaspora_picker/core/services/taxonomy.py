from __future__ import annotations

"""
Static Taxonomy Service.

Loads the bundled taxonomy resources (expertise and African locations),
normalizes their two native JSON shapes into TaxonomyNode trees and keeps
one read-only instance per kind for the process lifetime. Also derives the
flat label/value option lists used by searchable pickers.
"""

import json
import logging
import re
from functools import lru_cache
from typing import Any, Callable, Dict, List, Sequence, Tuple

from diaspora_picker.domain.constants import EXPERTISE_KIND, LOCATION_KIND, TAXONOMY_RESOURCES
from diaspora_picker.domain.taxonomy_models import (
    EXPERTISE_SCHEMA,
    LOCATION_SCHEMA,
    Taxonomy,
    TaxonomyError,
    TaxonomyNode,
    TreeSchema,
)
from diaspora_picker.infra.fs import get_resource_path

logger = logging.getLogger(__name__)

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def schema_for(kind: str) -> TreeSchema:
    """
    Return the schema of a taxonomy kind.

    Raises:
        TaxonomyError: If the kind is unknown.
    """
    if kind not in _PARSERS:
        raise TaxonomyError(f"Unknown taxonomy kind '{kind}'. Expected one of {sorted(_PARSERS)}.")
    return _PARSERS[kind][0]


@lru_cache(maxsize=None)
def load_taxonomy(kind: str) -> Taxonomy:
    """
    Load a bundled taxonomy once and share it for the process lifetime.

    Args:
        kind: 'expertise' or 'location'.

    Returns:
        Taxonomy: The immutable tree.

    Raises:
        TaxonomyError: If the kind is unknown or the resource is malformed.
    """
    schema_for(kind)
    return read_taxonomy_file(get_resource_path(TAXONOMY_RESOURCES[kind]), kind)


def read_taxonomy_file(path: str, kind: str) -> Taxonomy:
    """
    Parse a taxonomy JSON file without caching.

    Raises:
        TaxonomyError: If the file is unreadable or has the wrong shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise TaxonomyError(f"Cannot read taxonomy resource '{path}': {e}") from e

    taxonomy = parse_taxonomy(data, kind)
    logger.debug(
        f"Taxonomy: Loaded {kind} tree with {len(taxonomy)} roots "
        f"and {sum(1 for _ in taxonomy.paths())} leaves."
    )
    return taxonomy


def parse_taxonomy(data: Any, kind: str) -> Taxonomy:
    """Normalize already decoded JSON data of the given kind."""
    schema = schema_for(kind)
    parser = _PARSERS[kind][1]

    if not isinstance(data, list):
        raise TaxonomyError(f"{kind} taxonomy root must be a list, got {type(data).__name__}.")

    try:
        roots = tuple(parser(item) for item in data)
    except (KeyError, TypeError, AttributeError) as e:
        raise TaxonomyError(f"Malformed {kind} taxonomy entry: {e!r}") from e

    _ensure_unique(roots, kind)
    return Taxonomy(schema=schema, roots=roots)


def slugify(text: str) -> str:
    """Lower-case, collapse non-alphanumeric runs to '-', trim dashes."""
    return _SLUG_PATTERN.sub("-", text.lower()).strip("-")


def flatten_options(taxonomy: Taxonomy) -> List[Dict[str, str]]:
    """
    List every leaf as a label/value option.

    Locations read 'LGA, State, Country'; expertise reads
    'Domain > Category > Skill'. The value is the slug of the label.
    """
    options: List[Dict[str, str]] = []
    for root in taxonomy.roots:
        for branch in root.children:
            for leaf in branch.children:
                if taxonomy.schema.name == LOCATION_SCHEMA.name:
                    label = f"{leaf.label}, {branch.label}, {root.label}"
                else:
                    label = f"{root.label} > {branch.label} > {leaf.label}"
                options.append({"label": label, "value": slugify(label)})
    return options


# -----------------------------------------------------------------------------
# SHAPE PARSERS
# -----------------------------------------------------------------------------

def _parse_expertise_domain(item: Dict[str, Any]) -> TaxonomyNode:
    """{id, label, children: [{id, label, subChildren: [{id, label}]}]}"""
    return TaxonomyNode(
        id=str(item["id"]),
        label=str(item.get("label") or item["id"]),
        children=tuple(
            TaxonomyNode(
                id=str(category["id"]),
                label=str(category.get("label") or category["id"]),
                children=tuple(
                    TaxonomyNode(id=str(skill["id"]), label=str(skill.get("label") or skill["id"]))
                    for skill in category["subChildren"]
                ),
            )
            for category in item["children"]
        ),
    )


def _parse_location_country(item: Dict[str, Any]) -> TaxonomyNode:
    """{country, states: [{state, lgas: [str]}]}"""
    country = str(item["country"])
    return TaxonomyNode(
        id=country,
        label=country,
        children=tuple(
            TaxonomyNode(
                id=str(state["state"]),
                label=str(state["state"]),
                children=tuple(TaxonomyNode(id=str(lga), label=str(lga)) for lga in state["lgas"]),
            )
            for state in item["states"]
        ),
    )


_PARSERS: Dict[str, Tuple[TreeSchema, Callable[[Dict[str, Any]], TaxonomyNode]]] = {
    EXPERTISE_KIND: (EXPERTISE_SCHEMA, _parse_expertise_domain),
    LOCATION_KIND: (LOCATION_SCHEMA, _parse_location_country),
}


def _ensure_unique(nodes: Sequence[TaxonomyNode], kind: str, parent: str = "<root>") -> None:
    """Reject duplicate ids among siblings, recursively."""
    seen = set()
    for node in nodes:
        if node.id in seen:
            raise TaxonomyError(f"Duplicate {kind} id '{node.id}' under '{parent}'.")
        seen.add(node.id)
        _ensure_unique(node.children, kind, node.id)
