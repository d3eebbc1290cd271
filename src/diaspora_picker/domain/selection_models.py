from __future__ import annotations

"""
Selection State Data Models.

Defines the immutable checkbox state mirrored over a tri-level taxonomy and
the read-only views derived from it (nested projection and flat columns).
Every update of the state produces new objects. The nested mappings are
wrapped in read-only proxies on construction, so the state can be shared
freely but is not hashable.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from diaspora_picker.domain.taxonomy_models import TreeSchema


class NodeState(Enum):
    """Explicit checkbox status of one node, including 'never touched'."""
    ABSENT = "absent"
    UNCHECKED = "unchecked"
    CHECKED = "checked"


# -----------------------------------------------------------------------------
# NESTED STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BranchSelection:
    """
    Level-2 entry: its own flag plus the level-3 flags below it.

    Attributes:
        checked: Checkbox flag of the level-2 node.
        leaves: Level-3 key to checkbox flag.
    """
    checked: bool = False
    leaves: Mapping[str, bool] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "leaves", _read_only(self.leaves))


@dataclass(frozen=True)
class RootSelection:
    """
    Level-1 entry: its own flag plus the level-2 entries below it.

    Attributes:
        checked: Checkbox flag of the level-1 node.
        branches: Level-2 key to branch entry.
    """
    checked: bool = False
    branches: Mapping[str, BranchSelection] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", _read_only(self.branches))


@dataclass(frozen=True)
class SelectionState:
    """
    Complete checkbox state of one tree instance.

    Attributes:
        roots: Level-1 key to root entry. Only touched roots are present.
    """
    roots: Mapping[str, RootSelection] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "roots", _read_only(self.roots))

    def __contains__(self, l1: object) -> bool:
        return l1 in self.roots

    def __len__(self) -> int:
        return len(self.roots)

    def get(self, l1: str) -> Optional[RootSelection]:
        return self.roots.get(l1)

    def status(
            self,
            l1: str,
            l2: Optional[str] = None,
            l3: Optional[str] = None
    ) -> NodeState:
        """
        Resolve the status of the node addressed by a key path.

        A node whose entry (or any ancestor entry) was never created is
        reported as ABSENT rather than coerced to unchecked.

        Args:
            l1: Level-1 key.
            l2: Optional level-2 key.
            l3: Optional level-3 key (requires l2).

        Returns:
            NodeState: ABSENT, UNCHECKED or CHECKED.
        """
        root = self.roots.get(l1)
        if root is None:
            return NodeState.ABSENT
        if l2 is None:
            return _as_state(root.checked)

        branch = root.branches.get(l2)
        if branch is None:
            return NodeState.ABSENT
        if l3 is None:
            return _as_state(branch.checked)

        if l3 not in branch.leaves:
            return NodeState.ABSENT
        return _as_state(branch.leaves[l3])

    def is_checked(self, l1: str, l2: Optional[str] = None, l3: Optional[str] = None) -> bool:
        return self.status(l1, l2, l3) is NodeState.CHECKED

    def to_dict(self, schema: TreeSchema) -> Dict[str, Any]:
        """Render the nested mapping using the schema's key names."""
        return {
            l1: {
                "checked": root.checked,
                schema.branch_key: {
                    l2: {
                        "checked": branch.checked,
                        schema.leaf_key: dict(branch.leaves),
                    }
                    for l2, branch in root.branches.items()
                },
            }
            for l1, root in self.roots.items()
        }


# -----------------------------------------------------------------------------
# DERIVED VIEWS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SelectedBranch:
    """
    One entry of the projected selection.

    Attributes:
        root: Level-1 key.
        branches: Checked level-2 keys under the root.
        leaves: Checked level-3 keys under any level-2 entry of the root.
    """
    root: str
    branches: List[str] = field(default_factory=list)
    leaves: List[str] = field(default_factory=list)

    def to_dict(self, schema: TreeSchema) -> Dict[str, Any]:
        return {
            schema.root_key: self.root,
            schema.branch_key: list(self.branches),
            schema.leaf_key: list(self.leaves),
        }


@dataclass(frozen=True)
class FlatSelection:
    """
    Selection flattened into three parallel lists.

    Attributes:
        roots: Checked level-1 keys.
        branches: (l1, l2) pairs whose level-2 flag is checked.
        leaves: (l1, l2, l3) triples whose level-3 flag is checked.
    """
    roots: List[str] = field(default_factory=list)
    branches: List[Tuple[str, str]] = field(default_factory=list)
    leaves: List[Tuple[str, str, str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.roots or self.branches or self.leaves)

    def columns(self) -> Tuple[List[str], List[str], List[str]]:
        """Return the plain key lists stored as separate profile columns."""
        return (
            list(self.roots),
            [l2 for _, l2 in self.branches],
            [l3 for _, _, l3 in self.leaves],
        )

    def to_dict(self, schema: TreeSchema) -> Dict[str, List[str]]:
        roots, branches, leaves = self.columns()
        return dict(zip(schema.column_names, (roots, branches, leaves)))


def _as_state(flag: bool) -> NodeState:
    return NodeState.CHECKED if flag else NodeState.UNCHECKED


def _read_only(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))
