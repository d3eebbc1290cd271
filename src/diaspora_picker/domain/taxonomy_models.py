from __future__ import annotations

"""
Static Taxonomy Data Models.

Provides the immutable node and tree definitions behind the tri-level
pickers (domain/category/skill and country/state/LGA), together with the
schema object that names the three levels of one tree instance.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple, Union


class TaxonomyError(ValueError):
    """Raised when a taxonomy resource does not have the expected shape."""


class Level(IntEnum):
    """Depth of a node inside a tri-level tree."""
    ROOT = 1
    BRANCH = 2
    LEAF = 3


# -----------------------------------------------------------------------------
# SCHEMA
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeSchema:
    """
    Naming of one tri-level tree instance.

    Attributes:
        name: Identifier of the tree kind ('expertise', 'location').
        level_names: Public names of the three levels, root first.
        branch_key: Key under which level-2 selections are rendered.
        leaf_key: Key under which level-3 selections are rendered.
        column_names: Plural names of the three flat selection lists.
    """
    name: str
    level_names: Tuple[str, str, str]
    branch_key: str
    leaf_key: str
    column_names: Tuple[str, str, str]

    @property
    def root_key(self) -> str:
        """Key under which the level-1 id is rendered in projections."""
        return self.level_names[0]

    def level(self, value: Union[Level, str, int]) -> Level:
        """
        Resolve a level given as enum member, level name or depth.

        Raises:
            ValueError: If the value does not name a level of this schema.
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in self.level_names:
                return Level(self.level_names.index(key) + 1)
            raise ValueError(
                f"Unknown {self.name} level '{value}'. Expected one of {list(self.level_names)}."
            )
        return Level(int(value))

    def level_name(self, level: Level) -> str:
        return self.level_names[int(level) - 1]


EXPERTISE_SCHEMA = TreeSchema(
    name="expertise",
    level_names=("domain", "category", "skill"),
    branch_key="categories",
    leaf_key="skills",
    column_names=("domains", "categories", "skills"),
)

LOCATION_SCHEMA = TreeSchema(
    name="location",
    level_names=("country", "state", "lga"),
    branch_key="states",
    leaf_key="lgas",
    column_names=("countries", "states", "lgas"),
)


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TaxonomyNode:
    """
    Represents one checkable entry of the static tree.

    Attributes:
        id: Key of the node, unique among its siblings.
        label: Human readable caption.
        children: Child nodes; empty for level-3 leaves.
    """
    id: str
    label: str
    children: Tuple["TaxonomyNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def child(self, node_id: str) -> Optional["TaxonomyNode"]:
        for node in self.children:
            if node.id == node_id:
                return node
        return None


@dataclass(frozen=True)
class Taxonomy:
    """
    A complete, read-only three-level tree.

    Attributes:
        schema: Naming of the tree levels.
        roots: Level-1 nodes in display order.
    """
    schema: TreeSchema
    roots: Tuple[TaxonomyNode, ...]

    def __iter__(self) -> Iterator[TaxonomyNode]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def find(
            self,
            l1: str,
            l2: Optional[str] = None,
            l3: Optional[str] = None
    ) -> Optional[TaxonomyNode]:
        """
        Resolve the node addressed by a (partial) key path.

        Args:
            l1: Level-1 key.
            l2: Optional level-2 key.
            l3: Optional level-3 key (requires l2).

        Returns:
            Optional[TaxonomyNode]: The node, or None if any key is unknown.
        """
        node: Optional[TaxonomyNode] = None
        for root in self.roots:
            if root.id == l1:
                node = root
                break
        if node is None or l2 is None:
            return node

        node = node.child(l2)
        if node is None or l3 is None:
            return node

        return node.child(l3)

    def paths(self) -> Iterator[Tuple[str, str, str]]:
        """Yield every (l1, l2, l3) leaf path in display order."""
        for root in self.roots:
            for branch in root.children:
                for leaf in branch.children:
                    yield root.id, branch.id, leaf.id

    def locate_leaf(self, l3: str) -> List[Tuple[str, str, str]]:
        """Return all leaf paths ending in the given level-3 key."""
        return [path for path in self.paths() if path[2] == l3]
