from __future__ import annotations

"""
Shared Selection Accessor.

Lets a component read the selection of a picker it is nested under
without having the picker passed down explicitly. A picker is provided on
an owner object (typically the Tk frame that hosts it); consumers look it
up by walking their own '.master' chain, the same parent chain Tk widgets
already form. The lookup fails loudly outside a provider's subtree.
"""

from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable, Dict, List, Optional, Protocol, Type

from diaspora_picker.domain.selection_models import FlatSelection, SelectedBranch, SelectionState

_PROVIDERS_ATTR = "_diaspora_picker_selection_providers"


class ProviderNotFoundError(RuntimeError):
    """The accessor was used by a component outside any matching provider."""


class SelectionSource(Protocol):
    """What a provider exposes (implemented by TreeSelector)."""

    @property
    def selected(self) -> SelectionState: ...

    def get_selected(self) -> List[SelectedBranch]: ...

    def get_flat(self) -> FlatSelection: ...


@dataclass(frozen=True)
class SelectionContext:
    """
    Snapshot handed to consumers.

    Attributes:
        selected: State at the time of the lookup.
        get_selected: Projector bound to the live picker.
        get_flat: Flat-column view bound to the live picker.
    """
    selected: SelectionState
    get_selected: Callable[[], List[SelectedBranch]]
    get_flat: Callable[[], FlatSelection]


# -----------------------------------------------------------------------------
# PROVIDER SIDE
# -----------------------------------------------------------------------------

def provide(owner: Any, name: str, source: SelectionSource) -> None:
    """Register source under name on owner, shadowing outer providers of that name."""
    registry: Optional[Dict[str, SelectionSource]] = getattr(owner, _PROVIDERS_ATTR, None)
    if registry is None:
        registry = {}
        setattr(owner, _PROVIDERS_ATTR, registry)
    registry[name] = source


def revoke(owner: Any, name: str) -> None:
    """Remove a registration; unknown names are ignored."""
    registry = getattr(owner, _PROVIDERS_ATTR, None)
    if registry:
        registry.pop(name, None)


class SelectionProvider:
    """
    Scope a provider to a block: registered on enter, removed on exit.

    Example:
        with SelectionProvider(frame, "location", selector):
            panel = SelectionProcessor(frame, "location")
    """

    def __init__(self, owner: Any, name: str, source: SelectionSource) -> None:
        self.owner = owner
        self.name = name
        self.source = source

    def __enter__(self) -> SelectionSource:
        provide(self.owner, self.name, self.source)
        return self.source

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType]
    ) -> None:
        revoke(self.owner, self.name)


# -----------------------------------------------------------------------------
# CONSUMER SIDE
# -----------------------------------------------------------------------------

def find_source(node: Any, name: str) -> Optional[SelectionSource]:
    """Nearest provider named name on node or its '.master' ancestors."""
    visited = set()
    current = node
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        registry = getattr(current, _PROVIDERS_ATTR, None)
        if registry and name in registry:
            return registry[name]
        current = getattr(current, "master", None)
    return None


def use_selected(node: Any, name: str) -> SelectionContext:
    """
    Read the current selection of the enclosing picker called name.

    Raises:
        ProviderNotFoundError: If no ancestor of node provides name.
    """
    source = find_source(node, name)
    if source is None:
        raise ProviderNotFoundError(
            f"use_selected('{name}') must be used within a '{name}' selection provider."
        )
    return SelectionContext(
        selected=source.selected,
        get_selected=source.get_selected,
        get_flat=source.get_flat,
    )
