"""Named fragments and the scope table that carries them.

Fragments found in a content page are not stored on nodes. They live in a
ScopeTable keyed by node identity, which is handed explicitly to whatever
pass resolves fragment placeholders later on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from turbolayout.constants import ATTRIBUTE_NAME_FRAGMENT, DEFAULT_PREFIX
from turbolayout.utils import prefixed

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from turbolayout.node import Node


class ScopeTable:
    """Side-table of node-local variables.

    A mapping attached to a node is visible from that node and from every
    node in its subtree; lookups walk the parent chain and the nearest scope
    defining a name wins.
    """

    __slots__ = ("_scopes",)

    def __init__(self) -> None:
        # id(node) -> (node, variables). The node is kept so ids stay unique.
        self._scopes: dict[int, tuple[Node, dict[str, object]]] = {}

    def set_all(self, node: Node, variables: Mapping[str, object]) -> None:
        entry = self._scopes.get(id(node))
        if entry is None:
            self._scopes[id(node)] = (node, dict(variables))
        else:
            entry[1].update(variables)

    def get(self, node: Node) -> dict[str, object]:
        """Variables attached directly to node (empty if none)."""
        entry = self._scopes.get(id(node))
        if entry is None:
            return {}
        return dict(entry[1])

    def lookup(self, node: Node, name: str, default: object = None) -> object:
        current = node
        while current is not None:
            entry = self._scopes.get(id(current))
            if entry is not None and name in entry[1]:
                return entry[1][name]
            current = current.parent
        return default

    def visible(self, node: Node) -> dict[str, object]:
        """All variables visible from node, nearest scope first."""
        chain = []
        current = node
        while current is not None:
            entry = self._scopes.get(id(current))
            if entry is not None:
                chain.append(entry[1])
            current = current.parent
        merged: dict[str, object] = {}
        for variables in reversed(chain):
            merged.update(variables)
        return merged

    def __contains__(self, node: object) -> bool:
        return id(node) in self._scopes

    def __len__(self) -> int:
        return len(self._scopes)


def find_fragments(elements: Iterable[Node], attribute_name: str) -> dict[str, Node]:
    """Collect every element carrying attribute_name, keyed by the attribute value.

    Searches the given elements and all their descendants in document order.
    When a name is defined twice the later definition replaces the earlier.
    """
    fragments: dict[str, Node] = {}
    for element in elements:
        for candidate in element.iter_elements():
            name = candidate.attributes.get(attribute_name)
            if name is not None:
                fragments[name.strip()] = candidate
    return fragments


def _is_within(node: Node, root: Node) -> bool:
    current = node
    while current is not None:
        if current is root:
            return True
        current = current.parent
    return False


def pull_target_content(element: Node, target: Node) -> None:
    """Graft target into the position element occupies, detaching element."""
    parent = element.parent
    if parent is None:
        msg = f"Cannot replace {element!r}: it has no parent"
        raise ValueError(msg)
    parent.replace_child(target, element)


class FragmentReplacer:
    """Replace fragment placeholders in a composed tree with content fragments.

    A decorator element such as ``<div layout:fragment="content">`` is
    swapped for the content page's element with the same fragment name, when
    one is visible through the scope table. Placeholders with no matching
    content fragment keep the decorator's markup. The fragment attribute is
    removed from the output either way.
    """

    __slots__ = ("attribute_name", "debug_enabled", "replaced")

    def __init__(self, prefix: str = DEFAULT_PREFIX, *, debug: bool = False) -> None:
        self.attribute_name = prefixed(prefix, ATTRIBUTE_NAME_FRAGMENT)
        self.debug_enabled = bool(debug)
        self.replaced: list[str] = []

    def debug(self, message: str, indent: int = 4) -> None:
        if self.debug_enabled:
            print(f"{' ' * indent}FragmentReplacer: {message}")

    def apply(self, root: Node, scopes: ScopeTable) -> Node:
        # Snapshot placeholders first; replacement brings in content nodes
        # that also carry the fragment attribute and must not be revisited.
        placeholders = [el for el in root.iter_elements() if self.attribute_name in el.attributes]
        for placeholder in placeholders:
            name = placeholder.attributes[self.attribute_name].strip()
            placeholder.remove_attribute(self.attribute_name)
            if not _is_within(placeholder, root):
                # Left the tree along with an outer placeholder that was replaced
                continue
            fragment = scopes.lookup(placeholder, name)
            if fragment is None or fragment is placeholder:
                self.debug(f"no content fragment for '{name}', keeping decorator markup")
                continue
            fragment.remove_attribute(self.attribute_name)
            placeholder.parent.replace_child(fragment, placeholder)
            self.replaced.append(name)
            self.debug(f"replaced fragment '{name}'")

        for element in root.iter_elements():
            element.remove_attribute(self.attribute_name)
        return root
