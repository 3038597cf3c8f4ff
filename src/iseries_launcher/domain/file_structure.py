from __future__ import annotations

"""
Verifiable File Structure Model.

Represents the relative file layout expected next to the launcher as a
flat arena of nodes. Children are owned by their parent through index
tuples; the parent relation is a plain index used only to rebuild a
node's relative path.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

# Declarative form: directories map to nested mappings, files map to None.
StructureMapping = Mapping[str, Union["StructureMapping", None]]


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureNode:
    """
    A file or directory segment of the expected structure.

    Attributes:
        name: File or directory name (one path segment).
        parent: Arena index of the parent node, None for a root.
        children: Arena indices of the child nodes, in declaration order.
    """
    name: str
    parent: Optional[int] = None
    children: Tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        """A node without children is a file, even if meant as a directory."""
        return not self.children


class FileStructure:
    """
    Arena of StructureNodes describing one or more root entries.

    Built once at startup and only read afterwards.
    """

    def __init__(self) -> None:
        self._nodes: List[StructureNode] = []
        self._roots: List[int] = []

    @classmethod
    def from_mapping(cls, mapping: StructureMapping) -> "FileStructure":
        """
        Build a structure from its nested mapping declaration.

        Args:
            mapping: e.g. {"bin": {"a.jar": None, "b.jar": None}}.

        Returns:
            FileStructure: The populated arena.

        Raises:
            TypeError: If an entry is neither a mapping nor None.
        """
        structure = cls()
        structure._add_mapping(mapping, None)
        return structure

    def add(self, name: str, parent: Optional[int] = None) -> int:
        """
        Append a node under the given parent (or as a new root).

        Args:
            name: File or directory name.
            parent: Arena index of the parent, None for a root entry.

        Returns:
            int: Arena index of the new node.
        """
        if parent is not None and not 0 <= parent < len(self._nodes):
            raise IndexError(f"Unknown parent node index: {parent}")

        index = len(self._nodes)
        self._nodes.append(StructureNode(name=name, parent=parent))

        if parent is None:
            self._roots.append(index)
        else:
            owner = self._nodes[parent]
            self._nodes[parent] = replace(owner, children=owner.children + (index,))
        return index

    # -------------------------------------------------------------------------
    # READ API
    # -------------------------------------------------------------------------

    @property
    def roots(self) -> Tuple[int, ...]:
        return tuple(self._roots)

    def node(self, index: int) -> StructureNode:
        return self._nodes[index]

    def relative_path(self, index: int) -> str:
        """
        Join the names from the root down to the given node.

        Args:
            index: Arena index of the node.

        Returns:
            str: Relative path using the host separator (e.g. 'bin/a.jar').
        """
        parts: List[str] = []
        current: Optional[int] = index
        while current is not None:
            node = self._nodes[current]
            parts.append(node.name)
            current = node.parent
        return os.path.join(*reversed(parts))

    def walk(self) -> Iterator[int]:
        """Yield every node index depth-first, in declaration order."""
        for root in self._roots:
            yield from self._walk_from(root)

    def leaves(self) -> List[int]:
        return [i for i in self.walk() if self._nodes[i].is_leaf]

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _walk_from(self, index: int) -> Iterator[int]:
        yield index
        for child in self._nodes[index].children:
            yield from self._walk_from(child)

    def _add_mapping(self, mapping: Any, parent: Optional[int]) -> None:
        for name, value in mapping.items():
            index = self.add(str(name), parent)
            if value is None:
                continue
            if not isinstance(value, Mapping):
                raise TypeError(
                    f"Structure entry '{name}' must be a mapping or None, got {type(value).__name__}"
                )
            self._add_mapping(value, index)


def is_structure_mapping(value: Any) -> bool:
    """Check whether a value is a well-formed nested structure declaration."""
    if not isinstance(value, Mapping):
        return False
    for name, child in value.items():
        if not isinstance(name, str) or not name.strip():
            return False
        if child is not None and not is_structure_mapping(child):
            return False
    return True
