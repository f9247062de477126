"""Node capability and ready-made node types for render_as_tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """Anything with a label and an ordered sequence of children.

    Implementations only need the two methods below; subclassing is not
    required.
    """

    def label(self) -> str:
        """Text displayed for this node. May contain line breaks."""
        ...

    def children(self) -> Sequence[Node]:
        """Immediate children, in display order."""
        ...


@dataclass
class BasicNode:
    name: str
    child_nodes: list[BasicNode] = field(default_factory=list)

    def label(self) -> str:
        return self.name

    def children(self) -> list[BasicNode]:
        return self.child_nodes

    def add(self, *nodes: BasicNode) -> BasicNode:
        """Append child nodes and return self, for building trees inline."""
        self.child_nodes.extend(nodes)
        return self


class NodeAdapter:
    """Expose a foreign object as a :class:`Node`.

    Args:
        obj: the wrapped object (e.g. a dict, an AST node).
        label_of: returns the label text for an object.
        children_of: returns the child objects of an object, in order.

    Children are wrapped on access with the same two callables, so the
    foreign tree is never copied.
    """

    def __init__(
        self,
        obj: Any,
        label_of: Callable[[Any], str],
        children_of: Callable[[Any], Sequence[Any]],
    ) -> None:
        self.obj = obj
        self._label_of = label_of
        self._children_of = children_of

    def label(self) -> str:
        return self._label_of(self.obj)

    def children(self) -> list[NodeAdapter]:
        return [
            NodeAdapter(child, self._label_of, self._children_of)
            for child in self._children_of(self.obj)
        ]

    def __repr__(self) -> str:
        return f"NodeAdapter({self.obj!r})"
