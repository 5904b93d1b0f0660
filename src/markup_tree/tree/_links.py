"""Package-private writers for the parent/previous/next links of nodes.

Only the tree package calls these. They never update the other end of a link;
``relink`` is the single place that restores the sibling links of a
children list.
"""

from typing import Any, List, Optional

from markup_tree.shared.errors import InvalidArgumentError


def set_parent(node: Any, parent: Optional[Any]) -> None:
    if parent is not None and not parent.can_contain_children:
        raise InvalidArgumentError(
            f"Expected parent to be a Node that can contain children, "
            f"instead got {parent.type_text} Node",
            "parent",
        )
    node._parent = parent


def set_previous(node: Any, previous: Optional[Any]) -> None:
    node._previous = previous


def set_next(node: Any, next_node: Optional[Any]) -> None:
    node._next = next_node


def sever(node: Any) -> None:
    """Clear all three links of a node that left its parent."""
    node._parent = None
    node._previous = None
    node._next = None


def relink(owner: Any, children: List[Any], start: int = 0, stop: Optional[int] = None) -> None:
    """Restore parent and sibling links for ``children[start:stop]``.

    The neighbours just outside the window are relinked too, so inserting a run
    of nodes only needs the run's bounds.
    """
    if stop is None:
        stop = len(children)
    last = len(children) - 1

    for index in range(max(start - 1, 0), min(stop + 1, len(children))):
        child = children[index]
        if start <= index < stop:
            set_parent(child, owner)
        set_previous(child, children[index - 1] if index > 0 else None)
        set_next(child, children[index + 1] if index < last else None)
