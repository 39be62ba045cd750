from dataclasses import dataclass
from enum import Enum
from functools import reduce

from swaycycle.data_types.tree import Con, Node, Output, Root, Workspace


class Direction(Enum):
    NEXT = "next"
    PREV = "prev"

    @property
    def reversed(self) -> bool:
        return self is Direction.PREV


@dataclass(frozen=True, slots=True)
class Found:
    window: Con | Workspace


@dataclass(frozen=True, slots=True)
class Searching:
    """
    Nothing found yet in the folded part of the tree. `leftmost` is its first
    window in traversal order, `rightmost_focused` tells if its last window is
    the focused one. An empty nested workspace takes the place of a window
    that can never be focused
    """

    leftmost: Con | Workspace
    rightmost_focused: bool


Outcome = Found | Searching


def merge(left: Outcome, right: Outcome) -> Outcome:
    match left, right:
        case Found(), _:
            return left
        case _, Found():
            return right
        case Searching(rightmost_focused=True), Searching():
            # the window right after the focused one
            return Found(right.leftmost)
        case _:
            return Searching(left.leftmost, right.rightmost_focused)


def _outcome(node: Node, reversed_order: bool) -> Outcome:
    match node:
        case Con(nodes=()):
            return Searching(node, node.focused)
        case Con(nodes=nodes):
            return _fold(nodes, reversed_order)
        case Workspace(nodes=()):
            return Searching(node, False)
        case Workspace(nodes=nodes):
            return _fold(nodes, reversed_order)
        case _:
            raise AssertionError(
                f"{type(node).__name__} node found inside a workspace"
            )


def _fold(nodes: tuple[Node, ...], reversed_order: bool) -> Outcome:
    ordered = reversed(nodes) if reversed_order else nodes
    return reduce(merge, (_outcome(node, reversed_order) for node in ordered))


def next_window_to_focus(node: Node, reversed_order: bool = False) -> Con | None:
    """
    Returns the window after the focused one on its workspace, or the one before
    it if `reversed_order` is set, wrapping around at the ends. Outputs and
    workspaces are searched in tree order and the first workspace holding a
    focused window decides. Returns None if no workspace has a focused window,
    or if the position to focus is an empty workspace nested in the tree.
    """
    match node:
        case Root(nodes=nodes) | Output(nodes=nodes):
            return next(
                (
                    window
                    for child in nodes
                    if (window := next_window_to_focus(child, reversed_order))
                    is not None
                ),
                None,
            )
        case Workspace(nodes=()):
            return None
        case Workspace(nodes=nodes):
            match _fold(nodes, reversed_order):
                case Found(window=Con() as window):
                    return window
                case Searching(leftmost=Con() as leftmost, rightmost_focused=True):
                    # the focused window is the last one, wrap around
                    return leftmost
                case _:
                    return None
        case _:
            raise AssertionError(
                f"{type(node).__name__} node found outside a workspace"
            )
