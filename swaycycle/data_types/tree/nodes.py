from dataclasses import dataclass
from typing import Any


class MalformedTreeError(ValueError):
    """Raised when a tree reply does not have the shape of a sway layout tree"""


@dataclass(frozen=True, slots=True)
class Root:
    nodes: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Output:
    nodes: tuple["Node", ...] = ()
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    nodes: tuple["Node", ...] = ()
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Con:
    """A window when it has no children, a split container otherwise"""

    id: int
    focused: bool
    nodes: tuple["Node", ...] = ()


Node = Root | Output | Workspace | Con

_node_types: dict[str, type] = {
    "root": Root,
    "output": Output,
    "workspace": Workspace,
    "con": Con,
}

# the direct children in `floating_nodes` are the floating containers themselves
_floating_node_types: dict[str, type] = {"floating_con": Con}


def _field(payload: dict[str, Any], key: str, kind: type, path: str) -> Any:
    try:
        value = payload[key]
    except KeyError:
        raise MalformedTreeError(f"{path}: missing field {key!r}") from None

    # bool is a subclass of int, an id of `true` is still wrong
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedTreeError(
            f"{path}: field {key!r} should be {kind.__name__}, got {value!r}"
        )
    return value


def _children(payload: dict[str, Any], path: str, include_floating: bool) -> tuple:
    children = [
        _parse(child, f"{path}.nodes[{idx}]", include_floating)
        for idx, child in enumerate(_field(payload, "nodes", list, path))
    ]
    if include_floating and "floating_nodes" in payload:
        children.extend(
            _parse(
                child,
                f"{path}.floating_nodes[{idx}]",
                include_floating,
                _floating_node_types,
            )
            for idx, child in enumerate(_field(payload, "floating_nodes", list, path))
        )
    return tuple(children)


def _parse(
    payload: Any,
    path: str,
    include_floating: bool,
    node_types: dict[str, type] = _node_types,
) -> Node:
    if not isinstance(payload, dict):
        raise MalformedTreeError(f"{path}: expected an object, got {payload!r}")

    node_type = _field(payload, "type", str, path)
    if (cls := node_types.get(node_type)) is None:
        raise MalformedTreeError(f"{path}: unknown node type {node_type!r}")

    if cls is Con:
        con_id = _field(payload, "id", int, path)
        focused = _field(payload, "focused", bool, path)
        return Con(con_id, focused, _children(payload, path, include_floating))

    nodes = _children(payload, path, include_floating)
    if cls is Root:
        return Root(nodes)

    name = payload.get("name")
    return cls(nodes, name if isinstance(name, str) else None)


def parse_tree(payload: Any, include_floating: bool = False) -> Node:
    """
    Builds the layout tree from a decoded `get_tree` reply. Floating containers
    are appended after the tiling ones when `include_floating` is set, otherwise
    they are not part of the tree at all.
    """
    return _parse(payload, "tree", include_floating)

