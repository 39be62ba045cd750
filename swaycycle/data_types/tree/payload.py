from typing import Literal, NotRequired, TypedDict


class Rectangle(TypedDict):
    x: int
    y: int
    width: int
    height: int


class ContainerPayload(TypedDict):
    id: int
    type: Literal["con"] | Literal["floating_con"]
    focused: bool
    layout: str
    name: str | None
    rect: NotRequired[Rectangle]
    app_id: NotRequired[str | None]
    pid: NotRequired[int]
    nodes: list["ContainerPayload"]
    floating_nodes: list["ContainerPayload"]


class WorkspacePayload(TypedDict):
    id: int
    type: Literal["workspace"]
    name: str
    num: NotRequired[int]
    output: NotRequired[str]
    focused: bool
    nodes: list[ContainerPayload]
    floating_nodes: list[ContainerPayload]


class OutputPayload(TypedDict):
    """
    Holds workspaces; the hidden `__i3` output holds the single scratchpad workspace
    """

    id: int
    type: Literal["output"]
    name: str
    focused: bool
    nodes: list[WorkspacePayload]


class TreePayload(TypedDict):
    id: int
    type: Literal["root"]
    name: Literal["root"]
    focused: Literal[False]
    nodes: list[OutputPayload]


NodePayload = TreePayload | OutputPayload | WorkspacePayload | ContainerPayload
