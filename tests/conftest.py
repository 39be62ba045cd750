"""
Shared pytest fixtures for swaycycle tests.

The factories build raw nodes shaped like a sway `get_tree` reply.
"""

import asyncio
import contextlib
import sys

import orjson
import pytest


def create_container(
    container_id: int,
    focused: bool = False,
    nodes: list[dict] | None = None,
    floating_nodes: list[dict] | None = None,
    container_type: str = "con",
) -> dict:
    return {
        "id": container_id,
        "type": container_type,
        "name": None if nodes else f"window_{container_id}",
        "layout": "splith" if nodes else "none",
        "rect": {"x": 0, "y": 0, "width": 800, "height": 600},
        "focused": focused,
        "urgent": False,
        "marks": [],
        "app_id": None if nodes else f"app_{container_id}",
        "nodes": nodes or [],
        "floating_nodes": floating_nodes or [],
    }


def create_workspace(
    name: str,
    nodes: list[dict] | None = None,
    floating_nodes: list[dict] | None = None,
) -> dict:
    return {
        "id": 1000 + sum(map(ord, name)),
        "type": "workspace",
        "name": name,
        "layout": "splith",
        "focused": False,
        "nodes": nodes or [],
        "floating_nodes": floating_nodes or [],
    }


def create_tree(outputs: dict[str, list[dict]]) -> dict:
    """`outputs` maps output names to their workspaces"""
    return {
        "id": 1,
        "type": "root",
        "name": "root",
        "focused": False,
        "nodes": [
            {
                "id": 10 + idx,
                "type": "output",
                "name": name,
                "focused": False,
                "nodes": workspaces,
                "floating_nodes": [],
            }
            for idx, (name, workspaces) in enumerate(outputs.items())
        ],
        "floating_nodes": [],
    }


@pytest.fixture
def container():
    return create_container


@pytest.fixture
def workspace():
    return create_workspace


@pytest.fixture
def tree():
    return create_tree


@pytest.fixture
def nested_tree():
    """
    Two outputs, the focused window (12) sits on workspace 2 of the second one:
    `[11, [12, 13], 14]`, with a floating window 15
    """
    return create_tree(
        {
            "__i3": [create_workspace("__i3_scratch")],
            "eDP-1": [
                create_workspace("1", [create_container(1), create_container(2)]),
            ],
            "HDMI-A-1": [
                create_workspace(
                    "2",
                    [
                        create_container(11),
                        create_container(
                            20, nodes=[create_container(12, True), create_container(13)]
                        ),
                        create_container(14),
                    ],
                    floating_nodes=[
                        create_container(15, container_type="floating_con")
                    ],
                ),
                create_workspace("3", [create_container(31)]),
            ],
        }
    )


class FakeSway:
    """
    Answers get_tree and run_command requests on a unix socket the way sway
    does, and records the commands it receives
    """

    def __init__(self, tree: dict, command_results: list[dict] | None = None):
        self.tree = tree
        self.command_results = command_results or [{"success": True}]
        self.commands: list[str] = []
        self.magic = b"i3-ipc"
        self.truncate = False

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        try:
            while True:
                header = await reader.readexactly(14)
                length = int.from_bytes(header[6:10], sys.byteorder)
                message_type = int.from_bytes(header[10:14], sys.byteorder)
                payload = await reader.readexactly(length)

                if message_type == 0:
                    self.commands.append(payload.decode())
                    reply = orjson.dumps(self.command_results)
                else:
                    reply = orjson.dumps(self.tree)

                writer.write(self.magic)
                writer.write(len(reply).to_bytes(4, sys.byteorder))
                writer.write(message_type.to_bytes(4, sys.byteorder))
                writer.write(reply[: len(reply) // 2] if self.truncate else reply)
                await writer.drain()
                if self.truncate:
                    break
        except asyncio.IncompleteReadError:
            pass
        finally:
            writer.close()

    @contextlib.asynccontextmanager
    async def serve(self, path: str):
        server = await asyncio.start_unix_server(self.handle, path=path)
        async with server:
            yield path


@pytest.fixture
def fake_sway():
    return FakeSway


@pytest.fixture
def socket_path(tmp_path):
    return str(tmp_path / "sway.sock")
