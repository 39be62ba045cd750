import asyncio
import os
import sys

import orjson

from swaycycle.data_types.tree.payload import TreePayload

CommandResult = dict[str, bool | str]

magic_string = "i3-ipc"
magic_len = len(magic_string)
magic_enc = magic_string.encode()
payload_len_len = 4  # length of payload length
payload_type_len = 4  # length of payload type
header_len = magic_len + payload_len_len + payload_type_len

RUN_COMMAND = 0
GET_TREE = 4


def find_socket_path() -> str:
    for variable in ["SWAYSOCK", "I3SOCK"]:
        if socket_path := os.environ.get(variable):
            return socket_path
    raise EnvironmentError("Could not find the socket, set SWAYSOCK or I3SOCK")


class SwayIPCSocket:
    def __init__(self, socket_path: str | None = None):
        self.socket_path = socket_path
        self.reader: asyncio.StreamReader = None  # pyright: ignore
        self.writer: asyncio.StreamWriter = None  # pyright: ignore

    async def connect(self):
        path = self.socket_path or find_socket_path()
        self.reader, self.writer = await asyncio.open_unix_connection(path=path)

    async def send(self, payload_type: int, command=b""):
        if not self.writer:  # first time calling, create socket
            await self.connect()

        payload_length = len(command)

        data = magic_enc
        data += payload_length.to_bytes(payload_len_len, sys.byteorder)
        data += payload_type.to_bytes(payload_type_len, sys.byteorder)
        data += command

        self.writer.write(data)
        await self.writer.drain()

    async def receive(self):
        header = await self.reader.readexactly(header_len)
        if header[:magic_len] != magic_enc:
            raise ConnectionError(f"Invalid reply header {header!r}")

        payload_length_bytes = header[magic_len : magic_len + payload_len_len]
        payload_length = int.from_bytes(payload_length_bytes, sys.byteorder)

        raw_response = await self.reader.readexactly(payload_length)
        return orjson.loads(raw_response)

    async def close(self):
        if self.writer and not self.writer.is_closing():
            self.writer.close()
            await self.writer.wait_closed()

    async def send_receive(self, payload_type: int, command=b""):
        await self.send(payload_type, command)
        return await self.receive()


class SwayIPCConnection:
    def __init__(self, socket_path: str | None = None) -> None:
        self.socket = SwayIPCSocket(socket_path)

    async def __aenter__(self) -> "SwayIPCConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def run_command(self, c: str) -> list[CommandResult]:
        return await self.socket.send_receive(RUN_COMMAND, c.encode())

    async def get_tree(self) -> TreePayload:
        return await self.socket.send_receive(GET_TREE)  # pyright:ignore

    async def focus(self, con_id: int) -> None:
        command = f"[con_id={con_id}] focus"
        for result in await self.run_command(command):
            if not result.get("success"):
                error = result.get("error", "unknown error")
                raise ConnectionError(f"Command {command!r} failed: {error}")

    async def close(self):
        await self.socket.close()
