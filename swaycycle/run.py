import asyncio
import sys

from swaycycle.bootstrap import Settings, initialize_and_load
from swaycycle.core import SwayIPCConnection
from swaycycle.data_types.tree import parse_tree
from swaycycle.selector import Direction, next_window_to_focus

usage = "Usage: swaycycle {next,prev}"


async def cycle_focus(
    ipc: SwayIPCConnection, direction: Direction, include_floating: bool = False
) -> int | None:
    """
    Focuses the next or previous window on the focused workspace and returns
    its con_id, or None when there is no window to focus
    """
    tree = parse_tree(await ipc.get_tree(), include_floating)
    window = next_window_to_focus(tree, direction.reversed)
    if window is None:
        return None

    await ipc.focus(window.id)
    return window.id


async def run_cycle_focus(direction: Direction, settings: Settings) -> int | None:
    async with SwayIPCConnection(settings["socket"]) as ipc:
        return await cycle_focus(ipc, direction, settings["include_floating"])


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        (arg,) = args
        direction = Direction(arg)
    except ValueError:
        print(usage, file=sys.stderr)
        return 1

    settings = initialize_and_load()
    asyncio.run(run_cycle_focus(direction, settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
