import asyncio
import logging
import shlex

from ..errors import ToolProcessError, ToolStartError

logger = logging.getLogger(__name__)


async def run_tool(argv: list[str]) -> None:
    """Spawn ``argv`` with inherited stdio and wait for it to finish.

    Output of the child is streamed straight to this process's terminal.

    Raises:
        ToolStartError: If the executable cannot be launched.
        ToolProcessError: If the child exits with a non-zero status.
    """
    logger.info("$ %s", shlex.join(argv))
    try:
        proc = await asyncio.create_subprocess_exec(*argv)
    except OSError as exc:
        raise ToolStartError(f"could not start {argv[0]}: {exc}", command=argv) from exc
    returncode = await proc.wait()
    if returncode != 0:
        raise ToolProcessError(returncode=returncode, command=argv)
