"""Shell command execution for inline hooks."""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import signal
import sys
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)

_READ_SIZE = 4096


@dataclass(slots=True)
class CommandResult:
    """Outcome of running one hook command."""

    output: str
    exit_code: int
    timed_out: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the command ran to completion, whatever its exit status."""
        return not self.timed_out and self.error is None


async def run_command(
    command: str,
    *,
    timeout_sec: float,
    sink: TextIO | None = None,
    cwd: str | None = None,
) -> CommandResult:
    """Run *command* through the platform shell, bounded by *timeout_sec*.

    stderr is merged into stdout. Each decoded chunk is written to *sink* as
    soon as it is read. On timeout the whole process group is killed and the
    partial output is returned with ``timed_out`` set.
    """
    kwargs: dict[str, object] = {}
    if sys.platform != "win32":
        # Own process group so a timeout also kills the shell's children
        kwargs["start_new_session"] = True

    try:
        proc = await asyncio.create_subprocess_shell(
            command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            cwd=cwd,
            **kwargs,
        )
    except (OSError, ValueError) as exc:
        return CommandResult(output="", exit_code=-1, error=f"Failed to start process: {exc}")

    chunks: list[str] = []
    try:
        await asyncio.wait_for(_collect(proc, chunks, sink), timeout=timeout_sec)
    except TimeoutError:
        return CommandResult(
            output="".join(chunks), exit_code=-1, timed_out=True,
            error=f"Command timed out after {timeout_sec}s",
        )
    finally:
        if proc.returncode is None:
            await _kill(proc)

    exit_code = proc.returncode if proc.returncode is not None else 0
    return CommandResult(output="".join(chunks), exit_code=exit_code)


async def _collect(
    proc: asyncio.subprocess.Process, chunks: list[str], sink: TextIO | None,
) -> None:
    assert proc.stdout is not None
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        data = await proc.stdout.read(_READ_SIZE)
        text = decoder.decode(data, final=not data)
        if text:
            chunks.append(text)
            _emit(sink, text)
        if not data:
            break
    await proc.wait()


def _emit(sink: TextIO | None, text: str) -> None:
    if sink is None:
        return
    try:
        sink.write(text)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
    except Exception as exc:
        # The sink belongs to the caller and never affects hook results
        logger.debug("Progress sink rejected hook output: %s: %s", type(exc).__name__, exc)


async def _kill(proc: asyncio.subprocess.Process) -> None:
    try:
        if sys.platform != "win32":
            os.killpg(proc.pid, signal.SIGKILL)
        else:
            proc.kill()
    except (ProcessLookupError, PermissionError):
        pass
    await proc.wait()
