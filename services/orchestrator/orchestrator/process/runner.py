from __future__ import annotations

import logging
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import IO, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

# Exit code reported when the process had to be killed; callers must check timed_out.
KILLED_EXIT_CODE = -1

DEFAULT_DRAIN_GRACE_SECONDS = 1.0
READ_CHUNK_BYTES = 64 * 1024


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command execution."""

    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool


class CommandRunner(Protocol):
    def run(
        self, command: Sequence[str], stdin: Optional[str], timeout: float
    ) -> CommandResult:
        ...


def _drain(stream: IO[bytes], chunks: List[bytes]) -> None:
    # Chunks are appended as they arrive so an abandoned drain still leaves partial output.
    try:
        while True:
            chunk = stream.read1(READ_CHUNK_BYTES)
            if not chunk:
                break
            chunks.append(chunk)
    except (OSError, ValueError) as exc:
        logger.debug(f"Stream drain stopped early: {exc}")
    finally:
        # An abandoned drain releases its pipe here, once the last writer closes it.
        stream.close()


def _feed(stream: IO[bytes], payload: bytes) -> None:
    try:
        stream.write(payload)
        stream.flush()
    except BrokenPipeError:
        logger.debug("Child closed stdin before the payload was fully written")
    except (OSError, ValueError) as exc:
        logger.debug(f"Stdin write stopped early: {exc}")
    finally:
        try:
            stream.close()
        except BrokenPipeError:
            pass


def _decode(chunks: List[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")


class ProcessRunner:
    """
    Runs external commands with stdin/stdout/stderr exchange and a hard timeout.

    Both output streams are drained on their own threads, started before any
    stdin is written, so a child that fills a pipe before reading its input
    cannot deadlock the call. On timeout the child is killed (SIGKILL) and
    whatever output was captured so far is returned with ``timed_out=True``.
    The call never outlives ``timeout`` plus one ``drain_grace`` window.
    """

    def __init__(self, drain_grace: float = DEFAULT_DRAIN_GRACE_SECONDS) -> None:
        self._drain_grace = drain_grace

    def run(
        self, command: Sequence[str], stdin: Optional[str], timeout: float
    ) -> CommandResult:
        if not command:
            raise ValueError("command must not be empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        argv = list(command)
        logger.debug(f"Spawning {argv!r} (timeout {timeout}s)")
        # OSError (missing binary, permission denied) propagates as the launch failure
        process = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )

        out_chunks: List[bytes] = []
        err_chunks: List[bytes] = []
        helpers: List[threading.Thread] = []
        owned: List[IO[bytes]] = []
        try:
            for name, stream, chunks in (
                ("stdout", process.stdout, out_chunks),
                ("stderr", process.stderr, err_chunks),
            ):
                thread = threading.Thread(
                    target=_drain,
                    args=(stream, chunks),
                    name=f"drain-{name}-{process.pid}",
                    daemon=True,
                )
                thread.start()
                helpers.append(thread)
                owned.append(stream)

            if stdin is None:
                process.stdin.close()
            else:
                writer = threading.Thread(
                    target=_feed,
                    args=(process.stdin, stdin.encode("utf-8")),
                    name=f"feed-stdin-{process.pid}",
                    daemon=True,
                )
                writer.start()
                helpers.append(writer)
                owned.append(process.stdin)

            timed_out = False
            try:
                exit_code = process.wait(timeout=timeout)
            except subprocess.TimeoutExpired:
                logger.warning(f"Command {argv[0]} exceeded {timeout}s, killing pid {process.pid}")
                timed_out = True
                process.kill()
                process.wait()
                exit_code = KILLED_EXIT_CODE

            # One shared grace window for all helpers, measured after exit or kill.
            deadline = time.monotonic() + self._drain_grace
            for thread in helpers:
                thread.join(max(0.0, deadline - time.monotonic()))
                if thread.is_alive():
                    logger.warning(f"Abandoning stalled {thread.name} after {self._drain_grace}s")

            return CommandResult(
                exit_code=exit_code,
                stdout=_decode(out_chunks),
                stderr=_decode(err_chunks),
                timed_out=timed_out,
            )
        finally:
            if process.poll() is None:
                process.kill()
                process.wait()
            # Streams handed to a helper are closed by that helper, even when abandoned.
            for stream in (process.stdin, process.stdout, process.stderr):
                if stream is not None and stream not in owned and not stream.closed:
                    stream.close()
