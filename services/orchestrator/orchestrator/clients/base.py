from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Type

from ..codec import DEFAULT_CODEC, JsonCodec, ModelT
from ..domain.errors import (
    EmptyOutputError,
    InvocationError,
    MalformedOutputError,
    ProcessError,
    ProcessTimeoutError,
)
from ..process.runner import CommandRunner

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class ExternalToolClient:
    """
    Invokes one external tool per call and classifies the outcome.

    The classification order is fixed: launch failure, timeout, non-zero exit,
    blank stdout, unparseable stdout. Every failure is terminal for the call;
    nothing is retried here.
    """

    tool_name = "external tool"

    def __init__(
        self,
        runner: CommandRunner,
        command: Sequence[str],
        timeout: Optional[float] = None,
        codec: JsonCodec = DEFAULT_CODEC,
    ) -> None:
        if runner is None:
            raise ValueError("runner is required")
        if not command:
            raise ValueError(f"{self.tool_name} command must not be empty")
        self._runner = runner
        self._command: List[str] = list(command)
        self._timeout = DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout
        self._codec = codec

    @property
    def command(self) -> List[str]:
        return list(self._command)

    @property
    def timeout(self) -> float:
        return self._timeout

    def _invoke(self, payload: str, result_type: Type[ModelT]) -> ModelT:
        name = self.tool_name
        try:
            result = self._runner.run(self._command, payload, self._timeout)
        except OSError as exc:
            raise InvocationError(name, f"Failed to invoke {name}: {exc}") from exc

        if result.timed_out:
            logger.warning(f"{name} timed out after {self._timeout}s; stderr: {result.stderr.strip()}")
            raise ProcessTimeoutError(name, f"{name} process timed out after {self._timeout}s")
        if result.exit_code != 0:
            raise ProcessError(name, result.exit_code, result.stderr)
        stdout = result.stdout
        if stdout is None or not stdout.strip():
            raise EmptyOutputError(name, f"{name} returned no output")
        try:
            return self._codec.decode(stdout, result_type)
        except ValueError as exc:
            raise MalformedOutputError(
                name, f"{name} output is not a valid {result_type.__name__}: {exc}"
            ) from exc
