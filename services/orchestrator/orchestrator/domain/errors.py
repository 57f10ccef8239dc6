from __future__ import annotations


class ExternalToolError(RuntimeError):
    """Terminal failure of one external tool invocation."""

    kind = "external_tool_error"
    status_code = 500

    def __init__(self, tool: str, message: str) -> None:
        super().__init__(message)
        self.tool = tool


class InvocationError(ExternalToolError):
    kind = "invocation_failed"
    status_code = 503


class ProcessTimeoutError(ExternalToolError):
    kind = "timeout"
    status_code = 504


class ProcessError(ExternalToolError):
    kind = "process_failed"
    status_code = 502

    def __init__(self, tool: str, exit_code: int, stderr: str) -> None:
        super().__init__(tool, f"{tool} exited with code {exit_code}: {stderr}")
        self.exit_code = exit_code
        self.stderr = stderr


class EmptyOutputError(ExternalToolError):
    kind = "empty_output"
    status_code = 424


class MalformedOutputError(ExternalToolError):
    kind = "malformed_output"
    status_code = 500
