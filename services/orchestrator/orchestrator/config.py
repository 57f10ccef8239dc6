from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from typing import List, Mapping, Optional

DEFAULT_GENERATOR_COMMAND = "haskell/ga-exec"
DEFAULT_VALIDATOR_COMMAND = "swipl -q -s prolog/validator.pl -t main"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    generator_command: List[str]
    validator_command: List[str]
    process_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def split_command(command_line: Optional[str], variable: str) -> List[str]:
    parts = shlex.split(command_line or "")
    if not parts:
        raise ConfigurationError(f"{variable} must name a command")
    return parts


def _parse_timeout(raw: str, variable: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{variable} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{variable} must be positive, got {raw!r}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        generator_command=split_command(
            env.get("SCHEDULER_GENERATOR_COMMAND", DEFAULT_GENERATOR_COMMAND),
            "SCHEDULER_GENERATOR_COMMAND",
        ),
        validator_command=split_command(
            env.get("SCHEDULER_VALIDATOR_COMMAND", DEFAULT_VALIDATOR_COMMAND),
            "SCHEDULER_VALIDATOR_COMMAND",
        ),
        process_timeout_seconds=_parse_timeout(
            env.get("SCHEDULER_PROCESS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)),
            "SCHEDULER_PROCESS_TIMEOUT_SECONDS",
        ),
    )
