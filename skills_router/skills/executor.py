"""
Skill Executor

Runs a skill's script inside the skill folder. Arguments are exposed to the
child process as SKILL_ARG_<NAME> environment variables.

Every outcome, including launch failures, non-zero exits and timeouts, comes
back as an ExecutionResult; nothing is raised to the caller.
"""

import json
import logging
import os
import shlex
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "SKILL_ARG_"
NO_OUTPUT = "Success (no output)"
ERROR_PREFIX = "Error: "
FAILED_PREFIX = "Execution failed: "


class ExecutionStatus(Enum):
    SUCCESS = "success"
    ERROR_OUTPUT = "error_output"  # exited cleanly but only wrote to stderr
    NO_OUTPUT = "no_output"
    FAILED = "failed"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one script run."""
    status: ExecutionStatus
    text: str
    exit_code: Optional[int] = None
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (ExecutionStatus.SUCCESS, ExecutionStatus.NO_OUTPUT)


def env_value(value: Any) -> str:
    """Strings pass through; everything else is rendered as JSON (true, null, [1, 2])."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return str(value)


def args_to_env(args: dict[str, Any]) -> dict[str, str]:
    """Map {"who": "Ada"} to {"SKILL_ARG_WHO": "Ada"}."""
    return {f"{ENV_PREFIX}{key.upper()}": env_value(value) for key, value in args.items()}


def resolve_command(skill_path: Path, command: str) -> list[str] | str:
    """
    Turn a script name into something runnable.

    If the first token names a file in the skill folder (or its scripts/
    subfolder) it is run directly: .py files with this interpreter, executable
    files as-is, anything else through sh. Otherwise the command string is
    handed to the shell unchanged.
    """
    try:
        tokens = shlex.split(command)
    except ValueError:
        return command
    if not tokens:
        return command

    head, rest = tokens[0], tokens[1:]
    for candidate in (skill_path / head, skill_path / "scripts" / head):
        if not candidate.is_file():
            continue
        script = str(candidate.resolve())
        if candidate.suffix == ".py":
            return [sys.executable, script, *rest]
        if os.access(candidate, os.X_OK):
            return [script, *rest]
        return ["sh", script, *rest]

    return command


class SkillExecutor:
    """Runs skill scripts and captures their output."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def execute(self, skill_path: Path, command: str, args: dict[str, Any]) -> str:
        """Run a script and return its output text."""
        return self.run(skill_path, command, args).text

    def run(
        self,
        skill_path: Path,
        command: str,
        args: dict[str, Any],
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """
        Run a script in skill_path with args bound into the environment.

        Args:
            skill_path: Skill folder, used as the working directory
            command: Script name or shell command
            args: Tool arguments
            timeout: Seconds to wait before killing the child (default: executor
                timeout; None waits indefinitely)
        """
        skill_path = Path(skill_path)
        deadline = timeout if timeout is not None else self.timeout
        env = {**os.environ, **args_to_env(args or {})}
        argv = resolve_command(skill_path, command)

        logger.debug(f"Running {command!r} in {skill_path}")
        try:
            completed = subprocess.run(
                argv,
                shell=isinstance(argv, str),
                cwd=str(skill_path),
                env=env,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=deadline,
                check=True,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning(f"Skill script timed out: {e}")
            return ExecutionResult(
                status=ExecutionStatus.TIMEOUT,
                text=f"{FAILED_PREFIX}{e}",
                stdout=_decode(e.stdout),
                stderr=_decode(e.stderr),
            )
        except subprocess.CalledProcessError as e:
            logger.warning(f"Skill script failed: {e}")
            stderr = e.stderr or ""
            message = f"{FAILED_PREFIX}{e}"
            if stderr.strip():
                message = f"{message}\n{stderr.strip()}"
            return ExecutionResult(
                status=ExecutionStatus.FAILED,
                text=message,
                exit_code=e.returncode,
                stdout=e.stdout or "",
                stderr=stderr,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.warning(f"Skill script could not be started: {e}")
            return ExecutionResult(status=ExecutionStatus.FAILED, text=f"{FAILED_PREFIX}{e}")

        return _collect(completed)


def _collect(completed: subprocess.CompletedProcess) -> ExecutionResult:
    stdout = completed.stdout or ""
    stderr = completed.stderr or ""

    if stderr and not stdout:
        status, text = ExecutionStatus.ERROR_OUTPUT, f"{ERROR_PREFIX}{stderr}"
    elif stdout:
        status, text = ExecutionStatus.SUCCESS, stdout
    elif stderr:
        status, text = ExecutionStatus.ERROR_OUTPUT, stderr
    else:
        status, text = ExecutionStatus.NO_OUTPUT, NO_OUTPUT

    return ExecutionResult(
        status=status,
        text=text,
        exit_code=completed.returncode,
        stdout=stdout,
        stderr=stderr,
    )


def _decode(output: Any) -> str:
    # TimeoutExpired can carry raw bytes even in text mode
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
