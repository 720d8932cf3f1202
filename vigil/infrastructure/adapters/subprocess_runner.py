"""
Subprocess Runner

Architectural Intent:
- Shared blocking helper for feeding a document to an external program
- Used by the event handler executor and the custom notifier
- stdout and stderr are captured into a single buffer
"""

import subprocess
from typing import Optional, Sequence

from vigil.domain.errors import HandlerExecutionError


def run_with_input(
    argv: Sequence[str], data: bytes, timeout: Optional[float] = None
) -> bytes:
    """Run *argv* with *data* on stdin and return its combined output.

    Raises:
        HandlerExecutionError: on launch failure, timeout or non-zero exit
    """
    command = argv[0] if argv else ""
    if not command:
        raise HandlerExecutionError(command, "empty command")
    if timeout is not None and timeout <= 0:
        timeout = None

    try:
        result = subprocess.run(
            list(argv),
            input=data,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise HandlerExecutionError(
            command, f"timed out after {timeout}s", output=e.output or b""
        ) from e
    except OSError as e:
        raise HandlerExecutionError(command, f"could not start: {e}") from e

    if result.returncode != 0:
        raise HandlerExecutionError(
            command,
            f"exited with status {result.returncode}",
            returncode=result.returncode,
            output=result.stdout or b"",
        )
    return result.stdout or b""
