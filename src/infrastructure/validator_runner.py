"""
Validator runner — invokes the external ``lumos validate <file>`` command.

The runner is a thin subprocess wrapper.  Its contract with the rest of
the system:

- clean exit with nothing on stderr        → ``None`` (valid)
- anything else (non-zero exit, timeout)   → the raw output text, to be
  handed to ``diagnostics.diagnose``
- the executable cannot be started at all  → ``ValidatorUnavailableError``
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from core.errors import ValidatorError, ValidatorUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "lumos"
DEFAULT_TIMEOUT = 5.0


def _as_text(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


class ValidatorRunner:
    """Runs the schema validator as a subprocess with a timeout."""

    def __init__(self, command: str = DEFAULT_COMMAND, timeout: float = DEFAULT_TIMEOUT):
        self.command = command
        self.timeout = timeout

    def build_args(self, file_path: str) -> list[str]:
        return [self.command, "validate", file_path]

    def run(self, file_path: str) -> Optional[str]:
        path = Path(file_path)
        args = self.build_args(str(path))
        logger.debug("Running %s", args)
        try:
            proc = subprocess.run(
                args,
                cwd=str(path.parent) if str(path.parent) else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise ValidatorUnavailableError(
                f"Validator '{self.command}' not found. Is it installed and on PATH?"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            logger.warning("Validator timed out after %.1fs on %s", self.timeout, path)
            captured = _as_text(exc.stderr) or _as_text(exc.stdout)
            return captured or f"Error: validation timed out after {self.timeout:g} seconds"
        except OSError as exc:
            raise ValidatorError(f"Could not run validator '{self.command}': {exc}") from exc

        stderr = _as_text(proc.stderr)
        if proc.returncode == 0 and not stderr.strip():
            return None
        return stderr if stderr.strip() else _as_text(proc.stdout)
