"""
Best-effort formatting of generated Go files.

Runs goimports (or gofmt when goimports is not installed) on a written
file. Failures never invalidate the generated text: callers log them and
carry on.
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from .core.errors import FormatterFailure
from ..logging_config import get_logger

logger = get_logger(__name__)

FALLBACK_COMMAND = "gofmt"


class GoFormatter:
    """Formatter using goimports/gofmt for Go code."""

    def __init__(self, command: str = "goimports", timeout: float = 30.0):
        self.command = command
        self.timeout = timeout
        self._executable: Optional[str] = None

    def resolve_executable(self) -> Optional[str]:
        """Locate the formatter binary, falling back to gofmt."""
        if self._executable is None:
            for candidate in (self.command, FALLBACK_COMMAND):
                if candidate and shutil.which(candidate):
                    self._executable = candidate
                    break
        return self._executable

    def is_available(self) -> bool:
        return self.resolve_executable() is not None

    def format_file(self, path: Union[str, Path]) -> None:
        """
        Rewrite path in place.

        Raises:
            FormatterFailure: If no formatter is installed, it times out,
                or it exits with a non-zero status
        """
        if not self.is_available():
            raise FormatterFailure(
                f"Neither {self.command} nor {FALLBACK_COMMAND} is installed"
            )
        executable = self.resolve_executable()

        cmd = [executable, "-w", str(path)]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise FormatterFailure(
                f"{executable} timed out after {self.timeout}s on {path}"
            ) from e
        except OSError as e:
            raise FormatterFailure(f"Failed to run {executable}: {e}") from e

        if result.returncode != 0:
            raise FormatterFailure(
                f"{executable} failed on {path}: {result.stderr.strip()}"
            )

        logger.debug("Formatted %s with %s", path, executable)

    def format_files(self, paths: List[Path]) -> List[str]:
        """
        Format every path, collecting failures instead of raising.

        Returns:
            Warning messages, one per failed file
        """
        warnings = []
        for path in paths:
            try:
                self.format_file(path)
            except FormatterFailure as e:
                logger.warning("Formatter skipped: %s", e)
                warnings.append(str(e))
        return warnings
