"""
Client for invoking the Xpdf command-line tools.
"""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from ..config import XpdfConfig
from .which import find_executable

logger = logging.getLogger(__name__)

COMMANDS = ("pdfinfo", "pdftotext", "pdftopng")


class XpdfError(Exception):
    """Base class for errors raised while running the Xpdf tools."""
    pass


class MissingArgumentError(XpdfError, ValueError):
    """Raised when an extractor is called without an input file."""
    pass


class ExecutableNotFoundError(XpdfError):
    """Raised when an Xpdf executable cannot be located or spawned."""
    pass


class XpdfToolError(XpdfError):
    """Raised when an Xpdf tool exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(f"{command} failed with return status {returncode}")


class TemporaryFileError(XpdfError):
    """Raised when an intermediate output file cannot be opened."""
    pass


class ImageDecodeError(XpdfError):
    """Raised when a rasterized page cannot be decoded."""

    def __init__(self, page_number: int, message: str):
        self.page_number = page_number
        super().__init__(f"Page {page_number}: {message}")


class XpdfClient:
    """Runs Xpdf commands with executables resolved once at construction."""

    def __init__(self, config: Optional[XpdfConfig] = None):
        """Initialize the client.

        Args:
            config: Xpdf configuration; defaults to ``XpdfConfig.from_env()``
        """
        self.config = config or XpdfConfig.from_env()
        self.executables: Dict[str, Optional[str]] = {}
        for command in COMMANDS:
            self.executables[command] = self.config.executables.get(command) or find_executable(
                command,
                bundle_root=self.config.bundle_root,
                bin_dir=self.config.bin_dir,
            )
            logger.debug(f"Resolved {command} -> {self.executables[command]}")

    def executable(self, command: str) -> str:
        """Return the resolved path of a command.

        Raises:
            ExecutableNotFoundError: If the command was not found
        """
        path = self.executables.get(command)
        if not path:
            raise ExecutableNotFoundError(f"Could not find the Xpdf executable '{command}'")
        return path

    def run(self, command: str, args: List[str | Path]) -> str:
        """Run an Xpdf command and return its combined stdout/stderr.

        Args:
            command: Xpdf command name
            args: Command-line arguments

        Returns:
            The decoded output of the command

        Raises:
            ExecutableNotFoundError: If the executable is missing or cannot be spawned
            XpdfToolError: If the command exits with a non-zero status
        """
        cmd = [self.executable(command)] + [str(arg) for arg in args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding=self.config.codec,
                errors="replace",
            )
        except OSError as e:
            raise ExecutableNotFoundError(f"Could not execute {cmd[0]}: {e}") from e

        if proc.returncode != 0:
            logger.error(f"{command} failed with return status {proc.returncode}")
            raise XpdfToolError(command, proc.returncode, proc.stdout or "")
        return proc.stdout or ""
