"""
Locate the Xpdf command-line executables.

The system PATH is searched first, then the bundled ``xpdfbin-*`` folders for
the current platform.
"""

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Bundled binary folders, relative to the bundle root.
BUNDLED_PATHS = (
    ("linux", "xpdfbin-linux-3.04/bin64"),
    ("mac", "xpdfbin-mac-3.04/bin64"),
    ("win", "xpdfbin-win-3.04/bin64"),
)


def platform_key(platform: Optional[str] = None) -> Optional[str]:
    """Map ``sys.platform`` to one of ``linux``, ``mac`` or ``win``."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "mac"
    if platform in ("win32", "cygwin"):
        return "win"
    return None


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_executable(
    command: str,
    bundle_root: Optional[str | Path] = None,
    bin_dir: Optional[str | Path] = None,
    platform: Optional[str] = None,
) -> Optional[str]:
    """Find the executable for an Xpdf command.

    Args:
        command: Command name, e.g. ``"pdfinfo"``
        bundle_root: Directory containing the bundled ``xpdfbin-*`` folders
        bin_dir: Optional directory searched before the system PATH
        platform: Override for ``sys.platform``

    Returns:
        The path of the first existing executable, or None if the command
        could not be found anywhere.
    """
    key = platform_key(platform)
    name = f"{command}.exe" if key == "win" else command

    if bin_dir:
        candidate = Path(bin_dir) / name
        if _is_executable(candidate):
            return str(candidate)

    found = shutil.which(command)
    if found:
        return found

    if bundle_root is not None:
        for machine, relative in BUNDLED_PATHS:
            if machine != key:
                continue
            candidate = Path(bundle_root) / relative / name
            if _is_executable(candidate):
                return str(candidate)

    logger.debug(f"No executable found for {command}")
    return None
