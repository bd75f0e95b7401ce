"""Xpdf executable resolution and invocation."""

from .client import (
    COMMANDS,
    XpdfClient,
    XpdfError,
    MissingArgumentError,
    ExecutableNotFoundError,
    XpdfToolError,
    TemporaryFileError,
    ImageDecodeError,
)
from .which import find_executable, platform_key

__all__ = [
    "COMMANDS",
    "XpdfClient",
    "XpdfError",
    "MissingArgumentError",
    "ExecutableNotFoundError",
    "XpdfToolError",
    "TemporaryFileError",
    "ImageDecodeError",
    "find_executable",
    "platform_key",
]
