"""Configuration for locating and invoking the Xpdf tools."""

import codecs
import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

PACKAGE_ROOT = Path(__file__).resolve().parent

# Xpdf -enc names whose Python codec name differs
XPDF_ENCODINGS = {
    "UTF-8": "utf-8",
    "Latin1": "latin-1",
    "ASCII7": "ascii",
    "UCS-2": "utf-16-be",
}


def python_codec(encoding: str) -> str:
    """Return the Python codec for an Xpdf ``-enc`` encoding name.

    Raises:
        ValueError: If Python has no codec for the encoding
    """
    codec = XPDF_ENCODINGS.get(encoding, encoding)
    try:
        return codecs.lookup(codec).name
    except LookupError as e:
        raise ValueError(f"Unsupported text encoding: {encoding}") from e


class XpdfConfig(BaseModel):
    """Settings shared by every Xpdf invocation.

    Attributes:
        bin_dir: Directory searched before the system PATH.
        bundle_root: Directory holding the bundled ``xpdfbin-*`` folders.
        dpi: Raster resolution used by ``pdftopng``.
        text_encoding: Xpdf encoding name passed as ``-enc`` to pdfinfo and pdftotext.
        executables: Explicit executable paths keyed by command name.
    """

    bin_dir: Optional[Path] = Field(None, description="Extra directory searched first for the Xpdf binaries.")
    bundle_root: Path = Field(PACKAGE_ROOT, description="Root of the bundled xpdfbin-<platform>-3.04 folders.")
    dpi: int = Field(300, description="Resolution in dots per inch for rasterized pages.")
    text_encoding: str = Field("UTF-8", description="Encoding requested from the Xpdf tools and used to decode their output.")
    executables: Dict[str, str] = Field(default_factory=dict, description="Per-command executable overrides.")

    @field_validator("dpi")
    @classmethod
    def _positive_dpi(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"dpi must be positive, got {value}")
        return value

    @field_validator("text_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        python_codec(value)
        return value

    @property
    def codec(self) -> str:
        """Python codec matching ``text_encoding``."""
        return python_codec(self.text_encoding)

    @classmethod
    def from_env(cls, **overrides) -> "XpdfConfig":
        """Build a configuration from ``XPDF_*`` environment variables.

        Recognized variables are ``XPDF_BIN_DIR``, ``XPDF_BUNDLE_ROOT``,
        ``XPDF_DPI`` and ``XPDF_TEXT_ENCODING``. Keyword overrides win over
        the environment.
        """
        values = {}
        if os.environ.get("XPDF_BIN_DIR"):
            values["bin_dir"] = os.environ["XPDF_BIN_DIR"]
        if os.environ.get("XPDF_BUNDLE_ROOT"):
            values["bundle_root"] = os.environ["XPDF_BUNDLE_ROOT"]
        if os.environ.get("XPDF_DPI"):
            values["dpi"] = os.environ["XPDF_DPI"]
        if os.environ.get("XPDF_TEXT_ENCODING"):
            values["text_encoding"] = os.environ["XPDF_TEXT_ENCODING"]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
