"""High-level extraction helpers."""

from .extraction import xpdf_info, xpdf_text, xpdf_png

__all__ = ["xpdf_info", "xpdf_text", "xpdf_png"]
