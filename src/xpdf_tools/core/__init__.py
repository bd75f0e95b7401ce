"""Core functionality for Xpdf output processing."""

from . import models
from . import parsers
from . import extractors

__all__ = ["models", "parsers", "extractors"]
