"""Convenience functions running a single extractor on a PDF."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from xpdf_tools.config import XpdfConfig
from xpdf_tools.core.extractors import ExtractorFactory
from xpdf_tools.core.models import DocumentInfo, PageImage, PageText
from xpdf_tools.xpdf.client import XpdfClient


def xpdf_info(
    pdf_path: str | Path | None = None,
    client: XpdfClient | None = None,
    config: XpdfConfig | None = None,
) -> DocumentInfo:
    """Return the metadata reported by ``pdfinfo -box``."""
    extractor = ExtractorFactory.create("info", client=client, config=config)
    return extractor.extract(pdf_path).info


def xpdf_text(
    pdf_path: str | Path | None = None,
    client: XpdfClient | None = None,
    config: XpdfConfig | None = None,
    save_dir: str | None = None,
) -> List[PageText]:
    """Return the text lines of each page, one entry per page."""
    extractor = ExtractorFactory.create("text", client=client, config=config)
    return extractor.extract(pdf_path, save_dir=save_dir).text


def xpdf_png(
    pdf_path: str | Path | None = None,
    dpi: Optional[int] = None,
    strict: bool = False,
    client: XpdfClient | None = None,
    config: XpdfConfig | None = None,
    save_dir: str | None = None,
) -> List[PageImage]:
    """Return one rasterized image per page."""
    extractor = ExtractorFactory.create("png", client=client, config=config, strict=strict)
    return extractor.extract(pdf_path, save_dir=save_dir, dpi=dpi).images
