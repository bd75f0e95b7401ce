"""
pdftopng-based page rasterizer.
"""

import logging
import shutil
import tempfile
import time
from pathlib import Path
from typing import List, Optional

from PIL import Image

from .base import BaseExtractor, ExtractResult
from .info import InfoExtractor
from ..models import PageImage
from ...xpdf.client import ImageDecodeError

logger = logging.getLogger(__name__)


def page_image_path(prefix: str | Path, page_number: int) -> Path:
    """Path of the PNG that pdftopng writes for a page."""
    return Path(f"{prefix}-{page_number:06d}.png")


class PngExtractor(BaseExtractor):
    """Rasterizes every page with ``pdftopng`` and loads the images with Pillow.

    pdftopng runs once for the whole document. Pages that fail to decode are
    reported with an error and skipped unless ``strict`` is set.
    """

    name = "png"

    def __init__(self, client=None, dpi: Optional[int] = None, strict: bool = False):
        """Initialize the extractor.

        Args:
            client: Xpdf client holding the resolved executables
            dpi: Resolution override; defaults to the client configuration
            strict: Raise ImageDecodeError on the first page that fails to decode
        """
        super().__init__(client)
        self.info_extractor = InfoExtractor(self.client)
        self.dpi = dpi or self.client.config.dpi
        self.strict = strict

    def extract(self, filepath: str = None, save_dir: str = None, dpi: Optional[int] = None, **kwargs) -> ExtractResult:
        """Rasterize every page of a PDF.

        Args:
            filepath: Path to the PDF file
            save_dir: Optional directory to copy the generated PNG files to
            dpi: Resolution override for this call

        Returns:
            ExtractResult with one PageImage per page

        Raises:
            XpdfToolError: If pdfinfo or pdftopng fails
            ImageDecodeError: If a page cannot be decoded and ``strict`` is set
        """
        filepath = self._check_file(filepath)
        dpi = dpi or self.dpi
        logger.info(f"Extracting pdf images from {filepath}")
        start = time.perf_counter()

        info = self.info_extractor.document_info(filepath)
        page_numbers = self._page_numbers(info)
        images: List[PageImage] = []
        with tempfile.TemporaryDirectory(prefix="pdftopng-") as tmp_dir:
            prefix = Path(tmp_dir) / "pdftopng"
            self.client.run("pdftopng", ["-r", str(dpi), filepath, str(prefix)])

            for page_number in page_numbers:
                images.append(self._load_page(prefix, page_number))

            if save_dir:
                self._save(filepath, save_dir, prefix, images)

        failed = [page.page_number for page in images if not page.ok]
        if failed:
            logger.warning(f"Could not decode {len(failed)} of {len(images)} pages: {failed}")
        logger.info(f"Extraction completed successfully in {time.perf_counter() - start:0.3f} seconds")
        return ExtractResult(info=info, images=images)

    def _load_page(self, prefix: Path, page_number: int) -> PageImage:
        path = page_image_path(prefix, page_number)
        try:
            with Image.open(path) as image:
                image.load()
                return PageImage(page_number=page_number, image=image.copy())
        except (OSError, Image.DecompressionBombError) as e:
            error = ImageDecodeError(page_number, f"could not read {path.name}: {e}")
            logger.error(str(error))
            if self.strict:
                raise error from e
            return PageImage(page_number=page_number, error=str(error))

    def _save(self, filepath: str, save_dir: str, prefix: Path, images: List[PageImage]) -> None:
        save_dir = Path(save_dir)
        save_dir.mkdir(parents=True, exist_ok=True)
        stem = Path(filepath).stem
        for page in images:
            if page.ok:
                shutil.copyfile(page_image_path(prefix, page.page_number), page_image_path(save_dir / stem, page.page_number))
        logger.info(f"Saved page images to: {save_dir}")
