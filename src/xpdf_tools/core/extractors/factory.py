"""
Factory for creating Xpdf extractors.
"""

from typing import Optional

from .base import BaseExtractor
from .info import InfoExtractor
from .text import TextExtractor
from .png import PngExtractor
from ...config import XpdfConfig
from ...xpdf.client import XpdfClient


class ExtractorFactory:
    """Factory class for creating Xpdf extractors."""

    @staticmethod
    def create(
        extractor_type: str,
        client: Optional[XpdfClient] = None,
        config: Optional[XpdfConfig] = None,
        **kwargs
    ) -> BaseExtractor:
        """Create an extractor instance based on type.

        Args:
            extractor_type: Type of extractor ('info', 'text', 'png')
            client: Shared Xpdf client; one is built from ``config`` if omitted
            config: Configuration used when no client is given
            **kwargs: Additional arguments for extractor initialization

        Returns:
            BaseExtractor instance

        Raises:
            ValueError: If extractor type is not supported
        """
        extractor_type = extractor_type.lower()
        if extractor_type not in ExtractorFactory.get_available_extractors():
            raise ValueError(f"Unsupported extractor type: {extractor_type}")

        client = client or XpdfClient(config)
        if extractor_type == 'info':
            return InfoExtractor(client)
        elif extractor_type == 'text':
            return TextExtractor(client)
        else:
            png_kwargs = {}
            if 'dpi' in kwargs:
                png_kwargs['dpi'] = kwargs['dpi']
            if 'strict' in kwargs:
                png_kwargs['strict'] = kwargs['strict']
            return PngExtractor(client, **png_kwargs)

    @staticmethod
    def get_available_extractors():
        """Get list of available extractor types.

        Returns:
            List of available extractor type names
        """
        return ['info', 'text', 'png']
