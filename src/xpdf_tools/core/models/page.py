"""Per-page extraction results."""

from typing import Optional, Tuple
from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


class PageText(BaseModel):
    """Lines of text extracted from a single page."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(..., ge=1, description="1-based page index.")
    lines: Tuple[str, ...] = Field(default_factory=tuple, description="Lines in output order, without line terminators.")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class PageImage(BaseModel):
    """A rasterized page, or the reason it could not be decoded."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_number: int = Field(..., ge=1, description="1-based page index.")
    image: Optional[Image.Image] = Field(None, description="Decoded page image.")
    error: Optional[str] = Field(None, description="Decode error message when image is None.")

    @property
    def ok(self) -> bool:
        return self.image is not None
