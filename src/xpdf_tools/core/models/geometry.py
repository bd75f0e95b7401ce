"""Page geometry models reported by pdfinfo."""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Box(BaseModel):
    """A page rectangle such as the MediaBox, in PDF points."""

    model_config = ConfigDict(frozen=True)

    x1: float = Field(..., description="Lower-left x coordinate.")
    y1: float = Field(..., description="Lower-left y coordinate.")
    x2: float = Field(..., description="Upper-right x coordinate.")
    y2: float = Field(..., description="Upper-right y coordinate.")

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


class PageSize(BaseModel):
    """Size of the first page, in PDF points."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    name: Optional[str] = Field(None, description="Paper name printed by pdfinfo, e.g. 'letter' or 'A4'.")
