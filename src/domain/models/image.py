from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .text_block import BoundingBox


class ImageType(str, Enum):
    """Visual category of an image, assigned by layout analysis."""

    FIGURE = "figure"
    CHART = "chart"
    DIAGRAM = "diagram"
    PHOTO = "photo"
    ILLUSTRATION = "illustration"
    DECORATIVE = "decorative"
    FORMULA_IMAGE = "formula-image"
    OTHER = "other"


@dataclass
class ImageReference:
    """
    Document-level image not tied to a page's block stream (cover, appendix figure).
    
    Fields:
        id: Image identifier
        original_path: Path of the image as extracted from the source document
        epub_path: Path of the image inside the output package (optional)
        alt_text: Text alternative for assistive technology (None until resolved)
        caption: Human-authored caption (never overwritten)
        image_type: Visual category (None when unknown)
    """

    id: str
    original_path: str | None = None
    epub_path: str | None = None
    alt_text: str | None = None
    caption: str | None = None
    image_type: ImageType | None = None

    @property
    def is_decorative(self) -> bool:
        return self.image_type == ImageType.DECORATIVE


@dataclass
class ImageBlock:
    """
    Image placed on a page by layout analysis.
    
    Same alt text/caption semantics as ImageReference, plus requires_alt_text,
    which marks images whose alt text was generated and needs human review.
    """

    id: str
    image_path: str | None = None
    bounding_box: BoundingBox | None = None
    alt_text: str | None = None
    caption: str | None = None
    image_type: ImageType | None = None
    confidence: float | None = None
    requires_alt_text: bool = False

    @property
    def is_decorative(self) -> bool:
        return self.image_type == ImageType.DECORATIVE
