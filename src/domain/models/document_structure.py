from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .image import ImageBlock, ImageReference
from .reading_order import ReadingOrder
from .text_block import TextBlock


@dataclass
class DocumentMetadata:
    """Bibliographic metadata carried through the pipeline untouched."""

    title: str | None = None
    authors: list[str] = field(default_factory=list)
    language: str | None = None
    publisher: str | None = None
    description: str | None = None


@dataclass
class PageStructure:
    """
    One logical page produced by layout analysis.
    
    Fields:
        page_number: 1-based page number (optional)
        text_blocks: Text blocks in storage order (upstream reading order)
        image_blocks: Images placed on the page
        reading_order: Screen-reader traversal order (None until verified)
        is_scanned: True when the page text came from OCR
        ocr_confidence: Mean OCR confidence 0.0-1.0 for scanned pages
        is_two_page_spread: True when the page was split from a two-page spread
    """

    page_number: int | None = None
    text_blocks: list[TextBlock] = field(default_factory=list)
    image_blocks: list[ImageBlock] = field(default_factory=list)
    reading_order: ReadingOrder | None = None
    is_scanned: bool = False
    ocr_confidence: float | None = None
    is_two_page_spread: bool = False


@dataclass
class DocumentStructure:
    """
    Root aggregate for one converted document.
    
    Owned by the conversion pipeline; pipeline stages mutate it in place.
    """

    pages: list[PageStructure] = field(default_factory=list)
    images: list[ImageReference] = field(default_factory=list)
    metadata: DocumentMetadata | None = None

    def iter_image_blocks(self) -> Iterator[ImageBlock]:
        for page in self.pages:
            yield from page.image_blocks

    def iter_text_blocks(self) -> Iterator[TextBlock]:
        for page in self.pages:
            yield from page.text_blocks
