"""Domain models for the document structure handed between pipeline stages."""

from .document_structure import DocumentMetadata, DocumentStructure, PageStructure
from .image import ImageBlock, ImageReference, ImageType
from .reading_order import ReadingOrder
from .text_block import BlockType, BoundingBox, TextBlock

__all__ = [
    "BlockType",
    "BoundingBox",
    "DocumentMetadata",
    "DocumentStructure",
    "ImageBlock",
    "ImageReference",
    "ImageType",
    "PageStructure",
    "ReadingOrder",
    "TextBlock",
]
