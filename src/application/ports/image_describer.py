from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.models.image import ImageBlock, ImageReference


@runtime_checkable
class ImageDescriberPort(Protocol):
    """Protocol for generating a description of an image's content."""
    
    def describe(self, image: ImageReference | ImageBlock) -> str | None:
        """
        Describe an image that has neither alt text nor a caption.
        
        Args:
            image: Document-level image reference or page image block
        
        Returns:
            Description text, or None/empty string when no description is
            available (the resolver then falls back to the type-based text)
        """
        ...
