from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.models.image import ImageType

ImageScope = Literal["document", "block"]

GENERIC_ALT_TEXT = "Image: Content image"

# Fallback alt text by image type when no caption is available.
TYPE_ALT_TEXT: dict[ImageType, str] = {
    ImageType.FIGURE: "Figure: Illustration",
    ImageType.CHART: "Chart: Data visualization",
    ImageType.DIAGRAM: "Diagram: Visual diagram",
    ImageType.FORMULA_IMAGE: "Mathematical formula",
    ImageType.DECORATIVE: "",
}


@dataclass(frozen=True)
class AltTextPolicy:
    """Policy for deriving alt text from an image's type when no caption exists."""
    
    formula_label_for_blocks: bool = False
    flag_generated_alt_text: bool = True
    
    def fallback_for(self, image_type: ImageType | None, scope: ImageScope = "document") -> str:
        """
        Return the type-based alt text for an image.
        
        Block-level formula images get the generic text unless
        formula_label_for_blocks is enabled.
        
        Args:
            image_type: Visual category of the image (None for unknown)
            scope: "document" for ImageReference, "block" for ImageBlock
        
        Returns:
            Alt text; empty string only for decorative images
        """
        if image_type is None:
            return GENERIC_ALT_TEXT
        if (
            image_type == ImageType.FORMULA_IMAGE
            and scope == "block"
            and not self.formula_label_for_blocks
        ):
            return GENERIC_ALT_TEXT
        return TYPE_ALT_TEXT.get(image_type, GENERIC_ALT_TEXT)
