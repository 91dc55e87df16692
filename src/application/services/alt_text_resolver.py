"""Application service that fills missing alt text on document and page images."""

from __future__ import annotations

import logging

from ..ports.image_describer import ImageDescriberPort
from ...domain.models.document_structure import DocumentStructure
from ...domain.models.image import ImageBlock, ImageReference
from ...domain.policy.alt_text_policy import AltTextPolicy, ImageScope

logger = logging.getLogger(__name__)


class AltTextResolver:
    """
    Resolves alt text for every ImageReference and ImageBlock in a document.
    
    Resolution order for an image without alt text:
    1. Decorative images get empty alt text (caption ignored, never flagged)
    2. A non-empty caption is used verbatim
    3. The image describer, when configured, may supply a description
    4. Otherwise the policy's type-based fallback text is used
    
    A describer that raises is logged and treated as returning nothing.
    Images resolved by steps 3 or 4 are generated text; page image blocks
    resolved that way are flagged with requires_alt_text for human review.
    Alt text that is already non-empty is never touched, so resolve() is idempotent.
    """

    def __init__(
        self,
        policy: AltTextPolicy | None = None,
        describer: ImageDescriberPort | None = None,
    ) -> None:
        self.policy = policy or AltTextPolicy()
        self.describer = describer

    def resolve(self, structure: DocumentStructure) -> DocumentStructure:
        """Fill missing alt text in place and return the same structure."""
        resolved = 0
        flagged = 0
        
        for image in structure.images:
            if self._resolve_image(image, "document") is not None:
                resolved += 1
        
        for page in structure.pages:
            for block in page.image_blocks:
                generated = self._resolve_image(block, "block")
                if generated is None:
                    continue
                resolved += 1
                if generated and self.policy.flag_generated_alt_text:
                    block.requires_alt_text = True
                    flagged += 1
        
        logger.debug(
            f"Alt text resolved for {resolved} image(s), {flagged} flagged for review",
            extra={"images_resolved": resolved, "images_flagged": flagged},
        )
        return structure

    def _resolve_image(self, image: ImageReference | ImageBlock, scope: ImageScope) -> bool | None:
        """
        Fill alt text on one image.
        
        Returns:
            None if the image already had alt text, False if the text came from
            the decorative rule or the caption, True if it was generated
        """
        if image.alt_text:
            return None
        
        if image.is_decorative:
            if image.alt_text == "":
                return None
            image.alt_text = ""
            return False
        
        if image.caption:
            image.alt_text = image.caption
            return False
        
        image.alt_text = self._describe(image) or self.policy.fallback_for(image.image_type, scope)
        return True

    def _describe(self, image: ImageReference | ImageBlock) -> str | None:
        if self.describer is None:
            return None
        try:
            description = self.describer.describe(image)
        except Exception as e:
            # Describer failures fall back to the type-based text
            logger.warning(
                f"Image describer failed for image {image.id}: {e}",
                extra={"image_id": image.id},
                exc_info=True,
            )
            return None
        if description and description.strip():
            return description
        return None
