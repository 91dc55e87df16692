from __future__ import annotations

import logging

from ..dto.accessibility import AccessibilityReport, PageAudit
from .enhance_accessibility import validate_structure
from ...domain.models.document_structure import DocumentStructure
from ...domain.models.image import ImageBlock, ImageReference

logger = logging.getLogger(__name__)


def audit_accessibility(structure: DocumentStructure) -> AccessibilityReport:
    """
    Report the accessibility state of a document without modifying it.
    
    Used before rendering to confirm every image has alt text and every page
    has a reading order, and to list images whose alt text was generated and
    still needs human review.
    
    Args:
        structure: DocumentStructure to audit
    
    Returns:
        AccessibilityReport with counts, per-page findings and warnings
    
    Raises:
        InvalidDocumentStructure: If a required collection is missing
    """
    validate_structure(structure)
    
    warnings: list[str] = []
    page_audits: list[PageAudit] = []
    
    images_missing_alt_text = sum(1 for image in structure.images if _missing_alt_text(image))
    images_missing_alt_text += sum(1 for block in structure.iter_image_blocks() if _missing_alt_text(block))
    images_flagged = sum(1 for block in structure.iter_image_blocks() if block.requires_alt_text)
    blocks_without_role = sum(1 for block in structure.iter_text_blocks() if block.semantic_role is None)
    
    pages_without_order = 0
    pages_incomplete = 0
    
    for index, page in enumerate(structure.pages):
        order = page.reading_order
        audit = PageAudit(
            page_index=index,
            page_number=page.page_number,
            text_blocks=len(page.text_blocks),
            image_blocks=len(page.image_blocks),
            has_reading_order=order is not None,
        )
        label = page.page_number if page.page_number is not None else index + 1
        
        if order is None or (order.is_empty() and page.text_blocks):
            pages_without_order += 1
            warnings.append(f"Page {label} has no reading order")
        else:
            audit.missing_block_ids = order.missing_ids(page)
            audit.unknown_block_ids = order.unknown_ids(page)
            audit.reading_order_complete = order.is_complete_for(page)
            if not audit.reading_order_complete:
                pages_incomplete += 1
                warnings.append(
                    f"Page {label} reading order is incomplete "
                    f"({len(audit.missing_block_ids)} missing, {len(audit.unknown_block_ids)} unknown id(s))"
                )
        
        page_audits.append(audit)
    
    if images_missing_alt_text:
        warnings.append(f"{images_missing_alt_text} image(s) have no alt text")
    if images_flagged:
        warnings.append(f"{images_flagged} image(s) have generated alt text awaiting review")
    
    total_images = len(structure.images) + sum(len(page.image_blocks) for page in structure.pages)
    report = AccessibilityReport(
        pages=len(structure.pages),
        text_blocks=sum(len(page.text_blocks) for page in structure.pages),
        images=total_images,
        images_missing_alt_text=images_missing_alt_text,
        images_flagged_for_review=images_flagged,
        blocks_without_role=blocks_without_role,
        pages_without_reading_order=pages_without_order,
        pages_with_incomplete_reading_order=pages_incomplete,
        page_audits=page_audits,
        warnings=warnings,
    )
    
    logger.debug(f"Accessibility audit: {len(warnings)} warning(s)", extra={"warnings": len(warnings)})
    return report


def _missing_alt_text(image: ImageReference | ImageBlock) -> bool:
    """Empty alt text is only acceptable on decorative images."""
    if image.alt_text is None:
        return True
    return image.alt_text == "" and not image.is_decorative
