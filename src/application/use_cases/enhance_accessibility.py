from __future__ import annotations

import logging
import time
import uuid

from ..dto.accessibility import EnhancementOptions
from ..ports.color_analyzer import ColorAnalyzerPort
from ..ports.image_describer import ImageDescriberPort
from ..services.alt_text_resolver import AltTextResolver
from ..services.color_accessibility import ColorAccessibilityChecker
from ..services.reading_order_verifier import ReadingOrderVerifier
from ..services.semantic_role_mapper import SemanticRoleMapper
from ...domain.errors import InvalidDocumentStructure
from ...domain.models.document_structure import DocumentStructure
from ...domain.policy.alt_text_policy import AltTextPolicy
from ...domain.policy.reading_order_policy import ReadingOrderPolicy

logger = logging.getLogger(__name__)


def enhance_accessibility(
    structure: DocumentStructure,
    options: EnhancementOptions | None = None,
    image_describer: ImageDescriberPort | None = None,
    color_analyzer: ColorAnalyzerPort | None = None,
    job_id: str | None = None,
) -> DocumentStructure:
    """
    Attach accessibility metadata to a document: alt text → roles → color → reading order.
    
    The structure is mutated in place and the same instance is returned. Only
    missing metadata is filled, so running the pass twice changes nothing the
    second time. The caller must hold exclusive access to the structure for
    the duration of the call.
    
    Args:
        structure: DocumentStructure produced by layout analysis
        options: EnhancementOptions (defaults if not provided)
        image_describer: Optional ImageDescriberPort used before type-based alt text
        color_analyzer: Optional ColorAnalyzerPort (identity check if not provided)
        job_id: Optional job identifier for log correlation (generated if not provided)
    
    Returns:
        The same DocumentStructure instance, enhanced
    
    Raises:
        InvalidDocumentStructure: If a required collection is missing
    """
    start_time = time.time()
    job_id = job_id or str(uuid.uuid4())
    options = options or EnhancementOptions()
    
    validate_structure(structure)
    
    logger.info(
        f"Starting accessibility enhancement for {len(structure.pages)} page(s)",
        extra={"job_id": job_id, "pages": len(structure.pages), "images": len(structure.images)},
    )
    
    alt_text_resolver = AltTextResolver(
        policy=AltTextPolicy(
            formula_label_for_blocks=options.formula_label_for_blocks,
            flag_generated_alt_text=options.flag_generated_alt_text,
        ),
        describer=image_describer,
    )
    role_mapper = SemanticRoleMapper()
    color_checker = ColorAccessibilityChecker(analyzer=color_analyzer)
    reading_order_verifier = ReadingOrderVerifier(
        policy=ReadingOrderPolicy(repair_incomplete=options.repair_incomplete_reading_order),
    )
    
    structure = alt_text_resolver.resolve(structure)
    structure = role_mapper.apply(structure)
    structure = color_checker.check(structure)
    structure = reading_order_verifier.verify(structure)
    
    duration = time.time() - start_time
    logger.info(
        f"Accessibility enhancement completed in {duration:.3f}s",
        extra={"job_id": job_id, "duration_seconds": duration},
    )
    return structure


def validate_structure(structure: DocumentStructure | None) -> None:
    """
    Reject structures whose required collections are missing.
    
    Raises:
        InvalidDocumentStructure: On the first missing collection found
    """
    if structure is None:
        raise InvalidDocumentStructure("structure", hint="The layout stage produced no document")
    if structure.pages is None:
        raise InvalidDocumentStructure("pages", hint="Use an empty list for documents without pages")
    if structure.images is None:
        raise InvalidDocumentStructure("images", hint="Use an empty list for documents without images")
    
    for index, page in enumerate(structure.pages):
        if page is None:
            raise InvalidDocumentStructure(f"pages[{index}]")
        if page.text_blocks is None:
            raise InvalidDocumentStructure(f"pages[{index}].text_blocks")
        if page.image_blocks is None:
            raise InvalidDocumentStructure(f"pages[{index}].image_blocks")
