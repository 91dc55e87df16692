from pydantic import BaseModel


class EnhancementOptions(BaseModel):
    """Options for the accessibility enhancement use case."""
    
    formula_label_for_blocks: bool = False
    flag_generated_alt_text: bool = True
    repair_incomplete_reading_order: bool = False


class PageAudit(BaseModel):
    """Accessibility findings for one page."""
    
    page_index: int
    page_number: int | None = None
    text_blocks: int = 0
    image_blocks: int = 0
    has_reading_order: bool = False
    reading_order_complete: bool = False
    missing_block_ids: list[str] = []
    unknown_block_ids: list[str] = []


class AccessibilityReport(BaseModel):
    """Result DTO for the accessibility audit use case."""
    
    pages: int
    text_blocks: int
    images: int
    images_missing_alt_text: int
    images_flagged_for_review: int
    blocks_without_role: int
    pages_without_reading_order: int
    pages_with_incomplete_reading_order: int
    page_audits: list[PageAudit] = []
    warnings: list[str] = []
    
    @property
    def ready_for_rendering(self) -> bool:
        """True when every image has alt text and every page has a reading order."""
        return self.images_missing_alt_text == 0 and self.pages_without_reading_order == 0
