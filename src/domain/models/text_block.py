from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BlockType(str, Enum):
    """Structural category of a text block, assigned by layout analysis."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"
    LIST_ORDERED = "ordered-list"
    LIST_UNORDERED = "unordered-list"
    CAPTION = "caption"
    FOOTNOTE = "footnote"
    SIDEBAR = "sidebar"
    CALLOUT = "callout"
    QUESTION = "question"
    EXERCISE = "exercise"
    ANSWER = "answer"
    EXAMPLE = "example"
    NOTE = "note"
    TIP = "tip"
    WARNING = "warning"
    GLOSSARY_TERM = "glossary-term"
    LEARNING_OBJECTIVE = "learning-objective"
    OTHER = "other"


@dataclass
class BoundingBox:
    """Position of a block on its page, in page coordinates."""

    x: float
    y: float
    width: float
    height: float
    page_number: int | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"BoundingBox width/height must be >= 0, got {self.width}x{self.height}"
            )


@dataclass
class TextBlock:
    """
    Unit of text content on a page.
    
    Fields:
        id: Identifier unique within the page (assigned upstream, never reassigned)
        text: Text content
        type: Structural block type (None when layout analysis could not decide)
        level: Heading level (1 for H1, 2 for H2, ...) when type is heading
        bounding_box: Position on the page (optional)
        confidence: Layout classifier confidence 0.0-1.0 (optional)
        semantic_role: Assistive-technology role, filled by the accessibility stage
    """

    id: str
    text: str = ""
    type: BlockType | None = BlockType.PARAGRAPH
    level: int | None = None
    bounding_box: BoundingBox | None = None
    confidence: float | None = None
    semantic_role: str | None = None

    def __post_init__(self) -> None:
        """Validate text block."""
        if not self.id:
            raise ValueError("TextBlock id must be a non-empty string")
        if self.level is not None and self.level < 1:
            raise ValueError(f"level must be >= 1 if provided, got {self.level}")
