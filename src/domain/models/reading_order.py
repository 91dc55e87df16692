from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .document_structure import PageStructure


@dataclass
class ReadingOrder:
    """
    Screen-reader traversal order for one page.
    
    Complete when every text block id on the page appears exactly once and
    no other id appears.
    """

    block_ids: list[str] = field(default_factory=list)
    is_multi_column: bool = False
    column_count: int = 1

    def __post_init__(self) -> None:
        if self.column_count < 1:
            raise ValueError(f"column_count must be >= 1, got {self.column_count}")

    def is_empty(self) -> bool:
        return not self.block_ids

    def missing_ids(self, page: PageStructure) -> list[str]:
        """Text block ids on the page that the order does not mention, in storage order."""
        present = set(self.block_ids)
        return [block.id for block in page.text_blocks if block.id not in present]

    def unknown_ids(self, page: PageStructure) -> list[str]:
        """Ids in the order that no longer match a text block on the page."""
        known = {block.id for block in page.text_blocks}
        return [block_id for block_id in self.block_ids if block_id not in known]

    def has_duplicates(self) -> bool:
        return len(set(self.block_ids)) != len(self.block_ids)

    def is_complete_for(self, page: PageStructure) -> bool:
        return (
            not self.has_duplicates()
            and not self.missing_ids(page)
            and not self.unknown_ids(page)
        )
