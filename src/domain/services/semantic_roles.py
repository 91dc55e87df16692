"""Mapping from structural block types to assistive-technology roles."""

from __future__ import annotations

from typing import Literal

from src.domain.models.text_block import BlockType

SemanticRole = Literal["heading", "list", "caption", "note", "complementary", "text"]

DEFAULT_ROLE: SemanticRole = "text"

_ROLE_BY_BLOCK_TYPE: dict[BlockType, SemanticRole] = {
    BlockType.HEADING: "heading",
    BlockType.LIST_ITEM: "list",
    BlockType.LIST_ORDERED: "list",
    BlockType.LIST_UNORDERED: "list",
    BlockType.CAPTION: "caption",
    BlockType.FOOTNOTE: "note",
    BlockType.SIDEBAR: "complementary",
    BlockType.CALLOUT: "note",
}


def role_for(block_type: BlockType | str | None) -> SemanticRole:
    """
    Return the semantic role for a block type.
    
    Total over BlockType; unmapped and unknown types get the generic "text" role.
    The rendering stage uses this to emit ARIA roles and semantic elements.
    """
    if block_type is None:
        return DEFAULT_ROLE
    if not isinstance(block_type, BlockType):
        try:
            block_type = BlockType(block_type)
        except ValueError:
            return DEFAULT_ROLE
    return _ROLE_BY_BLOCK_TYPE.get(block_type, DEFAULT_ROLE)
