"""Application service that persists semantic roles onto text blocks."""

from __future__ import annotations

import logging

from ...domain.models.document_structure import DocumentStructure
from ...domain.services.semantic_roles import role_for

logger = logging.getLogger(__name__)


class SemanticRoleMapper:
    """Assigns each text block the semantic role derived from its block type."""

    def apply(self, structure: DocumentStructure) -> DocumentStructure:
        """
        Set TextBlock.semantic_role where it is not already set.
        
        Roles assigned upstream are kept; the block type itself is never changed.
        """
        assigned = 0
        for block in structure.iter_text_blocks():
            if block.semantic_role is None:
                block.semantic_role = role_for(block.type)
                assigned += 1
        
        logger.debug(f"Semantic roles assigned to {assigned} block(s)", extra={"roles_assigned": assigned})
        return structure
