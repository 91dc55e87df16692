"""Application service that verifies and rebuilds page reading orders."""

from __future__ import annotations

import logging

from ...domain.models.document_structure import DocumentStructure, PageStructure
from ...domain.models.reading_order import ReadingOrder
from ...domain.policy.reading_order_policy import ReadingOrderPolicy

logger = logging.getLogger(__name__)


class ReadingOrderVerifier:
    """
    Ensures every page carries a reading order over its text blocks.
    
    Pages without a reading order (or with an empty one) get one built from
    the text blocks' storage order, which layout analysis already sorts into
    reading order. Non-empty orders are left untouched unless the policy
    enables repair, in which case stale ids are dropped and missing block ids
    are appended in storage order.
    """

    def __init__(self, policy: ReadingOrderPolicy | None = None) -> None:
        self.policy = policy or ReadingOrderPolicy()

    def verify(self, structure: DocumentStructure) -> DocumentStructure:
        """Verify reading orders in place and return the same structure."""
        rebuilt = 0
        repaired = 0
        
        for page in structure.pages:
            order = page.reading_order
            if order is None or order.is_empty():
                page.reading_order = self._build(page, order)
                rebuilt += 1
            elif self.policy.repair_incomplete and not order.is_complete_for(page):
                self._repair(page, order)
                repaired += 1
        
        logger.debug(
            f"Reading order rebuilt on {rebuilt} page(s), repaired on {repaired} page(s)",
            extra={"reading_orders_rebuilt": rebuilt, "reading_orders_repaired": repaired},
        )
        return structure

    @staticmethod
    def _build(page: PageStructure, previous: ReadingOrder | None) -> ReadingOrder:
        order = ReadingOrder(block_ids=[block.id for block in page.text_blocks])
        if previous is not None:
            order.is_multi_column = previous.is_multi_column
            order.column_count = previous.column_count
        return order

    @staticmethod
    def _repair(page: PageStructure, order: ReadingOrder) -> None:
        known = {block.id for block in page.text_blocks}
        kept: list[str] = []
        seen: set[str] = set()
        for block_id in order.block_ids:
            if block_id in known and block_id not in seen:
                kept.append(block_id)
                seen.add(block_id)
        kept.extend(block.id for block in page.text_blocks if block.id not in seen)
        
        logger.info(
            f"Repaired reading order on page {page.page_number}: "
            f"{len(order.block_ids)} -> {len(kept)} block id(s)",
            extra={"page_number": page.page_number},
        )
        order.block_ids = kept
