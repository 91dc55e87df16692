"""Color-accessibility extension point."""

from __future__ import annotations

import logging

from ..ports.color_analyzer import ColorAnalyzerPort
from ...domain.models.document_structure import DocumentStructure

logger = logging.getLogger(__name__)


class ColorAccessibilityChecker:
    """
    Checks a document for content that relies on color alone.
    
    The document structure carries no color information, so without an
    analyzer the check is the identity. An analyzer (e.g. one that renders
    pages and measures contrast) can be injected without changing callers.
    """

    def __init__(self, analyzer: ColorAnalyzerPort | None = None) -> None:
        self.analyzer = analyzer

    def check(self, structure: DocumentStructure) -> DocumentStructure:
        if self.analyzer is None:
            return structure
        
        logger.debug(f"Running color analyzer {type(self.analyzer).__name__}")
        return self.analyzer.analyze(structure)
