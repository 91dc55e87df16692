from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.models.document_structure import DocumentStructure


@runtime_checkable
class ColorAnalyzerPort(Protocol):
    """Protocol for detecting content that conveys meaning through color alone."""
    
    def analyze(self, structure: DocumentStructure) -> DocumentStructure:
        """
        Analyze a document for color-only meaning and contrast problems.
        
        Args:
            structure: Document structure to analyze
        
        Returns:
            The same document structure, annotated by the analyzer
        """
        ...
