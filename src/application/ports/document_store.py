from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ...domain.models.document_structure import DocumentStructure


@runtime_checkable
class DocumentStorePort(Protocol):
    """Protocol for reading and writing serialized document structures."""
    
    def load(self, path: Path | str) -> DocumentStructure:
        """
        Load a document structure.
        
        Raises:
            DocumentLoadError: If the document is missing or malformed
        """
        ...
    
    def save(self, structure: DocumentStructure, path: Path | str) -> None:
        """Write a document structure, replacing any existing file."""
        ...
