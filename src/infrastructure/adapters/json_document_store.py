"""JSON document store adapter for reading and writing document structures."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ...domain.errors import DocumentLoadError
from ...domain.models.document_structure import DocumentStructure

logger = logging.getLogger(__name__)

_STRUCTURE_ADAPTER = TypeAdapter(DocumentStructure)


class JsonDocumentStoreAdapter:
    """
    Adapter that (de)serializes DocumentStructure as JSON.
    
    Field names follow the domain dataclasses; enum values use their
    hyphenated names (e.g. "list-item", "formula-image").
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def load(self, path: Path | str) -> DocumentStructure:
        """
        Load a document structure from a JSON file.
        
        Raises:
            DocumentLoadError: If the file is missing, not JSON, or not a valid structure
        """
        path = Path(path)
        if not path.exists():
            raise DocumentLoadError(str(path), "file does not exist")
        
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentLoadError(str(path), str(e)) from e
        
        return self.from_dict(data, source=str(path))

    def from_dict(self, data: object, source: str = "<memory>") -> DocumentStructure:
        """Validate a JSON-compatible object into a DocumentStructure."""
        try:
            structure = _STRUCTURE_ADAPTER.validate_python(data)
        except (ValidationError, ValueError) as e:
            raise DocumentLoadError(source, f"invalid document structure: {e}") from e
        
        logger.debug(f"Loaded document structure with {len(structure.pages)} page(s) from {source}")
        return structure

    def to_dict(self, structure: DocumentStructure) -> dict:
        """Serialize a DocumentStructure to a JSON-compatible dict."""
        return _STRUCTURE_ADAPTER.dump_python(structure, mode="json")

    def save(self, structure: DocumentStructure, path: Path | str) -> None:
        """
        Save a document structure atomically (write to temp file, then rename).
        
        Args:
            structure: DocumentStructure to write
            path: Destination file path (parent directories are created)
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.tmp.",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            try:
                json.dump(self.to_dict(structure), temp_file, indent=self.indent, ensure_ascii=False)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            except Exception:
                temp_file.close()
                temp_path.unlink(missing_ok=True)
                raise
        
        os.replace(temp_path, path)
        logger.debug(f"Document structure saved: {path}", extra={"path": str(path)})
