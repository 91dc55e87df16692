"""Domain errors for the accessibility enhancement stage."""


class InvalidDocumentStructure(Exception):
    """
    Raised when a document structure violates the pipeline contract.
    
    The accessibility stage never fails on missing metadata; it only rejects
    structures whose required collections are absent, which points to a bug
    in an upstream stage.
    
    Attributes:
        field_path: Dotted path of the offending field (e.g. 'pages[2].text_blocks')
        hint: Actionable hint for resolution (optional)
    """
    
    def __init__(self, field_path: str, hint: str | None = None) -> None:
        self.field_path = field_path
        self.hint = hint
        msg = f"Invalid document structure: '{field_path}' is required but missing"
        if hint:
            msg += f". {hint}"
        super().__init__(msg)


class DocumentLoadError(Exception):
    """
    Raised when a serialized document structure cannot be read.
    
    Attributes:
        path: Path of the document that failed to load
        reason: Why loading failed
    """
    
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load document structure from '{path}': {reason}")
