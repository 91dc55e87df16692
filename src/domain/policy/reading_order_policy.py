from dataclasses import dataclass


@dataclass(frozen=True)
class ReadingOrderPolicy:
    """Policy for verifying page reading orders."""
    
    # Existing non-empty orders are trusted unless repair is enabled.
    repair_incomplete: bool = False
