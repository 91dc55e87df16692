"""Use cases exposed to the conversion pipeline."""

from .audit_accessibility import audit_accessibility
from .enhance_accessibility import enhance_accessibility

__all__ = ["audit_accessibility", "enhance_accessibility"]
