"""Application services implementing the accessibility sub-passes."""

from .alt_text_resolver import AltTextResolver
from .color_accessibility import ColorAccessibilityChecker
from .reading_order_verifier import ReadingOrderVerifier
from .semantic_role_mapper import SemanticRoleMapper

__all__ = [
    "AltTextResolver",
    "ColorAccessibilityChecker",
    "ReadingOrderVerifier",
    "SemanticRoleMapper",
]
