"""Pure domain services."""

from .semantic_roles import SemanticRole, role_for

__all__ = ["SemanticRole", "role_for"]
