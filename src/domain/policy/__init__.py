"""Domain policies."""
