"""Domain layer: document structure model, policies and pure mappings."""
