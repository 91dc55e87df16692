"""Infrastructure layer: configuration, logging, adapters and CLI."""
