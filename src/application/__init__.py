"""Application layer: ports, services and use cases."""
