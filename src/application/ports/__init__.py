"""Port interfaces for pluggable capabilities."""
