"""Application layer - use cases orchestrating domain entities through ports."""
