"""Application-level routes."""
