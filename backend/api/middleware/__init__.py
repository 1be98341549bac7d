"""Request pipeline dependencies."""
