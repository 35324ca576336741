"""Gallery tag search service."""
