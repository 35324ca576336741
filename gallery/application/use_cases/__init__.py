"""Application use cases."""

from gallery.application.use_cases.tag_search import TagSearcher

__all__ = ["TagSearcher"]
