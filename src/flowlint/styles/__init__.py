"""Style acquisition, caching and indexing."""

from flowlint.styles.cache import StyleCache
from flowlint.styles.index import PropertyIndex, property_key
from flowlint.styles.service import StyleService

__all__ = ["StyleCache", "StyleService", "PropertyIndex", "property_key"]
