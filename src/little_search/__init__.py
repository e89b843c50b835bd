"""
Keyword indexing and ranked search package.

This package provides a pure-Python search stack:
- search.analyzers: Whitespace tokenizer and keyword normalization
- search.models: Occurrence value objects
- search.scanner: Per-document keyword frequency tables
- search.ordering: Binary-search repositioning of posting lists
- search.index: The keyword index and its merge step
- search.query: Two-keyword ranked OR search
- sources: Filesystem and in-memory document collaborators
- engine: Batch build facade
"""

from little_search.engine import SearchEngine
from little_search.search.index import IndexFrozenError, KeywordIndex
from little_search.search.models import Occurrence
from little_search.sources import DocumentNotFoundError


__all__ = [
    "DocumentNotFoundError",
    "IndexFrozenError",
    "KeywordIndex",
    "Occurrence",
    "SearchEngine",
]
