"""In-memory keyword index.

Each keyword owns exactly one posting list. Lists are only touched by
:meth:`KeywordIndex.merge`, which appends the new document's occurrence and
repositions it with :func:`insert_last_occurrence`. Callers only ever see
tuple snapshots, so no reference to a live list escapes a merge step.

Documents must be merged one at a time; the index is not safe for
concurrent merges. Once :meth:`KeywordIndex.freeze` is called the index is
read-only and may be queried from any number of threads.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
from typing import Any

from little_search.search.analyzers import normalize_keyword
from little_search.search.models import Occurrence, PostingList
from little_search.search.ordering import insert_last_occurrence
from little_search.search.query import MAX_RESULTS, top_search


logger = logging.getLogger(__name__)


class IndexFrozenError(RuntimeError):
    """Raised when a frozen index is asked to merge another document."""


class DuplicateDocumentError(ValueError):
    """Raised when a document is merged into the index a second time."""


class KeywordIndex:
    """Keyword -> descending posting list."""

    def __init__(self) -> None:
        self._postings: dict[str, PostingList] = {}
        self._documents: set[str] = set()
        self._frozen = False

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def document_count(self) -> int:
        """Number of distinct documents that contributed at least one keyword."""
        return len(self._documents)

    def keywords(self) -> Iterator[str]:
        return iter(self._postings)

    def postings(self, keyword: str) -> tuple[Occurrence, ...]:
        """Return a snapshot of the posting list for ``keyword`` (empty when absent)."""
        return tuple(self._postings.get(keyword, ()))

    def merge(self, table: Mapping[str, Occurrence]) -> None:
        """Fold one document's keyword table into the index.

        Raises:
            IndexFrozenError: if the index has been frozen.
            DuplicateDocumentError: if any occurrence names a document already merged.
        """
        if self._frozen:
            raise IndexFrozenError("Index is frozen; no further documents can be merged")

        documents = {occurrence.document for occurrence in table.values()}
        repeated = documents & self._documents
        if repeated:
            raise DuplicateDocumentError(f"Documents already indexed: {sorted(repeated)}")

        for keyword, occurrence in table.items():
            postings = self._postings.get(keyword)
            if postings is None:
                self._postings[keyword] = [occurrence]
                continue
            postings.append(occurrence)
            probes = insert_last_occurrence(postings)
            logger.debug("Positioned %s for %r after probes %s", occurrence, keyword, probes)

        self._documents |= documents

    def freeze(self) -> None:
        self._frozen = True

    def search(self, first: str, second: str, limit: int = MAX_RESULTS) -> list[str]:
        """Return up to ``limit`` documents containing ``first`` or ``second``.

        Query words are normalized like indexed tokens, so case and trailing
        punctuation do not matter. Words that can never be keywords match
        nothing.
        """
        first_postings = self._lookup(first)
        second_postings = self._lookup(second)
        results = top_search(first_postings, second_postings, limit)
        logger.debug("Search %r OR %r -> %d documents", first, second, len(results))
        return results

    def _lookup(self, word: str) -> PostingList | None:
        keyword = normalize_keyword(word)
        if keyword is None:
            return None
        return self._postings.get(keyword)

    def to_dict(self) -> dict[str, list[list[Any]]]:
        """Dump the index as keyword -> ``[[document, frequency], ...]``."""
        return {
            keyword: [[occurrence.document, occurrence.frequency] for occurrence in postings]
            for keyword, postings in self._postings.items()
        }
