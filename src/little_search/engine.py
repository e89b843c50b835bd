"""Batch build facade tying sources, scanner and index together.

Typical use::

    engine = SearchEngine.build_from_files("docs.txt", "noisewords.txt", docs_root="corpus")
    engine.top5_search("deer", "train")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
import time

from little_search.config import Settings
from little_search.observability.context import (
    clear_build_context,
    generate_build_id,
    set_build_context,
    update_build_context,
)
from little_search.search.analyzers import KeywordNormalizer
from little_search.search.index import IndexFrozenError, KeywordIndex
from little_search.search.models import KeywordTable, Occurrence, PostingList
from little_search.search.ordering import insert_last_occurrence
from little_search.search.scanner import load_keywords
from little_search.sources import (
    DocumentSource,
    FilesystemDocumentSource,
    read_document_list,
    read_noise_words,
)


logger = logging.getLogger(__name__)


class SearchEngine:
    """Build a keyword index over a document collection, then answer two-keyword queries."""

    def __init__(self, stopwords: Iterable[str] = (), source: DocumentSource | None = None) -> None:
        self.normalizer = KeywordNormalizer(stopwords)
        self.source: DocumentSource = source if source is not None else FilesystemDocumentSource()
        self.index = KeywordIndex()
        self._building = False
        logger.info("Loaded %d noise words", len(self.normalizer.stopwords))

    @property
    def stopwords(self) -> frozenset[str]:
        return self.normalizer.stopwords

    @classmethod
    def build_from_files(
        cls,
        docs_file: Path | str,
        noise_words_file: Path | str,
        *,
        docs_root: Path | str | None = None,
        encoding: str = "utf-8",
    ) -> SearchEngine:
        """Load noise words, then index every document listed in ``docs_file``.

        Raises:
            DocumentNotFoundError: if either list file or any listed document is missing.
        """
        stopwords = read_noise_words(noise_words_file, encoding)
        root = Path(docs_root) if docs_root is not None else Path(".")
        engine = cls(stopwords, FilesystemDocumentSource(root, encoding))
        engine.make_index(read_document_list(docs_file, encoding))
        return engine

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchEngine:
        return cls.build_from_files(
            settings.resolve_docs_file(),
            settings.resolve_noise_words_file(),
            docs_root=settings.docs_root,
            encoding=settings.encoding,
        )

    def make_index(self, documents: Iterable[str]) -> KeywordIndex:
        """Scan and merge ``documents`` in order, then freeze and publish the index.

        A document listed more than once is indexed on its first appearance only.
        The build runs against a private index; a failed read aborts it and
        ``self.index`` keeps whatever it held before the call.

        Raises:
            IndexFrozenError: if this engine already published a built index.
            RuntimeError: if called again while a build is still running.
        """
        if self.index.frozen:
            raise IndexFrozenError("Index already built; create a new engine to re-index")
        if self._building:
            raise RuntimeError("Index build already in progress")

        index = KeywordIndex()
        build_id = generate_build_id()
        set_build_context(build_id)
        started = time.perf_counter()
        seen: set[str] = set()
        self._building = True
        try:
            for document in documents:
                if document in seen:
                    logger.warning("Skipping repeated document %s", document)
                    continue
                seen.add(document)
                update_build_context(document=document)
                index.merge(self.load_keywords(document))
            index.freeze()
        finally:
            self._building = False
            clear_build_context()

        self.index = index
        logger.info(
            "Indexed %d documents into %d keywords in %.1f ms",
            len(seen),
            len(index),
            (time.perf_counter() - started) * 1000,
            extra={"build_id": build_id},
        )
        return index

    def get_keyword(self, word: str | None) -> str | None:
        return self.normalizer(word)

    def load_keywords(self, document: str) -> KeywordTable:
        return load_keywords(document, self.source, self.normalizer)

    def merge_keywords(self, table: Mapping[str, Occurrence]) -> None:
        self.index.merge(table)

    @staticmethod
    def insert_last_occurrence(postings: PostingList) -> list[int]:
        return insert_last_occurrence(postings)

    def top5_search(self, first: str, second: str) -> list[str]:
        return self.index.search(first, second)
