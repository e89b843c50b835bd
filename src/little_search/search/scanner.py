"""Document scanning: raw tokens to per-document keyword frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
import logging
from typing import TYPE_CHECKING

from little_search.search.analyzers import KeywordNormalizer
from little_search.search.models import KeywordTable, Occurrence


if TYPE_CHECKING:
    from little_search.sources import DocumentSource


logger = logging.getLogger(__name__)


def scan_tokens(document: str, tokens: Iterable[str], normalizer: KeywordNormalizer) -> KeywordTable:
    """Count keywords among ``tokens`` and wrap each count in an Occurrence.

    Keys keep the order in which keywords first appear in the document.
    """
    counts = Counter(normalizer.keywords(tokens))
    return {keyword: Occurrence(document, frequency) for keyword, frequency in counts.items()}


def load_keywords(document: str, source: DocumentSource, normalizer: KeywordNormalizer) -> KeywordTable:
    """Scan one document resolved through ``source``.

    Raises:
        DocumentNotFoundError: if the source cannot resolve ``document``.
    """
    table = scan_tokens(document, source.tokens(document), normalizer)
    logger.debug("Scanned %s: %d distinct keywords", document, len(table))
    return table
