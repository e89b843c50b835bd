"""Keyword normalization for the indexing pipeline.

A raw token is a maximal run of non-whitespace characters. It becomes a
keyword only when, after trailing non-letters are stripped, it consists solely
of alphabetic characters and its lower-cased form is not a noise word. Leading
punctuation and embedded punctuation both reject the whole token; neither is a
split point.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import re


_WHITESPACE_TOKEN = re.compile(r"\S+")


def split_tokens(text: str) -> Iterator[str]:
    """Yield whitespace-delimited raw tokens from ``text``."""
    for match in _WHITESPACE_TOKEN.finditer(text):
        yield match.group(0)


def build_stopwords(words: Iterable[str]) -> frozenset[str]:
    """Case-fold raw noise words into an immutable stop-word set."""
    return frozenset(word.strip().lower() for word in words if word.strip())


def normalize_keyword(word: str | None, stopwords: frozenset[str] | set[str] = frozenset()) -> str | None:
    """Return the canonical keyword for ``word`` or ``None`` when it is not one.

    >>> normalize_keyword("Hello!!")
    'hello'
    >>> normalize_keyword("(hello") is None
    True
    """
    if not word:
        return None
    if not word[0].isalpha():
        return None

    # word[0] is a letter, so the scan always stops inside the string
    end = len(word)
    while not word[end - 1].isalpha():
        end -= 1

    stem = word[:end]
    if not stem.isalpha():
        return None

    keyword = stem.lower()
    # some letters lower-case to a string with a combining mark (U+0130 -> "i" + U+0307)
    if not keyword.isalpha() or keyword in stopwords:
        return None
    return keyword


class KeywordNormalizer:
    """Callable normalizer bound to one stop-word set.

    The stop-word set is frozen on construction and never changes for the
    lifetime of the normalizer.
    """

    def __init__(self, stopwords: Iterable[str] = ()) -> None:
        self.stopwords = build_stopwords(stopwords)

    def __call__(self, word: str | None) -> str | None:
        return normalize_keyword(word, self.stopwords)

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self.stopwords

    def keywords(self, tokens: Iterable[str]) -> Iterator[str]:
        """Yield the keyword for each token, skipping tokens that are not keywords."""
        for token in tokens:
            keyword = normalize_keyword(token, self.stopwords)
            if keyword is not None:
                yield keyword
