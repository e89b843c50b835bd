"""Document collaborators: where identifiers, texts and noise words come from."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
from pathlib import Path
from typing import Protocol

from little_search.search.analyzers import split_tokens


logger = logging.getLogger(__name__)


class DocumentNotFoundError(FileNotFoundError):
    """Raised when a document or list file cannot be located."""

    def __init__(self, identifier: str | Path, location: Path | None = None) -> None:
        self.identifier = str(identifier)
        self.location = location
        where = f" (looked in {location})" if location is not None else ""
        super().__init__(f"Document not found: {self.identifier}{where}")


class DocumentSource(Protocol):
    """Resolve a document identifier to its whitespace-delimited tokens."""

    def tokens(self, document: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class FilesystemDocumentSource:
    """Documents are files named by their identifier under ``root``."""

    def __init__(self, root: Path | str = ".", encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def resolve(self, document: str) -> Path:
        path = Path(document)
        return path if path.is_absolute() else self.root / path

    def tokens(self, document: str) -> Iterator[str]:
        path = self.resolve(document)
        # Resolve eagerly so a missing file fails before any token is consumed.
        text = _read_text(path, self.encoding, identifier=document)
        return split_tokens(text)


class InMemoryDocumentSource:
    """Documents held as ``identifier -> text``."""

    def __init__(self, documents: Mapping[str, str]) -> None:
        self.documents = dict(documents)

    def tokens(self, document: str) -> Iterator[str]:
        try:
            text = self.documents[document]
        except KeyError:
            raise DocumentNotFoundError(document) from None
        return split_tokens(text)


def _read_text(path: Path, encoding: str, identifier: str | Path | None = None) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise DocumentNotFoundError(identifier if identifier is not None else path, path.parent) from exc


def read_document_list(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Read document identifiers in the order they should be indexed."""
    documents = list(split_tokens(_read_text(Path(path), encoding)))
    logger.debug("Read %d document identifiers from %s", len(documents), path)
    return documents


def read_noise_words(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Read raw noise words; case folding happens when the stop-word set is built."""
    return list(split_tokens(_read_text(Path(path), encoding)))
