"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Occurrence:
    """A keyword occurs ``frequency`` times in ``document``."""

    document: str
    frequency: int

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(f"Occurrence frequency must be >= 1, got {self.frequency}")

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"document": self.document, "frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Occurrence:
        """Create from dictionary."""
        return cls(document=str(data["document"]), frequency=int(data["frequency"]))


# Posting list: one Occurrence per document, non-increasing in frequency.
PostingList = list[Occurrence]

# Keyword frequencies for a single document.
KeywordTable = dict[str, Occurrence]
