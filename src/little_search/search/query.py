"""Ranked two-keyword OR search over descending posting lists."""

from __future__ import annotations

from collections.abc import Sequence

from little_search.search.models import Occurrence


MAX_RESULTS = 5


def top_search(
    first: Sequence[Occurrence] | None,
    second: Sequence[Occurrence] | None,
    limit: int = MAX_RESULTS,
) -> list[str]:
    """Merge two posting lists into at most ``limit`` distinct documents.

    Both lists are walked with one cursor each. The higher current frequency
    wins and ties go to ``first``. A document already collected is skipped but
    its cursor still advances. Once one list runs out the other is drained
    under the same rule.

    Args:
        first: Posting list of the first keyword, or None when it is not indexed.
        second: Posting list of the second keyword, or None when it is not indexed.
        limit: Result cap, clamped to ``MAX_RESULTS``.

    Returns:
        Document identifiers by descending frequency; empty when neither
        keyword is indexed.
    """
    limit = min(limit, MAX_RESULTS)
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    if not first and not second:
        return []
    if not second:
        return [occurrence.document for occurrence in first[:limit]]
    if not first:
        return [occurrence.document for occurrence in second[:limit]]

    results: list[str] = []
    seen: set[str] = set()

    def collect(occurrence: Occurrence) -> None:
        if occurrence.document not in seen:
            seen.add(occurrence.document)
            results.append(occurrence.document)

    i = j = 0
    while i < len(first) and j < len(second) and len(results) < limit:
        if first[i].frequency >= second[j].frequency:
            collect(first[i])
            i += 1
        else:
            collect(second[j])
            j += 1

    remainder = first[i:] if i < len(first) else second[j:]
    for occurrence in remainder:
        if len(results) >= limit:
            break
        collect(occurrence)

    return results
