"""Order-preserving insertion into descending posting lists."""

from __future__ import annotations

from little_search.search.models import PostingList


def insert_last_occurrence(postings: PostingList) -> list[int]:
    """Move the last posting into place so the list stays sorted by descending frequency.

    Entries ``0..n-2`` must already be sorted. The position is found by binary
    search over that prefix. When a probe lands on an equal frequency the new
    entry goes directly after that probe, so among equal frequencies it is
    placed next to whichever one the search hit first.

    Returns:
        The midpoint indexes probed, in order. Empty for a single-entry list.
        The list is diagnostic only.
    """
    probes: list[int] = []
    if len(postings) < 2:
        return probes

    target = postings[-1].frequency
    left, right = 0, len(postings) - 2
    mid = 0
    mid_frequency = 0

    while left <= right:
        mid = (left + right) // 2
        probes.append(mid)
        mid_frequency = postings[mid].frequency
        if mid_frequency == target:
            break
        if mid_frequency > target:
            # descending: smaller frequencies live toward the end
            left = mid + 1
        else:
            right = mid - 1

    position = mid if mid_frequency < target else mid + 1
    postings.insert(position, postings.pop())
    return probes
