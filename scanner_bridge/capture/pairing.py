"""Front/back pairing of captured pages.

Order comes from the file name alone. That is only correct because the scan
output template uses NAPS2's fixed-width counter (``scan_$(nnnn).jpg``), so
lexicographic order equals scan order. Modification times are never used.
"""

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TypeVar

from scanner_bridge.capture.models import PagePair

T = TypeVar("T")


def sort_pages(pages: Iterable[T], key: Callable[[T], Path] | None = None) -> list[T]:
    """Sort pages lexicographically by file name."""
    if key is None:
        return sorted(pages, key=lambda page: Path(page).name)  # type: ignore[arg-type]
    return sorted(pages, key=lambda page: key(page).name)


def pair_pages(pages: Sequence[T]) -> list[PagePair[T]]:
    """Group ordered pages two at a time into (front, back) pairs.

    Even offsets are fronts, the following page is the back. A trailing odd
    page becomes a front-only pair.
    """
    pairs: list[PagePair[T]] = []
    for i in range(0, len(pages), 2):
        back = pages[i + 1] if i + 1 < len(pages) else None
        pairs.append(PagePair(front=pages[i], back=back))
    return pairs
