"""
Shut the Box - Reachability Search

Decides whether any non-empty subset of the raised tiles sums exactly to a
target. With at most nine tiles there are at most 512 subsets, so the
search is exhaustive.
"""

from typing import Iterable


def has_reachable_subset(raised_tiles: Iterable[int], target: int) -> bool:
    """
    Check whether some subset of `raised_tiles` sums to `target`.

    Singles and pairs are tried first since nearly every roll resolves
    there; larger combinations fall back to an include/exclude search.

    Args:
        raised_tiles: Tile numbers currently raised
        target: Sum to reach. 0 means no active roll and is always reachable.

    Returns:
        True if a matching subset exists
    """
    if target == 0:
        return True
    if target < 0:
        return False

    # Sorted so the result never depends on the caller's ordering
    tiles = tuple(sorted(raised_tiles))
    if not tiles or sum(tiles) < target:
        return False

    if target in tiles:
        return True

    for i, first in enumerate(tiles):
        if target - first in tiles[i + 1:]:
            return True

    return _search(tiles, target)


def _search(tiles: tuple[int, ...], target: int) -> bool:
    """Include/exclude enumeration over an ascending tuple of tiles."""
    if target == 0:
        return True
    if not tiles:
        return False

    first, rest = tiles[0], tiles[1:]
    # Ascending order: if the smallest tile overshoots, every tile does
    if first > target:
        return False

    return _search(rest, target - first) or _search(rest, target)
