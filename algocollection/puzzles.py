"""Classic puzzles: the Tower of Hanoi and the tug of war partition."""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Move", "tower_of_hanoi", "tug_of_war"]


@dataclass(frozen=True)
class Move:
    """One Tower of Hanoi move: *disk* goes from pole *source* to pole *target*."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move circle {self.disk} from pole {self.source} to pole {self.target}"


def tower_of_hanoi(disks: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    """Yield the moves that carry *disks* disks from *source* to *target*."""
    if disks <= 0:
        return
    yield from tower_of_hanoi(disks - 1, source, auxiliary, target)
    yield Move(disks, source, target)
    yield from tower_of_hanoi(disks - 1, auxiliary, target, source)


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return -half if value < 0 else half


def tug_of_war(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split *values* into two groups whose sums are as close as possible.

    The first group holds ``len(values) // 2`` elements and the second the
    rest; both keep the original order of the elements.
    """
    items = list(values)
    size = len(items)
    wanted = size // 2
    target = _half_toward_zero(sum(items))
    chosen = [False] * size
    best_diff = math.inf
    best = list(chosen)

    def search(position: int, selected: int, current_sum: int) -> None:
        nonlocal best_diff, best
        if position == size:
            return
        if wanted - selected > size - position:
            return
        search(position + 1, selected, current_sum)
        selected += 1
        current_sum += items[position]
        chosen[position] = True
        if selected == wanted:
            diff = abs(target - current_sum)
            if diff < best_diff:
                best_diff = diff
                best = list(chosen)
        else:
            search(position + 1, selected, current_sum)
        chosen[position] = False

    search(0, 0, 0)
    first = [value for value, taken in zip(items, best) if taken]
    second = [value for value, taken in zip(items, best) if not taken]
    return first, second