from typing import Set, Tuple

class LaneAllocator:
    """Hands out the smallest lane index not currently in flight.

    The allocator only picks integers; which lanes stay occupied is decided by
    the caller through ``mark`` and ``free``.
    """

    def __init__(self):
        self._active: Set[int] = set()

    def allocate(self) -> int:
        lane = 0
        while lane in self._active:
            lane += 1
        self._active.add(lane)
        return lane

    def mark(self, lane: int):
        self._active.add(lane)

    def free(self, lane: int):
        self._active.discard(lane)

    def is_active(self, lane: int) -> bool:
        return lane in self._active

    @property
    def active(self) -> Tuple[int, ...]:
        return tuple(sorted(self._active))

    def __contains__(self, lane: int) -> bool:
        return self.is_active(lane)

    def __len__(self) -> int:
        return len(self._active)
