"""Bounded top-k selection of suggestion candidates."""

from dataclasses import dataclass
import heapq


@dataclass(frozen=True)
class Candidate:
    """A dictionary word and its distance from the query."""

    distance: int
    word: str

    @property
    def key(self) -> tuple[int, str]:
        return (self.distance, self.word)


@dataclass(frozen=True)
class _HeapEntry:
    # Reversed ordering: the heap root is the worst kept candidate
    candidate: Candidate

    def __lt__(self, other: "_HeapEntry") -> bool:
        return self.candidate.key > other.candidate.key


class TopK:
    """Keep the ``k`` smallest candidates by (distance, word)."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self._heap: list[_HeapEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def full(self) -> bool:
        return len(self._heap) >= self.k

    def worst(self) -> Candidate | None:
        """The candidate that the next better one would evict."""
        return self._heap[0].candidate if self._heap else None

    def offer(self, distance: int, word: str) -> bool:
        """Consider a candidate; return True if it was kept."""
        candidate = Candidate(distance, word)
        if not self.full:
            heapq.heappush(self._heap, _HeapEntry(candidate))
            return True
        if candidate.key >= self._heap[0].candidate.key:
            return False
        heapq.heapreplace(self._heap, _HeapEntry(candidate))
        return True

    def ranked(self) -> list[Candidate]:
        """Kept candidates, nearest first."""
        return sorted((entry.candidate for entry in self._heap), key=lambda c: c.key)
