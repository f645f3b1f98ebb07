import logging
from collections import deque
from typing import Generic, Iterable, TypeVar

from .buckets import bucket_sizes, split
from .enums import Pile
from .logger import PilePreview, get_logger
from .random_source import RandomSource, StdlibRandomSource

T = TypeVar("T")

logger = get_logger(__name__)


class Deck(Generic[T]):
    """
    Class representing a deck: a draw pile plus discard and removed piles.

    The draw pile is ordered bottom (index 0) to top (last index). Items are
    opaque; the deck never inspects or deduplicates them. Discarding and
    removing only append to the target pile, so taking the item out of the
    draw pile first is up to the caller.
    """

    def __init__(self, random_source: RandomSource | None = None):
        self.random_source = random_source if random_source is not None else StdlibRandomSource()
        self._draw: deque[T] = deque()
        self._discard: list[T] = []
        self._removed: list[T] = []

    @classmethod
    def seeded(cls, seed: int) -> "Deck[T]":
        """Deck with its own seeded random source, for reproducible shuffles."""
        return cls(StdlibRandomSource(seed))

    # -- draw pile -----------------------------------------------------------

    def can_draw(self) -> bool:
        return len(self._draw) > 0

    def draw_top(self) -> T | None:
        if not self._draw:
            logger.debug("draw_top on empty draw pile")
            return None
        return self._draw.pop()

    def draw_bottom(self) -> T | None:
        if not self._draw:
            logger.debug("draw_bottom on empty draw pile")
            return None
        return self._draw.popleft()

    def put_top(self, x: T) -> None:
        self._draw.append(x)

    def put_bottom(self, x: T) -> None:
        self._draw.appendleft(x)

    def put_sparse(self, elements: Iterable[T]) -> None:
        """
        Spread new items across the draw pile, one per bucket.

        The current draw pile is cut into ``len(elements)`` contiguous buckets
        whose sizes differ by at most one (earlier buckets take the remainder).
        The i-th element lands in the i-th bucket at one of its
        ``bucket_size + 1`` insertion points, each equally likely. The order of
        the items already in the pile is kept.

        Args:
            elements: New items, one per bucket, in bucket order
        """
        elements = list(elements)
        if not elements:
            return

        n = len(elements)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"put_sparse: {n} items into {len(self._draw)} cards, "
                f"bucket sizes {bucket_sizes(len(self._draw), n)}"
            )

        buckets = split(list(self._draw), n)
        rebuilt: deque[T] = deque()
        for bucket, x in zip(buckets, elements):
            index = self.random_source.pick(len(bucket))
            bucket.insert(index, x)
            rebuilt.extend(bucket)
        self._draw = rebuilt

    def put_sparse_copies(self, x: T, buckets: int) -> None:
        """
        Insert ``buckets`` copies of ``x``, one per bucket.

        Args:
            x: Item to insert
            buckets: Number of buckets; 0 leaves the pile unchanged

        Raises:
            ValueError: If buckets is negative
        """
        if buckets < 0:
            raise ValueError(f"Bucket count must be non-negative, got {buckets}")
        self.put_sparse([x] * buckets)

    def remaining(self) -> int:
        return len(self._draw)

    # -- auxiliary piles -----------------------------------------------------

    def discard(self, x: T) -> None:
        self._discard.append(x)

    def remove(self, x: T) -> None:
        self._removed.append(x)

    # -- inspection ----------------------------------------------------------

    def see_draw(self) -> tuple[T, ...]:
        return tuple(self._draw)

    def see_discarded(self) -> tuple[T, ...]:
        return tuple(self._discard)

    def see_removed(self) -> tuple[T, ...]:
        return tuple(self._removed)

    def see(self, pile: Pile) -> tuple[T, ...]:
        match Pile(pile):
            case Pile.DRAW:
                return self.see_draw()
            case Pile.DISCARD:
                return self.see_discarded()
            case Pile.REMOVED:
                return self.see_removed()

    # -- shuffling -----------------------------------------------------------

    def shuffle_draw(self) -> None:
        cards = list(self._draw)
        self.random_source.shuffle(cards)
        self._draw = deque(cards)
        logger.debug("Shuffled draw pile: %s", PilePreview(self._draw))

    def shuffle_discard(self) -> None:
        self.random_source.shuffle(self._discard)
        logger.debug("Shuffled discard pile: %s", PilePreview(self._discard))

    def shuffle(self, pile: Pile) -> None:
        """
        Shuffle the named pile.

        Raises:
            ValueError: For the removed pile, which is never reordered
        """
        match Pile(pile):
            case Pile.DRAW:
                self.shuffle_draw()
            case Pile.DISCARD:
                self.shuffle_discard()
            case Pile.REMOVED:
                raise ValueError("The removed pile cannot be shuffled")

    def __len__(self) -> int:
        return self.remaining()

    def __bool__(self) -> bool:
        return self.can_draw()

    def __repr__(self) -> str:
        return (f"Deck(draw={len(self._draw)}, discard={len(self._discard)}, "
                f"removed={len(self._removed)})")
