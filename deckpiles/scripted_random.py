from typing import Iterable, MutableSequence, Sequence


class ScriptedRandomSource:
    """
    Deterministic random source that yields a pre-specified sequence of picks.
    Shuffles apply pre-specified orders; once those run out, shuffling is a no-op.
    """

    def __init__(self, picks: Iterable[int], orders: Iterable[Sequence[int]] = ()):
        self._picks = list(picks)
        self._orders = [list(order) for order in orders]
        self.index = 0
        self.order_index = 0

    def pick(self, upper: int) -> int:
        """
        Return the next scripted pick.

        Args:
            upper: Largest value the caller accepts

        Returns:
            Next scripted int

        Raises:
            IndexError: If no picks remain
            ValueError: If the scripted pick falls outside [0, upper]
        """
        if self.index >= len(self._picks):
            raise IndexError(f"ScriptedRandomSource out of picks. Used all {len(self._picks)} scripted values.")

        value = self._picks[self.index]
        if not 0 <= value <= upper:
            raise ValueError(f"Scripted pick {value} outside [0, {upper}] at position {self.index}")
        self.index += 1
        return value

    def shuffle(self, items: MutableSequence) -> None:
        """
        Reorder items by the next scripted order: position i receives items[order[i]].
        No-op when no scripted orders remain.
        """
        if self.order_index >= len(self._orders):
            return

        order = self._orders[self.order_index]
        if sorted(order) != list(range(len(items))):
            raise ValueError(f"Scripted order {order} is not a permutation of {len(items)} items")
        self.order_index += 1
        permuted = [items[i] for i in order]
        for i, x in enumerate(permuted):
            items[i] = x

    @property
    def picks_remaining(self) -> int:
        return len(self._picks) - self.index
