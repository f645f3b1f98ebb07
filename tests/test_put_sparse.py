from unittest.mock import Mock, call

import pytest

from deckpiles import Deck, NumpyRandomSource, ScriptedRandomSource, StdlibRandomSource
from deckpiles.buckets import bucket_ranges, bucket_sizes


def build_deck(size: int, source=None) -> Deck:
    deck = Deck(source if source is not None else StdlibRandomSource(seed=size))
    for i in range(size):
        deck.put_top(i)
    return deck


def assert_sparse_layout(draw: tuple, initial_size: int, inserted: list):
    """
    Check a draw pile built from range(initial_size) after put_sparse(inserted).

    Every inserted value must sit inside its own bucket's index range, and the
    bucket minus that value must be the expected run of original items.
    """
    n = len(inserted)
    assert len(draw) == initial_size + n

    start_counter = 0
    sizes = bucket_sizes(initial_size, n)
    for value, size, span in zip(inserted, sizes, bucket_ranges(initial_size, n)):
        chunk = list(draw[span.start:span.stop])
        assert len(chunk) == size + 1
        assert value in chunk

        rest = [x for x in chunk if x != value]
        assert rest == list(range(start_counter, start_counter + size))
        start_counter += size

    originals = [x for x in draw if x not in inserted]
    assert originals == list(range(initial_size))


def test_put_sparse_zero_elements_is_noop():
    deck = build_deck(50)
    deck.put_sparse([])

    assert deck.see_draw() == tuple(range(50))


def test_put_sparse_zero_elements_on_empty_deck():
    deck = Deck()
    deck.put_sparse([])

    assert deck.see_draw() == ()


def test_put_sparse_every_size():
    """Exhaustive check for every deck size below 60 and every batch size up to it."""
    for deck_size in range(60):
        for n_insert in range(1, deck_size + 1):
            deck = build_deck(deck_size)
            inserted = [deck_size + i for i in range(n_insert)]
            deck.put_sparse(inserted)

            assert_sparse_layout(deck.see_draw(), deck_size, inserted)


@pytest.mark.parametrize("deck_size, n_insert", [(0, 1), (0, 4), (1, 3), (2, 5), (7, 20)])
def test_put_sparse_more_elements_than_cards(deck_size, n_insert):
    deck = build_deck(deck_size)
    inserted = [deck_size + i for i in range(n_insert)]
    deck.put_sparse(inserted)

    assert_sparse_layout(deck.see_draw(), deck_size, inserted)


def test_put_sparse_into_empty_deck_keeps_element_order():
    deck = Deck()
    deck.put_sparse(["a", "b", "c"])

    assert deck.see_draw() == ("a", "b", "c")


def test_put_sparse_fifty_cards_three_events():
    deck = build_deck(50)
    deck.put_sparse([50, 51, 52])
    draw = deck.see_draw()

    assert bucket_sizes(50, 3) == [17, 17, 16]
    assert len(draw) == 53
    assert 50 in draw[0:18]
    assert 51 in draw[18:36]
    assert 52 in draw[36:53]
    assert [x for x in draw if x < 50] == list(range(50))


def test_put_sparse_with_numpy_source():
    deck = build_deck(33, NumpyRandomSource(seed=9))
    inserted = [100, 101, 102, 103]
    deck.put_sparse(inserted)

    assert_sparse_layout(deck.see_draw(), 33, inserted)


def test_put_sparse_picks_within_each_bucket():
    """The source is asked for one position per bucket, bounded by the bucket size."""
    source = Mock()
    source.pick.return_value = 0
    deck = build_deck(5, source)

    deck.put_sparse(["a", "b"])

    assert source.pick.call_args_list == [call(3), call(2)]
    assert deck.see_draw() == ("a", 0, 1, 2, "b", 3, 4)


def test_put_sparse_scripted_positions():
    deck = build_deck(6, ScriptedRandomSource([0, 3]))
    deck.put_sparse(["a", "b"])

    assert deck.see_draw() == ("a", 0, 1, 2, 3, 4, 5, "b")


def test_put_sparse_scripted_positions_with_remainder():
    deck = build_deck(5, ScriptedRandomSource([1, 2]))
    deck.put_sparse(["a", "b"])

    assert deck.see_draw() == (0, "a", 1, 2, 3, 4, "b")


def test_put_sparse_scripted_empty_buckets():
    deck = build_deck(2, ScriptedRandomSource([1, 0, 0, 0, 0]))
    deck.put_sparse(["a", "b", "c", "d", "e"])

    assert deck.see_draw() == (0, "a", "b", 1, "c", "d", "e")


def test_put_sparse_reaches_every_insertion_point():
    """A single element into 4 cards can land in any of the 5 slots."""
    source = StdlibRandomSource(seed=77)
    positions = set()
    for _ in range(500):
        deck = build_deck(4, source)
        deck.put_sparse(["x"])
        positions.add(deck.see_draw().index("x"))

    assert positions == {0, 1, 2, 3, 4}


def test_put_sparse_accepts_any_iterable():
    deck = build_deck(10)
    deck.put_sparse(x for x in (10, 11))

    assert_sparse_layout(deck.see_draw(), 10, [10, 11])


def test_put_sparse_leaves_other_piles_alone():
    deck = build_deck(8)
    deck.discard("d")
    deck.remove("r")

    deck.put_sparse([8, 9])

    assert deck.see_discarded() == ("d",)
    assert deck.see_removed() == ("r",)


class TestPutSparseCopies:
    """Single-value form: one copy of the same item per bucket."""

    def setup_method(self):
        self.deck_size = 20
        self.deck = build_deck(self.deck_size)

    def test_zero_buckets_is_noop(self):
        self.deck.put_sparse_copies(self.deck_size, 0)
        assert self.deck.see_draw() == tuple(range(self.deck_size))

    def test_copies_land_one_per_bucket(self):
        self.deck.put_sparse_copies(self.deck_size, 3)
        draw = self.deck.see_draw()

        assert len(draw) == self.deck_size + 3
        for span in bucket_ranges(self.deck_size, 3):
            assert list(draw[span.start:span.stop]).count(self.deck_size) == 1
        assert [x for x in draw if x != self.deck_size] == list(range(self.deck_size))

    def test_negative_buckets_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            self.deck.put_sparse_copies(self.deck_size, -1)
        assert self.deck.remaining() == self.deck_size
