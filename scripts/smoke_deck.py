from deckpiles import Deck, NumpyRandomSource
from deckpiles.logging_utils import setup_logger
from datetime import datetime
import logging

log = setup_logger(name="smoke_deck",
             log_file='logs/smoke.log',
             mode='a',
             level=logging.INFO)

# library loggers only carry a NullHandler; give the package console output
setup_logger(name="deckpiles",
             log_file=None,
             level=logging.DEBUG,
             formatter_input='[%(levelname)s] %(name)s: %(message)s')

log.info(f'Logger Created at filename {log.name}, {datetime.now()}')

deck = Deck(NumpyRandomSource(seed=7))
for card in range(20):
    deck.put_top(card)

deck.shuffle_draw()
log.info(f'after shuffle: {deck.see_draw()}')

deck.put_sparse(["event-a", "event-b", "event-c"])
log.info(f'after put_sparse: {deck.see_draw()}')

while deck.can_draw():
    card = deck.draw_top()
    if isinstance(card, str):
        deck.remove(card)
    else:
        deck.discard(card)

log.info(f'discarded: {deck.see_discarded()}')
log.info(f'removed: {deck.see_removed()}')
log.info(repr(deck))
