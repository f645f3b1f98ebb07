from .deck import Deck
from .enums import Pile
from .random_source import NumpyRandomSource, RandomSource, StdlibRandomSource
from .scripted_random import ScriptedRandomSource

__all__ = ["Deck", "Pile", "RandomSource", "StdlibRandomSource", "NumpyRandomSource", "ScriptedRandomSource"]
