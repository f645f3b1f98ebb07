from enum import Enum


class Pile(str, Enum):
    DRAW = "draw"
    DISCARD = "discard"
    REMOVED = "removed"
