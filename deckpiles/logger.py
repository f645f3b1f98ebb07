import logging


def get_logger(name: str) -> logging.Logger:
    """Library logger; output is left to whoever configures logging."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def preview_items(items, limit: int = 8) -> str:
    """
    Short preview of a pile for log lines.
    
    Args:
        items: Any sized iterable of pile items
        limit: Maximum number of items to render
        
    Returns:
        String like "[1, 2, 3, ... (+5 more)]"
    """
    items = list(items)
    shown = ", ".join(repr(x) for x in items[:limit])
    if len(items) > limit:
        shown += f", ... (+{len(items) - limit} more)"
    return f"[{shown}]"


class PilePreview:
    """Lazy log argument: the pile is only rendered if the record is emitted."""

    def __init__(self, items, limit: int = 8):
        self.items = items
        self.limit = limit

    def __str__(self) -> str:
        return preview_items(self.items, self.limit)
