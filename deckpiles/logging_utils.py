import logging
from pathlib import Path

def setup_logger(name=None,
    log_file: str | Path | None = 'logs/deckpiles.log',
    level: int = logging.DEBUG,
    mode='a',
    console_handler = True,
    formatter_input: str = '%(message)s'
) -> logging.Logger:
    """
    Configure a named logger for scripts and test runs.

    Args:
        name: Logger name; "deckpiles" covers every module in the package
        log_file: Path of the log file, or None for console output only
        level: Level for the logger and its handlers
        mode: File mode for the file handler
        console_handler: Whether to also log to stderr
        formatter_input: Format string shared by all handlers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear() # avoid duplicate handlers on repeated setup

    formatter = logging.Formatter(formatter_input)
    handlers: list[logging.Handler] = []

    if console_handler:
        handlers.append(logging.StreamHandler())

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, mode=mode))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger
