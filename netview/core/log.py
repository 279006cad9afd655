from __future__ import annotations
import logging

def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route netview's loggers to stderr; DEBUG with -v, WARNING otherwise."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

    root_logger = logging.getLogger("netview")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root_logger.propagate = False
    return root_logger
