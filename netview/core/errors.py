from __future__ import annotations


class NetviewError(Exception):
    """Base class for failures reported to the user as a single line."""


class EnumerationError(NetviewError):
    pass


class RetrievalError(NetviewError):
    pass


class ParseError(NetviewError):
    pass
