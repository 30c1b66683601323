from __future__ import annotations


class SugarpipeError(Exception):
    """Base class for all exceptions raised by sugarpipe."""
    pass


class QueryCompositionError(SugarpipeError, TypeError):
    """Raised when something other than a Stage or Query is piped into a query."""

    def __init__(self, other: object):
        self.other = other
        super().__init__(f"Unsupported type for query composition: {type(other)}")


class UnboundQueryError(SugarpipeError):
    """Raised when a query without a source is materialized."""

    def __init__(self, query_name: str):
        self.query_name = query_name
        super().__init__(
            f"Query '{query_name}' has no source. "
            f"Bind one first, e.g. query.bind([1, 2, 3]) or from_([1, 2, 3]) | ..."
        )
