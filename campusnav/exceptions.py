"""Error types raised by campusnav.

Graph errors subclass ``ValueError`` so callers that only care about bad
arguments can catch a single type.
"""

from __future__ import annotations


class NotFoundError(ValueError):
    """A node or edge referenced by an operation does not exist."""


class DuplicateEdgeError(ValueError):
    """An edge with the same parent, child and label already exists."""


class InvariantViolation(AssertionError):
    """Internal graph state is inconsistent.

    Only raised by the optional consistency pass enabled through
    :data:`campusnav.config.GRAPH_CONFIG`.
    """


class CampusDataError(ValueError):
    """Campus building or path data could not be parsed."""
