"""Error type shared by the Catan board model, codec and routes."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a board, player name or resource line cannot be interpreted.

    Every decode failure surfaces as this one error type; the message names
    the offending token so callers can report it upstream unchanged.
    """
