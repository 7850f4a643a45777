"""Loading of serialized parser output into document trees."""

from marklint.parser.loader import MalformedTreeError, TreeLoader, TreeSafetyError

__all__ = [
    "MalformedTreeError",
    "TreeLoader",
    "TreeSafetyError",
]
