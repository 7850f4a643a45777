"""marklint: a pluggable style-rule engine for parsed markdown documents."""

__version__ = "0.1.0"
