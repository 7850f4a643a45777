"""First-occurrence style inference for rules that accept ``"consistent"``."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Generic, TypeVar

CONSISTENT = "consistent"

T = TypeVar("T")


class ConsistencyState(StrEnum):
    UNDETERMINED = "undetermined"
    DETERMINED = "determined"


def preference_from_setting(setting: object, choices: Iterable[T]) -> T | None:
    """Return the fixed preference named by ``setting``, or None for consistency mode.

    ``None``, ``True`` and ``"consistent"`` all mean consistency mode.
    Raises ``ValueError`` for anything that is not one of ``choices``.
    """
    if setting is None or setting is True or setting == CONSISTENT:
        return None
    options = list(choices)
    for choice in options:
        if setting == choice:
            return choice
    allowed = ", ".join(repr(str(c)) for c in options)
    raise ValueError(f"Expected {allowed} or {CONSISTENT!r}, not {setting!r}")


class ConsistencyTracker(Generic[T]):
    """Tracks the accepted value of one varying property within one document.

    With a fixed ``preferred`` value every observation is compared against
    it.  Without one, the first observation becomes the accepted value and
    later ones are compared against that.  Create one per rule run; it must
    not outlive the document.
    """

    def __init__(self, preferred: T | None = None) -> None:
        self._fixed = preferred is not None
        self._accepted: T | None = preferred

    @property
    def state(self) -> ConsistencyState:
        if self._accepted is None:
            return ConsistencyState.UNDETERMINED
        return ConsistencyState.DETERMINED

    @property
    def fixed(self) -> bool:
        return self._fixed

    @property
    def accepted(self) -> T | None:
        return self._accepted

    def check(self, observed: T) -> T | None:
        """Record ``observed``; return the expected value if it deviates, else None."""
        if self._accepted is None:
            self._accepted = observed
            return None
        if observed != self._accepted:
            return self._accepted
        return None
