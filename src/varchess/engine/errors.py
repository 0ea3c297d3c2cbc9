from __future__ import annotations


class RulesError(Exception):
    """Base class for errors raised by the rules engine."""


class BoardStateError(RulesError, ValueError):
    """A caller broke a board contract (e.g. moving from an empty square).

    Occupancy invariants cannot be repaired once broken, so the board refuses
    the operation before touching any bitmap.
    """


class RuleNotImplementedError(RulesError, NotImplementedError):
    """An attribute was asked for behaviour its configuration cannot express."""
