"""Exception types raised by the simulator.

Both concrete errors subclass :class:`ValueError` so callers that already
guard against bad inputs with ``except ValueError`` keep working.
"""

from __future__ import annotations


class MontyHallError(ValueError):
    """Base class for simulator errors."""


class InvalidArgumentError(MontyHallError):
    """A caller passed a value outside the accepted domain.

    Examples are door indices outside ``1..3`` or a negative trial count.
    """


class InvalidStateError(MontyHallError):
    """An internal game invariant does not hold.

    Raised for malformed door arrangements and for switch decisions where the
    opened door equals the initial pick.
    """


__all__ = ["InvalidArgumentError", "InvalidStateError", "MontyHallError"]
