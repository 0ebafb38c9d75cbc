"""Domain exceptions for shop floor planning."""

from __future__ import annotations


class SizingError(ValueError):
    """Raised when a load exceeds every defined standard size.

    Hard failures only: no safe recommendation exists for the load.
    Soft violations (excess voltage or pressure drop) are reported as
    warning strings on the sizing result instead.

    Attributes:
        quantity: What was being sized (e.g. "wire", "breaker").
        value: The load that could not be accommodated.
        limit: The largest standard capacity available.
    """

    def __init__(self, message: str, quantity: str, value: float, limit: float) -> None:
        self.message = message
        self.quantity = quantity
        self.value = value
        self.limit = limit
        super().__init__(message)


__all__ = ["SizingError"]
