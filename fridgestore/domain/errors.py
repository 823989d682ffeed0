"""
Error taxonomy for beverage dispensers.

Every failure raised by a dispenser is a ``DispensingError`` tagged with a
``DispensingErrorKind``, so callers can either catch a specific subclass or
branch on ``err.kind``.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fridgestore.domain.beverages import Beverage


class DispensingErrorKind(str, Enum):
    """Tags for the dispensing failure cases."""
    EMPTY = "empty"
    FULL = "full"
    NO_MORE = "no_more"
    CANT_STORE = "cant_store"


class DispensingError(Exception):
    """Base class for all dispenser failures."""
    kind: DispensingErrorKind


class DispenserEmptyError(DispensingError):
    """
    Raised when a dispenser has nothing left to hand out.

    Reserved for dispensers that track emptiness separately; ``Refrigerator``
    reports a missing beverage with ``NoMoreBeverageError`` instead.
    """
    kind = DispensingErrorKind.EMPTY

    def __init__(self) -> None:
        super().__init__("Dispenser is empty")


class DispenserFullError(DispensingError):
    """Raised when a beverage is added to a dispenser with no room left."""
    kind = DispensingErrorKind.FULL

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Dispenser is full (capacity {capacity})")


class NoMoreBeverageError(DispensingError):
    """Raised when no beverage with the requested name is left."""
    kind = DispensingErrorKind.NO_MORE

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No more '{name}' in dispenser")


class CantStoreError(DispensingError):
    """Raised by dispensers that refuse to store a beverage at all."""
    kind = DispensingErrorKind.CANT_STORE

    def __init__(self, beverage: "Beverage") -> None:
        self.beverage = beverage
        super().__init__(f"Can't store '{beverage.name}'")


__all__ = [
    "CantStoreError",
    "DispenserEmptyError",
    "DispenserFullError",
    "DispensingError",
    "DispensingErrorKind",
    "NoMoreBeverageError",
]
