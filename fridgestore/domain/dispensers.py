"""
Bounded beverage containers.

``BeverageDispenser`` is the capability every dispenser provides;
``Refrigerator`` is the standard implementation. A dispenser never holds
more than ``capacity`` beverages.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from fridgestore.config import get_settings
from fridgestore.domain.beverages import Beverage
from fridgestore.domain.errors import DispenserFullError, NoMoreBeverageError

logger = logging.getLogger(__name__)


@runtime_checkable
class BeverageDispenser(Protocol):
    """Something that stores beverages and hands them out by name."""

    drinks: list[Beverage]
    capacity: int

    def add(self, drink: Beverage) -> None:
        ...

    def take(self, name: str) -> Beverage:
        ...


def _default_capacity() -> int:
    return get_settings().default_capacity


@dataclass
class Refrigerator:
    """
    Standard dispenser backed by an ordered list.

    Attributes:
        drinks: Stored beverages in insertion order. When several share a
            name, the earliest one is taken first.
        capacity: Maximum number of beverages; fixed at construction.
    """
    drinks: list[Beverage] = field(default_factory=list)
    capacity: int = field(default_factory=_default_capacity)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")
        if len(self.drinks) > self.capacity:
            raise ValueError(
                f"{len(self.drinks)} drinks do not fit in capacity {self.capacity}"
            )

    @property
    def count(self) -> int:
        return len(self.drinks)

    @property
    def is_full(self) -> bool:
        return len(self.drinks) >= self.capacity

    def add(self, drink: Beverage) -> None:
        """
        Append a beverage to the end of the dispenser.

        Args:
            drink: The beverage to store. The dispenser keeps this exact object.

        Raises:
            DispenserFullError: If the dispenser already holds ``capacity``
                beverages.
        """
        if self.is_full:
            logger.info("dispenser_full", extra={"details": {"capacity": self.capacity, "drink": drink}})
            raise DispenserFullError(self.capacity)
        self.drinks.append(drink)
        logger.debug("beverage_added", extra={"details": {"drink": drink, "count": len(self.drinks)}})

    def take(self, name: str) -> Beverage:
        """
        Remove and return the first beverage called ``name``.

        Args:
            name: Exact, case-sensitive beverage name.

        Returns:
            The removed beverage. It is no longer referenced by the dispenser.

        Raises:
            NoMoreBeverageError: If no stored beverage has that name.
        """
        for index, drink in enumerate(self.drinks):
            if drink.name == name:
                del self.drinks[index]
                logger.debug("beverage_taken", extra={"details": {"name": name, "count": len(self.drinks)}})
                return drink
        raise NoMoreBeverageError(name)


__all__ = ["BeverageDispenser", "Refrigerator"]
