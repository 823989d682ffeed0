"""
Store facade over a single beverage dispenser.

The store refills its dispenser to capacity and hands beverages out by name.
``get`` deliberately hides why a beverage could not be handed out: callers
only see ``None``.
"""
from __future__ import annotations

import logging
from typing import Optional

from fridgestore.domain.beverages import Beverage
from fridgestore.domain.dispensers import BeverageDispenser, Refrigerator
from fridgestore.domain.errors import DispenserFullError, DispensingError
from fridgestore.domain.models import DispenserSnapshot

logger = logging.getLogger(__name__)


class Store:
    """
    Refills and serves beverages from one dispenser.

    Args:
        dispenser: The dispenser this store owns. Defaults to a new
            ``Refrigerator`` with the configured capacity.
    """

    def __init__(self, dispenser: Optional[BeverageDispenser] = None) -> None:
        self.dispenser: BeverageDispenser = dispenser if dispenser is not None else Refrigerator()

    def get(self, name: str) -> Optional[Beverage]:
        """
        Take a beverage out of the dispenser.

        Args:
            name: Exact beverage name.

        Returns:
            The beverage, or ``None`` if the dispenser could not provide one
            for any reason.
        """
        try:
            return self.dispenser.take(name)
        except DispensingError as exc:
            logger.debug("get_swallowed_error", extra={"details": {"name": name, "kind": exc.kind.value}})
            return None

    def refill(self, beverage: Beverage) -> None:
        """
        Fill the dispenser up to its capacity.

        One fresh copy of ``beverage`` is added per empty slot. Beverages
        added before a failure stay in the dispenser.

        Args:
            beverage: Template for the beverages to add.

        Raises:
            DispenserFullError: If the dispenser is already at capacity.
            DispensingError: Whatever the dispenser raises while adding.
        """
        count = len(self.dispenser.drinks)
        capacity = self.dispenser.capacity

        if count >= capacity:
            logger.info("refill_rejected", extra={"details": {"count": count, "capacity": capacity}})
            raise DispenserFullError(capacity)

        logger.info("refill_started", extra={"details": {"drink": beverage, "count": count, "capacity": capacity}})
        for _ in range(count, capacity):
            try:
                self.dispenser.add(beverage.fresh())
            except DispensingError as exc:
                logger.warning(
                    "refill_failed",
                    extra={"details": {"kind": exc.kind.value, "count": len(self.dispenser.drinks)}},
                )
                raise
        logger.info("refill_complete", extra={"details": {"count": len(self.dispenser.drinks)}})

    def snapshot(self) -> DispenserSnapshot:
        """Summarise what the dispenser currently holds."""
        drinks: dict[str, int] = {}
        for drink in self.dispenser.drinks:
            drinks[drink.name] = drinks.get(drink.name, 0) + 1
        count = len(self.dispenser.drinks)
        return DispenserSnapshot(
            capacity=self.dispenser.capacity,
            count=count,
            is_full=count >= self.dispenser.capacity,
            drinks=drinks,
            empty_drinks=sum(1 for d in self.dispenser.drinks if d.is_empty),
        )
