"""
Single-use beverages held by a dispenser.

A beverage is identified by name only; several beverages in the same
dispenser may share a name. Drinking one marks it empty for good.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fridgestore.config import get_settings


@dataclass
class Beverage:
    """
    A named beverage that can be drunk once.

    Attributes:
        name: Identifier used to look the beverage up in a dispenser.
        is_empty: ``True`` once the beverage has been drunk.
    """
    name: str
    is_empty: bool = False

    def drink(self) -> None:
        """Mark the beverage as consumed. Drinking an empty beverage does nothing."""
        self.is_empty = True

    def fresh(self) -> "Beverage":
        """
        Return a new, unconsumed beverage with the same name.

        The returned object is independent of ``self``; drinking one does not
        affect the other.
        """
        return Beverage(name=self.name)


def Water(name: Optional[str] = None) -> Beverage:
    """
    Build the default beverage used to refill dispensers.

    Args:
        name: Override for the beverage name. Defaults to the configured
            ``default_beverage_name`` (``"Water"``).

    Returns:
        A new, unconsumed ``Beverage``.
    """
    return Beverage(name=name if name is not None else get_settings().default_beverage_name)
