"""
This package defines the core domain models for the fridgestore library:
beverages, the dispensers that hold them, and the store facade on top.
"""
from fridgestore.domain.beverages import Beverage, Water
from fridgestore.domain.dispensers import BeverageDispenser, Refrigerator
from fridgestore.domain.errors import (
    CantStoreError,
    DispenserEmptyError,
    DispenserFullError,
    DispensingError,
    DispensingErrorKind,
    NoMoreBeverageError,
)
from fridgestore.domain.models import DispenserSnapshot
from fridgestore.domain.store import Store

__all__ = [
    "Beverage",
    "BeverageDispenser",
    "CantStoreError",
    "DispenserEmptyError",
    "DispenserFullError",
    "DispenserSnapshot",
    "DispensingError",
    "DispensingErrorKind",
    "NoMoreBeverageError",
    "Refrigerator",
    "Store",
    "Water",
]
