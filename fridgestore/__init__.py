from fridgestore.config import StoreSettings, get_settings
from fridgestore.domain import (
    Beverage,
    BeverageDispenser,
    DispensingError,
    DispensingErrorKind,
    Refrigerator,
    Store,
    Water,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Beverage",
    "BeverageDispenser",
    "DispensingError",
    "DispensingErrorKind",
    "Refrigerator",
    "Store",
    "StoreSettings",
    "Water",
    "get_settings",
]

try:
    __version__ = version("fridgestore")
except PackageNotFoundError:
    __version__ = "0.0.0"
