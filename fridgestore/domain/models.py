from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class DispenserSnapshot(BaseModel):
    capacity: int = Field(ge=0)
    count: int = Field(ge=0)
    is_full: bool
    drinks: Dict[str, int] = Field(default_factory=dict)
    empty_drinks: int = 0
