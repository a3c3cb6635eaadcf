"""
Deck domain entity.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Deck:
    name: str
    created_at: int
    id: Optional[int] = None
