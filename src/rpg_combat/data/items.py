"""Combat consumables."""

from __future__ import annotations

from typing import Any


ITEM_RECORDS: list[dict[str, Any]] = [
    {"id": "hp-potion", "name": "Health Potion", "restores": "health", "amount": 50},
    {"id": "mana-potion", "name": "Mana Potion", "restores": "mana", "amount": 30},
]


__all__ = ["ITEM_RECORDS"]
