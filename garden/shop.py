from __future__ import annotations

from dataclasses import dataclass

from garden.catalog import SHOP_ITEMS, PlantType, ShopItem


@dataclass(frozen=True)
class SeedSelection:
    seed: PlantType | None
    message: str


def shop_items() -> tuple[ShopItem, ...]:
    """Return the seed menu in display order."""
    return SHOP_ITEMS


def select_seed_from_menu(index: int) -> SeedSelection:
    """Pick a seed from the menu. Gold is only charged when planting."""
    if not 0 <= index < len(SHOP_ITEMS):
        return SeedSelection(seed=None, message="Invalid shop item.")
    item = SHOP_ITEMS[index]
    return SeedSelection(
        seed=item.type,
        message=f"Selected {item.name} ({item.cost}g). Place it in your garden!",
    )
