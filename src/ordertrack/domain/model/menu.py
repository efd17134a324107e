"""Fixed menu catalog used by menu-priced (single item) orders."""

from __future__ import annotations

from dataclasses import dataclass

from ordertrack.domain.model.value_objects import Money


@dataclass(frozen=True)
class MenuItem:
    name: str
    price_per_unit: Money  # per kg


class Menu:
    """An ordered, read-only catalog keyed by exact item name."""

    def __init__(self, items: list[MenuItem]) -> None:
        self._items = list(items)

    def get(self, name: str) -> MenuItem | None:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def list_all(self) -> list[MenuItem]:
        return list(self._items)


BIRYANI_MENU = Menu(
    [
        MenuItem("Chicken Biryani", Money.of(180)),
        MenuItem("Mutton Biryani", Money.of(250)),
        MenuItem("Veg Biryani", Money.of(150)),
        MenuItem("Egg Biryani", Money.of(130)),
        MenuItem("Prawns Biryani", Money.of(280)),
        MenuItem("Fish Biryani", Money.of(200)),
    ]
)
