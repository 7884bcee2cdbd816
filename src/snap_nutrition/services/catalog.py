"""Static nutrition catalog keyed by canonical food name."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from snap_nutrition.domain.nutrition import MacroQuantities

DEFAULT_KEY = "default"

# Approximate values per typical serving. Declaration order is the resolver's
# matching order.
_CATALOG_DATA: dict[str, MacroQuantities] = {
    "banana": MacroQuantities(calories=89, protein=1.1, carbs=23, fats=0.3),
    "apple": MacroQuantities(calories=52, protein=0.3, carbs=14, fats=0.2),
    "orange": MacroQuantities(calories=47, protein=0.9, carbs=12, fats=0.1),
    "pizza": MacroQuantities(calories=266, protein=11, carbs=33, fats=10),
    "burger": MacroQuantities(calories=354, protein=16, carbs=35, fats=18),
    "salad": MacroQuantities(calories=33, protein=3, carbs=6, fats=0.3),
    "chicken": MacroQuantities(calories=165, protein=31, carbs=0, fats=3.6),
    "bread": MacroQuantities(calories=265, protein=9, carbs=49, fats=3.2),
    "rice": MacroQuantities(calories=130, protein=2.7, carbs=28, fats=0.3),
    "pasta": MacroQuantities(calories=131, protein=5, carbs=25, fats=1.1),
    "sandwich": MacroQuantities(calories=200, protein=8, carbs=30, fats=6),
    "egg": MacroQuantities(calories=155, protein=13, carbs=1.1, fats=11),
    DEFAULT_KEY: MacroQuantities(calories=150, protein=5, carbs=20, fats=5),
}


@dataclass(frozen=True)
class NutritionCatalog:
    """Read-only mapping of canonical food keys to macro quantities."""

    entries: Mapping[str, MacroQuantities]

    def __post_init__(self) -> None:
        if DEFAULT_KEY not in self.entries:
            raise ValueError("Nutrition catalog requires a 'default' entry")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @property
    def default(self) -> MacroQuantities:
        """Return the fallback entry."""
        return self.entries[DEFAULT_KEY]

    def lookup(self, key: str) -> MacroQuantities:
        """Return the entry for an exact key, or the default entry."""
        return self.entries.get(key, self.default)

    def keys(self) -> list[str]:
        """Return food keys in declaration order, without the default."""
        return [key for key in self.entries if key != DEFAULT_KEY]


DEFAULT_CATALOG = NutritionCatalog(_CATALOG_DATA)
