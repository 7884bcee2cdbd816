"""Resolve free-text classifier labels to catalog keys."""

from collections.abc import Callable
from dataclasses import dataclass, field

from snap_nutrition.services.catalog import DEFAULT_KEY, NutritionCatalog

Matcher = Callable[[str], bool]


def _substring_matcher(key: str) -> Matcher:
    return lambda label: key in label


@dataclass
class LabelResolver:
    """Map classifier labels to canonical food keys.

    Matchers are evaluated in the catalog's declaration order and the first
    hit wins, so a label naming several foods resolves to whichever key is
    declared first.
    """

    catalog: NutritionCatalog
    _matchers: list[tuple[str, Matcher]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._matchers = [
            (key, _substring_matcher(key)) for key in self.catalog.keys()
        ]

    def resolve(self, raw_label: str) -> str:
        """Return the catalog key for a label, or its first word."""
        label = raw_label.lower()
        for key, matches in self._matchers:
            if matches(label):
                return key
        tokens = label.split()
        if not tokens:
            return DEFAULT_KEY
        return tokens[0]
