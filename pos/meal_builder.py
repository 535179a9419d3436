"""
Meal building rules for bowls, plates and bigger plates.

Each size asks for a fixed number of sides and entrées. Items are picked one
click at a time; a click drops the item into the next open slot of its
category, and clicking an item that already holds a slot takes it back out.
"""
from dataclasses import dataclass
from enum import Enum

SIDE = "side"
ENTREE = "entree"

ORDINALS = ["first", "second", "third"]


class MealSize(str, Enum):
    BOWL = "bowl"
    PLATE = "plate"
    BIGGER_PLATE = "bigger plate"


@dataclass(frozen=True)
class MealRequirements:
    sides: int
    entrees: int

    @property
    def total(self):
        return self.sides + self.entrees


MEAL_REQUIREMENTS = {
    MealSize.BOWL: MealRequirements(sides=1, entrees=1),
    MealSize.PLATE: MealRequirements(sides=1, entrees=2),
    MealSize.BIGGER_PLATE: MealRequirements(sides=2, entrees=3),
}


class MealSelectionError(ValueError):
    """Raised when an item cannot go into the meal being built."""


def requirements_for(size):
    """Return the side/entrée quota for a size name or MealSize."""
    return MEAL_REQUIREMENTS[MealSize(size)]


def _plural(count, word, plural):
    return f"{count} {word if count == 1 else plural}"


class MealBuilder:
    """
    Tracks one meal in progress.

    Items only need ``pk``, ``item_type`` and ``name`` attributes, so menu
    item model instances can be passed straight in.
    """

    def __init__(self, size):
        self.size = MealSize(size)
        self.requirements = MEAL_REQUIREMENTS[self.size]
        self.sides = []
        self.entrees = []

    def _slots(self, item):
        if item.item_type == SIDE:
            return self.sides, self.requirements.sides
        if item.item_type == ENTREE:
            return self.entrees, self.requirements.entrees
        raise MealSelectionError(f"{item.name} is not a side or an entrée.")

    def occupies(self, item):
        slots, _ = self._slots(item)
        return any(chosen.pk == item.pk for chosen in slots)

    def is_disabled(self, item):
        """True once every slot of the item's category is taken by other items."""
        slots, limit = self._slots(item)
        return len(slots) >= limit and not self.occupies(item)

    def select(self, item):
        """Toggle an item in or out of the meal."""
        slots, limit = self._slots(item)
        if self.occupies(item):
            # later slots shift up so filling order stays side1 → side2
            slots[:] = [chosen for chosen in slots if chosen.pk != item.pk]
            return
        if len(slots) >= limit:
            raise MealSelectionError(
                f"A {self.size.value} has no open {item.item_type} slot for {item.name}."
            )
        slots.append(item)

    def filled(self):
        return len(self.sides) + len(self.entrees)

    def progress(self):
        return self.filled() / self.requirements.total * 100

    def is_complete(self):
        return self.progress() >= 100

    def remaining(self):
        """Labels of the slots still waiting for an item, in filling order."""
        missing = []
        if self.requirements.sides == 1:
            if not self.sides:
                missing.append("side")
        else:
            for index in range(len(self.sides), self.requirements.sides):
                missing.append(f"{ORDINALS[index]} side")

        for index in range(len(self.entrees), self.requirements.entrees):
            missing.append(f"{ORDINALS[index]} entrée")
        return missing

    def description(self):
        return "{} ({}, {})".format(
            self.size.value,
            _plural(self.requirements.sides, "side", "sides"),
            _plural(self.requirements.entrees, "entrée", "entrées"),
        )
