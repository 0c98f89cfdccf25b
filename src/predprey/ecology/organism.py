from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from predprey.ecology.field import Field, Location
from predprey.ecology.randomizer import Randomizer

PREY = "prey"
PREDATOR = "predator"
SPECIES_ORDER = (PREY, PREDATOR)


@dataclass
class Species:
    name: str
    label: str
    max_age: int
    breeding_age: int
    breeding_probability: float
    max_litter_size: int
    creation_probability: float = 0.0
    max_food_level: Optional[int] = None
    starvation_threshold: int = 0

    @classmethod
    def from_config(cls, name: str, params: Dict[str, object]) -> "Species":
        if name == PREDATOR and params.get("max_food_level") is None:
            raise ValueError("Predator config requires 'max_food_level'")
        return cls(
            name=name,
            label=params.get("label", name.capitalize()),
            max_age=params.get("max_age", 40),
            breeding_age=params.get("breeding_age", 5),
            breeding_probability=params.get("breeding_probability", 0.1),
            max_litter_size=params.get("max_litter_size", 1),
            creation_probability=params.get("creation_probability", 0.0),
            max_food_level=params.get("max_food_level"),
            starvation_threshold=params.get("starvation_threshold", 0),
        )


def species_from_config(config: Dict[str, object]) -> Dict[str, Species]:
    return {name: Species.from_config(name, config[name]) for name in SPECIES_ORDER}


class Organism:
    """
    A prey or predator living on a Field.

    Both kinds share one act() protocol; the kind tag selects the
    predator-only phases (hunger and hunting). The organism keeps a
    non-owning reference to its field and records the cell it occupies.
    """

    def __init__(
        self,
        species: Species,
        field: Field,
        age: int = 0,
        food_level: Optional[int] = None,
    ):
        self.species = species
        self.kind: str = species.name
        self.field: Optional[Field] = field
        self.location: Optional[Location] = None
        self.alive: bool = True
        self.age: int = age
        self.death_cause: Optional[str] = None
        self.food_level: Optional[int] = None
        if self.kind == PREDATOR:
            self.food_level = species.max_food_level if food_level is None else food_level

    def __repr__(self) -> str:
        state = "alive" if self.alive else f"dead:{self.death_cause}"
        return f"Organism({self.kind}, age={self.age}, location={self.location}, {state})"

    def is_alive(self) -> bool:
        return self.alive

    def set_location(self, new_location: Location) -> None:
        """
        Move to new_location: vacate the current cell, occupy the new one,
        and record it. Nothing changes if new_location is off the field.
        """
        self.field.check_location(new_location)
        if self.location is not None and self.field.get_object_at_location(self.location) is self:
            self.field.clear_location(self.location)
        self.location = new_location
        self.field.place(self, new_location.row, new_location.col)

    def set_dead(self, cause: str) -> None:
        self.alive = False
        self.death_cause = cause
        if self.location is not None and self.field is not None:
            if self.field.get_object_at_location(self.location) is self:
                self.field.clear_location(self.location)
        self.location = None
        self.field = None

    def act(self, new_organisms: List["Organism"], rng: Randomizer) -> None:
        """
        Run one step of behaviour.

        Order is fixed: aging, hunger (predator), breeding, hunting
        (predator), movement. Newborns are appended to new_organisms with a
        reserved cell and are not put on the grid here.
        """
        if not self.alive:
            return
        self._increment_age()
        if not self.alive:
            return
        if self.kind == PREDATOR:
            self._increment_hunger()
            if not self.alive:
                return

        self._give_birth(new_organisms, rng)

        if self.kind == PREDATOR:
            food_location = self._find_food()
            if food_location is not None:
                self.set_location(food_location)
                return

        new_location = self.field.free_adjacent_location(self.location)
        if new_location is not None:
            self.set_location(new_location)
        # else: no room to move, stay put

    def _increment_age(self) -> None:
        self.age += 1
        if self.age > self.species.max_age:
            self.set_dead("old_age")

    def _increment_hunger(self) -> None:
        self.food_level -= 1
        if self.food_level <= self.species.starvation_threshold:
            self.set_dead("starvation")

    def _can_breed(self) -> bool:
        return self.age >= self.species.breeding_age

    def _breed(self, rng: Randomizer) -> int:
        """
        Returns:
            int: litter size, 0 when no birth happens this step.
        """
        if not self._can_breed():
            return 0
        if rng.next_float() >= self.species.breeding_probability:
            return 0
        return rng.next_int(self.species.max_litter_size) + 1

    def _give_birth(self, new_organisms: List["Organism"], rng: Randomizer) -> None:
        births = self._breed(rng)
        if births == 0:
            return
        free = self.field.free_adjacent_locations(self.location)
        for location in free[:births]:
            young = Organism(self.species, self.field)
            young.location = location
            self.field.reserve(location)
            new_organisms.append(young)

    def _find_food(self) -> Optional[Location]:
        for location in self.field.adjacent_locations(self.location):
            occupant = self.field.get_object_at_location(location)
            if occupant is not None and occupant.kind == PREY and occupant.alive:
                occupant.set_dead("eaten")
                self.food_level = self.species.max_food_level
                return location
        return None
