from typing import Dict, Optional

from predprey.ecology.field import Field
from predprey.ecology.organism import PREDATOR, PREY, Organism, Species
from predprey.ecology.randomizer import Randomizer


class AnimalCollector:
    """
    Seeding policy: decides, cell by cell, whether a new organism starts there.

    One draw per cell. Below the predator creation probability a predator is
    created; below the sum of both creation probabilities a prey is created;
    otherwise the cell stays empty. Seeded organisms start at a random age,
    and seeded predators with a random food level high enough to survive
    their first step (capped at max_food_level).
    """

    def __init__(self, species: Dict[str, Species], randomizer: Randomizer):
        self.species = species
        self.randomizer = randomizer

    def random_organism(self, field: Field) -> Optional[Organism]:
        predator = self.species[PREDATOR]
        prey = self.species[PREY]
        draw = self.randomizer.next_float()
        if draw < predator.creation_probability:
            # lowest food level that survives the first hunger tick
            low = min(predator.starvation_threshold + 2, predator.max_food_level)
            return Organism(
                predator,
                field,
                age=self.randomizer.next_int(predator.max_age),
                food_level=low + self.randomizer.next_int(predator.max_food_level - low + 1),
            )
        if draw < predator.creation_probability + prey.creation_probability:
            return Organism(prey, field, age=self.randomizer.next_int(prey.max_age))
        return None
