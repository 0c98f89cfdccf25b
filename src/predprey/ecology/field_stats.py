from typing import Dict, Sequence

import numpy as np

from predprey.ecology.field import Field
from predprey.ecology.organism import SPECIES_ORDER


class FieldStats:
    """
    Population counts derived from the contents of a Field.

    Counts are recomputed from the grid every time they are requested, so
    they can never drift from what the field actually holds.
    """

    def __init__(self, kinds: Sequence[str] = SPECIES_ORDER, labels: Dict[str, str] = None):
        self.kinds = tuple(kinds)
        self.labels = labels or {kind: kind.capitalize() for kind in self.kinds}
        self.counters: Dict[str, int] = dict.fromkeys(self.kinds, 0)

    def reset(self) -> None:
        self.counters = dict.fromkeys(self.kinds, 0)

    def _generate_counts(self, field: Field) -> None:
        layout = field.species_layout()
        for kind in self.kinds:
            self.counters[kind] = int(np.count_nonzero(layout == kind))

    def get_counts(self, field: Field) -> Dict[str, int]:
        self.reset()
        self._generate_counts(field)
        return dict(self.counters)

    def get_population_details(self, field: Field) -> str:
        counts = self.get_counts(field)
        return " ".join(f"{self.labels[kind]}: {counts[kind]}" for kind in self.kinds)

    def is_viable(self, field: Field) -> bool:
        """True while every known species still has at least one member on the field."""
        counts = self.get_counts(field)
        return all(counts[kind] > 0 for kind in self.kinds)
