from typing import Iterable, Iterator, List, Set

from predprey.ecology.organism import Organism


class Population:
    """
    Registry of the live organisms of a simulation, in insertion order.

    An organism is registered at most once. Dead organisms stay in the
    registry until purge_dead() is called at the end of a step.
    """

    def __init__(self):
        self.organisms: List[Organism] = []
        self._members: Set[Organism] = set()

    def __len__(self) -> int:
        return len(self.organisms)

    def __iter__(self) -> Iterator[Organism]:
        # iterate over a copy so the registry may change during a sweep
        return iter(list(self.organisms))

    def __contains__(self, organism: Organism) -> bool:
        return organism in self._members

    def add(self, organism: Organism) -> None:
        if organism in self._members:
            raise ValueError(f"{organism} is already registered")
        self.organisms.append(organism)
        self._members.add(organism)

    def extend(self, organisms: Iterable[Organism]) -> None:
        for organism in organisms:
            self.add(organism)

    def purge_dead(self) -> List[Organism]:
        """
        Drop every organism that is no longer alive.

        Returns:
            List[Organism]: the organisms that were removed.
        """
        dead = [organism for organism in self.organisms if not organism.alive]
        if dead:
            self.organisms = [organism for organism in self.organisms if organism.alive]
            self._members.difference_update(dead)
        return dead

    def clear(self) -> None:
        self.organisms.clear()
        self._members.clear()

    def count(self, kind: str) -> int:
        return sum(1 for organism in self.organisms if organism.kind == kind and organism.alive)
