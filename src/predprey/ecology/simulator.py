"""
Predator/prey simulator on a rectangular field.

The simulator owns the field, the population registry and the randomizer.
Each step lets every live organism act once, then removes the dead and adds
the newborns of that step, so an organism never acts in the step it is born
and never acts again after it has died.
"""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Union

from predprey.ecology.collector import AnimalCollector
from predprey.ecology.config.config_sim import config_sim
from predprey.ecology.field import DEFAULT_DEPTH, DEFAULT_WIDTH, Field, Location
from predprey.ecology.field_stats import FieldStats
from predprey.ecology.organism import SPECIES_ORDER, Organism, species_from_config
from predprey.ecology.population import Population
from predprey.ecology.randomizer import Randomizer


class Simulator:
    def __init__(
        self,
        depth: Optional[int] = None,
        width: Optional[int] = None,
        config: Optional[Dict[str, object]] = None,
        collector=None,
    ):
        config = config or config_sim  # Use provided config or default config_sim

        self.verbose_steps = config.get("verbose_steps", False)
        self.verbose_births = config.get("verbose_births", False)
        self.verbose_deaths = config.get("verbose_deaths", False)
        self.verbose_reset = config.get("verbose_reset", False)

        self.long_run_steps = config.get("long_run_steps", 4000)
        depth = config.get("depth", DEFAULT_DEPTH) if depth is None else depth
        width = config.get("width", DEFAULT_WIDTH) if width is None else width

        self.species = species_from_config(config)
        self.randomizer = Randomizer(config.get("seed", 1111))
        self.field = Field(depth, width, self.randomizer)
        self.population = Population()
        self.stats = FieldStats(SPECIES_ORDER, {kind: s.label for kind, s in self.species.items()})
        self.collector = collector or AnimalCollector(self.species, self.randomizer)

        self.step = 0
        self.history: Dict[str, List[int]] = {}
        self.last_step_events: Dict[str, object] = {}
        self.plotter = None
        self.ended = False

        # Setup a valid starting point
        self.reset()

    def run_long_simulation(self) -> None:
        self.simulate(self.long_run_steps)

    def simulate(self, num_steps: int) -> None:
        """
        Run up to num_steps steps, stopping as soon as a species has died out.
        """
        for _ in range(num_steps):
            if not self.is_viable():
                break
            self.simulate_one_step()

    def simulate_one_step(self) -> bool:
        """
        Advance the whole population by one step.

        Returns:
            bool: whether the simulation is still viable after this step.
        """
        self.step += 1
        new_organisms: List[Organism] = []

        for organism in self.population:
            if organism.alive:
                organism.act(new_organisms, self.randomizer)

        dead = self.population.purge_dead()

        # Newborns occupy the cells reserved for them during the sweep
        for young in new_organisms:
            self.field.release(young.location)
            young.set_location(young.location)
        self.population.extend(new_organisms)

        self.last_step_events = {
            "births": len(new_organisms),
            "deaths": len(dead),
            "death_causes": dict(Counter(organism.death_cause for organism in dead)),
        }
        self._record_population_metrics()

        if self.verbose_births and new_organisms:
            born = Counter(young.kind for young in new_organisms)
            print(f"[Births] step {self.step}: {dict(born)}")
        if self.verbose_deaths and dead:
            print(f"[Deaths] step {self.step}: {self.last_step_events['death_causes']}")
        if self.verbose_steps:
            print(f"[Step] {self.step}: {self.get_details()}")

        return self.is_viable()

    def reset(self) -> None:
        """
        Reset the simulation to its starting state: reseed the randomizer,
        repopulate the field and set the step counter to zero.
        """
        self.step = 0
        self.randomizer.reset()
        self.population.clear()
        self.field.clear()
        self.history = {"step": [], **{kind: [] for kind in SPECIES_ORDER}}
        self.last_step_events = {}
        self.ended = False
        self._populate()
        self._record_population_metrics()
        if self.verbose_reset:
            print(f"[Reset] {self.get_details()}")

    def _populate(self) -> None:
        for row in range(self.field.depth):
            for col in range(self.field.width):
                organism = self.collector.random_organism(self.field)
                if organism is not None:
                    self.add_organism(organism, Location(row, col))
                # else leave the location empty

    def add_organism(self, organism: Organism, location: Location) -> None:
        """Place an organism on the field and register it as live."""
        self.field.check_location(location)
        self.population.add(organism)
        organism.set_location(location)

    def _record_population_metrics(self) -> None:
        counts = self.stats.get_counts(self.field)
        self.history["step"].append(self.step)
        for kind in SPECIES_ORDER:
            self.history[kind].append(counts[kind])

    def get_field(self) -> Field:
        return self.field

    def get_step(self) -> int:
        return self.step

    def get_details(self) -> str:
        return self.stats.get_population_details(self.field)

    def is_viable(self) -> bool:
        return self.stats.is_viable(self.field)

    def get_population(self, kind: str) -> int:
        """Number of live organisms of the given kind in the registry."""
        return self.population.count(kind)

    def plot_population(self, out_path: Optional[Union[str, Path]] = None) -> None:
        from predprey.ecology.utils.population_plotter import PopulationPlotter

        if self.plotter is not None:
            self.plotter.close()
        self.plotter = PopulationPlotter(self.history, labels={k: s.label for k, s in self.species.items()})
        self.plotter.plot(out_path=out_path)

    def log(self, destination: Union[str, Path]) -> bool:
        """
        Write the current population summary to a file.

        Returns:
            bool: True on success, False if the file could not be written.
        """
        path = Path(destination)
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(self.get_details())
        except OSError as e:
            print(f"Error writing to file {path}: {e}")
            return False
        return True

    def end_simulation(self) -> None:
        if self.ended:
            return
        if self.plotter is not None:
            self.plotter.close()
            self.plotter = None
        self.population.clear()
        self.field.clear()
        self.ended = True
