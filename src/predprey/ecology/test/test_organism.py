import pytest

from predprey.ecology.config.config_sim import build_config
from predprey.ecology.field import Field, Location, OutOfBoundsError
from predprey.ecology.organism import PREDATOR, PREY, Organism, Species, species_from_config
from predprey.ecology.randomizer import Randomizer


def _species(overrides=None):
    return species_from_config(build_config(overrides))


def _put(field, species, row, col, **kwargs):
    organism = Organism(species, field, **kwargs)
    organism.set_location(Location(row, col))
    return organism


def test_set_location_keeps_grid_and_organism_in_sync():
    species = _species()
    field = Field(2, 2)
    prey = _put(field, species[PREY], 0, 0)

    prey.set_location(Location(1, 1))

    assert field.get_object_at(0, 0) is None
    assert field.get_object_at(1, 1) is prey
    assert prey.location == Location(1, 1)


def test_set_dead_vacates_cell():
    species = _species()
    field = Field(1, 2)
    prey = _put(field, species[PREY], 0, 1)

    prey.set_dead("eaten")

    assert not prey.is_alive()
    assert prey.death_cause == "eaten"
    assert prey.location is None
    assert field.get_object_at(0, 1) is None


def test_prey_moves_to_free_neighbour():
    species = _species({"prey": {"breeding_probability": 0.0}})
    field = Field(1, 2, Randomizer(1))
    prey = _put(field, species[PREY], 0, 0)
    births = []

    prey.act(births, Randomizer(1))

    assert prey.age == 1
    assert prey.location == Location(0, 1)
    assert field.get_object_at(0, 1) is prey
    assert field.get_object_at(0, 0) is None
    assert births == []


def test_immobilised_organism_stays_and_keeps_aging():
    species = _species({"prey": {"breeding_probability": 0.0}})
    field = Field(1, 1)
    prey = _put(field, species[PREY], 0, 0)

    prey.act([], Randomizer(1))

    assert prey.is_alive()
    assert prey.age == 1
    assert prey.location == Location(0, 0)


def test_old_age_death_pre_empts_breeding_and_movement():
    species = _species({"prey": {"breeding_probability": 1.0, "max_litter_size": 4}})
    field = Field(3, 3, Randomizer(1))
    prey = _put(field, species[PREY], 1, 1, age=species[PREY].max_age)
    births = []

    prey.act(births, Randomizer(1))

    assert not prey.is_alive()
    assert prey.death_cause == "old_age"
    assert births == []
    assert not field.reserved
    assert (field.species_layout() == "").all()


def test_predator_food_level_decays_and_starves_when_immobilised():
    species = _species()
    field = Field(1, 1)
    fox = _put(field, species[PREDATOR], 0, 0, food_level=2)

    fox.act([], Randomizer(1))
    assert fox.is_alive()
    assert fox.food_level == 1

    fox.act([], Randomizer(1))
    assert not fox.is_alive()
    assert fox.death_cause == "starvation"
    assert field.get_object_at(0, 0) is None


def test_predator_hunts_adjacent_prey_and_moves_into_its_cell():
    species = _species()
    field = Field(1, 3, Randomizer(3))
    fox = _put(field, species[PREDATOR], 0, 0, food_level=4)
    rabbit = _put(field, species[PREY], 0, 1)

    fox.act([], Randomizer(3))

    assert not rabbit.is_alive()
    assert rabbit.death_cause == "eaten"
    assert fox.location == Location(0, 1)
    assert fox.food_level == species[PREDATOR].max_food_level
    assert field.get_object_at(0, 1) is fox
    assert field.get_object_at(0, 0) is None


def test_breeding_fills_buffer_and_reserves_cells_without_placing():
    species = _species({"prey": {"breeding_probability": 1.0, "max_litter_size": 1}})
    field = Field(1, 2, Randomizer(5))
    parent = _put(field, species[PREY], 0, 0, age=species[PREY].breeding_age)
    births = []

    parent.act(births, Randomizer(5))

    assert len(births) == 1
    young = births[0]
    assert young.age == 0
    assert young.location == Location(0, 1)
    assert field.is_reserved(Location(0, 1))
    assert field.get_object_at(0, 1) is None
    # the only free cell is promised to the newborn, so the parent stays
    assert parent.location == Location(0, 0)


def test_litter_is_clamped_to_free_neighbours():
    species = _species({"prey": {"breeding_probability": 1.0, "max_litter_size": 4}})
    field = Field(1, 3, Randomizer(2))
    parent = _put(field, species[PREY], 0, 1, age=species[PREY].breeding_age)
    births = []

    parent.act(births, Randomizer(2))

    assert 1 <= len(births) <= 2
    assert len({young.location for young in births}) == len(births)


def test_predator_newborns_start_with_full_food_level():
    species = _species({"predator": {"breeding_probability": 1.0, "max_litter_size": 1}})
    field = Field(1, 2, Randomizer(9))
    parent = _put(field, species[PREDATOR], 0, 0, age=species[PREDATOR].breeding_age, food_level=5)
    births = []

    parent.act(births, Randomizer(9))

    assert len(births) == 1
    assert births[0].kind == PREDATOR
    assert births[0].food_level == species[PREDATOR].max_food_level


def test_dead_organism_does_nothing():
    species = _species()
    field = Field(1, 2)
    prey = _put(field, species[PREY], 0, 0, age=3)
    prey.set_dead("eaten")

    prey.act([], Randomizer(1))

    assert prey.age == 3
    assert field.get_object_at(0, 0) is None


@pytest.mark.parametrize("kind", [PREY, PREDATOR])
def test_species_defaults_from_config(kind):
    species = _species()[kind]
    assert species.name == kind
    assert 0.0 <= species.breeding_probability <= 1.0
    assert species.max_litter_size >= 1


def test_set_location_off_the_field_changes_nothing():
    species = _species()
    field = Field(2, 2)
    prey = _put(field, species[PREY], 0, 0)

    with pytest.raises(OutOfBoundsError):
        prey.set_location(Location(5, 5))

    assert prey.location == Location(0, 0)
    assert field.get_object_at(0, 0) is prey


def test_predator_species_requires_max_food_level():
    params = dict(build_config()["predator"])
    del params["max_food_level"]

    with pytest.raises(ValueError):
        Species.from_config(PREDATOR, params)
