import copy
from typing import Dict, Optional

config_sim = {
    "seed": 1111,  # Randomizer seed, restored on every reset
    # Grid settings
    "depth": 80,  # Number of rows
    "width": 120,  # Number of columns
    "long_run_steps": 4000,  # Step count used by run_long_simulation
    # Species settings
    "prey": {
        "label": "Prey",  # Name shown in the population summary
        "max_age": 40,  # Dies once age exceeds this
        "breeding_age": 5,  # Minimum age to breed
        "breeding_probability": 0.12,  # Per-step chance to breed
        "max_litter_size": 4,  # Upper bound on newborns per breeding event
        "creation_probability": 0.08,  # Per-cell chance at population seeding
    },
    "predator": {
        "label": "Predator",
        "max_age": 150,
        "breeding_age": 15,
        "breeding_probability": 0.08,
        "max_litter_size": 2,
        "creation_probability": 0.02,
        "max_food_level": 9,  # Food level after eating one prey, and at birth
        "starvation_threshold": 0,  # Starves when food level drops to this
    },
    # Verbosity
    "verbose_steps": False,  # One summary line per step
    "verbose_births": False,  # Newborn counts per step
    "verbose_deaths": False,  # Deaths per cause per step
    "verbose_reset": False,  # Population after reset
}


def build_config(overrides: Optional[Dict[str, object]] = None) -> Dict[str, object]:
    """
    Return a copy of the default configuration with the given overrides applied.

    Species entries ("prey", "predator") are merged key by key, so an override
    only needs to name the parameters it changes.

    Raises:
        ValueError: if an override names a key that the configuration does not know.
    """
    cfg = copy.deepcopy(config_sim)
    if not overrides:
        return cfg
    for key, value in overrides.items():
        if key not in cfg:
            raise ValueError(f"Unknown config_sim key: {key}")
        if isinstance(cfg[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f"Expected a dict for config_sim['{key}'], got {value!r}")
            for sub_key, sub_value in value.items():
                if sub_key not in cfg[key]:
                    raise ValueError(f"Unknown config_sim key: {key}.{sub_key}")
                cfg[key][sub_key] = sub_value
        else:
            cfg[key] = value
    return cfg
