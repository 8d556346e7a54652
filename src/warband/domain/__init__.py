"""Domain model for warband.

* Enumerations (see :mod:`enums`).
* Rule configuration objects (see :mod:`rules_config`).
* Roster dataclasses (see :mod:`models`).
* The :class:`~warband.domain.army.Army` aggregate and battle resolution.
"""

from . import army, battle, enums, models, rules_config

__all__ = [
    "army",
    "battle",
    "enums",
    "models",
    "rules_config",
]
