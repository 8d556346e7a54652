"""Enumerations shared by the warband domain."""

from __future__ import annotations

from enum import StrEnum


class UnitKind(StrEnum):
    """Unit categories an army can field.

    Declaration order matters: it is the tie-break order used when unit
    groups are ranked by strength.
    """

    PIKEMEN = "pikemen"
    ARCHERS = "archers"
    KNIGHTS = "knights"

    @property
    def order(self) -> int:
        """Position of the kind in declaration order."""
        return list(UnitKind).index(self)
