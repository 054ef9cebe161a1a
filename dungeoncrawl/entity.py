"""Creatures, the player and the rooms they occupy."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from dungeoncrawl.linkedlist import DoublyLinkedList


@dataclass
class Entity:
    """A creature's stat block."""

    name: str = ""
    cr: float = 0.0
    creature_type: str = ""
    size: str = ""
    ac: int = 0
    hp: int = 0
    alignment: str = ""


class Monster(Entity):
    """A creature compared by name.

    ``<`` and ``>`` are reversed relative to the name, so a search tree of
    monsters runs from the last name to the first; ``<=`` follows plain name order.
    """

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.name > other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.name < other.name

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.name <= other.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Player(Entity):
    """The adventurer, with the monsters it has defeated kept in name order."""

    defeated_monsters: DoublyLinkedList = field(default_factory=DoublyLinkedList)

    def add_defeated_monster(self, monster: Monster) -> None:
        self.defeated_monsters.add_in_order(monster)

    def display_defeated_monsters(self, out: Optional[TextIO] = None) -> None:
        self.defeated_monsters.display(out if out is not None else sys.stdout)


@dataclass
class Room:
    """A dungeon room holding a single monster."""

    monster: Monster = field(default_factory=Monster)

    def __str__(self) -> str:
        m = self.monster
        return f"In the room there is a {m.name} ac: {m.cr:g} hp: {m.hp}"