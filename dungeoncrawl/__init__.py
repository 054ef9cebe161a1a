"""A text dungeon crawler: a monster catalogue, a room graph and a path to walk."""

__version__ = "0.1.0"