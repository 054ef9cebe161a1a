"""A catalogue of monsters loaded from a CSV file."""

from __future__ import annotations

import copy
import string
from os import PathLike
from typing import Any, Callable, Optional, Union

from dungeoncrawl.bintree import BinaryTree
from dungeoncrawl.entity import Monster


class CatalogueError(Exception):
    """Raised when a catalogue cannot be loaded or read."""


def _text(cell: str) -> str:
    if not cell:
        raise ValueError("empty field")
    return cell


def _integer(cell: str) -> int:
    if not cell or any(c not in string.digits for c in cell):
        raise ValueError(f"invalid integer {cell!r}")
    return int(cell)


def _number(cell: str) -> float:
    if not cell:
        raise ValueError("empty number")
    if cell[0] in string.digits or cell[0] == "-":
        rest = cell[1:]
        if any(c not in string.digits and c != "." for c in rest) or rest.count(".") > 1:
            raise ValueError(f"invalid number {cell!r}")
    try:
        return float(cell)
    except ValueError:
        raise ValueError(f"invalid number {cell!r}") from None


_COLUMNS: tuple[tuple[str, Callable[[str], Any]], ...] = (
    ("name", _text),
    ("cr", _number),
    ("creature_type", _text),
    ("size", _text),
    ("ac", _integer),
    ("hp", _integer),
    ("alignment", _text),
)


def _split_cells(line: str) -> list[str]:
    cells = line.split(",")
    if cells[-1] == "":
        cells.pop()
    return cells


class Catalogue:
    """Monsters indexed by name, from which one can be drawn at random."""

    def __init__(self, rng: Optional[Any] = None) -> None:
        self._monsters: BinaryTree[Monster] = BinaryTree(rng)

    def load_csv(self, path: Union[str, PathLike]) -> None:
        """Add the monsters in a CSV file whose first line is a header.

        Columns are name, cr, type, size, ac, hp, alignment. A monster whose
        name is already present is ignored. Raises CatalogueError on the first
        invalid row; rows before it stay loaded.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError as exc:
            raise CatalogueError(f"cannot open {path}: {exc}") from exc

        for lineno, line in enumerate(lines[1:], start=2):
            cells = _split_cells(line)
            if not cells:
                continue
            values = {}
            for (attribute, parse), cell in zip(_COLUMNS, cells):
                try:
                    values[attribute] = parse(cell)
                except ValueError as exc:
                    raise CatalogueError(f"line {lineno}, {attribute}: {exc}") from None
            self._monsters.insert(Monster(**values))

    def is_empty(self) -> bool:
        return self._monsters.is_empty()

    def random_monster(self) -> Monster:
        """Return a copy of a monster chosen uniformly at random."""
        monster = self._monsters.random_key()
        if monster is None:
            raise CatalogueError("the catalogue is empty")
        return copy.copy(monster)