"""A dungeon of rooms joined by passages, with a path to walk through it."""

from __future__ import annotations

import sys
from itertools import islice
from os import PathLike
from typing import Optional, TextIO, Union

from dungeoncrawl.entity import Monster, Room
from dungeoncrawl.graph import Graph
from dungeoncrawl.linkedlist import DoublyLinkedList


class Dungeon:
    """Rooms stored in a graph, and the path currently being walked."""

    def __init__(self) -> None:
        self._graph = Graph()
        self._path: Optional[DoublyLinkedList] = None
        self._position = 0

    def __len__(self) -> int:
        return len(self._graph)

    def load(self, path: Union[str, PathLike]) -> None:
        """Load the dungeon layout from a graph file; every room starts vacant.

        Raises GraphError when the file cannot be read.
        """
        self._path = None
        self._position = 0
        self._graph.load(path)
        for room_id in range(len(self._graph)):
            self._graph.set_vertex_data(room_id, Room())

    def add_room(self, room_id: int, monster: Monster) -> None:
        """Put a room holding ``monster`` at ``room_id``."""
        self._graph.set_vertex_data(room_id, Room(monster))

    def display_rooms(self, out: Optional[TextIO] = None) -> None:
        self._graph.display(out if out is not None else sys.stdout)

    def trace_path(self, start: int, end: int) -> bool:
        """Find a path between two rooms and stand at its start; return whether one exists."""
        self._path = None
        self._position = 0
        if self._graph.is_empty():
            return False
        path = self._graph.bfs_path(start, end)
        if path.is_empty():
            return False
        self._path = path
        return True

    def _traced(self) -> DoublyLinkedList:
        if self._path is None:
            raise LookupError("no path has been traced")
        return self._path

    def move_in_path(self) -> bool:
        """Step to the next room; return False once the path is exhausted."""
        path = self._traced()
        self._position += 1
        return self._position < len(path)

    def current_room(self) -> Room:
        path = self._traced()
        room_id = next(islice(path, self._position, None), None)
        if room_id is None:
            raise IndexError("the end of the path has been passed")
        return self._graph.get_vertex_data(room_id)

    def display_path(self, out: Optional[TextIO] = None) -> None:
        self._traced().display(out if out is not None else sys.stdout)