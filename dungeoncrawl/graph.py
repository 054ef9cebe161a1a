"""A directed graph stored as adjacency lists, with a plain-text file format."""

from __future__ import annotations

import string
import sys
from collections import deque
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Optional, TextIO, Union

from dungeoncrawl.linkedlist import DoublyLinkedList

HEADER = "Grafo"


class GraphError(Exception):
    """Raised when a graph cannot be created, loaded or saved."""


@dataclass
class Vertex:
    """A vertex's payload and the ids of the vertices its edges lead to."""

    data: Any = None
    edges: DoublyLinkedList = field(default_factory=DoublyLinkedList)


def _is_count(text: str) -> bool:
    return bool(text) and all(c in string.digits for c in text)


def _split_cells(line: str) -> list[str]:
    cells = line.split(" ")
    if cells[-1] == "":
        cells.pop()
    return cells


class Graph:
    """A fixed-size graph of vertices numbered from 0."""

    def __init__(self) -> None:
        self._vertices: Optional[list[Vertex]] = None

    def __len__(self) -> int:
        return 0 if self._vertices is None else len(self._vertices)

    def is_empty(self) -> bool:
        return self._vertices is None

    def create(self, n: int) -> None:
        """Allocate ``n`` vertices with no edges; the graph must be empty."""
        if self._vertices is not None:
            raise GraphError("the graph has already been created")
        if n < 0:
            raise ValueError(f"a graph cannot have {n} vertices")
        self._vertices = [Vertex() for _ in range(n)]

    def clear(self) -> None:
        self._vertices = None

    def _vertex(self, vertex: int) -> Vertex:
        if self._vertices is None or not 0 <= vertex < len(self._vertices):
            raise IndexError(f"vertex {vertex} out of range for graph of size {len(self)}")
        return self._vertices[vertex]

    def set_vertex_data(self, vertex: int, data: Any) -> None:
        self._vertex(vertex).data = data

    def get_vertex_data(self, vertex: int) -> Any:
        return self._vertex(vertex).data

    def insert_edge_directed(self, src: int, dest: int) -> bool:
        """Add an edge from ``src`` to ``dest``; return False if it already exists."""
        source = self._vertex(src)
        self._vertex(dest)
        if dest in source.edges:
            return False
        source.edges.add_to_head(dest)
        return True

    def delete_edge_directed(self, src: int, dest: int) -> bool:
        """Remove the edge from ``src`` to ``dest``; return whether it existed."""
        source = self._vertex(src)
        self._vertex(dest)
        return source.edges.delete_value(dest)

    def insert_edge_undirected(self, src: int, dest: int) -> bool:
        """Add edges both ways; return False if ``src`` already leads to ``dest``."""
        source = self._vertex(src)
        target = self._vertex(dest)
        if dest in source.edges:
            return False
        source.edges.add_to_head(dest)
        if src not in target.edges:
            target.edges.add_to_head(src)
        return True

    def delete_edge_undirected(self, src: int, dest: int) -> bool:
        """Remove edges both ways; return whether ``src`` led to ``dest``."""
        source = self._vertex(src)
        target = self._vertex(dest)
        removed = source.edges.delete_value(dest)
        target.edges.delete_value(src)
        return removed

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the header, the vertex count and one line of edges per vertex."""
        if self._vertices is None:
            raise GraphError("cannot save an empty graph")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{HEADER}\n{len(self._vertices)}\n")
            for vertex in self._vertices:
                handle.write(f"{vertex.edges}\n")

    def load(self, path: Union[str, PathLike]) -> None:
        """Replace the graph with the one stored at ``path``.

        Each edge line is read left to right and added at the head of the
        vertex's list. Raises GraphError, leaving the graph empty, when the
        file is missing or malformed.
        """
        self.clear()
        try:
            with open(path, encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except OSError as exc:
            raise GraphError(f"cannot open {path}: {exc}") from exc

        if not lines or lines[0] != HEADER:
            raise GraphError(f"{path} is not a graph file")
        if len(lines) < 2 or not _is_count(lines[1]) or int(lines[1]) <= 0:
            raise GraphError(f"{path}: invalid vertex count")
        self.create(int(lines[1]))

        try:
            for src, line in enumerate(lines[2:]):
                for cell in _split_cells(line):
                    if not _is_count(cell):
                        raise GraphError(f"{path}: invalid vertex id {cell!r}")
                    try:
                        inserted = self.insert_edge_directed(src, int(cell))
                    except IndexError as exc:
                        raise GraphError(f"{path}: {exc}") from None
                    if not inserted:
                        raise GraphError(f"{path}: duplicate edge {src} -> {cell}")
        except GraphError:
            self.clear()
            raise

    def depth_first_search(self, vertex: int) -> list[int]:
        """Return the vertices reachable from ``vertex`` in depth-first visiting order."""
        self._vertex(vertex)
        assert self._vertices is not None
        visited = [False] * len(self._vertices)
        stack = [vertex]
        order: list[int] = []
        while stack:
            current = stack.pop()
            if visited[current]:
                continue
            visited[current] = True
            order.append(current)
            stack.extend(n for n in self._vertices[current].edges if not visited[n])
        return order

    def bfs_path(self, start: int, end: int) -> DoublyLinkedList:
        """Return a path from ``start`` to ``end`` found breadth first, empty if none."""
        self._vertex(start)
        self._vertex(end)
        assert self._vertices is not None
        visited = [False] * len(self._vertices)
        previous: dict[int, int] = {}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if visited[current]:
                continue
            visited[current] = True
            for neighbour in self._vertices[current].edges:
                if not visited[neighbour]:
                    previous[neighbour] = current
                    queue.append(neighbour)

        path: DoublyLinkedList = DoublyLinkedList()
        if not visited[end]:
            return path
        vertex = end
        while vertex != start:
            path.add_to_head(vertex)
            vertex = previous[vertex]
        path.add_to_head(start)
        return path

    def display(self, out: Optional[TextIO] = None) -> None:
        """Write one line per vertex: its id, its data and its edges."""
        out = out if out is not None else sys.stdout
        for index, vertex in enumerate(self._vertices or ()):
            out.write(f"[{index}] {vertex.data}: {vertex.edges}\n")