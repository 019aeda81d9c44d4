"""Generic directed graph structure."""

from __future__ import annotations

import logging
import sys
from collections.abc import Hashable
from typing import Dict, Generic, Iterator, List, TextIO, Tuple, TypeVar

from dotgraph.utils import display_text, dot_edge, dot_node

T = TypeVar("T", bound=Hashable)


class Edge(Generic[T]):

    """A directed edge, owned by its source vertex.

    The edge refers to its destination but does not own it. Vertices are owned
    by the graph they were created in.
    """

    def __init__(self, destination: Vertex[T]):
        self._destination = destination

    def __repr__(self) -> str:
        return f"Edge(destination={self._destination.value!r})"

    def __str__(self) -> str:
        return f"Edge to: {display_text(self._destination.value)}"

    @property
    def destination(self) -> Vertex[T]:
        return self._destination


class Vertex(Generic[T]):

    """A vertex wrapping a value of type T.

    Vertices compare and hash by value, so a graph never holds two vertices
    with equal values. The value cannot be changed after construction.
    """

    def __init__(self, value: T):
        self._value = value
        self._edges: List[Edge[T]] = []

    def __repr__(self) -> str:
        return f"Vertex(value={self._value!r}, edges={len(self._edges)})"

    def __str__(self) -> str:
        edges = ", ".join(str(edge) for edge in self._edges)
        return f"Vertex: {display_text(self._value)}\n  Edges: [{edges}]\n\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def edges(self) -> Tuple[Edge[T], ...]:
        """The outgoing edges, in the order they were added."""
        return tuple(self._edges)

    def append_edge(self, edge: Edge[T]):
        """Append an outgoing edge. Only Graph.add_edge should call this."""
        self._edges.append(edge)


class Graph(Generic[T]):

    """A directed graph.

    Vertices wrap values of type T, which must be hashable. Adding a value that
    is already present returns the existing vertex. Self-loops and parallel
    edges are allowed. There is no way to remove vertices or edges.

    Example usage:

        graph: Graph[str] = Graph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.add_edge(a, b)
        print(graph.dot_description)

    Graphs are not thread safe. Callers must not mutate a graph while another
    thread is reading or exporting it.
    """

    def __init__(self):
        self._vertices: Dict[T, Vertex[T]] = {}

    def __repr__(self) -> str:
        return f"Graph(N={len(self._vertices)})"

    def __str__(self) -> str:
        return self.description

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex[T]]:
        """Iterate over all vertices."""
        return iter(self._vertices.values())

    def __contains__(self, value: object) -> bool:
        """Return true if the graph has a vertex for value."""
        return value in self._vertices

    def add_vertex(self, value: T) -> Vertex[T]:
        """Add a vertex for value, or return the existing one."""
        vertex = self._vertices.get(value)
        if vertex is None:
            vertex = Vertex(value)
            self._vertices[value] = vertex
            logging.debug("added vertex %r", value)
        return vertex

    def add_edge(self, source: Vertex[T], destination: Vertex[T]):
        """Add an edge from source to destination.

        Both vertices must have been returned by this graph's add_vertex. This
        is not checked. Adding the same edge twice creates two parallel edges.
        """
        source.append_edge(Edge(destination))
        logging.debug("added edge %r -> %r", source.value, destination.value)

    @property
    def description(self) -> str:
        """Return a textual dump of all vertices and their edges.

        This is meant for debugging. The order of vertices is unspecified.
        """
        return "[" + ", ".join(str(vertex) for vertex in self) + "]"

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        print(self.description, file=out)

    @property
    def dot_description(self) -> str:
        """Return the graph in DOT format for Graphviz and similar tools.

        Each vertex is numbered by its position in one pass over the vertices,
        and the edges are written in a second pass using those numbers.
        Labels are not escaped, so values whose text contains double quotes
        produce invalid DOT.
        """
        indexes: Dict[Vertex[T], int] = {}
        nodes = []
        for index, vertex in enumerate(self):
            indexes[vertex] = index
            nodes.append(dot_node(index, vertex.value))
        edges = []
        for index, vertex in enumerate(self):
            for edge in vertex.edges:
                dest_index = indexes.get(edge.destination)
                if dest_index is None:
                    logging.debug(
                        "skipping edge to unknown vertex %r", edge.destination.value
                    )
                    continue
                edges.append(dot_edge(index, dest_index))
        return "digraph {\n" + "\n".join(nodes) + "\n\n" + "\n".join(edges) + "\n}"
