"""An undirected weighted graph of named vertices (states) keyed by id."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Edge", "Vertex", "StateGraph"]


@dataclass
class Edge:
    """A link to another vertex, carrying a weight."""

    target: int
    weight: int


@dataclass
class Vertex:
    """A vertex with a unique id, a display name and its edges in insertion order."""

    vertex_id: int
    name: str
    edges: list[Edge] = field(default_factory=list)

    def edge_to(self, target: int) -> Edge | None:
        """The first edge leading to ``target``, or None."""
        return next((edge for edge in self.edges if edge.target == target), None)

    def drop_edge_to(self, target: int) -> bool:
        """Remove the first edge leading to ``target``; return whether one was found."""
        edge = self.edge_to(target)
        if edge is None:
            return False
        self.edges.remove(edge)
        return True

    def render(self) -> str:
        """The vertex and its edges on one line."""
        links = "".join(f"{edge.target}({edge.weight}) --> " for edge in self.edges)
        return f"{self.name} ({self.vertex_id}) --> [{links}]"


class StateGraph:
    """Vertices kept in the order they were added, joined by undirected edges.

    Every edge is stored on both of its endpoints.  Naming a vertex or edge
    that does not exist raises KeyError; adding one that already exists
    raises ValueError.
    """

    def __init__(self) -> None:
        self._vertices: dict[int, Vertex] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices.values())

    def has_vertex(self, vertex_id: int) -> bool:
        """Whether a vertex with ``vertex_id`` exists."""
        return vertex_id in self._vertices

    def has_edge(self, source: int, target: int) -> bool:
        """Whether ``source`` has an edge leading to ``target``."""
        vertex = self._vertices.get(source)
        return vertex is not None and vertex.edge_to(target) is not None

    def vertex(self, vertex_id: int) -> Vertex:
        """The vertex with ``vertex_id``."""
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise KeyError(vertex_id) from None

    def add_vertex(self, vertex_id: int, name: str) -> Vertex:
        """Add a vertex and return it."""
        if vertex_id in self._vertices:
            raise ValueError("Vertex with this ID already exist")
        vertex = Vertex(vertex_id, name)
        self._vertices[vertex_id] = vertex
        return vertex

    def update_vertex(self, vertex_id: int, name: str) -> None:
        """Rename the vertex with ``vertex_id``."""
        self.vertex(vertex_id).name = name

    def delete_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge leading to it."""
        self.vertex(vertex_id)
        for vertex in self._vertices.values():
            vertex.drop_edge_to(vertex_id)
        del self._vertices[vertex_id]

    def _require_edge(self, source: int, target: int) -> None:
        if not self.has_edge(source, target):
            raise KeyError((source, target))

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Join ``source`` and ``target`` with an edge of ``weight``."""
        start = self.vertex(source)
        end = self.vertex(target)
        if self.has_edge(source, target):
            raise ValueError(
                f"Edge between {start.name}({source}) and "
                f"{end.name}({target}) Already Exist"
            )
        start.edges.append(Edge(target, weight))
        if end is not start:
            end.edges.append(Edge(source, weight))

    def update_edge(self, source: int, target: int, weight: int) -> None:
        """Set the weight of the edge between ``source`` and ``target``."""
        self._require_edge(source, target)
        for here, there in ((source, target), (target, source)):
            vertex = self._vertices.get(here)
            edge = vertex.edge_to(there) if vertex is not None else None
            if edge is not None:
                edge.weight = weight

    def delete_edge(self, source: int, target: int) -> None:
        """Remove the edge between ``source`` and ``target``."""
        self._require_edge(source, target)
        self._vertices[source].drop_edge_to(target)
        if target != source and target in self._vertices:
            self._vertices[target].drop_edge_to(source)

    def neighbors(self, vertex_id: int) -> list[Edge]:
        """The edges of the vertex with ``vertex_id``, in insertion order."""
        return list(self.vertex(vertex_id).edges)

    def render(self) -> str:
        """Every vertex with its edges, one line each."""
        return "".join(vertex.render() + "\n" for vertex in self._vertices.values())