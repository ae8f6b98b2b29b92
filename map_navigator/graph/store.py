"""In-memory graph store.

This module defines the Graph type used throughout the project: an
insertion-ordered list of named nodes, each owning a list of outgoing
weighted edges. Nodes are addressed internally by integer ids; names
are resolved to ids once per query.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain.errors import GraphError, NodeNotFoundError
from ..domain.models import Edge, Node

EdgeSpec = Tuple[str, str, int]


class Graph:
    """Directed, weighted graph over named nodes.

    Node names are expected to be unique but this is not enforced: with
    duplicates, ``find_by_name`` returns the first node added under that
    name. Use ``find_all_by_name`` to detect the ambiguity.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._adjacency: List[List[Edge]] = []

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeSpec], nodes: Iterable[str] = ()) -> Graph:
        """Build a graph from ``(source, destination, weight)`` name triples.

        Names listed in ``nodes`` are added first, in order. Endpoint
        names not seen yet are added on first appearance.
        """
        graph = cls()
        for name in nodes:
            graph.add_node(name)

        for source_name, destination_name, weight in edges:
            source = graph.find_by_name(source_name) or graph.add_node(source_name)
            destination = graph.find_by_name(destination_name) or graph.add_node(
                destination_name
            )
            graph.add_edge(source, destination, weight)

        return graph

    def add_node(self, name: str) -> Node:
        node = Node(id=len(self._nodes), name=name)
        self._nodes.append(node)
        self._adjacency.append([])
        return node

    def add_edge(self, source: Node, destination: Node, weight: int) -> Edge:
        """Add a directed edge ``source -> destination``.

        Raises:
            GraphError: If the weight is not a non-negative integer or
                either endpoint belongs to another graph.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise GraphError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise GraphError(
                f"Negative edge weight {weight} on {source.name} -> {destination.name}"
            )
        for endpoint in (source, destination):
            if endpoint not in self:
                raise GraphError(f"Node {endpoint.name!r} does not belong to this graph")

        edge = Edge(destination=destination.id, weight=weight)
        self._adjacency[source.id].append(edge)
        return edge

    def find_by_name(self, name: str) -> Optional[Node]:
        """Return the first node named ``name``, or None."""
        for node in self._nodes:
            if node.name == name:
                return node
        return None

    def find_all_by_name(self, name: str) -> List[Node]:
        return [node for node in self._nodes if node.name == name]

    def get_node_or_raise(self, name: str) -> Node:
        """Return the first node named ``name``.

        Raises:
            NodeNotFoundError: If no node has that name.
        """
        node = self.find_by_name(name)
        if node is None:
            raise NodeNotFoundError(f"Node not found: {name}", node_name=name)
        return node

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    def outgoing(self, node: Node) -> Sequence[Edge]:
        return tuple(self._adjacency[node.id])

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, Node):
            return False
        return 0 <= node.id < len(self._nodes) and self._nodes[node.id] is node

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count()})"
