"""Graph index — dense integer adjacency built from a flat node/edge list.

Every node gets an index in input order. ``forward[i]`` lists the indices of
``i``'s successors, ``reverse[i]`` its predecessors, one entry per edge (so
parallel edges appear twice). Edges whose source or target is unknown are
kept aside in ``dangling`` and contribute no adjacency.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import networkx as nx

from workflow_dag.types import Edge, Node, NodeType, Workflow

logger = logging.getLogger(__name__)


@dataclass
class GraphIndex:
    """Arena-style adjacency for one workflow snapshot.

    Attributes:
        nodes: Nodes in index order (duplicates dropped).
        edges: All edges, in input order, dangling ones included.
        forward: ``forward[i]`` → successor indices of node ``i``.
        reverse: ``reverse[i]`` → predecessor indices of node ``i``.
        dangling: Ids of edges with an unknown endpoint.
    """

    nodes: list[Node]
    edges: list[Edge]
    forward: list[list[int]]
    reverse: list[list[int]]
    dangling: list[str] = field(default_factory=list)
    _index: dict[str, int] = field(default_factory=dict, repr=False)

    @classmethod
    def build(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> GraphIndex:
        """Index ``nodes`` and ``edges`` in O(N + E)."""
        ordered: list[Node] = []
        index: dict[str, int] = {}
        for node in nodes:
            if node.id in index:
                logger.debug("duplicate node id %r ignored", node.id)
                continue
            index[node.id] = len(ordered)
            ordered.append(node)

        forward: list[list[int]] = [[] for _ in ordered]
        reverse: list[list[int]] = [[] for _ in ordered]
        dangling: list[str] = []
        edge_list = list(edges)

        for edge in edge_list:
            src = index.get(edge.source)
            tgt = index.get(edge.target)
            if src is None or tgt is None:
                logger.debug("edge %r references unknown node (%r → %r)", edge.id, edge.source, edge.target)
                dangling.append(edge.id)
                continue
            forward[src].append(tgt)
            reverse[tgt].append(src)

        return cls(
            nodes=ordered,
            edges=edge_list,
            forward=forward,
            reverse=reverse,
            dangling=dangling,
            _index=index,
        )

    @classmethod
    def from_workflow(cls, workflow: Workflow) -> GraphIndex:
        return cls.build(workflow.nodes, workflow.edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def index_of(self, node_id: str) -> int | None:
        return self._index.get(node_id)

    def id_of(self, idx: int) -> str:
        return self.nodes[idx].id

    def node(self, node_id: str) -> Node | None:
        idx = self._index.get(node_id)
        return None if idx is None else self.nodes[idx]

    def successors(self, node_id: str) -> list[str]:
        """Ids of nodes reached by an edge out of ``node_id`` ([] if unknown)."""
        idx = self._index.get(node_id)
        if idx is None:
            return []
        return [self.nodes[i].id for i in self.forward[idx]]

    def predecessors(self, node_id: str) -> list[str]:
        """Ids of nodes with an edge into ``node_id`` ([] if unknown)."""
        idx = self._index.get(node_id)
        if idx is None:
            return []
        return [self.nodes[i].id for i in self.reverse[idx]]

    def in_degrees(self) -> list[int]:
        return [len(parents) for parents in self.reverse]

    def to_digraph(self) -> nx.DiGraph:
        """Export as a ``networkx.DiGraph``.

        Node attribute ``data`` holds the ``Node``, edge attribute ``data`` the
        ``Edge``. Dangling edges are left out; parallel edges collapse to one.
        """
        g: nx.DiGraph = nx.DiGraph()
        for node in self.nodes:
            g.add_node(node.id, data=node)
        for edge in self.edges:
            if edge.source in self._index and edge.target in self._index:
                g.add_edge(edge.source, edge.target, data=edge)
        return g


def workflow_from_digraph(graph: nx.DiGraph, default_type: NodeType = NodeType.TASK) -> Workflow:
    """Build a ``Workflow`` from a ``networkx.DiGraph``.

    Node attributes may carry a ready ``Node`` under ``data``; otherwise one is
    built from the ``type``/``label``/``status`` attributes. Edges likewise
    use ``data`` or get a synthetic ``"{src}->{tgt}"`` id.
    """
    nodes: list[Node] = []
    for node_id, attrs in graph.nodes(data=True):
        data = attrs.get("data")
        if isinstance(data, Node):
            nodes.append(data)
            continue
        raw = {key: attrs[key] for key in ("type", "label", "status", "description", "metadata") if key in attrs}
        raw.setdefault("type", default_type)
        raw["id"] = str(node_id)
        nodes.append(Node.from_dict(raw))

    edges: list[Edge] = []
    for src, tgt, attrs in graph.edges(data=True):
        data = attrs.get("data")
        if isinstance(data, Edge):
            edges.append(data)
            continue
        raw = {key: attrs[key] for key in ("label", "style", "condition", "metadata") if key in attrs}
        if "condition_type" in attrs:
            raw["condition_type"] = attrs["condition_type"]
        raw.update(id=attrs.get("id", f"{src}->{tgt}"), source=str(src), target=str(tgt))
        edges.append(Edge.from_dict(raw))

    return Workflow(nodes=tuple(nodes), edges=tuple(edges))
