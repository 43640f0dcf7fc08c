"""Tests for graph.py — arena indexing and networkx interop."""

from __future__ import annotations

import networkx as nx

from workflow_dag.graph import GraphIndex, workflow_from_digraph
from workflow_dag.types import Edge, Node, NodeStatus, NodeType

# ─── Helpers ──────────────────────────────────────────────────────────────────


def make_nodes(*ids: str) -> list[Node]:
    return [Node(id=i, type=NodeType.TASK, label=i) for i in ids]


def make_edges(*pairs: tuple[str, str]) -> list[Edge]:
    return [Edge(id=f"{s}->{t}", source=s, target=t) for s, t in pairs]


# ─── GraphIndex Tests ─────────────────────────────────────────────────────────


class TestGraphIndex:
    def test_indices_follow_input_order(self):
        """Nodes get dense indices in the order they were given."""
        index = GraphIndex.build(make_nodes("C", "A", "B"), [])
        assert [index.index_of(i) for i in ("C", "A", "B")] == [0, 1, 2]
        assert index.id_of(1) == "A"

    def test_forward_and_reverse(self):
        """A → B, A → C: forward from A, reverse into B and C."""
        index = GraphIndex.build(make_nodes("A", "B", "C"), make_edges(("A", "B"), ("A", "C")))
        assert index.successors("A") == ["B", "C"]
        assert index.predecessors("B") == ["A"]
        assert index.predecessors("C") == ["A"]
        assert index.predecessors("A") == []

    def test_isolated_node_has_empty_entries(self):
        """Every node has an adjacency entry even without edges."""
        index = GraphIndex.build(make_nodes("X"), [])
        assert index.forward == [[]]
        assert index.reverse == [[]]
        assert index.in_degrees() == [0]

    def test_dangling_edge_recorded_not_indexed(self):
        """Edge to an unknown node is kept aside and creates no entry."""
        index = GraphIndex.build(make_nodes("A"), make_edges(("A", "Z")))
        assert index.dangling == ["A->Z"]
        assert "Z" not in index
        assert index.successors("A") == []
        assert len(index) == 1
        assert len(index.edges) == 1

    def test_dangling_source(self):
        """Edge from an unknown node is dangling too."""
        index = GraphIndex.build(make_nodes("B"), make_edges(("Q", "B")))
        assert index.dangling == ["Q->B"]
        assert index.in_degrees() == [0]

    def test_unknown_id_lookups(self):
        """Lookups for unknown ids return empty results, never raise."""
        index = GraphIndex.build([], [])
        assert index.index_of("nope") is None
        assert index.node("nope") is None
        assert index.successors("nope") == []
        assert index.predecessors("nope") == []

    def test_duplicate_node_first_wins(self):
        """A repeated id keeps the first node and ignores the rest."""
        first = Node(id="A", type=NodeType.START, label="first")
        second = Node(id="A", type=NodeType.END, label="second")
        index = GraphIndex.build([first, second], [])
        assert len(index) == 1
        assert index.node("A") is first

    def test_parallel_edges_counted_twice(self):
        """Two A → B edges give B an in-degree of 2."""
        edges = [Edge(id="e1", source="A", target="B"), Edge(id="e2", source="A", target="B")]
        index = GraphIndex.build(make_nodes("A", "B"), edges)
        assert index.in_degrees() == [0, 2]

    def test_empty(self):
        index = GraphIndex.build([], [])
        assert len(index) == 0
        assert index.forward == []
        assert index.reverse == []


# ─── networkx interop ─────────────────────────────────────────────────────────


class TestDigraphInterop:
    def test_to_digraph_skips_dangling(self):
        """Export keeps valid edges and drops the dangling one."""
        index = GraphIndex.build(make_nodes("A", "B"), make_edges(("A", "B"), ("B", "Z")))
        g = index.to_digraph()
        assert set(g.nodes) == {"A", "B"}
        assert list(g.edges) == [("A", "B")]
        assert g.nodes["A"]["data"].label == "A"
        assert g.edges["A", "B"]["data"].id == "A->B"

    def test_to_digraph_dag_check(self):
        """networkx agrees a chain is acyclic and a 2-cycle is not."""
        chain = GraphIndex.build(make_nodes("A", "B", "C"), make_edges(("A", "B"), ("B", "C")))
        cycle = GraphIndex.build(make_nodes("A", "B"), make_edges(("A", "B"), ("B", "A")))
        assert nx.is_directed_acyclic_graph(chain.to_digraph())
        assert not nx.is_directed_acyclic_graph(cycle.to_digraph())

    def test_workflow_from_plain_digraph(self):
        """Plain networkx nodes become TASK nodes with synthetic edge ids."""
        g: nx.DiGraph = nx.DiGraph()
        g.add_edge("A", "B")
        g.add_node("C", type="database", label="Store", status="running")
        wf = workflow_from_digraph(g)
        by_id = {n.id: n for n in wf.nodes}
        assert by_id["A"].type is NodeType.TASK
        assert by_id["A"].label == "A"
        assert by_id["C"].type is NodeType.DATABASE
        assert by_id["C"].status is NodeStatus.RUNNING
        assert [e.id for e in wf.edges] == ["A->B"]

    def test_round_trip_keeps_node_objects(self):
        """Nodes attached under ``data`` are reused as-is."""
        nodes = make_nodes("A", "B")
        index = GraphIndex.build(nodes, make_edges(("A", "B")))
        wf = workflow_from_digraph(index.to_digraph())
        assert wf.nodes[0] is nodes[0]
        assert wf.edges[0].source == "A"
