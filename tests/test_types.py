"""Tests for types.py — raw mapping constructors and positioned wrappers."""

from __future__ import annotations

import pytest

from workflow_dag.errors import WorkflowDataError
from workflow_dag.types import (
    ConditionType,
    Edge,
    EdgeStyle,
    Node,
    NodeStatus,
    NodeType,
    PositionedEdge,
    PositionedNode,
    Workflow,
)


class TestNodeFromDict:
    def test_full(self):
        node = Node.from_dict(
            {
                "id": "n1",
                "type": "api",
                "label": "Call service",
                "status": "failed",
                "description": "POST /orders",
                "metadata": {"retries": 2, "error": "timeout"},
            }
        )
        assert node.type is NodeType.API
        assert node.status is NodeStatus.FAILED
        assert node.metadata["retries"] == 2

    def test_label_defaults_to_id(self):
        assert Node.from_dict({"id": "n1", "type": "task"}).label == "n1"

    def test_missing_id(self):
        with pytest.raises(WorkflowDataError):
            Node.from_dict({"type": "task"})

    def test_missing_type(self):
        with pytest.raises(WorkflowDataError):
            Node.from_dict({"id": "n1"})

    def test_unknown_type(self):
        with pytest.raises(WorkflowDataError, match="unknown node type"):
            Node.from_dict({"id": "n1", "type": "widget"})

    def test_immutable(self):
        node = Node(id="A", type=NodeType.TASK, label="A")
        with pytest.raises(AttributeError):
            node.label = "B"  # type: ignore[misc]


class TestEdgeFromDict:
    def test_camel_case_condition_type(self):
        edge = Edge.from_dict(
            {"id": "e", "source": "A", "target": "B", "conditionType": "failure", "style": "dashed"}
        )
        assert edge.condition_type is ConditionType.FAILURE
        assert edge.style is EdgeStyle.DASHED

    def test_missing_target(self):
        with pytest.raises(WorkflowDataError):
            Edge.from_dict({"id": "e", "source": "A"})

    def test_unknown_style(self):
        with pytest.raises(WorkflowDataError):
            Edge.from_dict({"id": "e", "source": "A", "target": "B", "style": "wavy"})


class TestWorkflow:
    def test_from_dict(self):
        wf = Workflow.from_dict(
            {
                "id": "wf-1",
                "name": "Nightly",
                "nodes": [{"id": "A", "type": "start", "label": "Go"}],
                "edges": [{"id": "e", "source": "A", "target": "Z"}],
                "metadata": {"version": "2"},
            }
        )
        assert wf.name == "Nightly"
        assert isinstance(wf.nodes, tuple)
        assert wf.edges[0].target == "Z"

    def test_lists_become_tuples(self):
        wf = Workflow(nodes=[Node(id="A", type=NodeType.TASK, label="A")], edges=[])
        assert isinstance(wf.nodes, tuple)
        assert isinstance(wf.edges, tuple)

    def test_empty(self):
        wf = Workflow.from_dict({})
        assert wf.nodes == ()
        assert wf.edges == ()


class TestPositionedWrappers:
    def test_positioned_node_delegates(self):
        node = Node(id="A", type=NodeType.MANUAL, label="Approve", status=NodeStatus.WAITING)
        pn = PositionedNode(node=node, x=1, y=2, layer=0, column=0)
        assert (pn.id, pn.type, pn.label, pn.status) == ("A", NodeType.MANUAL, "Approve", NodeStatus.WAITING)

    def test_unrouted_edge_defaults(self):
        pe = PositionedEdge(edge=Edge(id="e", source="A", target="Z"), path=None)
        assert pe.svg_path == ""
        assert not pe.is_routed
        assert (pe.source_x, pe.source_y, pe.target_x, pe.target_y) == (0, 0, 0, 0)

    def test_direct_construction_coerces_enums(self):
        node = Node(id="A", type="schedule", label="Cron", status="idle")
        edge = Edge(id="e", source="A", target="B", condition_type="always", style="dotted")
        assert node.type is NodeType.SCHEDULE
        assert node.status is NodeStatus.IDLE
        assert edge.condition_type is ConditionType.ALWAYS
        assert edge.style is EdgeStyle.DOTTED
