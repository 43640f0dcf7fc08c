"""Workflow statistics — counts by type and status plus layer shape."""

from __future__ import annotations

from collections import Counter

from workflow_dag.config import REFERENCE_PARAMS
from workflow_dag.critical_path import analyze_critical_path
from workflow_dag.graph import GraphIndex
from workflow_dag.layout import layout_index
from workflow_dag.types import NodeStatus, NodeType, Workflow, WorkflowStats


def calculate_workflow_stats(workflow: Workflow) -> WorkflowStats:
    """Summarise ``workflow``.

    ``nodes_by_type`` and ``nodes_by_status`` carry every enum member, zero
    when absent; nodes without a status are counted in neither status bucket.
    ``layers`` and ``max_nodes_per_layer`` come from a layout run with
    ``REFERENCE_PARAMS``. They depend only on topology, so the reference run
    says nothing about the rendered positions.
    """
    nodes_by_type: dict[NodeType, int] = {t: 0 for t in NodeType}
    nodes_by_status: dict[NodeStatus, int] = {s: 0 for s in NodeStatus}
    for node in workflow.nodes:
        nodes_by_type[node.type] += 1
        if node.status is not None:
            nodes_by_status[node.status] += 1

    index = GraphIndex.from_workflow(workflow)
    positioned, _ = layout_index(index, REFERENCE_PARAMS)
    per_layer = Counter(n.layer for n in positioned)

    return WorkflowStats(
        total_nodes=len(workflow.nodes),
        total_edges=len(workflow.edges),
        layers=len(per_layer),
        max_nodes_per_layer=max(per_layer.values(), default=0),
        longest_path=analyze_critical_path(index).length,
        nodes_by_type=nodes_by_type,
        nodes_by_status=nodes_by_status,
    )
