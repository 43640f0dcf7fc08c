"""workflow_dag — deterministic layered layout and critical-path analysis for workflow DAGs."""

from __future__ import annotations

import logging

from workflow_dag.api import layout_workflow, workflow_critical_path, workflow_stats
from workflow_dag.config import REFERENCE_PARAMS, LayoutParams, Settings
from workflow_dag.critical_path import (
    CriticalPath,
    analyze_critical_path,
    find_critical_path,
    is_edge_on_critical_path,
    is_on_critical_path,
    longest_path_length,
)
from workflow_dag.errors import InvalidLayoutParams, WorkflowDagError, WorkflowDataError
from workflow_dag.filtering import filter_workflow
from workflow_dag.graph import GraphIndex, workflow_from_digraph
from workflow_dag.layering import LayerAssignment, assign_layers
from workflow_dag.layout import LayoutResult, assign_coordinates, compute_bounds, layout_nodes
from workflow_dag.routing import route_edge, route_edges
from workflow_dag.stats import calculate_workflow_stats
from workflow_dag.types import (
    BezierPath,
    Bounds,
    ConditionType,
    Edge,
    EdgeStyle,
    LayoutAlgorithm,
    Node,
    NodeStatus,
    NodeType,
    Orientation,
    Point,
    PositionedEdge,
    PositionedNode,
    Workflow,
    WorkflowStats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "REFERENCE_PARAMS",
    "BezierPath",
    "Bounds",
    "ConditionType",
    "CriticalPath",
    "Edge",
    "EdgeStyle",
    "GraphIndex",
    "InvalidLayoutParams",
    "LayerAssignment",
    "LayoutAlgorithm",
    "LayoutParams",
    "LayoutResult",
    "Node",
    "NodeStatus",
    "NodeType",
    "Orientation",
    "Point",
    "PositionedEdge",
    "PositionedNode",
    "Settings",
    "Workflow",
    "WorkflowDagError",
    "WorkflowDataError",
    "WorkflowStats",
    "analyze_critical_path",
    "assign_coordinates",
    "assign_layers",
    "calculate_workflow_stats",
    "compute_bounds",
    "filter_workflow",
    "find_critical_path",
    "is_edge_on_critical_path",
    "is_on_critical_path",
    "layout_nodes",
    "layout_workflow",
    "longest_path_length",
    "route_edge",
    "route_edges",
    "workflow_critical_path",
    "workflow_from_digraph",
    "workflow_stats",
]
