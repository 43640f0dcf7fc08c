"""Public API — lay out a workflow, find its critical path, summarise it.

Every call recomputes from scratch; nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from workflow_dag.config import LayoutParams
from workflow_dag.critical_path import CriticalPath, analyze_critical_path
from workflow_dag.graph import GraphIndex
from workflow_dag.layout import LayoutResult, layout_index
from workflow_dag.routing import route_edges
from workflow_dag.stats import calculate_workflow_stats
from workflow_dag.types import Workflow, WorkflowStats


def _coerce_params(params: LayoutParams | Mapping[str, Any] | None) -> LayoutParams:
    if params is None:
        return LayoutParams()
    if isinstance(params, LayoutParams):
        return params.validate()
    return LayoutParams.from_dict(params)


def layout_workflow(
    workflow: Workflow,
    params: LayoutParams | Mapping[str, Any] | None = None,
) -> LayoutResult:
    """Lay out ``workflow`` and route its edges.

    ``params`` may be a ``LayoutParams`` or a mapping using the camelCase keys
    of the rendering layer (``nodeWidth``, ``horizontalSpacing``...).
    Raises ``InvalidLayoutParams`` for unusable parameters; graph shape
    problems (cycles, dangling edges, empty graph) never raise.
    """
    resolved = _coerce_params(params)
    index = GraphIndex.from_workflow(workflow)
    nodes, assignment = layout_index(index, resolved)
    edges = route_edges(workflow.edges, nodes, resolved)
    return LayoutResult(nodes=nodes, edges=edges, params=resolved, layers=assignment.layers)


def workflow_critical_path(workflow: Workflow) -> CriticalPath:
    """Critical path of ``workflow``, usable as a per-frame membership test."""
    return analyze_critical_path(GraphIndex.from_workflow(workflow))


def workflow_stats(workflow: Workflow) -> WorkflowStats:
    return calculate_workflow_stats(workflow)
