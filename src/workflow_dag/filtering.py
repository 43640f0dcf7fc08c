"""Sub-graph selection by text search, node type and node status."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import replace

from workflow_dag.types import Edge, Node, NodeStatus, NodeType, Workflow


def _matches_query(node: Node, query: str) -> bool:
    return (
        query in node.label.lower()
        or (node.description is not None and query in node.description.lower())
        or query in node.type.value
    )


def _induced_edges(edges: Iterable[Edge], keep: Collection[str]) -> tuple[Edge, ...]:
    return tuple(e for e in edges if e.source in keep and e.target in keep)


def filter_workflow(
    workflow: Workflow,
    query: str | None = None,
    types: Collection[NodeType] | None = None,
    statuses: Collection[NodeStatus] | None = None,
) -> Workflow:
    """Return the sub-workflow induced by the nodes passing every filter.

    Args:
        query: Case-insensitive substring matched against label, description
            and type. Empty or ``None`` disables the search.
        types: Keep only nodes of these types. Empty or ``None`` keeps all.
        statuses: Keep only nodes with one of these statuses; nodes without a
            status are dropped. Empty or ``None`` keeps all.

    Edges survive only if both endpoints survive.
    """
    nodes: Iterable[Node] = workflow.nodes
    if query:
        needle = query.lower()
        nodes = [n for n in nodes if _matches_query(n, needle)]
    if types:
        wanted_types = {NodeType(t) for t in types}
        nodes = [n for n in nodes if n.type in wanted_types]
    if statuses:
        wanted_statuses = {NodeStatus(s) for s in statuses}
        nodes = [n for n in nodes if n.status is not None and n.status in wanted_statuses]

    kept = tuple(nodes)
    keep_ids = {n.id for n in kept}
    return replace(workflow, nodes=kept, edges=_induced_edges(workflow.edges, keep_ids))
