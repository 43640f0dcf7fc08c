"""Layout engine — layered (Sugiyama-style) coordinate assignment.

Phases:
  1. Indexing          (graph.py)
  2. Layer assignment  (layering.py — Kahn's algorithm with forced picks)
  3. Coordinate assignment (this file)
  4. Edge routing      (routing.py — cubic Bézier S-curves)

No crossing minimisation: nodes keep their first-discovery order within a
layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from workflow_dag.config import LayoutParams
from workflow_dag.graph import GraphIndex
from workflow_dag.layering import LayerAssignment
from workflow_dag.types import Bounds, Node, PositionedEdge, PositionedNode, Workflow

# Padding around the content box when computing view bounds.
BOUNDS_MARGIN: float = 20


@dataclass
class LayoutResult:
    """Self-contained layout output — everything a renderer needs."""

    nodes: list[PositionedNode]
    edges: list[PositionedEdge]
    params: LayoutParams
    layers: list[list[str]] = field(default_factory=list)
    _by_id: dict[str, PositionedNode] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._by_id = {n.id: n for n in self.nodes}

    def node(self, node_id: str) -> PositionedNode | None:
        return self._by_id.get(node_id)

    def edge(self, edge_id: str) -> PositionedEdge | None:
        return next((e for e in self.edges if e.id == edge_id), None)

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def bounds(self, margin: float = BOUNDS_MARGIN) -> Bounds:
        return compute_bounds(self.nodes, self.params, margin)


def _cross_start(count: int, node_size: float, spacing: float, viewport: float) -> float:
    """Offset of the first node so ``count`` nodes are centred in ``viewport``."""
    total = count * node_size + (count - 1) * spacing
    return (viewport - total) / 2


def assign_coordinates(
    layers: Sequence[Sequence[str]],
    nodes_by_id: dict[str, Node],
    params: LayoutParams,
) -> list[PositionedNode]:
    """Assign pixel coordinates to every node listed in ``layers``.

    The primary axis (x for horizontal flow, y for vertical) places layer
    ``L`` at ``L * (size + spacing) + spacing``. On the cross axis the
    ``k`` nodes of a layer are centred in the viewport and spaced
    ``size + spacing`` apart. Ids missing from ``nodes_by_id`` are skipped.
    """
    horizontal = params.is_horizontal
    if horizontal:
        main_size, main_gap = params.node_width, params.horizontal_spacing
        cross_size, cross_gap, viewport = params.node_height, params.vertical_spacing, params.height
    else:
        main_size, main_gap = params.node_height, params.vertical_spacing
        cross_size, cross_gap, viewport = params.node_width, params.horizontal_spacing, params.width

    positioned: list[PositionedNode] = []
    for layer_idx, layer in enumerate(layers):
        main = layer_idx * (main_size + main_gap) + main_gap
        start = _cross_start(len(layer), cross_size, cross_gap, viewport)

        for column, node_id in enumerate(layer):
            node = nodes_by_id.get(node_id)
            if node is None:
                continue
            cross = start + column * (cross_size + cross_gap)
            x, y = (main, cross) if horizontal else (cross, main)
            positioned.append(PositionedNode(node=node, x=x, y=y, layer=layer_idx, column=column))

    return positioned


def layout_index(index: GraphIndex, params: LayoutParams) -> tuple[list[PositionedNode], LayerAssignment]:
    """Layer and position an already-indexed graph."""
    assignment = LayerAssignment.assign(index)
    nodes_by_id = {node.id: node for node in index.nodes}
    return assign_coordinates(assignment.layers, nodes_by_id, params), assignment


def layout_nodes(workflow: Workflow, params: LayoutParams) -> list[PositionedNode]:
    """Position every node of ``workflow`` (empty workflow → [])."""
    positioned, _ = layout_index(GraphIndex.from_workflow(workflow), params)
    return positioned


def compute_bounds(
    nodes: Iterable[PositionedNode],
    params: LayoutParams,
    margin: float = BOUNDS_MARGIN,
) -> Bounds:
    """Bounding box of all node boxes, grown by ``margin`` on every side.

    With no nodes the viewport rectangle ``(0, 0, width, height)`` is returned.
    """
    nodes = list(nodes)
    if not nodes:
        return Bounds(0, 0, params.width, params.height)
    return Bounds(
        min_x=min(n.x for n in nodes) - margin,
        min_y=min(n.y for n in nodes) - margin,
        max_x=max(n.x + params.node_width for n in nodes) + margin,
        max_y=max(n.y + params.node_height for n in nodes) + margin,
    )
