"""Edge routing — anchor points and cubic Bézier S-curves between layers.

Horizontal flow: exit at the right-centre of the source box, enter at the
left-centre of the target box; control points sit at the horizontal midpoint,
one on each anchor's y.

Vertical flow: exit at the bottom-centre, enter at the top-centre; control
points sit at the vertical midpoint, one on each anchor's x.

Edges whose source or target is not among the positioned nodes are emitted
unrouted (``path=None``, all anchors zero) instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from workflow_dag.config import LayoutParams
from workflow_dag.types import BezierPath, Edge, Point, PositionedEdge, PositionedNode

logger = logging.getLogger(__name__)


def anchor_points(
    source: PositionedNode,
    target: PositionedNode,
    params: LayoutParams,
) -> tuple[Point, Point]:
    """Exit point on ``source``'s border and entry point on ``target``'s border."""
    w, h = params.node_width, params.node_height
    if params.is_horizontal:
        return Point(source.x + w, source.y + h / 2), Point(target.x, target.y + h / 2)
    return Point(source.x + w / 2, source.y + h), Point(target.x + w / 2, target.y)


def bezier_between(start: Point, end: Point, horizontal: bool) -> BezierPath:
    """S-curve from ``start`` to ``end`` bending along the flow axis."""
    if horizontal:
        mid_x = start.x + (end.x - start.x) / 2
        return BezierPath(start, Point(mid_x, start.y), Point(mid_x, end.y), end)
    mid_y = start.y + (end.y - start.y) / 2
    return BezierPath(start, Point(start.x, mid_y), Point(end.x, mid_y), end)


def route_edge(
    edge: Edge,
    node_map: Mapping[str, PositionedNode],
    params: LayoutParams,
) -> PositionedEdge:
    """Route a single edge; unknown endpoints yield an unrouted edge."""
    source = node_map.get(edge.source)
    target = node_map.get(edge.target)
    if source is None or target is None:
        logger.debug("edge %r left unrouted: missing endpoint", edge.id)
        return PositionedEdge(edge=edge, path=None)

    start, end = anchor_points(source, target, params)
    return PositionedEdge(
        edge=edge,
        path=bezier_between(start, end, params.is_horizontal),
        source_x=start.x,
        source_y=start.y,
        target_x=end.x,
        target_y=end.y,
    )


def route_edges(
    edges: Iterable[Edge],
    positioned_nodes: Iterable[PositionedNode],
    params: LayoutParams,
) -> list[PositionedEdge]:
    """Route every edge in input order."""
    node_map: dict[str, PositionedNode] = {n.id: n for n in positioned_nodes}
    return [route_edge(edge, node_map, params) for edge in edges]
