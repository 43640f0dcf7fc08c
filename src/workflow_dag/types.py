"""Workflow graph types shared across the layout engine and its callers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from workflow_dag.errors import WorkflowDataError

# ─── Vocabularies ────────────────────────────────────────────────────────────


class NodeType(str, Enum):
    START = "start"
    END = "end"
    TASK = "task"
    CONDITION = "condition"
    PARALLEL = "parallel"
    MERGE = "merge"
    API = "api"
    DATABASE = "database"
    TRANSFORM = "transform"
    NOTIFICATION = "notification"
    SCHEDULE = "schedule"
    MANUAL = "manual"
    CUSTOM = "custom"


class NodeStatus(str, Enum):
    IDLE = "idle"
    WAITING = "waiting"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class ConditionType(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ALWAYS = "always"
    CONDITIONAL = "conditional"


class EdgeStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class Orientation(str, Enum):
    """Flow direction of layers: left→right or top→bottom."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutAlgorithm(str, Enum):
    LAYERED = "layered"


def _coerce_enum(enum_cls: type[Enum], value: Any, what: str) -> Any:
    """Convert a raw string (or enum member) into ``enum_cls``."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise WorkflowDataError(f"unknown {what} {value!r} (expected one of: {allowed})") from exc


# ─── Input graph ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Node:
    """A workflow step.

    ``id`` is unique within a workflow. Instances are immutable: layout output
    wraps them in ``PositionedNode`` instead of writing coordinates back.
    """

    id: str
    type: NodeType
    label: str
    status: NodeStatus | None = None
    description: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", _coerce_enum(NodeType, self.type, "node type"))
        object.__setattr__(self, "status", _coerce_enum(NodeStatus, self.status, "node status"))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Node:
        """Build a node from a JSON-style mapping."""
        node_id = raw.get("id")
        if not node_id:
            raise WorkflowDataError(f"node is missing an id: {dict(raw)!r}")
        if raw.get("type") is None:
            raise WorkflowDataError(f"node {node_id!r} is missing a type")
        return cls(
            id=str(node_id),
            type=raw["type"],
            label=str(raw.get("label", node_id)),
            status=raw.get("status"),
            description=raw.get("description"),
            metadata=dict(raw.get("metadata") or {}),
        )


@dataclass(frozen=True)
class Edge:
    """A transition from ``source`` to ``target``.

    Either endpoint may name a node that does not exist; such edges are
    carried through layout as degenerate (unrouted) edges.
    """

    id: str
    source: str
    target: str
    label: str | None = None
    condition_type: ConditionType | None = None
    style: EdgeStyle | None = None
    condition: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "condition_type", _coerce_enum(ConditionType, self.condition_type, "condition type"))
        object.__setattr__(self, "style", _coerce_enum(EdgeStyle, self.style, "edge style"))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Edge:
        """Build an edge from a JSON-style mapping (camelCase keys accepted)."""
        for key in ("id", "source", "target"):
            if raw.get(key) is None:
                raise WorkflowDataError(f"edge is missing {key!r}: {dict(raw)!r}")
        condition_type = raw.get("conditionType", raw.get("condition_type"))
        return cls(
            id=str(raw["id"]),
            source=str(raw["source"]),
            target=str(raw["target"]),
            label=raw.get("label"),
            condition_type=condition_type,
            style=raw.get("style"),
            condition=raw.get("condition"),
            metadata=dict(raw.get("metadata") or {}),
        )


@dataclass(frozen=True)
class Workflow:
    """An immutable snapshot of a workflow graph."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    id: str = ""
    name: str = ""
    description: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so snapshots stay immutable.
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Workflow:
        """Build a workflow from ``{"nodes": [...], "edges": [...], ...}``."""
        return cls(
            nodes=tuple(Node.from_dict(n) for n in raw.get("nodes") or []),
            edges=tuple(Edge.from_dict(e) for e in raw.get("edges") or []),
            id=str(raw.get("id", "")),
            name=str(raw.get("name", "")),
            description=raw.get("description"),
            metadata=dict(raw.get("metadata") or {}),
        )


# ─── Layout output ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """A 2D point in pixel coordinates."""

    x: float
    y: float


def _fmt(value: float) -> str:
    # 100.0 → "100", 12.5 → "12.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class BezierPath:
    """A single cubic Bézier segment from ``start`` to ``end``."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    def points(self) -> list[Point]:
        return [self.start, self.control1, self.control2, self.end]

    def to_svg(self) -> str:
        """Render as an SVG path ``d`` attribute."""
        s, c1, c2, e = self.points()
        return (
            f"M {_fmt(s.x)} {_fmt(s.y)} "
            f"C {_fmt(c1.x)} {_fmt(c1.y)}, {_fmt(c2.x)} {_fmt(c2.y)}, {_fmt(e.x)} {_fmt(e.y)}"
        )


@dataclass(frozen=True)
class PositionedNode:
    """A node with its computed position.

    ``x``/``y`` is the top-left corner of the node's box, ``layer`` its
    topological depth and ``column`` its index within that layer.
    """

    node: Node
    x: float
    y: float
    layer: int
    column: int

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def type(self) -> NodeType:
        return self.node.type

    @property
    def label(self) -> str:
        return self.node.label

    @property
    def status(self) -> NodeStatus | None:
        return self.node.status


@dataclass(frozen=True)
class PositionedEdge:
    """An edge with its anchor points and curve.

    ``path`` is ``None`` when either endpoint is unknown; all four anchor
    coordinates are then zero.
    """

    edge: Edge
    path: BezierPath | None
    source_x: float = 0.0
    source_y: float = 0.0
    target_x: float = 0.0
    target_y: float = 0.0

    @property
    def id(self) -> str:
        return self.edge.id

    @property
    def source(self) -> str:
        return self.edge.source

    @property
    def target(self) -> str:
        return self.edge.target

    @property
    def is_routed(self) -> bool:
        return self.path is not None

    @property
    def svg_path(self) -> str:
        return self.path.to_svg() if self.path is not None else ""


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in pixel coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class WorkflowStats:
    """Summary counts for a workflow."""

    total_nodes: int
    total_edges: int
    layers: int
    max_nodes_per_layer: int
    longest_path: int
    nodes_by_type: dict[NodeType, int]
    nodes_by_status: dict[NodeStatus, int]
