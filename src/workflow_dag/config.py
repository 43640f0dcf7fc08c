"""Layout parameters and environment-driven defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from workflow_dag.errors import InvalidLayoutParams
from workflow_dag.types import LayoutAlgorithm, Orientation

# camelCase keys used by the rendering layer's parameter object.
_CAMEL_KEYS: dict[str, str] = {
    "nodeWidth": "node_width",
    "nodeHeight": "node_height",
    "horizontalSpacing": "horizontal_spacing",
    "verticalSpacing": "vertical_spacing",
}


@dataclass(frozen=True)
class LayoutParams:
    """Viewport size, node box size, spacing and flow direction.

    Attributes:
        width: Viewport width; the cross-axis extent for vertical layouts.
        height: Viewport height; the cross-axis extent for horizontal layouts.
        node_width: Width of every node box.
        node_height: Height of every node box.
        horizontal_spacing: Gap between boxes along x.
        vertical_spacing: Gap between boxes along y.
        orientation: ``HORIZONTAL`` flows layers left→right, ``VERTICAL`` top→bottom.
        algorithm: Layout strategy; only ``LAYERED`` exists.
    """

    width: float = 800
    height: float = 600
    node_width: float = 120
    node_height: float = 60
    horizontal_spacing: float = 80
    vertical_spacing: float = 100
    orientation: Orientation = Orientation.HORIZONTAL
    algorithm: LayoutAlgorithm = LayoutAlgorithm.LAYERED

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "orientation", Orientation(self.orientation))
            object.__setattr__(self, "algorithm", LayoutAlgorithm(self.algorithm))
        except ValueError as exc:
            raise InvalidLayoutParams(str(exc)) from exc

    def validate(self) -> LayoutParams:
        """Raise ``InvalidLayoutParams`` if no sensible layout can be produced."""
        if self.node_width <= 0 or self.node_height <= 0:
            raise InvalidLayoutParams(f"node size must be positive, got {self.node_width}x{self.node_height}")
        if self.horizontal_spacing < 0 or self.vertical_spacing < 0:
            raise InvalidLayoutParams(
                f"spacing must be non-negative, got {self.horizontal_spacing}/{self.vertical_spacing}"
            )
        if self.width < 0 or self.height < 0:
            raise InvalidLayoutParams(f"viewport must be non-negative, got {self.width}x{self.height}")
        return self

    def with_changes(self, **changes: Any) -> LayoutParams:
        return replace(self, **changes)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> LayoutParams:
        """Build params from a mapping with either snake_case or camelCase keys.

        Unknown keys are ignored; missing keys fall back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in raw.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs).validate()


# Fixed dimensions used to learn layer counts for statistics. These never
# describe the rendered layout.
REFERENCE_PARAMS = LayoutParams(
    width=800,
    height=600,
    node_width=120,
    node_height=60,
    horizontal_spacing=80,
    vertical_spacing=100,
    orientation=Orientation.HORIZONTAL,
    algorithm=LayoutAlgorithm.LAYERED,
)


@dataclass
class Settings:
    """Default layout parameters from environment."""

    width: float = 800
    height: float = 600
    node_width: float = 120
    node_height: float = 60
    horizontal_spacing: float = 80
    vertical_spacing: float = 100
    orientation: str = Orientation.HORIZONTAL.value

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from ``WORKFLOW_DAG_*`` environment variables."""
        return cls(
            width=float(os.getenv("WORKFLOW_DAG_WIDTH", "800")),
            height=float(os.getenv("WORKFLOW_DAG_HEIGHT", "600")),
            node_width=float(os.getenv("WORKFLOW_DAG_NODE_WIDTH", "120")),
            node_height=float(os.getenv("WORKFLOW_DAG_NODE_HEIGHT", "60")),
            horizontal_spacing=float(os.getenv("WORKFLOW_DAG_HORIZONTAL_SPACING", "80")),
            vertical_spacing=float(os.getenv("WORKFLOW_DAG_VERTICAL_SPACING", "100")),
            orientation=os.getenv("WORKFLOW_DAG_ORIENTATION", Orientation.HORIZONTAL.value),
        )

    def layout_params(self) -> LayoutParams:
        return LayoutParams(
            width=self.width,
            height=self.height,
            node_width=self.node_width,
            node_height=self.node_height,
            horizontal_spacing=self.horizontal_spacing,
            vertical_spacing=self.vertical_spacing,
            orientation=self.orientation.lower(),
        ).validate()
