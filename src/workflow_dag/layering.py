"""Layer assignment — Kahn's algorithm, batched by layer.

Each round collects every unprocessed node whose remaining in-degree is zero
(in input order) into one layer, then decrements the in-degree of their
successors. When no such node exists but nodes remain, the graph has a cycle:
the first unprocessed node is forced into a layer of its own so the sweep
always terminates after at most N rounds and covers every node.

With cycles the result is complete but not a valid topological order; strict
DAG validation is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from workflow_dag.graph import GraphIndex

logger = logging.getLogger(__name__)


def layer_indices(index: GraphIndex) -> tuple[list[list[int]], list[int]]:
    """Run the layered sweep over arena indices.

    Returns ``(layers, forced)`` where ``layers`` is a list of index lists and
    ``forced`` holds the indices that were force-picked to break a cycle.
    """
    n = len(index)
    in_degree = index.in_degrees()
    processed = [False] * n
    remaining = n
    # Lowest index that may still be unprocessed; only ever moves forward.
    cursor = 0

    layers: list[list[int]] = []
    forced: list[int] = []
    frontier = [i for i in range(n) if in_degree[i] == 0]

    while remaining > 0:
        if not frontier:
            while processed[cursor]:
                cursor += 1
            frontier = [cursor]
            forced.append(cursor)
            logger.debug("cycle detected, forcing node %r into layer %d", index.id_of(cursor), len(layers))

        layers.append(frontier)
        for i in frontier:
            processed[i] = True
        remaining -= len(frontier)

        # Nodes whose in-degree drops to zero now form the next layer. Every
        # other zero in-degree node was already emitted in an earlier layer.
        released: list[int] = []
        for i in frontier:
            for succ in index.forward[i]:
                if in_degree[succ] > 0:
                    in_degree[succ] -= 1
                    if in_degree[succ] == 0 and not processed[succ]:
                        released.append(succ)
        frontier = sorted(released)

    return layers, forced


@dataclass
class LayerAssignment:
    """Result of layer assignment.

    Attributes:
        layers: Node ids per layer; layer 0 holds the sources.
        layer_of: Maps node id → layer index.
        forced: Ids force-picked to break cycles (empty for a DAG).
    """

    layers: list[list[str]]
    layer_of: dict[str, int] = field(default_factory=dict)
    forced: list[str] = field(default_factory=list)

    @classmethod
    def assign(cls, index: GraphIndex) -> LayerAssignment:
        idx_layers, idx_forced = layer_indices(index)
        layers = [[index.id_of(i) for i in layer] for layer in idx_layers]
        layer_of = {node_id: depth for depth, layer in enumerate(layers) for node_id in layer}
        return cls(layers=layers, layer_of=layer_of, forced=[index.id_of(i) for i in idx_forced])

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    @property
    def max_layer_size(self) -> int:
        return max((len(layer) for layer in self.layers), default=0)

    @property
    def had_cycle(self) -> bool:
        return bool(self.forced)


def assign_layers(index: GraphIndex) -> list[list[str]]:
    """Assign every node in ``index`` to a layer; see module docstring."""
    return LayerAssignment.assign(index).layers
