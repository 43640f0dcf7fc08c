"""Critical path analysis — longest chain of dependent nodes.

Nodes are visited in layer order (a topological order when the graph is
acyclic). For each node::

    distance[n] = 1 + max(distance[p] for p in predecessors(n))   # sources → 1

and the predecessor that first reached the strict maximum is remembered. The
path ends at the first node, in layer order, holding the largest distance and
is recovered by following predecessor pointers back to a source.

Ties are broken by iteration order. Any longest path is an acceptable answer;
the tie-break only makes the choice deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from workflow_dag.graph import GraphIndex
from workflow_dag.layering import layer_indices
from workflow_dag.types import Edge, Workflow

_NO_PARENT = -1


@dataclass(frozen=True)
class CriticalPath:
    """The critical path of a workflow.

    Attributes:
        node_ids: Node ids from the root to the deepest node.
        length: Longest path length counted in nodes (0 for an empty graph).
        distances: Longest-path distance of every node, keyed by id.
    """

    node_ids: tuple[str, ...] = ()
    length: int = 0
    distances: dict[str, int] = field(default_factory=dict, compare=False)
    _members: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.node_ids))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._members

    def __iter__(self):
        return iter(self.node_ids)

    def __len__(self) -> int:
        return len(self.node_ids)

    def contains(self, node_id: str) -> bool:
        return node_id in self._members

    def contains_edge(self, edge: Edge) -> bool:
        """True if both endpoints of ``edge`` lie on the path."""
        return edge.source in self._members and edge.target in self._members


def analyze_critical_path(index: GraphIndex) -> CriticalPath:
    """Compute distances and the critical path for an indexed graph."""
    n = len(index)
    if n == 0:
        return CriticalPath()

    layers, _ = layer_indices(index)
    distance = [0] * n
    parent = [_NO_PARENT] * n

    for layer in layers:
        for i in layer:
            best = 0
            best_parent = _NO_PARENT
            for p in index.reverse[i]:
                if distance[p] > best:
                    best = distance[p]
                    best_parent = p
            distance[i] = best + 1
            parent[i] = best_parent

    end = _NO_PARENT
    longest = 0
    for layer in layers:
        for i in layer:
            if distance[i] > longest:
                longest = distance[i]
                end = i

    # Distances strictly decrease along parent pointers, so this terminates even with cycles.
    path: list[int] = []
    current = end
    while current != _NO_PARENT:
        path.append(current)
        current = parent[current]
    path.reverse()

    return CriticalPath(
        node_ids=tuple(index.id_of(i) for i in path),
        length=longest,
        distances={index.id_of(i): distance[i] for i in range(n)},
    )


def find_critical_path(workflow: Workflow) -> list[str]:
    """Node ids of the critical path of ``workflow`` (empty for an empty graph)."""
    return list(analyze_critical_path(GraphIndex.from_workflow(workflow)).node_ids)


def longest_path_length(workflow: Workflow) -> int:
    """Number of nodes on the longest path of ``workflow``."""
    return analyze_critical_path(GraphIndex.from_workflow(workflow)).length


def is_on_critical_path(path: CriticalPath, node_id: str) -> bool:
    return path.contains(node_id)


def is_edge_on_critical_path(path: CriticalPath, edge: Edge) -> bool:
    return path.contains_edge(edge)
