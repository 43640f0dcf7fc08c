"""Exceptions raised at the input boundary.

The layout pipeline itself never raises for graph shape problems (dangling
edges, cycles, empty graphs). These errors only cover malformed parameters and
malformed raw input handed to the ``from_dict`` constructors.
"""

from __future__ import annotations


class WorkflowDagError(Exception):
    """Base exception for workflow_dag errors."""


class InvalidLayoutParams(WorkflowDagError, ValueError):
    """Raised when layout parameters cannot produce a layout."""


class WorkflowDataError(WorkflowDagError, ValueError):
    """Raised when a raw node, edge or workflow mapping is malformed."""
