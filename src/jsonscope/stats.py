"""DocumentStats: shape statistics of a parsed document.

Feeds the viewer's header ("N nodes, depth D") and the CLI ``stats``
sub-command.  The walk uses an explicit stack, so it is safe on any value
the parser accepts.

Formula for fan-out::

    mean_fan_out = total children of all containers / number of containers
                   (0.0 when the document holds no container)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from jsonscope.tree.nodes import Value, ValueKind, child_count, is_container, iter_children

__all__ = ["DocumentStats", "document_stats"]


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Shape statistics of one document.

    Attributes:
        node_count:      Every node, containers and leaves.
        container_count: Arrays plus objects.
        leaf_count:      Scalars.
        max_depth:       Depth of the deepest node; the root is depth 0.
        kind_counts:     Number of nodes per ValueKind (every kind present,
                         zero when absent).
        depth_histogram: ``depth_histogram[d]`` is the number of nodes at depth
                         ``d``; length ``max_depth + 1``.
        mean_fan_out:    Average number of children per container.
    """

    node_count: int
    container_count: int
    leaf_count: int
    max_depth: int
    kind_counts: dict[ValueKind, int]
    depth_histogram: np.ndarray = field(repr=False, compare=False)
    mean_fan_out: float

    def to_dict(self) -> dict[str, Any]:
        """JSON-encodable form of the statistics."""
        return {
            "node_count": self.node_count,
            "container_count": self.container_count,
            "leaf_count": self.leaf_count,
            "max_depth": self.max_depth,
            "kind_counts": {str(kind): count for kind, count in self.kind_counts.items()},
            "depth_histogram": self.depth_histogram.tolist(),
            "mean_fan_out": self.mean_fan_out,
        }


def document_stats(value: Value) -> DocumentStats:
    """Compute ``DocumentStats`` for ``value``."""
    depths: list[int] = []
    fan_outs: list[int] = []
    kind_counts = dict.fromkeys(ValueKind, 0)

    stack: list[tuple[int, Value]] = [(0, value)]
    while stack:
        depth, node = stack.pop()
        depths.append(depth)
        kind_counts[node.kind] += 1
        if is_container(node):
            fan_outs.append(child_count(node))
            stack.extend((depth + 1, child) for _, child in iter_children(node))

    depth_arr = np.asarray(depths, dtype=np.int64)
    histogram = np.bincount(depth_arr)
    mean_fan_out = float(np.mean(fan_outs)) if fan_outs else 0.0

    return DocumentStats(
        node_count=int(depth_arr.size),
        container_count=len(fan_outs),
        leaf_count=int(depth_arr.size) - len(fan_outs),
        max_depth=int(depth_arr.max()),
        kind_counts=kind_counts,
        depth_histogram=histogram,
        mean_fan_out=mean_fan_out,
    )
