"""
Graph utilities: walk, order and summarise the value graph reachable from a node.

All walks use an explicit stack, so graphs deeper than the interpreter's
recursion limit are fine.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from .node import Node


def iter_nodes(root: Node) -> List[Node]:
    """Every node reachable from `root` (root included), each exactly once."""
    seen = set()
    out = []
    stack = [root]
    while stack:
        v = stack.pop()
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
        stack.extend(v.parents)
    return out


def topological_order(root: Node) -> List[Node]:
    """
    Reachable nodes ordered so that every parent precedes the nodes built from it.
    `root` is always last.
    """
    order = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            order.append(v)
            continue
        if v in visited:
            continue
        visited.add(v)
        stack.append((v, True))
        for p in reversed(v.parents):
            if p not in visited:
                stack.append((p, False))
    return order


def count_paths(root: Node) -> Dict[Node, int]:
    """
    Number of distinct directed paths from `root` to each reachable node.

    This is how many times the path-enumerating backward strategy visits the
    node. Repeated operands (e.g. x * x) count as separate paths.
    """
    order = topological_order(root)
    paths: Dict[Node, int] = {v: 0 for v in order}
    paths[root] = 1
    for v in reversed(order):
        for p in v.parents:
            paths[p] += paths[v]
    return paths


def graph_depth(root: Node) -> int:
    """Longest path (in edges) from `root` down to a leaf."""
    depth: Dict[Node, int] = {}
    for v in topological_order(root):
        depth[v] = 1 + max((depth[p] for p in v.parents), default=-1)
    return depth[root]


def get_graph_stats(root: Node) -> Dict:
    """
    Statistics of the graph reachable from `root` (no printing).

    Returns
    -------
    dict with keys: nodes, edges, leaves, max_fan_in, avg_fan_in,
    max_fan_out, avg_fan_out, depth, total_paths, operations
    """
    nodes = topological_order(root)
    n_nodes = len(nodes)

    fan_ins = [len(v.edges) for v in nodes]
    fan_outs = Counter()
    for v in nodes:
        for p in v.parents:
            fan_outs[p] += 1
    outs = [fan_outs[v] for v in nodes]

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for v in nodes if v.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(outs),
        'avg_fan_out': float(np.mean(outs)),
        'depth': graph_depth(root),
        'total_paths': sum(count_paths(root).values()),
        'operations': dict(Counter(v.op_tag for v in nodes)),
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root` and return its stats.

    With `detailed=True` and at most 100 nodes, also list every node with the
    indices of its parents.
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("VALUE GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print(f"Root-to-node paths: {stats['total_paths']:,}")
    print()
    print("Operation breakdown:")
    for op, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        order = topological_order(root)
        index = {v: i for i, v in enumerate(order)}
        print()
        for i, v in enumerate(order):
            if v.is_leaf:
                print(f"Node {i:3d}: {v.op_tag:12s} ({float(v.value):10.6f}) [leaf]")
            else:
                parent_info = ", ".join(f"Node{index[p]}" for p in v.parents)
                print(f"Node {i:3d}: {v.op_tag:12s} ({float(v.value):10.6f}) <- [{parent_info}]")

    print("="*70 + "\n")
    return stats
