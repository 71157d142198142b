"""Export of an OrderedTree to networkx for structural inspection.

Keys become graph nodes, so they must be hashable. Each edge runs from parent
to child and carries the colour of the link and the side it hangs on.
"""
from typing import List

import networkx as nx

from .rbtree import Colour, OrderedTree


def to_graph(tree: OrderedTree) -> nx.DiGraph:
    G = nx.DiGraph()
    if tree.root is None:
        return G

    G.graph["root"] = tree.root.key
    G.add_node(tree.root.key, size=tree.root.size, colour=tree.root.colour)
    stack = [tree.root]
    while stack:
        node = stack.pop()
        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            G.add_node(child.key, size=child.size, colour=child.colour)
            G.add_edge(node.key, child.key, colour=child.colour, side=side)
            stack.append(child)
    return G


def black_depths(graph: nx.DiGraph) -> List[int]:
    """Returns the number of black links crossed to reach each null link.

    A tree with n keys has n + 1 null links, and every one of them counts as
    black. In a black-balanced tree all the returned values are equal.
    """
    if "root" not in graph.graph:
        return [0]

    def weight(u, v, attrs):
        return 1 if attrs["colour"] is Colour.BLACK else 0

    depths = nx.single_source_dijkstra_path_length(graph, graph.graph["root"], weight=weight)
    result = []
    for node, depth in sorted(depths.items(), key=lambda item: item[0]):
        missing = 2 - graph.out_degree(node)
        result.extend([depth + 1] * missing)
    return result


def is_left_leaning(graph: nx.DiGraph) -> bool:
    return not any(side == "right" and graph.edges[u, v]["colour"] is Colour.RED
                   for u, v, side in graph.edges(data="side"))
