import math

import networkx as nx


class Node:
    """A point in the plane. Everything else about a node is its index."""

    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Node({self.x!r}, {self.y!r})"


class Edge:
    def __init__(self, start, end):
        self.start = start
        self.end = end

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __repr__(self):
        return f"Edge({self.start}, {self.end})"


def create_initial_node(index, total):
    """Places node `index` of `total` evenly around the unit circle."""
    angle = 2 * math.pi * index / total
    return Node(math.cos(angle), math.sin(angle))


class SimpleGraph:
    def __init__(self, nodes=None, edges=None):
        self.nodes = nodes if nodes is not None else []  # index -> Node
        self.edges = edges if edges is not None else []  # Edge(start, end)

    def is_empty(self):
        return not self.nodes

    def to_networkx(self):
        g = nx.MultiGraph()
        for i, node in enumerate(self.nodes):
            g.add_node(i, x=node.x, y=node.y)
        for edge in self.edges:
            g.add_edge(edge.start, edge.end)
        return g

    def __repr__(self):
        return f"SimpleGraph({len(self.nodes)} nodes, {len(self.edges)} edges)"


def describe_graph(graph):
    """Summary statistics used for the post-load log line."""
    g = graph.to_networkx()
    degrees = [d for _, d in g.degree()]
    return {
        'nodes': g.number_of_nodes(),
        'edges': g.number_of_edges(),
        'components': nx.number_connected_components(g) if degrees else 0,
        'max_degree': max(degrees) if degrees else 0,
        'isolated': nx.number_of_isolates(g),
    }
