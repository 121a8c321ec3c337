import logging

from ForceViz import forces

logger = logging.getLogger(__name__)


def initialize_node_changes(graph):
    """One zeroed [dx, dy] entry per node, aligned with graph.nodes."""
    return [[0.0, 0.0] for _ in graph.nodes]


def calculate_repulsive_forces(graph, node_changes):
    """Pushes every unordered pair of distinct nodes apart."""
    nodes = graph.nodes
    for i in range(len(nodes)):
        n0 = nodes[i]
        for j in range(i + 1, len(nodes)):
            n1 = nodes[j]

            f = forces.repulsive_force(n0.x, n0.y, n1.x, n1.y)
            angle = forces.direction_angle(n0.x, n0.y, n1.x, n1.y)
            fx = forces.x_force(f, angle)
            fy = forces.y_force(f, angle)

            node_changes[i][0] -= fx
            node_changes[i][1] -= fy
            node_changes[j][0] += fx
            node_changes[j][1] += fy


def calculate_attractive_forces(graph, node_changes):
    """Pulls the endpoints of every edge together. Multi-edges count once each."""
    for edge in graph.edges:
        n0 = graph.nodes[edge.start]
        n1 = graph.nodes[edge.end]

        f = forces.attractive_force(n0.x, n0.y, n1.x, n1.y)
        angle = forces.direction_angle(n0.x, n0.y, n1.x, n1.y)
        fx = forces.x_force(f, angle)
        fy = forces.y_force(f, angle)

        node_changes[edge.start][0] += fx
        node_changes[edge.start][1] += fy
        node_changes[edge.end][0] -= fx
        node_changes[edge.end][1] -= fy


def update_node_movements(graph, node_changes):
    """Applies the accumulated deltas, then zeroes them for the next step."""
    for node, change in zip(graph.nodes, node_changes):
        node.x += change[0]
        node.y += change[1]
        change[0] = 0.0
        change[1] = 0.0


class GraphEngine:
    def __init__(self, graph=None):
        self.graph = None
        self.node_changes = []
        self.iterations = 0
        if graph is not None:
            self.load(graph)

    def load(self, graph):
        self.graph = graph
        self.node_changes = initialize_node_changes(graph)
        self.iterations = 0
        logger.debug("Engine loaded %d nodes, %d edges", len(graph.nodes), len(graph.edges))

    def step(self):
        """One layout iteration: repulsion, attraction, then integration."""
        if len(self.node_changes) != len(self.graph.nodes):
            self.node_changes = initialize_node_changes(self.graph)

        calculate_repulsive_forces(self.graph, self.node_changes)
        calculate_attractive_forces(self.graph, self.node_changes)
        update_node_movements(self.graph, self.node_changes)

        self.iterations += 1
