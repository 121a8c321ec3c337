from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QColor, QPen, QBrush

from ForceViz.simple_graph import SimpleGraph
from ForceViz.viewport import compute_viewport


class GraphWidget(QWidget):
    def __init__(self, graph=None, parent=None):
        super().__init__(parent)
        self.graph = graph if graph is not None else SimpleGraph()

        # Rendering settings
        self.node_radius = 6
        self.node_color = QColor("blue")
        self.edge_color = QColor("black")
        self.bg_color = QColor("white")
        self.edge_width = 1

    def set_graph(self, graph):
        self.graph = graph
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.draw(painter, self.width(), self.height())
        painter.end()

    def draw(self, painter, width, height):
        """Clears the surface, then draws edges and nodes on top of them."""
        painter.fillRect(0, 0, width, height, self.bg_color)

        viewport = compute_viewport(self.graph, width, height)
        if viewport is None:
            return

        # Draw Edges
        painter.setPen(QPen(self.edge_color, self.edge_width))
        for edge in self.graph.edges:
            n1 = self.graph.nodes[edge.start]
            n2 = self.graph.nodes[edge.end]
            p1 = QPointF(viewport.transform_x(n1.x), viewport.transform_y(n1.y))
            p2 = QPointF(viewport.transform_x(n2.x), viewport.transform_y(n2.y))
            painter.drawLine(p1, p2)

        # Draw Nodes
        painter.setBrush(QBrush(self.node_color))
        painter.setPen(Qt.PenStyle.NoPen)
        for node in self.graph.nodes:
            center = QPointF(viewport.transform_x(node.x), viewport.transform_y(node.y))
            painter.drawEllipse(center, self.node_radius, self.node_radius)
