import logging
import sys

from PyQt6.QtWidgets import QApplication

from ForceViz.ui.graph_widget import GraphWidget

logger = logging.getLogger(__name__)


class GraphVisualizer:
    """
    Owns the display window. init_graph_visualizer() must be called once
    before draw_graph().

    The simulation runs on the main thread, so each draw pumps the Qt event
    queue itself rather than returning to app.exec().
    """

    def __init__(self, width=400, height=400, title="ForceViz"):
        self.width = width
        self.height = height
        self.title = title
        self.app = None
        self.widget = None

    def init_graph_visualizer(self):
        self.app = QApplication.instance() or QApplication(sys.argv)
        self.widget = GraphWidget()
        self.widget.setWindowTitle(self.title)
        self.widget.resize(self.width, self.height)
        self.widget.show()
        self.app.processEvents()
        logger.info("Display window ready (%dx%d)", self.width, self.height)

    def draw_graph(self, graph):
        if self.widget is None:
            raise RuntimeError("init_graph_visualizer() must be called before draw_graph()")
        self.widget.set_graph(graph)
        self.widget.repaint()
        self.app.processEvents()
