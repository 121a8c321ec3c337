import logging
import os
import sys

from ForceViz.console import Console
from ForceViz.driver import SimulationDriver
from ForceViz.visualizer import GraphVisualizer

logger = logging.getLogger(__name__)


def setup_logging():
    level = os.environ.get("FORCEVIZ_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))


def main():
    setup_logging()

    console = Console()
    console.welcome()

    visualizer = GraphVisualizer()
    visualizer.init_graph_visualizer()

    driver = SimulationDriver(console, visualizer)
    try:
        status = driver.run()
    except EOFError:
        logger.info("Input closed, finishing")
        status = 0
    return status


if __name__ == "__main__":
    sys.exit(main())
