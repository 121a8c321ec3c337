import enum
import logging
import time

from ForceViz.graph_engine import GraphEngine
from ForceViz.graph_loader import load_graph_file
from ForceViz.simple_graph import describe_graph

logger = logging.getLogger(__name__)


class DriverState(enum.Enum):
    AWAITING_GRAPH = "awaiting_graph"
    AWAITING_DURATION = "awaiting_duration"
    RUNNING = "running"
    AWAITING_REPEAT = "awaiting_repeat"
    TERMINATED = "terminated"


class SimulationDriver:
    """
    Runs the prompt -> load -> simulate -> repeat cycle on one thread.

    console needs prompt_for_file_name/prompt_for_time/prompt_for_repeat and
    writeln; visualizer needs draw_graph. clock returns seconds.
    """

    def __init__(self, console, visualizer, clock=time.monotonic, loader=load_graph_file):
        self.console = console
        self.visualizer = visualizer
        self.clock = clock
        self.loader = loader
        self.engine = GraphEngine()
        self.state = DriverState.AWAITING_GRAPH
        self.duration = None

    def run(self):
        while self.state is not DriverState.TERMINATED:
            self.advance()
        return 0

    def advance(self):
        """Performs the work of the current state and moves to the next one."""
        if self.state is DriverState.AWAITING_GRAPH:
            self.load_graph()
            self.state = DriverState.AWAITING_DURATION

        elif self.state is DriverState.AWAITING_DURATION:
            self.duration = self.console.prompt_for_time()
            self.state = DriverState.RUNNING

        elif self.state is DriverState.RUNNING:
            self.run_simulation(self.duration)
            self.state = DriverState.AWAITING_REPEAT

        elif self.state is DriverState.AWAITING_REPEAT:
            if self.console.prompt_for_repeat():
                self.state = DriverState.AWAITING_GRAPH
            else:
                self.state = DriverState.TERMINATED

    def load_graph(self):
        path = self.console.prompt_for_file_name()
        result = self.loader(path)
        if not result.ok:
            self.console.writeln(result.error)
        else:
            logger.info("Graph summary: %s", describe_graph(result.graph))

        self.engine.load(result.graph)
        self.visualizer.draw_graph(result.graph)

    def run_simulation(self, seconds):
        """
        Steps and redraws until more than `seconds` have elapsed. The clock
        is only checked between full steps. Returns the iteration count.
        """
        start = self.clock()
        while True:
            self.engine.step()
            self.visualizer.draw_graph(self.engine.graph)
            if self.clock() - start > seconds:
                break

        logger.info("Ran %d iterations in %ds", self.engine.iterations, seconds)
        return self.engine.iterations
