import pytest

from ForceViz.driver import DriverState, SimulationDriver
from ForceViz.graph_loader import LoadResult, load_graph_file
from ForceViz.simple_graph import SimpleGraph


class ScriptedConsole:
    def __init__(self, files, durations, repeats):
        self.files = list(files)
        self.durations = list(durations)
        self.repeats = list(repeats)
        self.lines = []

    def prompt_for_file_name(self):
        return self.files.pop(0)

    def prompt_for_time(self):
        return self.durations.pop(0)

    def prompt_for_repeat(self):
        return self.repeats.pop(0)

    def writeln(self, text=""):
        self.lines.append(text)


class RecordingVisualizer:
    def __init__(self):
        self.frames = []

    def draw_graph(self, graph):
        self.frames.append([(n.x, n.y) for n in graph.nodes])


class FakeClock:
    """Advances by `tick` seconds on every read."""

    def __init__(self, tick):
        self.now = 0.0
        self.tick = tick

    def __call__(self):
        value = self.now
        self.now += self.tick
        return value


def test_full_cycle_terminates(data_dir):
    console = ScriptedConsole([str(data_dir / "triangle.txt")], [1], [False])
    visualizer = RecordingVisualizer()
    driver = SimulationDriver(console, visualizer, clock=FakeClock(0.4))

    assert driver.run() == 0
    assert driver.state is DriverState.TERMINATED
    # start=0.0, checks at 0.4, 0.8, 1.2 -> three steps
    assert driver.engine.iterations == 3
    # one frame after loading plus one per step
    assert len(visualizer.frames) == 4
    assert visualizer.frames[0] != visualizer.frames[-1]


def test_repeat_loads_another_graph(data_dir):
    path = str(data_dir / "triangle.txt")
    console = ScriptedConsole([path, path], [1, 2], [True, False])
    driver = SimulationDriver(console, RecordingVisualizer(), clock=FakeClock(1.5))

    driver.run()
    assert console.files == []
    assert console.durations == []


def test_state_transitions(data_dir):
    console = ScriptedConsole([str(data_dir / "triangle.txt")], [1], [True])
    driver = SimulationDriver(console, RecordingVisualizer(), clock=FakeClock(5))

    seen = [driver.state]
    for _ in range(4):
        driver.advance()
        seen.append(driver.state)

    assert seen == [
        DriverState.AWAITING_GRAPH,
        DriverState.AWAITING_DURATION,
        DriverState.RUNNING,
        DriverState.AWAITING_REPEAT,
        DriverState.AWAITING_GRAPH,
    ]


def test_simulation_checks_clock_after_each_full_step():
    driver = SimulationDriver(ScriptedConsole([], [], []), RecordingVisualizer(), clock=FakeClock(10))
    driver.engine.load(SimpleGraph())
    # even when the budget is already spent, one full step runs
    assert driver.run_simulation(1) == 1


def test_failed_load_reports_and_renders_empty_graph(data_dir):
    console = ScriptedConsole([str(data_dir / "corrupted.txt")], [1], [False])
    visualizer = RecordingVisualizer()
    driver = SimulationDriver(console, visualizer, clock=FakeClock(2))

    driver.run()
    assert console.lines == ["Corrupted file on number of nodes."]
    assert visualizer.frames[0] == []


def test_custom_loader_is_used():
    calls = []

    def loader(path):
        calls.append(path)
        return LoadResult(SimpleGraph())

    console = ScriptedConsole(["whatever"], [1], [False])
    SimulationDriver(console, RecordingVisualizer(), clock=FakeClock(2), loader=loader).run()
    assert calls == ["whatever"]


def test_default_loader():
    assert SimulationDriver(None, None).loader is load_graph_file
