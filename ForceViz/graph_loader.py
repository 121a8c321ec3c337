import logging
import re

from ForceViz.simple_graph import SimpleGraph, Edge, create_initial_node

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s*")
UNSIGNED = re.compile(r"[0-9]+")


class LoadResult:
    def __init__(self, graph, error=None):
        self.graph = graph
        self.error = error  # None on success

    @property
    def ok(self):
        return self.error is None


class _Reader:
    """Reads unsigned numbers off the front of the text, stream style."""

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def read_unsigned(self):
        """Next unsigned number, or None. A failed read consumes nothing."""
        start = WHITESPACE.match(self.text, self.pos).end()
        match = UNSIGNED.match(self.text, start)
        if not match:
            return None
        self.pos = match.end()
        return int(match.group())

    def remainder(self):
        return self.text[self.pos:].strip()


def load_graph(stream):
    """
    Parses a graph description:

        <n>
        <start> <end>
        ...

    Numbers are read from the front of the input like an istream: "3abc"
    reads 3 and leaves "abc", which then ends the edge loop. A bad node
    count, or an edge pointing past the last node, yields an empty graph
    and an error message instead of raising.
    """
    reader = _Reader(stream.read())

    node_count = reader.read_unsigned()
    if node_count is None:
        logger.warning("Graph file has no valid node count")
        return LoadResult(SimpleGraph(), "Corrupted file on number of nodes.")

    nodes = [create_initial_node(i, node_count) for i in range(node_count)]
    edges = []

    while True:
        start = reader.read_unsigned()
        if start is None:
            break
        end = reader.read_unsigned()
        if end is None:
            logger.warning("Corrupted file on edges: dangling endpoint %d after %d edges",
                           start, len(edges))
            break

        for index in (start, end):
            if index >= node_count:
                message = (f"Edge {start} {end} references node {index} "
                           f"but graph has {node_count} nodes.")
                logger.warning(message)
                return LoadResult(SimpleGraph(), message)

        edges.append(Edge(start, end))

    leftover = reader.remainder()
    if leftover:
        logger.warning("Corrupted file on edges: stopped at %r", leftover[:20])

    return LoadResult(SimpleGraph(nodes, edges))


def load_graph_file(path):
    # Undecodable bytes become U+FFFD, which never parses as a number
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        result = load_graph(f)
    logger.info("Loaded %s: %r", path, result.graph)
    return result
