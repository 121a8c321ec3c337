"""
Maps world coordinates onto the drawing surface.

The viewport is the bounding box of all nodes, stretched to fill the
surface with a MARGIN fraction of padding on each side, so the graph
always fits the window no matter how far it drifts.
"""

# Fraction of each surface dimension left blank on either side
MARGIN = 0.025


def transform_coordinate(pt, lo, hi, scale_max):
    """
    Rescales pt from [lo, hi] to [0, scale_max], then shrinks the result by
    (1 - 2 * MARGIN) and shifts it by MARGIN * scale_max. A zero-width range
    maps every point to the centre.
    """
    if hi == lo:
        return scale_max / 2
    return (1 - 2 * MARGIN) * (pt - lo) * scale_max / (hi - lo) + MARGIN * scale_max


class Viewport:
    def __init__(self, min_x, min_y, max_x, max_y, width, height):
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y
        self.width = width
        self.height = height

    def transform_x(self, x):
        return transform_coordinate(x, self.min_x, self.max_x, self.width)

    def transform_y(self, y):
        # Screen y grows downward; flip so world +y points up
        return self.height - transform_coordinate(y, self.min_y, self.max_y, self.height)


def compute_viewport(graph, width, height):
    """Bounding viewport for graph, or None when it has no nodes."""
    if graph.is_empty():
        return None

    xs = [n.x for n in graph.nodes]
    ys = [n.y for n in graph.nodes]
    return Viewport(min(xs), min(ys), max(xs), max(ys), width, height)
