"""
Force calculator for the Fruchterman-Reingold style layout.

All functions are pure and take the two endpoint positions as
(x0, y0, x1, y1), with node 0 as the origin of the direction.
"""
import math

# Physics constants
K_REPEL = 0.01
K_ATTRACT = 0.01

# Repulsion uses at least this distance, so coincident nodes get a large
# but finite push instead of inf/NaN.
MIN_DISTANCE = 1e-3


def distance(x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    return math.sqrt(dx*dx + dy*dy)


def repulsive_force(x0, y0, x1, y1):
    """F = k_repel / d, with d clamped to MIN_DISTANCE."""
    dist = distance(x0, y0, x1, y1)
    if dist < MIN_DISTANCE:
        dist = MIN_DISTANCE
    return K_REPEL / dist


def attractive_force(x0, y0, x1, y1):
    """F = k_attract * d^2"""
    dx = x1 - x0
    dy = y1 - y0
    return K_ATTRACT * (dx*dx + dy*dy)


def direction_angle(x0, y0, x1, y1):
    """Angle in radians of the vector from node 0 to node 1."""
    return math.atan2(y1 - y0, x1 - x0)


def x_force(force, angle):
    return force * math.cos(angle)


def y_force(force, angle):
    return force * math.sin(angle)
