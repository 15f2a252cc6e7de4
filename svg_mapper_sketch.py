#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
svg_mapper_sketch.py

Preview a converted sketch. The sketch is sampled into a dense list of
(x, y, z) points, where z = 0 means the pen is down (drawn) and z = 1 marks a
pen lift (moves between contours and shapes). The drawn segments are then
plotted with matplotlib. Coordinates are sketch coordinates, so y points up.
"""

import logging
import matplotlib.pyplot as plt
import numpy as np

from sketch_script import DrawPath
from svg_shapes import DrawCircle, DrawEllipse

logger = logging.getLogger(__name__)

PEN_DOWN = 0
PEN_UP = 1

# a segment needs both its start and its end point
MIN_DENSITY = 2

def check_density(density):
    if density < MIN_DENSITY:
        raise ValueError("density must be at least %d, got %d" % (MIN_DENSITY, density))
    return density

# -----------------------------------------------------------
# Sampling functions for lines, Bezier segments and ellipses
# -----------------------------------------------------------
def sample_line(p0, p1, density):
    return [p0 + (p1 - p0) * t for t in np.linspace(0, 1, density)]

def sample_quadratic_bezier(p0, p1, p2, density):
    return [((1-t)**2) * p0 + 2 * (1-t) * t * p1 + (t**2) * p2 for t in np.linspace(0, 1, density)]

def sample_cubic_bezier(p0, p1, p2, p3, density):
    return [((1-t)**3) * p0 + 3 * ((1-t)**2) * t * p1 + 3 * (1-t) * (t**2) * p2 + (t**3) * p3
            for t in np.linspace(0, 1, density)]

def sample_ellipse(center, rx, ry, density):
    return [center + complex(rx * np.cos(t), ry * np.sin(t))
            for t in np.linspace(0, 2 * np.pi, density)]

def _point(vert):
    return complex(vert[0], vert[1])

def sample_instructions(instructions, density=20):
    """
    Sample the instructions of one path into (complex_point, pen) tuples.
    A drawing starts at the origin, like replicad's draw().
    """
    check_density(density)
    sampled = []
    last_point = 0j
    subpath_start = 0j

    for command, verts in instructions:
        if command == 'M':
            pt = _point(verts[0])
            sampled.append((pt, PEN_UP))
            last_point = subpath_start = pt
            continue

        if not sampled:
            sampled.append((last_point, PEN_UP))

        if command == 'L':
            pts = sample_line(last_point, _point(verts[0]), density)
        elif command == 'H':
            pts = sample_line(last_point, complex(verts[0], last_point.imag), density)
        elif command == 'V':
            pts = sample_line(last_point, complex(last_point.real, verts[0]), density)
        elif command == 'Q':
            pts = sample_quadratic_bezier(last_point, _point(verts[0]), _point(verts[1]), density)
        elif command == 'C':
            pts = sample_cubic_bezier(last_point, _point(verts[0]), _point(verts[1]),
                                      _point(verts[2]), density)
        elif command == 'Z':
            # close() draws the closing segment back to the contour start
            pts = sample_line(last_point, subpath_start, density)
        else:
            raise ValueError("Unknown instruction: " + command)

        # Omit the first point, it is the previous end point.
        sampled.extend((p, PEN_DOWN) for p in pts[1:])
        last_point = pts[-1]

    return sampled

def sample_sketch(sketch, density=20):
    """Return the list of (x, y, z) tuples of every shape of the sketch."""
    check_density(density)
    sampled = []
    for item in sketch:
        if isinstance(item, DrawPath):
            sampled.extend(sample_instructions(item.instructions, density))
            continue
        if isinstance(item, DrawCircle):
            rx = ry = item.radius
        elif isinstance(item, DrawEllipse):
            rx, ry = item.radius_x, item.radius_y
        else:
            raise TypeError("Cannot sample %r" % (item,))
        pts = sample_ellipse(_point(item.center), rx, ry, density)
        sampled.append((pts[0], PEN_UP))
        sampled.extend((p, PEN_DOWN) for p in pts[1:])
    return [(pt.real, pt.imag, pen) for pt, pen in sampled]

def split_segments(points):
    """
    Split (x, y, z) points into drawn segments.
    Returns the segments and the pen-up positions.
    """
    segments = []
    current_segment = []
    pen_up_positions = []
    for (x, y, pen) in points:
        if pen == PEN_UP:
            if len(current_segment) > 1:
                segments.append(current_segment)
            # the next drawn segment starts where the pen was lifted
            current_segment = [(x, y)]
            pen_up_positions.append((x, y))
        else:
            current_segment.append((x, y))
    if len(current_segment) > 1:
        segments.append(current_segment)
    return segments, pen_up_positions

def write_points(points, output_file):
    with open(output_file, "w") as f:
        for x, y, z in points:
            f.write("{:.2f} {:.2f} {:.0f}\n".format(x, y, z))
    logger.info("Sampled %d points into %s", len(points), output_file)

def plot_sketch(sketch, density=20, show=True):
    points = sample_sketch(sketch, density)
    segments, pen_up_positions = split_segments(points)

    fig, ax = plt.subplots(figsize=(10, 10))

    # assign each segment a color from the viridis colormap.
    total_segments = len(segments)
    for idx, seg in enumerate(segments):
        xs, ys = zip(*seg)
        color_factor = idx / max(total_segments - 1, 1)
        color = plt.cm.viridis(color_factor)
        ax.plot(xs, ys, linestyle='-', color=color, linewidth=2,
                label=f"Segment {idx+1}" if total_segments > 1 else "Path")

    # pen-up positions as red circle markers.
    if pen_up_positions:
        pen_x, pen_y = zip(*pen_up_positions)
        ax.scatter(pen_x, pen_y, color='red', marker='o', s=50, zorder=5, label="Pen Lift")

    ax.set_aspect('equal')
    ax.set_title("Preview of the Converted Sketch")
    ax.set_xlabel("X Coordinate")
    ax.set_ylabel("Y Coordinate")
    ax.grid(True)

    handles, labels = ax.get_legend_handles_labels()
    if handles:
        unique = dict(zip(labels, handles))
        ax.legend(unique.values(), unique.keys())

    if show:
        plt.show()
    return fig
