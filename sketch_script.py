"""
Render a converted sketch as a replicad drawing script.

Every shape is fused into a single drawing, in document order:

    const svg = draw()
    .fuse(drawCircle(5).translate(10, -20))
    .fuse(draw()
    .movePointerTo([0, 0])
    .lineTo([10, -10])
    .close()
    )
    .done().sketchOnPlane(new Plane('XY'));
"""

import sys
from collections import namedtuple

from svg_shapes import DrawCircle, DrawEllipse

PREAMBLE = "const svg = draw()"
POSTAMBLE = ".done().sketchOnPlane(new Plane('XY'));"

DrawPath = namedtuple('DrawPath', ['instructions'])


class Sketch:
    """The union of all shapes of one document."""

    def __init__(self, items=None):
        self.items = list(items or [])

    def add(self, item):
        self.items.append(item)

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return 'Sketch(%r)' % self.items


def format_number(value):
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)

def format_point(point):
    return "[%s, %s]" % (format_number(point[0]), format_number(point[1]))

# replicad takes the end point first, then the control points
INSTRUCTION_FORMATS = {
    'M': lambda verts: ".movePointerTo(%s)" % format_point(verts[0]),
    'L': lambda verts: ".lineTo(%s)" % format_point(verts[0]),
    'H': lambda verts: ".hLineTo(%s)" % format_number(verts[0]),
    'V': lambda verts: ".vLineTo(%s)" % format_number(verts[0]),
    'Q': lambda verts: ".quadraticBezierCurveTo(%s, %s)" % (
        format_point(verts[1]), format_point(verts[0])),
    'C': lambda verts: ".cubicBezierCurveTo(%s, %s, %s)" % (
        format_point(verts[2]), format_point(verts[0]), format_point(verts[1])),
    'Z': lambda verts: ".close()",
}


def render_item(item):
    """Return the script lines fusing one shape into the drawing."""
    if isinstance(item, DrawCircle):
        return [".fuse(drawCircle(%s).translate(%s, %s))" % (
            format_number(item.radius),
            format_number(item.center[0]), format_number(item.center[1]))]
    if isinstance(item, DrawEllipse):
        return [".fuse(drawEllipse(%s, %s).translate(%s, %s))" % (
            format_number(item.radius_x), format_number(item.radius_y),
            format_number(item.center[0]), format_number(item.center[1]))]
    if isinstance(item, DrawPath):
        lines = [".fuse(draw()"]
        lines.extend(INSTRUCTION_FORMATS[command](verts)
                     for command, verts in item.instructions)
        lines.append(")")
        return lines
    raise TypeError("Cannot render %r" % (item,))


def render_script(sketch):
    lines = [PREAMBLE]
    for item in sketch:
        lines.extend(render_item(item))
    lines.append(POSTAMBLE)
    return "\n".join(lines) + "\n"


def write_script(sketch, output_file="-"):
    script = render_script(sketch)
    if output_file == "-":
        sys.stdout.write(script)
        return
    with open(output_file, "w") as f:
        f.write(script)
