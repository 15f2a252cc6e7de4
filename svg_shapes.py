"""
Walk an SVG document and turn its simple shapes into sketch instructions.

SVGWalker yields (kind, attributes) for every circle, ellipse and path element
in document order. Circles and ellipses map directly to one drawCircle or
drawEllipse instruction translated to their center; paths are left to the
path interpreter.
"""

import logging
import math
import xml.etree.ElementTree as ET
from collections import namedtuple

logger = logging.getLogger(__name__)

SHAPE_KINDS = ('circle', 'ellipse', 'path')

Circle = namedtuple('Circle', ['x', 'y', 'radius'])
Ellipse = namedtuple('Ellipse', ['x', 'y', 'radius_x', 'radius_y'])

# center is already in sketch coordinates (y up)
DrawCircle = namedtuple('DrawCircle', ['radius', 'center'])
DrawEllipse = namedtuple('DrawEllipse', ['radius_x', 'radius_y', 'center'])

CIRCLE_FIELDS = {'cx': 'x', 'cy': 'y', 'r': 'radius'}
ELLIPSE_FIELDS = {'cx': 'x', 'cy': 'y', 'rx': 'radius_x', 'ry': 'radius_y'}


class ShapeAttributeError(ValueError):
    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__("Invalid number %r for attribute %r" % (value, name))


def local_name(name):
    """Strip the '{namespace}' prefix ElementTree puts on tags and attributes."""
    if name.startswith('{'):
        return name.split('}', 1)[1]
    return name


class SVGWalker:
    def __init__(self, svg_file, kinds=SHAPE_KINDS):
        self.svg_file = svg_file
        self.kinds = kinds

    def walk(self):
        for _, element in ET.iterparse(self.svg_file, events=('start',)):
            kind = local_name(element.tag)
            if kind not in self.kinds:
                continue
            attributes = {local_name(name): value
                          for name, value in element.attrib.items()}
            logger.debug("Found <%s> %r", kind, attributes)
            yield kind, attributes

    __iter__ = walk


def parse_float(name, value):
    try:
        number = float(value)
    except (ValueError, TypeError):
        raise ShapeAttributeError(name, value) from None
    # inf and nan have no meaning in a sketch script
    if not math.isfinite(number):
        raise ShapeAttributeError(name, value)
    return number


def _read_fields(attributes, fields):
    values = dict.fromkeys(fields.values(), 0.0)
    for name, value in attributes.items():
        if name in fields:
            values[fields[name]] = parse_float(name, value)
    return values


def extract_circle(attributes):
    return Circle(**_read_fields(attributes, CIRCLE_FIELDS))


def extract_ellipse(attributes):
    return Ellipse(**_read_fields(attributes, ELLIPSE_FIELDS))


def circle_instruction(circle):
    return DrawCircle(circle.radius, (circle.x, -circle.y))


def ellipse_instruction(ellipse):
    return DrawEllipse(ellipse.radius_x, ellipse.radius_y, (ellipse.x, -ellipse.y))
