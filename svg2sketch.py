#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
svg2sketch.py

Convert the circles, ellipses and paths of an SVG file into a replicad
sketch script. SVGWalker yields the shape elements in document order, each
one becomes a drawCircle, drawEllipse or draw() item, and all items are
fused into a single sketch that is written as a script. With --preview the
sketch is also sampled and plotted.
"""

import argparse
import logging
import sys
import xml.etree.ElementTree as ET

from sketch_script import DrawPath, Sketch, write_script
from svg_mapper_sketch import MIN_DENSITY, plot_sketch, sample_sketch, write_points
from svg_shapes import (
    ShapeAttributeError,
    SVGWalker,
    circle_instruction,
    ellipse_instruction,
    extract_circle,
    extract_ellipse,
)
from svgpath2sketch import PathParseError, interpret

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """A shape element of the document could not be converted."""

    def __init__(self, kind, index, attribute, cause):
        self.kind = kind
        self.index = index
        self.attribute = attribute
        self.cause = cause
        super().__init__("<%s> element #%d, attribute %r: %s"
                         % (kind, index, attribute, cause))


def convert_path_data(pathdef):
    return DrawPath(interpret(pathdef))


def convert_element(kind, attributes):
    """Return the sketch item for one element, or None for unknown kinds."""
    if kind == 'circle':
        return circle_instruction(extract_circle(attributes))
    if kind == 'ellipse':
        return ellipse_instruction(extract_ellipse(attributes))
    if kind == 'path':
        return convert_path_data(attributes.get('d', ''))
    return None


def convert_elements(elements):
    """Fuse the (kind, attributes) elements into one Sketch, in order."""
    sketch = Sketch()
    for index, (kind, attributes) in enumerate(elements):
        try:
            item = convert_element(kind, attributes)
        except PathParseError as e:
            raise ConversionError(kind, index, 'd', e) from e
        except ShapeAttributeError as e:
            raise ConversionError(kind, index, e.name, e) from e
        if item is None:
            logger.debug("Skipping unsupported <%s> element", kind)
            continue
        sketch.add(item)
    logger.info("Converted %d shapes", len(sketch))
    return sketch


def convert(svg_file):
    return convert_elements(SVGWalker(svg_file))


def density_arg(value):
    density = int(value)
    if density < MIN_DENSITY:
        raise argparse.ArgumentTypeError(
            "must be at least %d, got %d" % (MIN_DENSITY, density))
    return density


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert SVG circles, ellipses and paths to a replicad sketch script."
    )
    parser.add_argument(
        "input",
        help="Path to the input SVG file."
    )
    parser.add_argument(
        "-o", "--output",
        default="-",
        help="Where to write the script (default: standard output)."
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Plot the converted sketch with matplotlib."
    )
    parser.add_argument(
        "--points",
        metavar="FILENAME",
        help="Write the sampled (x, y, pen) points to a file."
    )
    parser.add_argument(
        "--density",
        type=density_arg,
        default=20,
        help="Sample points per segment for --preview and --points (default: 20)."
    )
    parser.add_argument(
        '--loglevel',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Set the logging level (default: WARNING)'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.loglevel),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        sketch = convert(args.input)
        write_script(sketch, args.output)
        if args.points:
            write_points(sample_sketch(sketch, args.density), args.points)
    except (ConversionError, ET.ParseError, OSError) as e:
        print("Error converting %s: %s" % (args.input, e), file=sys.stderr)
        return 1

    if args.preview:
        plot_sketch(sketch, args.density)
    return 0


if __name__ == "__main__":
    sys.exit(main())
