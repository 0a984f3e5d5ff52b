## command-line demo for mathcanvas
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2026 mathcanvas contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Render a demo scene to DXF, or open it in the pyglet viewer.

    python -m mathcanvas dxf demo --ticks 120
    python -m mathcanvas view
"""

import argparse
import logging
import math
import sys

from mathcanvas.config import load_config
from mathcanvas.curve import FunctionDescriptor, Variant
from mathcanvas.errors import MathCanvasError
from mathcanvas.shapes import Circle, Rect
from mathcanvas.world import World

logger = logging.getLogger(__name__)


def _tangent_break(a, b):
    # tan is discontinuous wherever an odd multiple of pi/2 lies between samples
    return math.floor(a / math.pi + 0.5) != math.floor(b / math.pi + 0.5)


def build_demo(config):
    """A world with one curve of each variant and a few sprites."""
    world = World.from_config(config)
    frame = world.frame

    world.add_graph(math.sin, name='sine', color='aqua', fills={'below': 'navy'})
    world.add_graph(FunctionDescriptor(math.tan, discontinuous_at=_tangent_break),
                    name='tangent', color='orange')
    world.add_graph(FunctionDescriptor(lambda th: 2.0 + math.cos(3 * th), Variant.POLAR),
                    name='rose', color='fuchsia')
    world.add_graph(FunctionDescriptor(lambda y: 0.25 * y * y - 4.0, Variant.INVERTED),
                    name='sideways parabola', color='lime')
    world.add_graph(FunctionDescriptor(lambda t: (4 * math.cos(t), 3 * math.sin(2 * t)),
                                       Variant.PARAMETRIC, start=0.0, end=0.0),
                    name='lissajous', color='yellow', velocity_end=0.05)

    world.add_sprite(Circle(frame.width * 0.25, frame.height * 0.5, 12),
                     velocity=(3, 2), boundary='bounce', color='red', name='ball')
    world.add_sprite(Rect(20, 20, 30, 20), velocity=(-4, 0),
                     boundary=['bounce', 'wrap'], color='yellow', name='box', layer=1)
    return world


def main(argv=None):
    parser = argparse.ArgumentParser(prog='mathcanvas', description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-c', '--config', help='view config YAML file')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    dxf = sub.add_parser('dxf', help='run the demo and save the last frame as DXF')
    dxf.add_argument('filename', nargs='?', default='mathcanvas-out',
                     help='output name, without the .dxf extension')
    dxf.add_argument('-t', '--ticks', type=int, default=60, help='ticks to run first')

    sub.add_parser('view', help='open the interactive pyglet viewer')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        config = load_config(args.config)
    except MathCanvasError as e:
        parser.error(str(e))

    world = build_demo(config)

    if args.command == 'dxf':
        from mathcanvas.ezdxf_drawable import ezdxfDraw
        for _ in range(args.ticks):
            world.tick()
        dd = ezdxfDraw(world.frame)
        dd.filename = args.filename
        dd.draw_axes()
        world.render(dd)
        dd.display()
        print('wrote {}.dxf after {} ticks'.format(args.filename, world.frame_count))
    else:
        from mathcanvas.pyglet_drawable import pygletDraw
        pygletDraw(world).display()
    return 0


if __name__ == '__main__':
    sys.exit(main())
