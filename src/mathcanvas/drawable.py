## base class of drawable for mathcanvas
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

"""rendering surfaces for mathcanvas

``Drawable`` is the base class of every rendering back end.  All
coordinates passed to it are screen pixels (y grows downward); each
back end maps them to its own device.  A back end overrides the pure
virtual primitives

- ``draw_line(p1, p2)``
- ``draw_polyline(points, closed=False)``
- ``draw_circle(p, r, filled=False)``
- ``draw_fill(region, rings, color)``
- ``draw_text(text, location)``
- ``display()``

and inherits the composite operations built on them: ``draw_curve()``,
``draw_graph()``, ``draw_sprite()``, ``draw_axes()`` and the generic
``draw()`` dispatcher.

Colors may be given as a color name, an AutoCAD color index, or an RGB
triple of bytes or floats; see ``thing2color()``.
"""

import logging
import math

from mathcanvas.curve import Curve, Graph
from mathcanvas.geom import ScreenPoint, epsilon
from mathcanvas.shapes import Rect, Circle, Segment
from mathcanvas.sprite import Sprite

logger = logging.getLogger(__name__)


class Drawable:
    """Base class for mathcanvas drawables"""

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_line(self, p1, p2):
        logger.debug("pure virtual draw_line called: %s, %s", p1, p2)

    def draw_polyline(self, points, closed=False):
        logger.debug("pure virtual draw_polyline called: %d points", len(points))

    def draw_circle(self, p, r, filled=False):
        logger.debug("pure virtual draw_circle called: %s, %s", p, r)

    def draw_fill(self, region, rings, color):
        logger.debug("pure virtual draw_fill called: %s, %d rings", region, len(rings))

    def draw_text(self, text, location):
        logger.debug("pure virtual draw_text called: %s, %s", text, location)

    ## cause drawing page to be rendered -- pure virtual in base class
    def display(self):
        logger.debug('pure virtual display function called')
        return True

    def __init__(self):
        self.__linewidth = 1.0
        self.__linecolor = False
        self.__fillcolor = False
        self.__layer = False
        self.__layerlist = [False, 'default']
        self.frame = None

    def __repr__(self):
        return 'an abstract Drawable instance'

    ## Various property functions

    @property
    def layerlist(self):
        return self.__layerlist

    def _set_layerlist(self, lst):
        self.__layerlist = lst

    @layerlist.setter
    def layerlist(self, lst):
        if isinstance(lst, list):
            self._set_layerlist(lst)
        else:
            raise ValueError('bad layer list ' + str(lst))

    @property
    def layer(self):
        return self.__layer

    def _set_layer(self, lyr):
        self.__layer = lyr

    @layer.setter
    def layer(self, lyr=False):
        if lyr in self.layerlist:
            self._set_layer(lyr)
        else:
            raise ValueError('bad layer: ' + str(lyr))

    @property
    def linewidth(self):
        return self.__linewidth

    @linewidth.setter
    def linewidth(self, lw=False):
        if not isinstance(lw, (int, float)):
            raise ValueError('invalid linewidth ' + str(lw))
        if isinstance(lw, bool) and lw == False:
            lw = 1.0
        elif lw < epsilon:
            lw = epsilon
        self.__linewidth = lw

    ## color is a complex property -- it can be set as an AUTOCAD
    ## index color, a standard color name, or an RGB tripple

    def __checkcolor(self, c):
        def isbyte(x):
            return isinstance(x, int) and 0 <= x <= 255
        if isinstance(c, bool) and c == False:
            return True
        elif (isinstance(c, (list, tuple)) and len(c) == 3 and
              all(isbyte(x) for x in c)) or \
             (isinstance(c, int) and 0 <= c < len(self.colormapAUTOCAD)) or \
             (isinstance(c, str) and c.lower() in self.colordict):
            return True
        return False

    @property
    def linecolor(self):
        return self.__linecolor

    @linecolor.setter
    def linecolor(self, c=False):
        if self.__checkcolor(c):
            self.__linecolor = c
        else:
            raise ValueError('bad linecolor ' + str(c))

    @property
    def fillcolor(self):
        return self.__fillcolor

    @fillcolor.setter
    def fillcolor(self, c=False):
        if self.__checkcolor(c):
            self.__fillcolor = c
        else:
            raise ValueError('bad fillcolor ' + str(c))

    ## non-virtual utility drawing functions

    def draw_rect(self, rect, filled=False):
        c = rect.corners()
        if filled:
            self.draw_fill('rect', [c], self.fillcolor or self.linecolor or 'white')
        self.draw_polyline(c, closed=True)

    ## utility function to draw an "x", centered on point p inside square of
    ## dimension d
    def draw_x(self, p, d):
        hd = d / 2
        self.draw_line(ScreenPoint(p.x - hd, p.y - hd), ScreenPoint(p.x + hd, p.y + hd))
        self.draw_line(ScreenPoint(p.x - hd, p.y + hd), ScreenPoint(p.x + hd, p.y - hd))

    def draw_curve(self, curve):
        for sub in curve.subpaths:
            if len(sub) == 1:
                self.draw_x(sub[0], 2 * self.linewidth)
            else:
                self.draw_polyline(sub)

    def draw_graph(self, graph):
        """Fill regions first, then the curve itself."""
        curve = graph.curve
        for region, color in graph.fills.items():
            rings = curve.fills.get(region)
            if rings:
                self.draw_fill(region, rings, color)
        self.linecolor = graph.color
        self.linewidth = graph.line_width
        self.draw_curve(curve)

    def draw_sprite(self, sprite):
        self.linecolor = sprite.color
        self.fillcolor = sprite.color
        self.draw_shape(sprite.shape, sprite.filled)

    def draw_shape(self, shape, filled=False):
        if isinstance(shape, Rect):
            self.draw_rect(shape, filled)
        elif isinstance(shape, Circle):
            self.draw_circle(shape.center, shape.r, filled)
        elif isinstance(shape, Segment):
            self.draw_line(shape.p0, shape.p1)
        else:
            raise ValueError('bad shape passed to draw_shape: {}'.format(shape))

    def draw_axes(self, frame=None, ticks=True):
        """Draw the real x and y axes with tick marks every
        ``frame.tick_distance`` pixels."""
        frame = frame if frame is not None else self.frame
        o = frame.origin
        w, h = frame.width, frame.height
        self.draw_line(ScreenPoint(0, o.y), ScreenPoint(w, o.y))
        self.draw_line(ScreenPoint(o.x, 0), ScreenPoint(o.x, h))
        if not ticks:
            return
        d = frame.tick_distance
        half = max(min(5.0, 0.25 * d), 3.0)
        for x in _tick_positions(o.x, d, w):
            self.draw_line(ScreenPoint(x, o.y - half), ScreenPoint(x, o.y + half))
        for y in _tick_positions(o.y, d, h):
            self.draw_line(ScreenPoint(o.x - half, y), ScreenPoint(o.x + half, y))

    def draw(self, x):
        if isinstance(x, Graph):
            self.draw_graph(x)
        elif isinstance(x, Sprite):
            self.draw_sprite(x)
        elif isinstance(x, Curve):
            self.draw_curve(x)
        elif isinstance(x, (Rect, Circle, Segment)):
            self.draw_shape(x)
        elif isinstance(x, ScreenPoint):
            self.draw_x(x, 2 * self.linewidth)
        elif isinstance(x, list):
            for e in x:
                self.draw(e)
        else:
            raise ValueError(f'bad argument to Drawable.draw(): {x}')

    ## Standard color names, with the nearest AutoCAD index where one
    ## matches exactly
    colordict = {
        'black': ([0, 0, 0], 0),
        'red': ([255, 0, 0], 1),
        'yellow': ([255, 255, 0], 2),
        'lime': ([0, 255, 0], 3),
        'green': ([0, 128, 0], None),
        'aqua': ([0, 255, 255], 4),
        'cyan': ([0, 255, 255], 4),
        'blue': ([0, 0, 255], 5),
        'fuchsia': ([255, 0, 255], 6),
        'magenta': ([255, 0, 255], 6),
        'white': ([255, 255, 255], 7),
        'gray': ([128, 128, 128], 8),
        'grey': ([128, 128, 128], 8),
        'silver': ([192, 192, 192], 9),
        'darkgray': ([169, 169, 169], None),
        'lightblue': ([173, 216, 230], None),
        'orange': ([255, 165, 0], None),
        'purple': ([128, 0, 128], None),
        'navy': ([0, 0, 128], None),
        'teal': ([0, 128, 128], None),
        'maroon': ([128, 0, 0], None),
        'olive': ([128, 128, 0], None),
        'pink': ([255, 192, 203], None),
        'brown': ([165, 42, 42], None),
    }

    ## the first ten AutoCAD index colors
    colormapAUTOCAD = [
        [0, 0, 0],
        [255, 0, 0],
        [255, 255, 0],
        [0, 255, 0],
        [0, 255, 255],
        [0, 0, 255],
        [255, 0, 255],
        [255, 255, 255],
        [128, 128, 128],
        [192, 192, 192],
    ]

    def thing2color(self, thing, convert='b', colormap=None, colordict=None):
        """Convert a color name, index or RGB triple.

        ``convert`` selects the result: ``'b'`` for a list of bytes,
        ``'f'`` for a list of floats on [0, 1], ``'i'`` for the nearest
        AutoCAD color index.
        """
        def _b2f(c):
            return [c[0] / 255.0, c[1] / 255.0, c[2] / 255.0]

        def _f2b(c):
            return [round(c[0] * 255.0), round(c[1] * 255.0), round(c[2] * 255.0)]

        def _nearest_index(rgb):
            best_idx = 0
            best_dist = float('inf')
            for idx, candidate in enumerate(colormap):
                dist = ((candidate[0] - rgb[0]) ** 2 +
                        (candidate[1] - rgb[1]) ** 2 +
                        (candidate[2] - rgb[2]) ** 2)
                if dist < best_dist:
                    best_idx = idx
                    best_dist = dist
                    if dist == 0:
                        break
            return best_idx

        def _isgoodf(x):
            return isinstance(x, float) and 0.0 <= x <= 1.0

        def _isgoodb(x):
            return isinstance(x, int) and not isinstance(x, bool) and 0 <= x < 256

        def _isgoodfc(c):
            return isinstance(c, (list, tuple)) and len(c) == 3 and \
                all(_isgoodf(x) for x in c)

        def _isgoodbc(c):
            return isinstance(c, (list, tuple)) and len(c) == 3 and \
                all(_isgoodb(x) for x in c)

        if colormap is None:
            colormap = self.colormapAUTOCAD
        if colordict is None:
            colordict = self.colordict
        if convert not in ['f', 'b', 'i']:
            raise ValueError('bad colormap conversion')

        if _isgoodfc(thing):
            c = _f2b(thing)
        elif _isgoodbc(thing):
            c = list(thing)
        elif isinstance(thing, str):
            key = thing.lower()
            if key not in colordict:
                raise ValueError('bad color name passed to thing2color: {}'.format(thing))
            rgb, idx = colordict[key]
            if convert == 'i':
                return idx if idx is not None else _nearest_index(rgb)
            c = list(rgb)
        elif isinstance(thing, int) and not isinstance(thing, bool):
            if thing < 0 or thing >= len(colormap):
                raise ValueError('colormap index out of range: {}'.format(thing))
            if convert == 'i':
                return thing
            c = list(colormap[thing])
        else:
            raise ValueError('bad thing passed to thing2color: {}'.format(thing))

        if convert == 'i':
            return _nearest_index(c)
        elif convert == 'f':
            return _b2f(c)
        return c


def _tick_positions(origin, d, limit):
    """Screen positions of ticks every ``d`` pixels from ``origin``,
    excluding the origin itself, within ``[0, limit]``."""
    if d <= 0:
        return []
    kmin = math.ceil(-origin / d)
    kmax = math.floor((limit - origin) / d)
    return [origin + k * d for k in range(kmin, kmax + 1) if k != 0]
