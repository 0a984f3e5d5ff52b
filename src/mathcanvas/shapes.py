## shape primitives for mathcanvas collision and boundary handling
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

"""screen-space shapes: axis-aligned rectangle, circle, and segment

All three live in screen pixels, with y growing downward, so a
rectangle's ``top`` is its smallest y.  Shapes are mutable; a moving
``Sprite`` translates its shape once per tick.  Every shape offers the
same small surface used by the boundary code:

- ``bbox()`` -- the axis-aligned bounding ``Rect``
- ``center`` -- the centre as a ``ScreenPoint``
- ``translate(dx, dy)`` -- move in place

A zero-size rectangle, a zero-radius circle and a zero-length segment
are all legal, point-like shapes.
"""

from dataclasses import dataclass

from mathcanvas.errors import InvalidParameterError
from mathcanvas.geom import ScreenPoint, isfinitenum


def _check_coords(kind, *vals):
    for v in vals:
        if not isfinitenum(v):
            raise InvalidParameterError('bad {} coordinate: {!r}'.format(kind, v))


@dataclass
class Rect:
    """Axis-aligned rectangle with top-left corner ``(x, y)``."""
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        _check_coords('rectangle', self.x, self.y, self.w, self.h)
        if self.w < 0 or self.h < 0:
            raise InvalidParameterError(
                'rectangle size must be non-negative, got {} x {}'.format(self.w, self.h))

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.w

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.h

    @property
    def center(self):
        return ScreenPoint(self.x + 0.5 * self.w, self.y + 0.5 * self.h)

    def corners(self):
        """ top-left, top-right, bottom-right, bottom-left"""
        return [ScreenPoint(self.left, self.top),
                ScreenPoint(self.right, self.top),
                ScreenPoint(self.right, self.bottom),
                ScreenPoint(self.left, self.bottom)]

    def sides(self):
        """ the four sides as segments, clockwise from the top"""
        c = self.corners()
        return [Segment(c[i], c[(i + 1) % 4]) for i in range(4)]

    def bbox(self):
        return Rect(self.x, self.y, self.w, self.h)

    def translate(self, dx, dy):
        self.x += dx
        self.y += dy


@dataclass
class Circle:
    """Circle centred on ``(cx, cy)`` with radius ``r``."""
    cx: float
    cy: float
    r: float

    def __post_init__(self):
        _check_coords('circle', self.cx, self.cy, self.r)
        if self.r < 0:
            raise InvalidParameterError('circle radius must be non-negative, got {}'.format(self.r))

    @property
    def center(self):
        return ScreenPoint(self.cx, self.cy)

    def bbox(self):
        return Rect(self.cx - self.r, self.cy - self.r, 2 * self.r, 2 * self.r)

    def translate(self, dx, dy):
        self.cx += dx
        self.cy += dy


@dataclass
class Segment:
    """Line segment from ``p0`` to ``p1``; endpoints are ``ScreenPoint``
    instances, or anything that unpacks to ``(x, y)``."""
    p0: ScreenPoint
    p1: ScreenPoint

    def __post_init__(self):
        if not isinstance(self.p0, ScreenPoint):
            self.p0 = ScreenPoint(*self.p0)
        if not isinstance(self.p1, ScreenPoint):
            self.p1 = ScreenPoint(*self.p1)
        _check_coords('segment', self.p0.x, self.p0.y, self.p1.x, self.p1.y)

    @property
    def center(self):
        return ScreenPoint(0.5 * (self.p0.x + self.p1.x), 0.5 * (self.p0.y + self.p1.y))

    def length(self):
        return ((self.p1.x - self.p0.x) ** 2 + (self.p1.y - self.p0.y) ** 2) ** 0.5

    def isdegenerate(self):
        return self.p0 == self.p1

    def bbox(self):
        x0 = min(self.p0.x, self.p1.x)
        y0 = min(self.p0.y, self.p1.y)
        return Rect(x0, y0,
                    max(self.p0.x, self.p1.x) - x0,
                    max(self.p0.y, self.p1.y) - y0)

    def translate(self, dx, dy):
        self.p0 = ScreenPoint(self.p0.x + dx, self.p0.y + dy)
        self.p1 = ScreenPoint(self.p1.x + dx, self.p1.y + dy)


def isshape(x):
    return isinstance(x, (Rect, Circle, Segment))
