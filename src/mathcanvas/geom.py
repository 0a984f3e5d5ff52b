## point primitives and scalar helpers for mathcanvas
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

"""point primitives and scalar helpers for **mathcanvas**

====================
OVERVIEW
====================

mathcanvas works in two planes at once.  The *real* plane is the
mathematical (x, y) space an author reasons in, with y growing
upward.  The *screen* plane is the pixel space of the drawing
surface, with the origin at the top-left corner and y growing
downward.  ``mathcanvas.frame`` maps between them.

Points in the two planes are kept as distinct immutable types so that
a screen coordinate is never silently passed where a real one is
expected:

- ``RealPoint(x, y, z=0.0)`` -- problem-domain units.  ``z`` is only
  carried along for extensions and is ignored by the 2D engines.
- ``ScreenPoint(x, y)`` -- floating point pixels.

Both unpack like tuples, *e.g.* ``x, y = point``.

``Vector`` is the one mutable primitive, used for per-tick velocity and
acceleration of moving shapes.

constants
=========

``epsilon`` is the comparison tolerance used throughout the collision
code, and ``pi2`` is 2*pi.  Redefine these at your peril.

"""

import math
import sys
from dataclasses import dataclass

## constants
epsilon = 0.000005
pi2 = 2.0 * math.pi

## operations on scalars
## ---------------------

## booleans are ints in Python, but True is not a coordinate
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def isfinitenum(n):
    """ is ``n`` a real, finite, non-boolean number?"""
    return isgoodnum(n) and math.isfinite(n)


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


## trim away floating point noise by snapping insignificantly small
## values to zero
def roundsmall(val):
    """Return ``val``, or 0.0 if its magnitude is below machine epsilon."""
    if abs(val) < sys.float_info.epsilon:
        return 0.0
    return val


def to_degrees(radians):
    return 180.0 * radians / math.pi


def to_radians(degrees):
    return math.pi * degrees / 180.0


## points and vectors
## ------------------

@dataclass(frozen=True)
class RealPoint:
    """A point in the real (mathematical) plane."""
    x: float
    y: float
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class ScreenPoint:
    """A point on the drawing surface, in pixels, y growing downward."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Vector:
    """Mutable 2D vector used for velocity and acceleration."""
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y


def almost_equal(a, b, tol=epsilon):
    """Return ``True`` if two points agree coordinate-wise within ``tol``.

    Works for ``RealPoint`` and ``ScreenPoint``; the z coordinate of real
    points takes part in the comparison.
    """
    if not (close(a.x, b.x, tol) and close(a.y, b.y, tol)):
        return False
    return close(getattr(a, 'z', 0.0), getattr(b, 'z', 0.0), tol)


def distance(p1, p2):
    """ euclidean distance between two points, 3D if both carry z"""
    if isinstance(p1, RealPoint) and isinstance(p2, RealPoint):
        return math.hypot(p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def midpoint(p1, p2):
    """ the point halfway between ``p1`` and ``p2``, of the same type as ``p1``"""
    return type(p1)(0.5 * (p1.x + p2.x), 0.5 * (p1.y + p2.y))


## polar coordinates
## -----------------

def to_polar(x, y):
    """Convert a real cartesian point to ``(r, theta)``.

    ``theta`` is in radians on ``[0, 2*pi)``.  The origin maps to
    ``(0, 0)``.
    """
    if x == 0 and y == 0:
        return 0.0, 0.0
    theta = math.atan2(y, x) % pi2
    return math.hypot(x, y), theta


def from_polar(r, theta):
    """Convert ``(r, theta)`` to a real ``RealPoint``, trimming
    rounding noise so that *e.g.* ``cos(pi/2)`` gives exactly zero."""
    return RealPoint(roundsmall(r * math.cos(theta)),
                     roundsmall(r * math.sin(theta)))


## slopes
## ------

def slope(p1, p2):
    """Slope from ``p1`` to ``p2``, ``inf``/``-inf`` for vertical lines
    and ``nan`` for coincident points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    if dx == 0:
        if dy == 0:
            return math.nan
        return math.copysign(math.inf, dy)
    return dy / dx


def finite_slope(p1, p2):
    """Like ``slope()``, but ``None`` where the slope is undefined."""
    m = slope(p1, p2)
    return m if math.isfinite(m) else None


def slope_to_radians(m):
    """Angle on the unit circle, in ``[0, 2*pi)``, of a ray of slope ``m``
    leaving the origin toward positive x (or straight up/down for
    infinite slopes)."""
    if m == math.inf:
        return 0.5 * math.pi
    if m == -math.inf:
        return 1.5 * math.pi
    return to_polar(1.0, m)[1]


def radians_to_slope(rad):
    """Slope of the ray at angle ``rad``; ``inf`` at pi/2 and ``-inf`` at
    3*pi/2."""
    rad = rad % pi2
    if close(rad, 0.5 * math.pi, sys.float_info.epsilon * 8):
        return math.inf
    if close(rad, 1.5 * math.pi, sys.float_info.epsilon * 8):
        return -math.inf
    return math.tan(rad)
