## real-plane to screen-plane coordinate frame for mathcanvas
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

"""coordinate frame mapping the real plane onto the drawing surface

A ``CoordinateFrame`` owns the pixel location of the real origin, the
scale (pixels per real unit) and the zoom level.  It is the single
mutable object shared by every curve and shape in a view: one writer
per tick (zoom, pan or resize), many readers.

Every mutation bumps ``version``, so that readers which cache derived
data (sampled curves, in particular) can tell cheaply when their cache
is stale.

Zoom is always relative to the unzoomed *baseline*.  ``zoom(2.0)``
twice in a row leaves the frame at 2x, not 4x, and ``zoom(1.0)``
restores the baseline exactly, regardless of history.
"""

import logging

from mathcanvas.errors import InvalidParameterError
from mathcanvas.geom import RealPoint, ScreenPoint, isfinitenum, close
from mathcanvas.shapes import Rect

logger = logging.getLogger(__name__)


def _check_positive(name, value):
    if not isfinitenum(value) or value <= 0:
        raise InvalidParameterError(
            '{} must be a positive, finite number, got {!r}'.format(name, value))


def check_screen_point(name, p):
    """Raise ``InvalidParameterError`` unless both coordinates of ``p`` are finite."""
    if not (isfinitenum(p.x) and isfinitenum(p.y)):
        raise InvalidParameterError('bad {}: {!r}'.format(name, p))


class CoordinateFrame:
    """Bidirectional real <-> screen mapping with baseline-relative zoom.

    ``origin`` is the screen point representing real (0, 0); it defaults
    to the centre of the surface.  ``scale`` is in pixels per real unit.
    ``tick_distance`` is the pixel spacing of grid ticks at baseline and
    defaults to ``scale`` (one tick per real unit).
    """

    def __init__(self, width, height, origin=None, scale=1.0,
                 tick_distance=None):
        _check_positive('width', width)
        _check_positive('height', height)
        _check_positive('scale', scale)
        if origin is None:
            origin = ScreenPoint(0.5 * width, 0.5 * height)
        elif not isinstance(origin, ScreenPoint):
            origin = ScreenPoint(*origin)
        check_screen_point('origin', origin)
        if tick_distance is None:
            tick_distance = scale
        _check_positive('tick_distance', tick_distance)

        self.__width = width
        self.__height = height
        self.__baseline_origin = origin
        self.__baseline_scale = scale
        self.__baseline_tick = tick_distance
        self.__origin = origin
        self.__scale = scale
        self.__zoom_level = 1.0
        self.__version = 0

    def __repr__(self):
        return (f"CoordinateFrame(width={self.__width}, height={self.__height}, "
                f"origin={self.__origin}, scale={self.__scale}, "
                f"zoom_level={self.__zoom_level})")

    ## read-only properties; mutate through zoom(), pan() and resize()

    @property
    def width(self):
        return self.__width

    @property
    def height(self):
        return self.__height

    @property
    def origin(self):
        return self.__origin

    @property
    def scale(self):
        return self.__scale

    @property
    def zoom_level(self):
        return self.__zoom_level

    @property
    def baseline_origin(self):
        return self.__baseline_origin

    @property
    def baseline_scale(self):
        return self.__baseline_scale

    @property
    def tick_distance(self):
        return self.__baseline_tick / self.__zoom_level

    @property
    def version(self):
        return self.__version

    @property
    def center(self):
        """ the screen point at the middle of the surface"""
        return ScreenPoint(0.5 * self.__width, 0.5 * self.__height)

    @property
    def rect(self):
        """ the whole surface as a ``Rect``, for boundary policies"""
        return Rect(0.0, 0.0, self.__width, self.__height)

    ## per-axis conversions

    def x_to_screen(self, x):
        return self.__origin.x + x * self.__scale

    def y_to_screen(self, y):
        # screen y grows downward, real y grows upward
        return self.__origin.y - y * self.__scale

    def x_to_real(self, sx):
        return (sx - self.__origin.x) / self.__scale

    def y_to_real(self, sy):
        return -(sy - self.__origin.y) / self.__scale

    def real_to_screen(self, p):
        """ map a ``RealPoint`` to a ``ScreenPoint``"""
        return ScreenPoint(self.x_to_screen(p.x), self.y_to_screen(p.y))

    def screen_to_real(self, p):
        """ map a ``ScreenPoint`` to a ``RealPoint``"""
        return RealPoint(self.x_to_real(p.x), self.y_to_real(p.y))

    def visible_window(self):
        """Return the real points at the lower-left and upper-right
        corners of the surface."""
        return (RealPoint(self.x_to_real(0.0), self.y_to_real(self.__height)),
                RealPoint(self.x_to_real(self.__width), self.y_to_real(0.0)))

    def contains(self, p):
        """ does screen point ``p`` lie on the surface (edges inclusive)?"""
        return 0.0 <= p.x <= self.__width and 0.0 <= p.y <= self.__height

    def almost_equal(self, a, b):
        """Are two real points drawn within half a pixel of each other?"""
        tol = 0.5 / self.__scale
        return close(a.x, b.x, tol) and close(a.y, b.y, tol)

    ## mutations

    def zoom(self, factor, pivot=None):
        """Zoom to ``factor`` times the baseline, keeping ``pivot`` fixed.

        A factor above 1 zooms out (more real units per pixel), as the
        scale becomes ``baseline_scale / factor``.  The pivot is a
        ``ScreenPoint`` and defaults to the surface centre.  The real
        point under the pivot before a zoom from baseline is still under
        it afterwards.

        Raises ``InvalidParameterError`` without touching any state if
        ``factor`` is not a positive finite number.
        """
        if not isfinitenum(factor) or factor <= 0:
            raise InvalidParameterError(
                'zoom factor must be a positive, finite number, got {!r}'.format(factor))
        if pivot is None:
            pivot = self.center
        check_screen_point('zoom pivot', pivot)

        base = self.__baseline_origin
        if factor == 1:
            origin = base
        else:
            origin = ScreenPoint(pivot.x + (base.x - pivot.x) / factor,
                                 pivot.y + (base.y - pivot.y) / factor)

        self.__scale = self.__baseline_scale / factor
        self.__origin = origin
        self.__zoom_level = float(factor)
        self.__version += 1
        logger.debug('zoom %s about %s: scale=%s origin=%s',
                     factor, pivot, self.__scale, origin)

    def reset_zoom(self):
        self.zoom(1.0)

    def pan(self, dx, dy):
        """Shift the view by ``(dx, dy)`` pixels.

        The baseline moves too, scaled by the zoom level, so that a later
        zoom about the same pivot keeps the pan.
        """
        if not (isfinitenum(dx) and isfinitenum(dy)):
            raise InvalidParameterError('bad pan offset: {!r}, {!r}'.format(dx, dy))
        z = self.__zoom_level
        b = self.__baseline_origin
        o = self.__origin
        self.__baseline_origin = ScreenPoint(b.x + dx * z, b.y + dy * z)
        self.__origin = ScreenPoint(o.x + dx, o.y + dy)
        self.__version += 1

    def resize(self, width, height):
        """Change the surface size.  Origin and scale are kept."""
        _check_positive('width', width)
        _check_positive('height', height)
        self.__width = width
        self.__height = height
        self.__version += 1
