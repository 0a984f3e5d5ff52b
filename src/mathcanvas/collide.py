## intersection and containment tests for mathcanvas shapes
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

"""pairwise intersection and point containment for shapes

``intersects(a, b)`` answers "do these two shapes overlap" for any pair
drawn from {``Rect``, ``Circle``, ``Segment``}, and
``contains_point(shape, p)`` answers "is ``p`` in (or on) this shape".
All tests are inclusive: touching counts as overlapping.

The segment-segment test solves the two infinite lines by point-slope
elimination in ``mpmath`` extended precision, then checks that the
solution falls within both segments.  Vertical and zero-length
segments are handled before any slope is computed.  Parallel segments
overlap only if they are collinear and their projections overlap.
"""

import math

import mpmath as mpm

from mathcanvas.geom import epsilon, close
from mathcanvas.shapes import Rect, Circle, Segment


def _within(v, a, b, tol=epsilon):
    lo, hi = (a, b) if a <= b else (b, a)
    return lo - tol <= v <= hi + tol


## point tests
## -----------

def point_in_rect(p, rect):
    return rect.left <= p.x <= rect.right and rect.top <= p.y <= rect.bottom


def point_in_circle(p, circle):
    return math.hypot(p.x - circle.cx, p.y - circle.cy) <= circle.r


def point_segment_distance(p, seg):
    """Shortest distance from point ``p`` to segment ``seg``."""
    x0, y0 = seg.p0
    x1, y1 = seg.p1
    dx = x1 - x0
    dy = y1 - y0
    len2 = dx * dx + dy * dy
    if len2 == 0:
        return math.hypot(p.x - x0, p.y - y0)
    u = ((p.x - x0) * dx + (p.y - y0) * dy) / len2
    u = max(0.0, min(1.0, u))
    return math.hypot(p.x - (x0 + u * dx), p.y - (y0 + u * dy))


def point_on_segment(p, seg, tol=epsilon):
    return point_segment_distance(p, seg) <= tol


def contains_point(shape, p, tol=epsilon):
    """Is screen point ``p`` inside or on ``shape``?

    Segments have no interior, so for them the test is "within ``tol``
    of the segment".
    """
    if isinstance(shape, Rect):
        return point_in_rect(p, shape)
    elif isinstance(shape, Circle):
        return point_in_circle(p, shape)
    elif isinstance(shape, Segment):
        return point_on_segment(p, shape, tol)
    else:
        raise ValueError('bad shape passed to contains_point: {}'.format(shape))


## pairwise tests
## --------------

def rect_rect(a, b):
    return (a.left <= b.right and b.left <= a.right and
            a.top <= b.bottom and b.top <= a.bottom)


def circle_circle(a, b):
    return math.hypot(a.cx - b.cx, a.cy - b.cy) <= a.r + b.r


def circle_rect(c, rect):
    """exact test: the point of ``rect`` closest to the centre of ``c``
    must lie within the radius"""
    nx = max(rect.left, min(c.cx, rect.right))
    ny = max(rect.top, min(c.cy, rect.bottom))
    return math.hypot(c.cx - nx, c.cy - ny) <= c.r


def segment_circle(seg, c):
    return point_segment_distance(c.center, seg) <= c.r


def segment_segment(s1, s2):
    """Do two segments share at least one point?"""
    if s1.isdegenerate():
        return point_on_segment(s1.p0, s2)
    if s2.isdegenerate():
        return point_on_segment(s2.p0, s1)

    x1, y1 = mpm.mpf(s1.p0.x), mpm.mpf(s1.p0.y)
    x2, y2 = mpm.mpf(s1.p1.x), mpm.mpf(s1.p1.y)
    x3, y3 = mpm.mpf(s2.p0.x), mpm.mpf(s2.p0.y)
    x4, y4 = mpm.mpf(s2.p1.x), mpm.mpf(s2.p1.y)

    vert1 = close(x1, x2)
    vert2 = close(x3, x4)

    if vert1 and vert2:
        if not close(x1, x3):
            return False
        return _overlap(y1, y2, y3, y4)

    if vert1:
        m2 = (y4 - y3) / (x4 - x3)
        y = m2 * (x1 - x3) + y3
        return _within(x1, x3, x4) and _within(y, y1, y2)

    if vert2:
        m1 = (y2 - y1) / (x2 - x1)
        y = m1 * (x3 - x1) + y1
        return _within(x3, x1, x2) and _within(y, y3, y4)

    dx1, dy1 = x2 - x1, y2 - y1
    dx2, dy2 = x4 - x3, y4 - y3
    len1 = mpm.sqrt(dx1 * dx1 + dy1 * dy1)
    len2 = mpm.sqrt(dx2 * dx2 + dy2 * dy2)

    ## parallel when the lines drift apart by less than epsilon pixels
    ## along the longer segment
    cross = dx1 * dy2 - dy1 * dx2
    if abs(cross) < epsilon * min(len1, len2):
        ## overlap only if collinear
        if abs(dx1 * (y3 - y1) - dy1 * (x3 - x1)) >= epsilon * len1:
            return False
        return _overlap(x1, x2, x3, x4)

    m1 = dy1 / dx1
    m2 = dy2 / dx2

    x = (m1 * x1 - m2 * x3 + y3 - y1) / (m1 - m2)
    return _within(x, x1, x2) and _within(x, x3, x4)


def _overlap(a0, a1, b0, b1):
    """ do the closed intervals [a0, a1] and [b0, b1] overlap? (either
    end order)"""
    return (max(min(a0, a1), min(b0, b1)) <=
            min(max(a0, a1), max(b0, b1)) + epsilon)


def segment_rect(seg, rect):
    if point_in_rect(seg.p0, rect) or point_in_rect(seg.p1, rect):
        return True
    if not rect_rect(seg.bbox(), rect):
        return False
    return any(segment_segment(seg, side) for side in rect.sides())


def intersects(a, b):
    """Return ``True`` if shapes ``a`` and ``b`` overlap or touch.

    Raises ``ValueError`` if either argument is not a ``Rect``,
    ``Circle`` or ``Segment``.
    """
    if isinstance(a, Rect):
        if isinstance(b, Rect):
            return rect_rect(a, b)
        elif isinstance(b, Circle):
            return circle_rect(b, a)
        elif isinstance(b, Segment):
            return segment_rect(b, a)
    elif isinstance(a, Circle):
        if isinstance(b, Rect):
            return circle_rect(a, b)
        elif isinstance(b, Circle):
            return circle_circle(a, b)
        elif isinstance(b, Segment):
            return segment_circle(b, a)
    elif isinstance(a, Segment):
        if isinstance(b, Rect):
            return segment_rect(a, b)
        elif isinstance(b, Circle):
            return segment_circle(a, b)
        elif isinstance(b, Segment):
            return segment_segment(a, b)
    raise ValueError('bad shapes passed to intersects: {}, {}'.format(a, b))
