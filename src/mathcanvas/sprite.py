## moving shapes for mathcanvas
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

"""``Sprite``: a shape with kinematics and a boundary policy

Each tick a sprite integrates once, acceleration into velocity and
then velocity into position, all in pixels per tick.  A sprite given a
``Graph`` as its path ignores its velocity and instead keeps its centre
on the graph's current end point, so that an animated graph drags the
sprite along.
"""

import logging

from mathcanvas import collide
from mathcanvas.boundary import BoundaryPolicy
from mathcanvas.curve import Graph
from mathcanvas.errors import InvalidParameterError
from mathcanvas.geom import Vector, isfinitenum
from mathcanvas.shapes import isshape

logger = logging.getLogger(__name__)


class Sprite:
    """A moving shape.

    ``boundary`` takes anything ``BoundaryPolicy.of()`` accepts.  Lower
    layers are updated and drawn first.  ``on_destroy(sprite)`` is
    called exactly once, when the sprite is destroyed;
    ``on_update(sprite, frame_count)`` after every update.
    """

    def __init__(self, shape, boundary=None, velocity=None, acceleration=None,
                 layer=0, on_destroy=None, on_update=None, name='',
                 color='white', filled=True):
        if not isshape(shape):
            raise ValueError('bad shape passed to Sprite: {}'.format(shape))
        self.shape = shape
        self.boundary = BoundaryPolicy.of(boundary)
        self.velocity = _vector(velocity)
        self.acceleration = _vector(acceleration)
        self.layer = layer
        self.on_destroy = on_destroy
        self.on_update = on_update
        self.name = name
        self.color = color
        self.filled = filled
        self.path = None
        self.entered = False
        self.destroyed = False
        self.onscreen = False

    def __repr__(self):
        if self.name:
            return 'Sprite({!r})'.format(self.name)
        return 'Sprite({!r})'.format(self.shape)

    @property
    def center(self):
        return self.shape.center

    def set_path(self, path):
        """Follow a ``Graph``, or set the velocity from an ``(vx, vy)``
        pair.  ``None`` stops following."""
        if path is None or isinstance(path, Graph):
            self.path = path
            if path is not None:
                self._follow()
        else:
            self.path = None
            self.velocity = _vector(path)

    def _follow(self):
        p = self.path.end_point()
        if p is None:
            return
        c = self.shape.center
        self.shape.translate(p.x - c.x, p.y - c.y)

    def update(self, frame_count=0):
        if self.destroyed:
            return
        if self.path is not None:
            self._follow()
        else:
            self.velocity.x += self.acceleration.x
            self.velocity.y += self.acceleration.y
            self.shape.translate(self.velocity.x, self.velocity.y)
        if self.on_update is not None:
            self.on_update(self, frame_count)

    def bound(self, frame_rect):
        self.boundary.apply(self, frame_rect)

    def destroy(self):
        if self.destroyed:
            return
        self.destroyed = True
        logger.debug('%r destroyed', self)
        if self.on_destroy is not None:
            self.on_destroy(self)

    def contains_point(self, p):
        return collide.contains_point(self.shape, p)

    def intersects(self, other):
        if isinstance(other, Sprite):
            other = other.shape
        return collide.intersects(self.shape, other)


def _vector(v):
    if v is None:
        return Vector()
    if isinstance(v, Vector):
        return v
    try:
        x, y = v
    except (TypeError, ValueError):
        raise InvalidParameterError('bad vector: {!r}'.format(v)) from None
    if not (isfinitenum(x) and isfinitenum(y)):
        raise InvalidParameterError('bad vector: {!r}'.format(v))
    return Vector(x, y)
