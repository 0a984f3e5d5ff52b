## the per-tick driver tying frame, graphs and sprites together
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

"""``World``: one view's frame, graphs and sprites, advanced per tick

A tick runs in a fixed order:

1. zoom requests queued during the previous tick are applied
2. every graph updates (domain animation)
3. every sprite updates and then has its boundary policy applied
4. destroyed sprites are removed
5. ``frame_count`` increments

Rendering happens between ticks and never mutates the frame; any zoom
requested while rendering waits for the next tick.
"""

import itertools
import logging

from mathcanvas.curve import Graph, CurveSampler, FunctionDescriptor
from mathcanvas.geom import ScreenPoint
from mathcanvas.sprite import Sprite
from mathcanvas.zoom import ZoomController

logger = logging.getLogger(__name__)


class World:

    def __init__(self, frame, config=None):
        self.frame = frame
        self.config = config
        self.zoom = ZoomController(frame)
        if config is not None:
            self.sampler = CurveSampler(frame, pixel_step=config.pixel_step,
                                        polar_step=config.polar_step,
                                        parametric_step=config.parametric_step)
        else:
            self.sampler = CurveSampler(frame)
        self.graphs = []
        self.sprites = []
        self.frame_count = 0

    @classmethod
    def from_config(cls, config):
        return cls(config.make_frame(), config)

    def __repr__(self):
        return 'World(frame={!r}, graphs={}, sprites={}, frame_count={})'.format(
            self.frame, len(self.graphs), len(self.sprites), self.frame_count)

    ## population

    def add_graph(self, graph, **kw):
        """Add a ``Graph``, or build one from a ``FunctionDescriptor`` or
        a bare callable with keyword arguments passed to ``Graph``."""
        if not isinstance(graph, Graph):
            if not isinstance(graph, FunctionDescriptor):
                graph = FunctionDescriptor(graph)
            kw.setdefault('sampler', self.sampler)
            graph = Graph(self.frame, graph, **kw)
        self.graphs.append(graph)
        self.zoom.register(graph)
        return graph

    def remove_graph(self, graph):
        if graph in self.graphs:
            self.graphs.remove(graph)
        self.zoom.unregister(graph)

    def add_sprite(self, sprite, **kw):
        """Add a ``Sprite``, or build one from a shape with keyword
        arguments passed to ``Sprite``."""
        if not isinstance(sprite, Sprite):
            if 'boundary' not in kw and self.config is not None:
                kw['boundary'] = self.config.boundary_policy()
            sprite = Sprite(sprite, **kw)
        self.sprites.append(sprite)
        # stable: same-layer sprites keep insertion order
        self.sprites.sort(key=lambda s: s.layer)
        return sprite

    def remove_sprite(self, sprite):
        if sprite in self.sprites:
            self.sprites.remove(sprite)

    ## zoom

    def request_zoom(self, factor, pivot=None):
        """Zoom now, or at the start of the next tick if a tick or a
        render is in progress."""
        return self.zoom.apply(factor, pivot)

    ## view changes

    def pan(self, dx, dy):
        """Shift the view by ``(dx, dy)`` pixels and rebuild every graph
        domain against the new window."""
        self.frame.pan(dx, dy)
        self.zoom.rebuild_graphs()

    def resize(self, width, height):
        self.frame.resize(width, height)
        self.zoom.rebuild_graphs()

    ## the tick

    def tick(self):
        with self.zoom.tick():
            frame_rect = self.frame.rect
            for g in list(self.graphs):
                g.update(self.frame_count)
            for s in list(self.sprites):
                s.update(self.frame_count)
                s.bound(frame_rect)
            dead = [s for s in self.sprites if s.destroyed]
            for s in dead:
                self.sprites.remove(s)
            if dead:
                logger.debug('removed %d destroyed sprites', len(dead))
        self.frame_count += 1

    def render(self, drawable):
        """Draw graphs, then sprites in layer order, onto ``drawable``."""
        with self.zoom.deferred():
            drawable.frame = self.frame
            for g in self.graphs:
                drawable.draw_graph(g)
            for s in self.sprites:
                drawable.draw_sprite(s)

    ## queries

    def colliding_pairs(self):
        """All pairs of live sprites whose shapes overlap."""
        live = [s for s in self.sprites if not s.destroyed]
        return [(a, b) for a, b in itertools.combinations(live, 2)
                if a.intersects(b)]

    def sprites_at(self, p):
        """ sprites containing screen point ``p``, topmost first"""
        return [s for s in reversed(self.sprites) if s.contains_point(p)]

    def real_point_at(self, sx, sy):
        """ convert a pointer position to a real point"""
        return self.frame.screen_to_real(ScreenPoint(sx, sy))
