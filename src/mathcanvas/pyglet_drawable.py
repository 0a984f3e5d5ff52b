## interactive pyglet viewer for mathcanvas worlds
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

"""pyglet rendering of a ``World``

Drawing calls are recorded as plain primitive lists (``lines``,
``circles``, ``triangles``, ``labels``), so a ``pygletDraw`` can be
driven and inspected without a display.  ``display()`` opens the
window, builds ``pyglet.shapes`` from the recorded primitives on every
redraw, and ticks the world from ``pyglet.clock``.

Keys: UP zooms in and DOWN zooms out about the mouse pointer; RETURN
restores the baseline zoom.

Fill regions are triangulated per region kind: cartesian and inverted
regions as strips of quads between the curve and the frame edge, polar
``inside`` as a fan about the real origin.  Polar ``outside`` is
painted as the frame with the inside fan painted over in the
background color.
"""

import logging

import pyglet

import mathcanvas.drawable as drawable
from mathcanvas.geom import ScreenPoint

logger = logging.getLogger(__name__)

ZOOM_STEP = 1.25


def _quad_strip(curve_pts, edge, axis):
    """Triangles between ``curve_pts`` and a frame edge.  ``axis`` is
    ``'y'`` for a horizontal edge at y = ``edge`` (cartesian) and
    ``'x'`` for a vertical one (inverted)."""
    tris = []
    for a, b in zip(curve_pts, curve_pts[1:]):
        if axis == 'y':
            ea = ScreenPoint(a.x, edge)
            eb = ScreenPoint(b.x, edge)
        else:
            ea = ScreenPoint(edge, a.y)
            eb = ScreenPoint(edge, b.y)
        tris.append((a, b, eb))
        tris.append((a, eb, ea))
    return tris


def _fan(center, ring):
    return [(center, a, b) for a, b in zip(ring, ring[1:] + ring[:1])]


def _convex_fan(ring):
    return [(ring[0], ring[i], ring[i + 1]) for i in range(1, len(ring) - 1)]


def region_triangles(region, rings, origin):
    """Triangulate the rings of a fill region; ``origin`` is the screen
    point of real (0, 0), used for polar fans.

    Returns ``(triangles, holes)``: holes are painted afterwards in the
    background color.
    """
    tris = []
    holes = []
    if region in ('above', 'below'):
        for ring in rings:
            tris.extend(_quad_strip(ring[:-2], ring[-1].y, 'y'))
    elif region in ('left', 'right'):
        for ring in rings:
            tris.extend(_quad_strip(ring[:-2], ring[-1].x, 'x'))
    elif region == 'inside':
        for ring in rings:
            tris.extend(_fan(origin, ring))
    elif region == 'outside':
        if rings:
            tris.extend(_convex_fan(rings[0]))
            for ring in rings[1:]:
                holes.extend(_fan(origin, ring))
    else:
        ## convex rings, e.g. rectangles
        for ring in rings:
            tris.extend(_convex_fan(ring))
    return tris, holes


## class to provide pyglet drawing functionality
class pygletDraw(drawable.Drawable):

    def __init__(self, world=None, background='black'):
        super().__init__()
        self.world = world
        self.frame = world.frame if world is not None else None
        self.background = background
        self.lines = []
        self.circles = []
        self.triangles = []
        self.labels = []
        self.mouse = None
        self.window = None
        self.linecolor = 'white'

    def __repr__(self):
        return 'an instance of pygletDraw'

    def clear(self):
        self.lines = []
        self.circles = []
        self.triangles = []
        self.labels = []

    def _rgb(self, color=None):
        if color is None:
            color = self.linecolor
        if color is False:
            color = 'white'
        return tuple(self.thing2color(color, 'b'))

    ## Overload virtual mathcanvas.drawable base class drawing methods

    def draw_line(self, p1, p2):
        self.lines.append((p1, p2, self._rgb()))

    def draw_polyline(self, points, closed=False):
        color = self._rgb()
        for a, b in zip(points, points[1:]):
            self.lines.append((a, b, color))
        if closed and len(points) > 2:
            self.lines.append((points[-1], points[0], color))

    def draw_circle(self, p, r, filled=False):
        fill = self._rgb(self.fillcolor or self.linecolor) if filled else None
        self.circles.append((p, r, self._rgb(), fill))

    def draw_fill(self, region, rings, color):
        origin = self.frame.origin if self.frame is not None else ScreenPoint(0, 0)
        tris, holes = region_triangles(region, rings, origin)
        rgb = self._rgb(color)
        bg = self._rgb(self.background)
        self.triangles.extend((t, rgb) for t in tris)
        self.triangles.extend((t, bg) for t in holes)

    def draw_text(self, text, location, attr=None):
        if attr is None:
            attr = {'size': 12}
        self.labels.append((text, location, attr.get('size', 12), self._rgb()))

    ## window and event handling

    def _make_window(self):
        import pyglet.gl as gl
        w = int(self.frame.width) if self.frame is not None else 640
        h = int(self.frame.height) if self.frame is not None else 480
        try:
            # Try and create a window with multisampling (antialiasing)
            config = gl.Config(sample_buffers=1, samples=4, double_buffer=True)
            window = pyglet.window.Window(w, h, resizable=True, config=config)
        except pyglet.window.NoSuchConfigException:
            # Fall back to no multisampling for old hardware
            window = pyglet.window.Window(w, h, resizable=True)
        return window

    def _batch(self):
        """Build pyglet shapes for the recorded primitives.  pyglet
        places its origin bottom-left, so y is flipped."""
        from pyglet import shapes
        h = self.window.height
        batch = pyglet.graphics.Batch()
        keep = []
        for (a, b, c), color in self.triangles:
            keep.append(shapes.Triangle(a.x, h - a.y, b.x, h - b.y, c.x, h - c.y,
                                        color=color, batch=batch))
        for p1, p2, color in self.lines:
            keep.append(shapes.Line(p1.x, h - p1.y, p2.x, h - p2.y,
                                    color=color, batch=batch))
        for p, r, color, fill in self.circles:
            if fill is not None:
                keep.append(shapes.Circle(p.x, h - p.y, r, color=fill, batch=batch))
            keep.append(shapes.Arc(p.x, h - p.y, r, color=color, batch=batch))
        for text, p, size, color in self.labels:
            keep.append(pyglet.text.Label(text, font_size=size, x=p.x, y=h - p.y,
                                          color=color + (255,), batch=batch))
        return batch, keep

    def zoom_about_mouse(self, zoom_in):
        """Step the zoom level one notch about the pointer."""
        frame = self.world.frame
        factor = frame.zoom_level / ZOOM_STEP if zoom_in else frame.zoom_level * ZOOM_STEP
        pivot = self.mouse if self.mouse is not None else frame.center
        self.world.request_zoom(factor, pivot)

    def display(self):
        from pyglet.window import key

        if self.world is None:
            raise ValueError('pygletDraw.display() needs a world to show')
        self.window = self._make_window()
        fps = self.world.config.fps if self.world.config is not None else 60.0

        @self.window.event
        def on_draw():
            self.window.clear()
            self.clear()
            self.draw_axes(self.world.frame)
            self.world.render(self)
            batch, keep = self._batch()
            batch.draw()

        @self.window.event
        def on_mouse_motion(x, y, dx, dy):
            self.mouse = ScreenPoint(x, self.window.height - y)

        @self.window.event
        def on_key_press(symbol, modifiers):
            if symbol == key.UP:
                self.zoom_about_mouse(True)
            elif symbol == key.DOWN:
                self.zoom_about_mouse(False)
            elif symbol == key.RETURN:
                self.world.zoom.reset()

        @self.window.event
        def on_resize(width, height):
            self.world.resize(width, height)

        pyglet.clock.schedule_interval(lambda dt: self.world.tick(), 1.0 / fps)
        logger.debug('starting pyglet viewer at %s fps', fps)
        pyglet.app.run()
