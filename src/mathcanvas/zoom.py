## zoom coordination between a frame and its graphs for mathcanvas
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

"""Single entry point for zooming a view.

``ZoomController.apply()`` updates the frame first and then every
registered graph, so the two never disagree.  While a tick is in
progress (between ``begin_tick()`` and ``end_tick()``, or inside
``with controller.tick():``) zoom requests are queued instead and
applied, in order, by the next ``begin_tick()``.
"""

import logging
from contextlib import contextmanager

from mathcanvas.errors import InvalidParameterError
from mathcanvas.frame import check_screen_point
from mathcanvas.geom import isfinitenum

logger = logging.getLogger(__name__)


def _validate(factor, pivot):
    if not isfinitenum(factor) or factor <= 0:
        raise InvalidParameterError(
            'zoom factor must be a positive, finite number, got {!r}'.format(factor))
    if pivot is not None:
        check_screen_point('zoom pivot', pivot)


class ZoomController:

    def __init__(self, frame):
        self.frame = frame
        self._graphs = []
        self._pending = []
        self._in_tick = False

    def register(self, graph):
        if graph not in self._graphs:
            self._graphs.append(graph)

    def unregister(self, graph):
        if graph in self._graphs:
            self._graphs.remove(graph)

    @property
    def graphs(self):
        return list(self._graphs)

    @property
    def pending(self):
        return list(self._pending)

    @property
    def in_tick(self):
        return self._in_tick

    def apply(self, factor, pivot=None):
        """Zoom the frame to ``factor`` about ``pivot``, then rebuild the
        domain of every registered graph.

        The factor and pivot are validated immediately, even when the
        zoom itself is deferred.  Returns ``True`` if the zoom was
        applied now and ``False`` if it was queued.
        """
        _validate(factor, pivot)
        if self._in_tick:
            logger.debug('deferring zoom %s about %s to next tick', factor, pivot)
            self._pending.append((factor, pivot))
            return False
        self._apply_now(factor, pivot)
        return True

    def reset(self):
        return self.apply(1.0)

    def _apply_now(self, factor, pivot):
        self.frame.zoom(factor, pivot)
        self.rebuild_graphs()

    def rebuild_graphs(self):
        """Recompute the domain of every registered graph after the
        frame has changed, static graphs included."""
        for g in self._graphs:
            g.rebuild_bounds()
            g.invalidate()

    def flush(self):
        """Apply queued zooms in request order."""
        pending, self._pending = self._pending, []
        for factor, pivot in pending:
            self._apply_now(factor, pivot)
        return len(pending)

    def begin_tick(self):
        self._in_tick = False
        self.flush()
        self._in_tick = True

    def end_tick(self):
        self._in_tick = False

    @contextmanager
    def tick(self):
        self.begin_tick()
        try:
            yield self
        finally:
            self.end_tick()

    @contextmanager
    def deferred(self):
        """Queue zoom requests for the duration of the block without
        flushing on entry, as during rendering."""
        was = self._in_tick
        self._in_tick = True
        try:
            yield self
        finally:
            self._in_tick = was
