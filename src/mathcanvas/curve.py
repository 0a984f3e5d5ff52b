## function sampling and graph entities for mathcanvas
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

"""sampling single-input functions into drawable curves

====================
OVERVIEW
====================

A ``FunctionDescriptor`` names a function and how to read it:

==============  ==============================  =====================
variant         func                            independent variable
==============  ==============================  =====================
``CARTESIAN``   ``x -> y``                      x, one sample per
                                                ``step`` pixel columns
``INVERTED``    ``y -> x``                      y, one sample per
                                                ``step`` pixel rows
``POLAR``       ``theta -> r``                  theta, fixed step
``PARAMETRIC``  ``t -> (x, y)``                 t, fixed step
==============  ==============================  =====================

``sample()`` (or ``CurveSampler.sample()``) evaluates the function over
its domain window and returns a ``Curve``: a list of *subpaths*, each an
ordered list of ``ScreenPoint`` instances, plus closed fill regions.

The domain is inclusive of both ends.  Defaults, where the descriptor
leaves ``start``/``end`` as ``None``:

- cartesian and inverted: the visible window of the frame
- polar: ``[0, 2*pi]``
- parametric: ``[0, 0]``, which draws nothing

A curve is broken into a new subpath between two consecutive samples
when

- the optional ``discontinuous_at(prev, cur)`` predicate, called with
  the two values of the independent variable, returns true
- for cartesian (inverted) curves, one sample is above the top (left of
  the left) edge of the frame and the next is below the bottom (right
  of the right) edge, or vice versa; this keeps asymptotes from being
  drawn as near-vertical lines
- a sample is undefined: the function raised ``ArithmeticError`` or
  ``ValueError``, or returned a non-finite value.  Undefined samples
  are dropped.

A non-positive step or an empty domain gives an empty curve rather than
an error.

fill regions
============

Each non-parametric curve carries fill regions built per subpath by
running out to just beyond the frame edge and closing the loop.  A
region is a list of closed rings meant to be filled with the even-odd
rule:

- cartesian: ``'above'`` and ``'below'``
- inverted: ``'left'`` and ``'right'``
- polar: ``'inside'`` (the curve itself) and ``'outside'`` (the frame
  with the curve cut out)

``Graph`` wraps a descriptor as a live entity with an animated domain
and a cached curve that is rebuilt lazily when the frame changes.
"""

import enum
import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from mathcanvas.errors import InvalidParameterError
from mathcanvas.geom import (RealPoint, ScreenPoint, pi2, isfinitenum,
                             close, from_polar, to_polar)

logger = logging.getLogger(__name__)


class Variant(enum.Enum):
    CARTESIAN = 'cartesian'
    INVERTED = 'inverted'
    POLAR = 'polar'
    PARAMETRIC = 'parametric'

    @classmethod
    def parse(cls, name):
        if isinstance(name, Variant):
            return name
        if not isinstance(name, str):
            raise InvalidParameterError('bad curve variant: {!r}'.format(name))
        key = name.strip().lower()
        key = _VARIANT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidParameterError('unknown curve variant: {!r}'.format(name)) from None


_VARIANT_ALIASES = {'yofx': 'cartesian', 'xofy': 'inverted'}

DEFAULT_PIXEL_STEP = 1.0
DEFAULT_POLAR_STEP = pi2 / 360.0
DEFAULT_PARAMETRIC_STEP = 0.1


@dataclass
class FunctionDescriptor:
    """What to sample.  ``None`` for ``start``, ``end`` or ``step``
    selects the variant's default."""
    func: Callable
    variant: Variant = Variant.CARTESIAN
    start: Optional[float] = None
    end: Optional[float] = None
    step: Optional[float] = None
    discontinuous_at: Optional[Callable] = None

    def __post_init__(self):
        self.variant = Variant.parse(self.variant)
        if not callable(self.func):
            raise InvalidParameterError('function descriptor needs a callable, got {!r}'.format(self.func))


@dataclass
class Curve:
    """Result of sampling: subpaths of screen points plus fill regions."""
    variant: Variant
    subpaths: List[List[ScreenPoint]] = field(default_factory=list)
    fills: Dict[str, List[List[ScreenPoint]]] = field(default_factory=dict)

    @property
    def empty(self):
        return not self.subpaths

    @property
    def continuous(self):
        return len(self.subpaths) <= 1

    def points(self):
        """ all sampled points, in domain order, across subpaths"""
        for sub in self.subpaths:
            yield from sub

    def __len__(self):
        return sum(len(sub) for sub in self.subpaths)

    @property
    def start_point(self):
        return self.subpaths[0][0] if self.subpaths else None

    @property
    def end_point(self):
        return self.subpaths[-1][-1] if self.subpaths else None


## evaluation
## ----------

def _evaluate(func, u):
    """Evaluate ``func(u)``; ``None`` if the result is undefined there."""
    try:
        value = func(u)
    except (ArithmeticError, ValueError):
        return None
    if isinstance(value, RealPoint):
        x, y = value.x, value.y
    elif isinstance(value, (tuple, list, np.ndarray)):
        x, y = value[0], value[1]
    else:
        if not isinstance(value, numbers.Real) or not math.isfinite(value):
            return None
        return float(value)
    if not all(isinstance(v, numbers.Real) and math.isfinite(v) for v in (x, y)):
        return None
    return RealPoint(float(x), float(y))


def _grid(start, end, step):
    """Inclusive sample grid from ``start`` to ``end``, ascending or
    descending according to the sign of ``step``."""
    g = np.arange(start, end, step, dtype=float)
    if g.size == 0 or abs(end - g[-1]) > abs(step) * 1e-9:
        g = np.append(g, float(end))
    return g


def default_domain(variant, frame):
    """The ``(start, end)`` used where a descriptor leaves them unset."""
    variant = Variant.parse(variant)
    if variant is Variant.CARTESIAN:
        lo, hi = frame.visible_window()
        return lo.x, hi.x
    if variant is Variant.INVERTED:
        lo, hi = frame.visible_window()
        return lo.y, hi.y
    if variant is Variant.POLAR:
        return 0.0, pi2
    return 0.0, 0.0


def default_step(variant):
    variant = Variant.parse(variant)
    if variant is Variant.POLAR:
        return DEFAULT_POLAR_STEP
    if variant is Variant.PARAMETRIC:
        return DEFAULT_PARAMETRIC_STEP
    return DEFAULT_PIXEL_STEP


## the sampler proper
## ------------------

def _trace(samples, discontinuous_at, straddles):
    """Split ``(u, screen_point)`` samples into subpaths.

    ``None`` in place of a screen point marks an undefined sample.
    """
    subpaths = []
    current = []
    prev_u = None
    prev_p = None
    for u, p in samples:
        if p is None:
            if current:
                subpaths.append(current)
            current = []
            prev_u = prev_p = None
            continue
        if current and ((discontinuous_at is not None and discontinuous_at(prev_u, u))
                        or (straddles is not None and straddles(prev_p, p))):
            subpaths.append(current)
            current = []
        current.append(p)
        prev_u = u
        prev_p = p
    if current:
        subpaths.append(current)
    return subpaths


def _cartesian_samples(func, start, end, step, frame):
    c0 = max(0.0, frame.x_to_screen(start))
    c1 = min(float(frame.width), frame.x_to_screen(end))
    if c1 < c0:
        return
    for col in _grid(c0, c1, step):
        col = float(col)
        x = frame.x_to_real(col)
        y = _evaluate(func, x)
        if y is None or isinstance(y, RealPoint):
            yield x, None
        else:
            yield x, ScreenPoint(col, frame.y_to_screen(y))


def _inverted_samples(func, start, end, step, frame):
    # rows run bottom to top, so y increases along the curve
    r0 = min(float(frame.height), frame.y_to_screen(start))
    r1 = max(0.0, frame.y_to_screen(end))
    if r0 < r1:
        return
    for row in _grid(r0, r1, -step):
        row = float(row)
        y = frame.y_to_real(row)
        x = _evaluate(func, y)
        if x is None or isinstance(x, RealPoint):
            yield y, None
        else:
            yield y, ScreenPoint(frame.x_to_screen(x), row)


def _polar_samples(func, start, end, step, frame):
    for theta in _grid(start, end, step):
        theta = float(theta)
        r = _evaluate(func, theta)
        if r is None or isinstance(r, RealPoint):
            yield theta, None
        else:
            yield theta, frame.real_to_screen(from_polar(r, theta))


def _parametric_samples(func, start, end, step, frame):
    for t in _grid(start, end, step):
        t = float(t)
        p = _evaluate(func, t)
        if isinstance(p, RealPoint):
            yield t, frame.real_to_screen(p)
        else:
            yield t, None


_SAMPLERS = {
    Variant.CARTESIAN: _cartesian_samples,
    Variant.INVERTED: _inverted_samples,
    Variant.POLAR: _polar_samples,
    Variant.PARAMETRIC: _parametric_samples,
}


def _straddler(variant, frame):
    if variant is Variant.CARTESIAN:
        h = frame.height
        return lambda a, b: (a.y < 0 and b.y > h) or (a.y > h and b.y < 0)
    if variant is Variant.INVERTED:
        w = frame.width
        return lambda a, b: (a.x < 0 and b.x > w) or (a.x > w and b.x < 0)
    return None


## fill regions
## ------------

def _fill_regions(variant, subpaths, frame, line_width):
    lw = line_width
    w = frame.width
    h = frame.height
    paths = [s for s in subpaths if len(s) > 1]
    if variant is Variant.CARTESIAN:
        above = [s + [ScreenPoint(s[-1].x, -lw), ScreenPoint(s[0].x, -lw)] for s in paths]
        below = [s + [ScreenPoint(s[-1].x, h + lw), ScreenPoint(s[0].x, h + lw)] for s in paths]
        return {'above': above, 'below': below}
    if variant is Variant.INVERTED:
        left = [s + [ScreenPoint(-lw, s[-1].y), ScreenPoint(-lw, s[0].y)] for s in paths]
        right = [s + [ScreenPoint(w + lw, s[-1].y), ScreenPoint(w + lw, s[0].y)] for s in paths]
        return {'left': left, 'right': right}
    if variant is Variant.POLAR:
        inside = [list(s) for s in paths]
        border = [ScreenPoint(-lw, -lw), ScreenPoint(w + lw, -lw),
                  ScreenPoint(w + lw, h + lw), ScreenPoint(-lw, h + lw)]
        outside = [border] + [list(s) for s in paths] if paths else []
        return {'inside': inside, 'outside': outside}
    return {}


def sample(func, variant, start, end, step, frame, discontinuous_at=None,
           line_width=1.0):
    """Sample ``func`` into a ``Curve``; see the module docs.

    ``start``, ``end`` and ``step`` may be ``None`` for the variant's
    defaults.  For cartesian and inverted curves ``step`` is in pixels;
    otherwise it is in units of the independent variable.
    """
    variant = Variant.parse(variant)
    dstart, dend = default_domain(variant, frame)
    if start is None:
        start = dstart
    if end is None:
        end = dend
    if step is None:
        step = default_step(variant)

    curve = Curve(variant)
    if not (isfinitenum(step) and isfinitenum(start) and isfinitenum(end)):
        logger.debug('empty %s curve: non-finite domain [%s, %s] step %s',
                     variant.value, start, end, step)
        return curve
    if step <= 0 or end <= start:
        logger.debug('empty %s curve: domain [%s, %s] step %s',
                     variant.value, start, end, step)
        return curve

    samples = _SAMPLERS[variant](func, start, end, step, frame)
    curve.subpaths = _trace(samples, discontinuous_at, _straddler(variant, frame))
    curve.fills = _fill_regions(variant, curve.subpaths, frame, line_width)
    return curve


class CurveSampler:
    """Samples descriptors against one frame with per-view default
    steps."""

    def __init__(self, frame, pixel_step=DEFAULT_PIXEL_STEP,
                 polar_step=DEFAULT_POLAR_STEP,
                 parametric_step=DEFAULT_PARAMETRIC_STEP,
                 line_width=1.0):
        self.frame = frame
        self.steps = {
            Variant.CARTESIAN: pixel_step,
            Variant.INVERTED: pixel_step,
            Variant.POLAR: polar_step,
            Variant.PARAMETRIC: parametric_step,
        }
        self.line_width = line_width

    def sample(self, descriptor, start=None, end=None):
        """Sample ``descriptor``.  ``start``/``end`` override the
        descriptor's domain, as a ``Graph`` does when animating."""
        d = descriptor
        step = d.step if d.step is not None else self.steps[d.variant]
        return sample(d.func, d.variant,
                      d.start if start is None else start,
                      d.end if end is None else end,
                      step, self.frame, d.discontinuous_at, self.line_width)


class Graph:
    """A function entity living in a view.

    Holds a descriptor, an animated domain and a lazily sampled curve.
    Domain ends left unset on a cartesian or inverted descriptor are
    *anchored* to the visible window and follow it through zooms.
    A pan or resize of the frame moves them too.
    Each ``update()`` advances the domain ends by ``velocity_start`` and
    ``velocity_end``, which is how a curve is revealed over time.

    A ``static`` graph does not animate and keeps its curve until it is
    explicitly invalidated or rebuilt, which ``World.pan()`` and
    ``World.resize()`` do.
    """

    def __init__(self, frame, descriptor, velocity_start=0.0, velocity_end=0.0,
                 static=False, on_update=None, sampler=None, name='',
                 color='white', fills=None, line_width=1.0):
        if not isinstance(descriptor, FunctionDescriptor):
            descriptor = FunctionDescriptor(descriptor)
        self.frame = frame
        self.descriptor = descriptor
        self.sampler = sampler if sampler is not None else CurveSampler(frame, line_width=line_width)
        self.velocity_start = velocity_start
        self.velocity_end = velocity_end
        self.static = static
        self.on_update = on_update
        self.name = name
        self.color = color
        self.fills = dict(fills) if fills else {}
        self.line_width = line_width

        anchorable = descriptor.variant in (Variant.CARTESIAN, Variant.INVERTED)
        self._anchored_start = anchorable and descriptor.start is None
        self._anchored_end = anchorable and descriptor.end is None
        self.start_offset = 0.0
        self.end_offset = 0.0
        self._base_start = None
        self._base_end = None
        self._curve = None
        self._curve_version = None
        self._bounds_version = None
        self.rebuild_bounds()

    def __repr__(self):
        return 'Graph({!r}, {}, [{}, {}])'.format(
            self.name, self.descriptor.variant.value, self.start, self.end)

    @property
    def variant(self):
        return self.descriptor.variant

    @property
    def start(self):
        self._follow_frame()
        return self._base_start + self.start_offset

    @property
    def end(self):
        self._follow_frame()
        return self._base_end + self.end_offset

    def rebuild_bounds(self):
        """Reset the unzoomed domain; anchored ends are recomputed from
        the frame's current visible window."""
        dstart, dend = default_domain(self.variant, self.frame)
        d = self.descriptor
        self._base_start = dstart if d.start is None else d.start
        self._base_end = dend if d.end is None else d.end
        self._bounds_version = self.frame.version
        if self._anchored_start or self._anchored_end:
            self.invalidate()

    def _follow_frame(self):
        if not self.static and self._bounds_version != self.frame.version:
            self.rebuild_bounds()

    def invalidate(self):
        self._curve = None

    @property
    def curve(self):
        stale = (self._curve is None or
                 (not self.static and self._curve_version != self.frame.version))
        if stale:
            self._curve = self.sampler.sample(self.descriptor, self.start, self.end)
            self._curve_version = self.frame.version
        return self._curve

    def update(self, frame_count=0):
        if not self.static and (self.velocity_start or self.velocity_end):
            self.start_offset += self.velocity_start
            self.end_offset += self.velocity_end
            self.invalidate()
        if self.on_update is not None:
            self.on_update(self, frame_count)

    def end_point(self):
        """Screen point where the curve currently ends, or ``None``."""
        return self.curve.end_point

    def of(self, u):
        """Evaluate the underlying function; ``None`` where undefined."""
        return _evaluate(self.descriptor.func, u)

    def position_of(self, p):
        """Where real point ``p`` lies relative to the curve.

        Returns ``'above'``/``'below'``/``'on'`` for cartesian curves,
        ``'left'``/``'right'``/``'on'`` for inverted ones,
        ``'inside'``/``'outside'``/``'on'`` for polar ones and
        ``'unknown'`` for parametric curves or where the function is
        undefined.  "On" means within half a pixel.
        """
        tol = 0.5 / self.frame.scale
        v = self.variant
        if v is Variant.CARTESIAN:
            fy = self.of(p.x)
            if fy is None or isinstance(fy, RealPoint):
                return 'unknown'
            if close(p.y, fy, tol):
                return 'on'
            return 'above' if p.y > fy else 'below'
        if v is Variant.INVERTED:
            fx = self.of(p.y)
            if fx is None or isinstance(fx, RealPoint):
                return 'unknown'
            if close(p.x, fx, tol):
                return 'on'
            return 'right' if p.x > fx else 'left'
        if v is Variant.POLAR:
            r, theta = to_polar(p.x, p.y)
            fr = self.of(theta)
            if fr is None or isinstance(fr, RealPoint):
                return 'unknown'
            if close(r, fr, tol):
                return 'on'
            return 'outside' if r > fr else 'inside'
        return 'unknown'
