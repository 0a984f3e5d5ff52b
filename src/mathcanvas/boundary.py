## per-edge boundary rules for moving shapes in mathcanvas
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

"""what happens when a moving shape reaches the edge of the frame

A ``BoundaryPolicy`` holds one rule per edge (top, right, bottom,
left).  A rule is a ``Rule`` member or, for custom behaviour, any
callable taking ``(sprite, frame_rect)``.

==========  ===========================================================
rule        behaviour once the shape touches the edge
==========  ===========================================================
NONE        nothing; the shape keeps going
WRAP        once the shape has fully cleared the edge, it is placed just
            beyond the opposite edge with its velocity unchanged
BOUNCE      clamp to the edge and negate the perpendicular velocity
FENCE       clamp to the edge; velocity unchanged
DESTROY     once the shape has fully cleared the edge, destroy it
custom      call ``fn(sprite, frame_rect)``
==========  ===========================================================

Edges are evaluated in the fixed order left, right, top, bottom, so a
shape in a corner gets both of the corner's rules.  Nothing is applied
until the shape has overlapped the frame at least once, which lets
shapes be launched from off screen.

All tests work on the shape's bounding box, so segments are bounded
like the rectangle enclosing them.

Policies are built from the shorthands accepted by
``BoundaryPolicy.of()``:

- a single rule, applied to all four edges
- ``[vertical, horizontal]`` -- top and bottom get the first rule,
  left and right the second
- ``[top, right, bottom, left]``

Rule names (``'wrap'``, ``'bounce'`` ...) are accepted by ``of()``
only; ``'wraparound'`` and ``'clip'`` are aliases for ``'wrap'`` and
``'fence'``.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any

from mathcanvas.errors import InvalidParameterError
from mathcanvas.collide import rect_rect

logger = logging.getLogger(__name__)


class Rule(enum.Enum):
    NONE = 'none'
    WRAP = 'wrap'
    BOUNCE = 'bounce'
    FENCE = 'fence'
    DESTROY = 'destroy'

    @classmethod
    def parse(cls, name):
        """Look up a rule by (case-insensitive) name or alias."""
        if not isinstance(name, str):
            raise InvalidParameterError('bad boundary rule: {!r}'.format(name))
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidParameterError('unknown boundary rule: {!r}'.format(name)) from None


_ALIASES = {'wraparound': 'wrap', 'clip': 'fence'}


def _coerce(rule):
    if isinstance(rule, Rule) or callable(rule):
        return rule
    if rule is None:
        return Rule.NONE
    return Rule.parse(rule)


## edge geometry; ``b`` is the shape's bounding box, ``f`` the frame

def _left_touch(b, f):
    return b.left <= f.left

def _left_cleared(b, f):
    return b.right < f.left

def _left_clamp(b, f):
    return f.left - b.left, 0.0

def _left_wrap(b, f):
    return f.right - b.left, 0.0

def _right_touch(b, f):
    return b.right >= f.right

def _right_cleared(b, f):
    return b.left > f.right

def _right_clamp(b, f):
    return f.right - b.right, 0.0

def _right_wrap(b, f):
    return f.left - b.right, 0.0

def _top_touch(b, f):
    return b.top <= f.top

def _top_cleared(b, f):
    return b.bottom < f.top

def _top_clamp(b, f):
    return 0.0, f.top - b.top

def _top_wrap(b, f):
    return 0.0, f.bottom - b.top

def _bottom_touch(b, f):
    return b.bottom >= f.bottom

def _bottom_cleared(b, f):
    return b.top > f.bottom

def _bottom_clamp(b, f):
    return 0.0, f.bottom - b.bottom

def _bottom_wrap(b, f):
    return 0.0, f.top - b.bottom


## (name, axis, touch, cleared, clamp, wrap), in evaluation order
_EDGES = (
    ('left', 'x', _left_touch, _left_cleared, _left_clamp, _left_wrap),
    ('right', 'x', _right_touch, _right_cleared, _right_clamp, _right_wrap),
    ('top', 'y', _top_touch, _top_cleared, _top_clamp, _top_wrap),
    ('bottom', 'y', _bottom_touch, _bottom_cleared, _bottom_clamp, _bottom_wrap),
)


@dataclass(frozen=True)
class BoundaryPolicy:
    """One boundary rule per edge of the frame."""
    top: Any = Rule.NONE
    right: Any = Rule.NONE
    bottom: Any = Rule.NONE
    left: Any = Rule.NONE

    def __post_init__(self):
        for name in ('top', 'right', 'bottom', 'left'):
            rule = getattr(self, name)
            if not (isinstance(rule, Rule) or callable(rule)):
                raise InvalidParameterError(
                    'bad {} boundary rule: {!r}; use BoundaryPolicy.of() for names'.format(name, rule))

    @classmethod
    def of(cls, shorthand=None):
        """Build a policy from a shorthand; see the module docs."""
        if isinstance(shorthand, BoundaryPolicy):
            return shorthand
        if isinstance(shorthand, (list, tuple)):
            rules = [_coerce(r) for r in shorthand]
            if len(rules) == 1:
                return cls(*(rules * 4))
            if len(rules) == 2:
                vertical, horizontal = rules
                return cls(top=vertical, right=horizontal,
                           bottom=vertical, left=horizontal)
            if len(rules) == 4:
                return cls(*rules)
            raise InvalidParameterError(
                'boundary shorthand needs 1, 2 or 4 rules, got {}'.format(len(rules)))
        rule = _coerce(shorthand)
        return cls(rule, rule, rule, rule)

    def rule_for(self, edge):
        return getattr(self, edge)

    def apply(self, sprite, frame_rect):
        """Apply the per-edge rules to ``sprite`` against ``frame_rect``.

        ``sprite`` must offer ``shape``, ``velocity``, ``entered``,
        ``destroyed``, ``onscreen`` and ``destroy()``.  The shape is
        moved in place.
        """
        if sprite.destroyed:
            return
        shape = sprite.shape
        if not sprite.entered:
            if not rect_rect(shape.bbox(), frame_rect):
                sprite.onscreen = False
                return
            sprite.entered = True

        wrapped = set()
        for name, axis, touch, cleared, clamp, wrap in _EDGES:
            if axis in wrapped:
                continue
            rule = self.rule_for(name)
            if rule is Rule.NONE:
                continue
            b = shape.bbox()
            if not touch(b, frame_rect):
                continue

            if callable(rule):
                rule(sprite, frame_rect)
                if sprite.destroyed:
                    break
            elif rule is Rule.WRAP:
                if cleared(b, frame_rect):
                    shape.translate(*wrap(b, frame_rect))
                    wrapped.add(axis)
                    logger.debug('wrapped %r off the %s edge', sprite, name)
            elif rule is Rule.BOUNCE:
                shape.translate(*clamp(b, frame_rect))
                if axis == 'x':
                    sprite.velocity.x = -sprite.velocity.x
                else:
                    sprite.velocity.y = -sprite.velocity.y
            elif rule is Rule.FENCE:
                shape.translate(*clamp(b, frame_rect))
            elif rule is Rule.DESTROY:
                if cleared(b, frame_rect):
                    logger.debug('destroying %r past the %s edge', sprite, name)
                    sprite.destroy()
                    break

        sprite.onscreen = rect_rect(shape.bbox(), frame_rect)
