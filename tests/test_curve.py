import math
import pytest
from mathcanvas.curve import *
from mathcanvas.errors import InvalidParameterError
from mathcanvas.frame import CoordinateFrame
from mathcanvas.geom import RealPoint, ScreenPoint, pi2, close
## unit tests for mathcanvas curve.py

def make_frame():
    return CoordinateFrame(640, 480, scale=20)


def floor_break(a, b):
    return math.floor(a) != math.floor(b)


class TestDescriptor:
    def test_variant_parse(self):
        assert Variant.parse('polar') is Variant.POLAR
        assert Variant.parse('YofX') is Variant.CARTESIAN
        assert Variant.parse('xofy') is Variant.INVERTED
        assert Variant.parse(Variant.PARAMETRIC) is Variant.PARAMETRIC
        with pytest.raises(InvalidParameterError):
            Variant.parse('spiral')
        with pytest.raises(InvalidParameterError):
            Variant.parse(3)

    def test_descriptor(self):
        d = FunctionDescriptor(math.sin, 'polar')
        assert d.variant is Variant.POLAR
        with pytest.raises(InvalidParameterError):
            FunctionDescriptor(42)

    def test_defaults(self):
        f = make_frame()
        assert default_domain(Variant.CARTESIAN, f) == (-16.0, 16.0)
        assert default_domain(Variant.INVERTED, f) == (-12.0, 12.0)
        assert default_domain(Variant.POLAR, f) == (0.0, pi2)
        assert default_domain(Variant.PARAMETRIC, f) == (0.0, 0.0)
        assert default_step(Variant.CARTESIAN) == DEFAULT_PIXEL_STEP
        assert default_step(Variant.POLAR) == DEFAULT_POLAR_STEP
        assert default_step(Variant.PARAMETRIC) == DEFAULT_PARAMETRIC_STEP


class TestCartesian:
    def test_sine_continuous(self):
        f = make_frame()
        c = sample(math.sin, Variant.CARTESIAN, -10, 10, 1.0, f)
        assert c.continuous
        assert len(c.subpaths) == 1
        assert c.start_point.x == 120.0
        assert close(c.start_point.y, 240.0 - 20 * math.sin(-10))
        assert close(c.end_point.x, 520.0)
        ## one sample per pixel column, both ends included
        assert len(c) == 401

    def test_columns_ascend(self):
        c = sample(lambda x: x * x, 'cartesian', None, None, 4.0, make_frame())
        xs = [p.x for p in c.points()]
        assert xs == sorted(xs)
        assert xs[0] == 0.0 and xs[-1] == 640.0

    def test_window_clipped(self):
        c = sample(math.sin, 'cartesian', -1000, 1000, 1.0, make_frame())
        xs = [p.x for p in c.points()]
        assert min(xs) == 0.0 and max(xs) == 640.0

    def test_floor_breaks(self):
        f = make_frame()
        c = sample(math.floor, Variant.CARTESIAN, -3, 3, 1.0, f, discontinuous_at=floor_break)
        assert len(c.subpaths) >= 6
        for sub in c.subpaths:
            ys = {p.y for p in sub}
            assert len(ys) == 1

    def test_floor_without_predicate(self):
        c = sample(math.floor, Variant.CARTESIAN, -3, 3, 1.0, make_frame())
        assert len(c.subpaths) == 1

    def test_tangent_asymptotes(self):
        f = make_frame()
        c = sample(math.tan, Variant.CARTESIAN, None, None, 1.0, f)
        ## odd multiples of pi/2 in [-16, 16]
        assert len(c.subpaths) >= 10
        for sub in c.subpaths:
            for a, b in zip(sub, sub[1:]):
                assert not (a.y < 0 and b.y > f.height)
                assert not (a.y > f.height and b.y < 0)

    def test_undefined_dropped(self):
        c = sample(math.sqrt, Variant.CARTESIAN, -5, 5, 1.0, make_frame())
        assert len(c.subpaths) == 1
        assert c.start_point.x == 320.0

    def test_complex_dropped(self):
        c = sample(lambda x: x ** 0.5, Variant.CARTESIAN, -5, 5, 1.0, make_frame())
        assert len(c.subpaths) == 1
        assert c.start_point.x == 320.0

    def test_undefined_splits(self):
        def f(x):
            if -1 < x < 1:
                raise ZeroDivisionError
            return 1.0
        c = sample(f, Variant.CARTESIAN, -5, 5, 1.0, make_frame())
        assert len(c.subpaths) == 2

    def test_non_finite_splits(self):
        c = sample(lambda x: math.nan if abs(x) < 1 else x, 'cartesian', -5, 5, 1.0, make_frame())
        assert len(c.subpaths) == 2

    @pytest.mark.parametrize('start,end,step', [
        (0, 0, 1.0), (5, -5, 1.0), (-5, 5, 0), (-5, 5, -1.0),
        (-5, 5, math.nan), (-math.inf, 5, 1.0)])
    def test_empty(self, start, end, step):
        c = sample(math.sin, Variant.CARTESIAN, start, end, step, make_frame())
        assert c.empty
        assert len(c) == 0
        assert c.start_point is None and c.end_point is None

    def test_fills(self):
        f = make_frame()
        c = sample(math.sin, Variant.CARTESIAN, -10, 10, 1.0, f, line_width=2.0)
        above = c.fills['above'][0]
        below = c.fills['below'][0]
        assert above[-1] == ScreenPoint(120.0, -2.0)
        assert below[-2].y == 482.0
        assert len(above) == len(c.subpaths[0]) + 2


class TestInverted:
    def test_rows_ascend_in_y(self):
        f = make_frame()
        c = sample(lambda y: y, Variant.INVERTED, -5, 5, 1.0, f)
        assert len(c.subpaths) == 1
        rows = [p.y for p in c.points()]
        assert rows == sorted(rows, reverse=True)
        assert c.start_point == ScreenPoint(220.0, 340.0)
        assert c.end_point == ScreenPoint(420.0, 140.0)

    def test_asymptote(self):
        c = sample(math.tan, Variant.INVERTED, None, None, 1.0, make_frame())
        assert len(c.subpaths) >= 7

    def test_fills(self):
        c = sample(lambda y: 0.0, Variant.INVERTED, -5, 5, 1.0, make_frame())
        assert set(c.fills) == {'left', 'right'}
        assert c.fills['left'][0][-1].x == -1.0
        assert c.fills['right'][0][-1].x == 641.0


class TestPolar:
    def test_circle(self):
        f = make_frame()
        c = sample(lambda th: 2.0, Variant.POLAR, None, None, None, f)
        assert len(c.subpaths) == 1
        for p in c.points():
            assert close(math.hypot(p.x - 320, p.y - 240), 40.0, 1e-6)
        assert f.almost_equal(f.screen_to_real(c.start_point), f.screen_to_real(c.end_point))

    def test_no_asymptote_heuristic(self):
        ## jumps from far off one side to the other are not broken
        f = make_frame()
        c = sample(lambda th: 1000.0 if th < math.pi else -1000.0, 'polar', 0, pi2, 0.5, f)
        assert len(c.subpaths) == 1

    def test_fills(self):
        c = sample(lambda th: 2.0, Variant.POLAR, None, None, None, make_frame())
        assert len(c.fills['inside']) == 1
        outside = c.fills['outside']
        assert len(outside) == 2
        assert outside[0][0] == ScreenPoint(-1.0, -1.0)


class TestParametric:
    def test_default_draws_nothing(self):
        c = sample(lambda t: (t, t), Variant.PARAMETRIC, None, None, None, make_frame())
        assert c.empty

    def test_segment(self):
        f = make_frame()
        c = sample(lambda t: (t, 2 * t), Variant.PARAMETRIC, 0, 1, 0.25, f)
        assert len(c) == 5
        assert c.end_point == ScreenPoint(340.0, 200.0)
        assert c.fills == {}

    def test_realpoint_result(self):
        c = sample(lambda t: RealPoint(math.cos(t), math.sin(t)), 'parametric', 0, pi2, 0.1, make_frame())
        assert len(c.subpaths) == 1

    def test_scalar_result_undefined(self):
        c = sample(lambda t: t, 'parametric', 0, 1, 0.1, make_frame())
        assert c.empty


class TestSampler:
    def test_steps(self):
        f = make_frame()
        s = CurveSampler(f, pixel_step=10.0)
        c = s.sample(FunctionDescriptor(math.sin))
        assert len(c) == 65

    def test_descriptor_step_wins(self):
        s = CurveSampler(make_frame(), pixel_step=10.0)
        c = s.sample(FunctionDescriptor(math.sin, step=320.0))
        assert len(c) == 3

    def test_override(self):
        s = CurveSampler(make_frame())
        c = s.sample(FunctionDescriptor(math.sin, start=-10, end=10), start=0.0, end=1.0)
        assert c.start_point.x == 320.0
        assert c.end_point.x == 340.0


class TestGraph:
    def test_bounds(self):
        f = make_frame()
        g = Graph(f, math.sin)
        assert (g.start, g.end) == (-16.0, 16.0)
        g2 = Graph(f, FunctionDescriptor(math.sin, start=-1.0))
        assert (g2.start, g2.end) == (-1.0, 16.0)

    def test_animation(self):
        f = make_frame()
        d = FunctionDescriptor(lambda t: (t, 0.0), Variant.PARAMETRIC, start=0.0, end=0.0)
        g = Graph(f, d, velocity_end=0.5)
        assert g.curve.empty
        g.update()
        g.update()
        assert g.end == 1.0
        assert g.end_point() == ScreenPoint(340.0, 240.0)

    def test_static(self):
        f = make_frame()
        g = Graph(f, math.sin, velocity_end=1.0, static=True)
        c = g.curve
        g.update()
        assert g.end == 16.0
        f.pan(10, 0)
        assert g.curve is c
        g.invalidate()
        assert g.curve is not c

    def test_lazy_rebuild(self):
        f = make_frame()
        g = Graph(f, math.sin)
        c = g.curve
        assert g.curve is c
        f.pan(5, 0)
        assert g.curve is not c

    def test_anchored_follow_zoom(self):
        f = make_frame()
        g = Graph(f, math.sin)
        f.zoom(2.0)
        g.rebuild_bounds()
        assert (g.start, g.end) == (-32.0, 32.0)

    def test_anchored_follow_pan(self):
        f = make_frame()
        g = Graph(f, math.sin)
        g2 = Graph(f, FunctionDescriptor(math.sin, start=-1.0, end=1.0))
        f.pan(100, 0)
        assert (g.start, g.end) == (-21.0, 11.0)
        assert g.curve.start_point.x == 0.0
        assert (g2.start, g2.end) == (-1.0, 1.0)

    def test_anchored_follow_resize(self):
        f = make_frame()
        g = Graph(f, FunctionDescriptor(lambda y: y, Variant.INVERTED))
        f.resize(640, 600)
        assert (g.start, g.end) == (-18.0, 12.0)

    def test_on_update(self):
        seen = []
        g = Graph(make_frame(), math.sin, on_update=lambda gr, n: seen.append((gr, n)))
        g.update(7)
        assert seen == [(g, 7)]

    def test_of(self):
        g = Graph(make_frame(), math.sqrt)
        assert g.of(4.0) == 2.0
        assert g.of(-1.0) is None

    def test_position_cartesian(self):
        g = Graph(make_frame(), lambda x: x)
        assert g.position_of(RealPoint(0, 1)) == 'above'
        assert g.position_of(RealPoint(0, -1)) == 'below'
        assert g.position_of(RealPoint(1, 1.01)) == 'on'
        assert Graph(make_frame(), math.log).position_of(RealPoint(-1, 0)) == 'unknown'

    def test_position_inverted(self):
        g = Graph(make_frame(), FunctionDescriptor(lambda y: 0.0, 'inverted'))
        assert g.position_of(RealPoint(1, 3)) == 'right'
        assert g.position_of(RealPoint(-1, 3)) == 'left'
        assert g.position_of(RealPoint(0, 3)) == 'on'

    def test_position_polar(self):
        g = Graph(make_frame(), FunctionDescriptor(lambda th: 2.0, 'polar'))
        assert g.position_of(RealPoint(1, 1)) == 'inside'
        assert g.position_of(RealPoint(3, 0)) == 'outside'
        assert g.position_of(RealPoint(0, -2)) == 'on'

    def test_position_parametric(self):
        g = Graph(make_frame(), FunctionDescriptor(lambda t: (t, t), 'parametric'))
        assert g.position_of(RealPoint(0, 0)) == 'unknown'
