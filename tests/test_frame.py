import math
import random
import pytest
from mathcanvas.errors import InvalidParameterError
from mathcanvas.frame import CoordinateFrame
from mathcanvas.geom import RealPoint, ScreenPoint, almost_equal, close
## unit tests for mathcanvas frame.py

def make_frame():
    return CoordinateFrame(640, 480, scale=20)


class TestConversion:
    def test_defaults(self):
        f = make_frame()
        assert f.origin == ScreenPoint(320, 240)
        assert f.zoom_level == 1.0
        assert f.tick_distance == 20
        assert f.version == 0

    def test_axes(self):
        f = make_frame()
        assert f.real_to_screen(RealPoint(1, 1)) == ScreenPoint(340, 220)
        assert f.screen_to_real(ScreenPoint(320, 240)) == RealPoint(0, 0)
        assert f.x_to_screen(-2) == 280
        assert f.y_to_screen(-2) == 280
        assert f.x_to_real(360) == 2
        assert f.y_to_real(200) == 2

    def test_round_trip(self):
        f = CoordinateFrame(800, 600, origin=ScreenPoint(123.5, 456.25), scale=37.3)
        rng = random.Random(4)
        for i in range(200):
            p = RealPoint(rng.uniform(-1e3, 1e3), rng.uniform(-1e3, 1e3))
            q = f.screen_to_real(f.real_to_screen(p))
            assert abs(q.x - p.x) < 1e-9 and abs(q.y - p.y) < 1e-9

    def test_visible_window(self):
        f = make_frame()
        lo, hi = f.visible_window()
        assert almost_equal(lo, RealPoint(-16, -12))
        assert almost_equal(hi, RealPoint(16, 12))

    def test_almost_equal(self):
        f = make_frame()
        assert f.almost_equal(RealPoint(0, 0), RealPoint(0.02, -0.02))
        assert not f.almost_equal(RealPoint(0, 0), RealPoint(0.05, 0))

    def test_rect(self):
        f = make_frame()
        r = f.rect
        assert (r.left, r.top, r.right, r.bottom) == (0, 0, 640, 480)
        assert f.contains(ScreenPoint(640, 0))
        assert not f.contains(ScreenPoint(-1, 0))


class TestZoom:
    def test_scale(self):
        f = make_frame()
        f.zoom(2.0)
        assert f.scale == 10
        assert f.zoom_level == 2.0
        assert f.tick_distance == 10
        f.zoom(0.5)
        assert f.scale == 40

    def test_relative_to_baseline(self):
        f = make_frame()
        f.zoom(2.0)
        f.zoom(2.0)
        assert f.scale == 10

    def test_idempotent_reset(self):
        f = CoordinateFrame(640, 480, origin=ScreenPoint(100, 400), scale=25)
        for factor, pivot in [(2.0, ScreenPoint(10, 10)), (0.3, None),
                              (7.5, ScreenPoint(600, 20)), (1.1, ScreenPoint(0, 0))]:
            f.zoom(factor, pivot)
        f.zoom(1.0)
        assert f.scale == 25
        assert f.origin == ScreenPoint(100, 400)
        f.zoom(1.0, ScreenPoint(5, 5))
        assert f.scale == 25
        assert f.origin == ScreenPoint(100, 400)

    @pytest.mark.parametrize('factor', [0.1, 0.5, 1.5, 2.0, 13.0])
    def test_pivot_invariance(self, factor):
        f = CoordinateFrame(640, 480, origin=ScreenPoint(200, 300), scale=20)
        pivot = ScreenPoint(450, 120)
        before = f.screen_to_real(pivot)
        f.zoom(factor, pivot)
        after = f.real_to_screen(before)
        assert close(after.x, pivot.x, 1e-9) and close(after.y, pivot.y, 1e-9)

    def test_default_pivot_is_center(self):
        f = CoordinateFrame(640, 480, origin=ScreenPoint(0, 480), scale=20)
        center_real = f.screen_to_real(f.center)
        f.zoom(4.0)
        assert almost_equal(f.real_to_screen(center_real), f.center, 1e-9)

    @pytest.mark.parametrize('bad', [0, -1.0, math.inf, math.nan, True, '2'])
    def test_invalid(self, bad):
        f = make_frame()
        f.zoom(2.0)
        state = (f.scale, f.origin, f.zoom_level, f.version)
        with pytest.raises(InvalidParameterError):
            f.zoom(bad)
        assert (f.scale, f.origin, f.zoom_level, f.version) == state

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            make_frame().zoom(-2)

    def test_version(self):
        f = make_frame()
        f.zoom(2.0)
        f.pan(5, 5)
        f.resize(100, 100)
        assert f.version == 3


class TestMutation:
    def test_pan(self):
        f = make_frame()
        f.pan(10, -20)
        assert f.origin == ScreenPoint(330, 220)
        assert f.baseline_origin == ScreenPoint(330, 220)

    def test_pan_survives_zoom(self):
        f = make_frame()
        pivot = ScreenPoint(100, 100)
        f.zoom(2.0, pivot)
        f.pan(10, 0)
        moved = f.origin
        f.zoom(2.0, pivot)
        assert almost_equal(f.origin, moved, 1e-9)

    def test_resize(self):
        f = make_frame()
        f.resize(800, 600)
        assert (f.width, f.height) == (800, 600)
        assert f.origin == ScreenPoint(320, 240)

    def test_bad_construction(self):
        with pytest.raises(InvalidParameterError):
            CoordinateFrame(0, 480)
        with pytest.raises(InvalidParameterError):
            CoordinateFrame(640, 480, scale=-1)
        with pytest.raises(InvalidParameterError):
            CoordinateFrame(640, 480, scale=math.nan)
        with pytest.raises(InvalidParameterError):
            make_frame().resize(-5, 10)
